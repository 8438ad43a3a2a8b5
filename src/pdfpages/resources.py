"""Scoped ownership of codec handles opened during one operation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pdfpages.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from pdfpages.typing.protocol import SupportsClose

logger = get_logger(__name__)


class DocumentScope:
    """Close every registered handle when the block exits.

    Handles are closed in reverse registration order on every exit path. A
    failing `close()` is logged and does not stop the remaining handles from
    being closed. If an exception is already propagating, close failures are
    attached to it as notes instead of replacing it.
    """

    def __init__(self) -> None:
        self._handles: list[SupportsClose] = []
        self._close_failures: list[BaseException] = []

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        _ = (exc_type, tb)
        self.close_all()
        if exc is not None:
            for failure in self._close_failures:
                exc.add_note(f"While cleaning up: failed to close resource: {failure!r}")

    def enter[T: SupportsClose](self, handle: T) -> T:
        """Register a handle for release and return it unchanged.

        Args:
            handle: Object exposing `close()`.

        Returns:
            The same handle.
        """
        self._handles.append(handle)
        return handle

    @property
    def open_handles(self) -> int:
        """Return how many handles are still awaiting release."""
        return len(self._handles)

    @property
    def close_failures(self) -> tuple[BaseException, ...]:
        """Return the errors raised while closing handles."""
        return tuple(self._close_failures)

    def close_all(self) -> None:
        """Close all registered handles, newest first."""
        while self._handles:
            handle = self._handles.pop()
            try:
                handle.close()
            except Exception as exc:
                self._close_failures.append(exc)
                logger.warning(
                    "Failed to close PDF resource",
                    extra={"resource": type(handle).__name__, "error": str(exc)},
                )
