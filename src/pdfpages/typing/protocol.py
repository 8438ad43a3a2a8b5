"""Resource interfaces."""

from __future__ import annotations

from typing import Protocol


class SupportsClose(Protocol):
    """Handle that owns codec resources released by `close()`."""

    def close(self) -> None:
        """Release the resources held by the handle."""
