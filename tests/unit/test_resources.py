from __future__ import annotations

import pytest

from pdfpages.resources import DocumentScope


class _Handle:
    def __init__(self, name: str, closed: list[str], *, fail: bool = False) -> None:
        self.name = name
        self.closed = closed
        self.fail = fail

    def close(self) -> None:
        self.closed.append(self.name)
        if self.fail:
            raise OSError(f"cannot close {self.name}")


def test_scope_closes_handles_in_reverse_order() -> None:
    closed: list[str] = []

    with DocumentScope() as scope:
        first = scope.enter(_Handle("first", closed))
        scope.enter(_Handle("second", closed))
        assert scope.open_handles == 2

    assert first.name == "first"
    assert closed == ["second", "first"]
    assert scope.open_handles == 0


def test_scope_closes_handles_when_block_raises() -> None:
    closed: list[str] = []

    with pytest.raises(ValueError, match="boom"), DocumentScope() as scope:
        scope.enter(_Handle("first", closed))
        scope.enter(_Handle("second", closed))
        raise ValueError("boom")

    assert closed == ["second", "first"]


def test_close_failure_does_not_stop_remaining_closes() -> None:
    closed: list[str] = []

    with DocumentScope() as scope:
        scope.enter(_Handle("first", closed))
        scope.enter(_Handle("broken", closed, fail=True))
        scope.enter(_Handle("third", closed))

    assert closed == ["third", "broken", "first"]
    assert len(scope.close_failures) == 1
    assert "cannot close broken" in str(scope.close_failures[0])


def test_close_failure_is_attached_to_primary_error() -> None:
    closed: list[str] = []

    with pytest.raises(RuntimeError, match="primary") as exc_info, DocumentScope() as scope:
        scope.enter(_Handle("broken", closed, fail=True))
        scope.enter(_Handle("fine", closed))
        raise RuntimeError("primary")

    assert closed == ["fine", "broken"]
    notes = getattr(exc_info.value, "__notes__", [])
    assert len(notes) == 1
    assert "cannot close broken" in notes[0]
