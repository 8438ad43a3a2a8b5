from __future__ import annotations

import pytest

from pdfpages.typing.enums import PageRotation, RemoveBlankOption


def test_remove_blank_option_from_str() -> None:
    assert RemoveBlankOption.from_str("yes") == RemoveBlankOption.YES


def test_remove_blank_option_from_str_raises_on_invalid_value() -> None:
    with pytest.raises(ValueError, match="Unsupported RemoveBlankOption value"):
        RemoveBlankOption.from_str("no")


def test_remove_blank_option_is_yes() -> None:
    assert RemoveBlankOption.is_yes(RemoveBlankOption.YES) is True
    assert RemoveBlankOption.is_yes(None) is False


@pytest.mark.parametrize(("raw", "expected"), [("90", 90), (" 180 ", 180), ("270", 270)])
def test_page_rotation_from_str(raw: str, expected: int) -> None:
    assert PageRotation.from_str(raw) == expected


@pytest.mark.parametrize("raw", ["0", "45", "360", "ninety"])
def test_page_rotation_from_str_raises_on_invalid_value(raw: str) -> None:
    with pytest.raises(ValueError, match="Unsupported PageRotation value"):
        PageRotation.from_str(raw)
