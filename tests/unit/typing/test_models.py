from __future__ import annotations

import pytest
from pydantic import ValidationError

from pdfpages.exceptions import InvalidParameterError
from pdfpages.typing.enums import RemoveBlankOption
from pdfpages.typing.models import FileAttributes, FilterOptions


def test_filter_options_require_at_least_one_option() -> None:
    with pytest.raises(InvalidParameterError, match="Either a page range or blank-page removal"):
        FilterOptions()


def test_filter_options_accept_page_range_only() -> None:
    options = FilterOptions(page_range="1-3")

    assert options.page_range == "1-3"
    assert options.removes_blank_pages is False


def test_filter_options_parse_remove_blank_flag() -> None:
    options = FilterOptions(remove_blank_pages="yes")

    assert options.remove_blank_pages is RemoveBlankOption.YES
    assert options.removes_blank_pages is True


def test_filter_options_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        FilterOptions(page_range="1", compress=True)


def test_file_attributes_are_immutable() -> None:
    attributes = FileAttributes(number_of_pages=3, pdf_size=100)

    assert attributes.title is None
    with pytest.raises(ValidationError):
        attributes.title = "changed"


def test_file_attributes_reject_negative_counts() -> None:
    with pytest.raises(ValidationError):
        FileAttributes(number_of_pages=-1, pdf_size=0)
