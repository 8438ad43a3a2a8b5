"""Page-level processing helpers."""

from pdfpages.processing.blank_pages import is_page_blank
from pdfpages.processing.metadata import extract_attributes, format_pdf_date, parse_pdf_date
from pdfpages.processing.page_ranges import resolve_page_range, validate_page_range
from pdfpages.processing.text import extract_text, page_text

__all__ = [
    "extract_attributes",
    "extract_text",
    "format_pdf_date",
    "is_page_blank",
    "page_text",
    "parse_pdf_date",
    "resolve_page_range",
    "validate_page_range",
]
