"""Blank-page detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pdfpages.logging import get_logger
from pdfpages.processing.text import page_text

if TYPE_CHECKING:
    import fitz

logger = get_logger(__name__)


def is_page_blank(doc: fitz.Document, page_number: int) -> bool:
    """Return whether a page carries no visible content.

    A page is blank when it has no text, no image or form XObjects, no
    annotations and no form widget bound to it. Checks run in that order and
    stop at the first one that finds content.

    Args:
        doc (fitz.Document): Open PDF document.
        page_number (int): Page number (1-based).

    Returns:
        bool: True if the page is blank.
    """
    if _has_text(doc, page_number):
        return False

    page = doc.load_page(page_number - 1)
    if _count_graphical_objects(page, page_number) > 0:
        return False
    if _has_annotations(page):
        return False
    return not _has_bound_form_widget(doc, page)


def _has_text(doc: fitz.Document, page_number: int) -> bool:
    """Return whether the page has non-whitespace text.

    Args:
        doc (fitz.Document): Open PDF document.
        page_number (int): Page number (1-based).

    Returns:
        bool: True if trimmed page text is not empty.
    """
    return bool(page_text(doc, page_number).strip())


def _count_graphical_objects(page: fitz.Page, page_number: int) -> int:
    """Count image and form XObjects referenced by the page resources.

    Args:
        page (fitz.Page): Loaded page.
        page_number (int): Page number (1-based), used for logging.

    Returns:
        int: Number of XObjects, or 0 when the resources cannot be read.
    """
    try:
        return len(page.get_images(full=True)) + len(page.get_xobjects())
    except Exception as exc:
        logger.warning(
            "Error accessing XObjects on page",
            extra={"page_number": page_number, "error": str(exc)},
        )
        return 0


def _has_annotations(page: fitz.Page) -> bool:
    """Return whether the page carries markup or link annotations."""
    return page.first_annot is not None or page.first_link is not None


def _has_bound_form_widget(doc: fitz.Document, page: fitz.Page) -> bool:
    """Return whether a form field widget is placed on this page.

    Args:
        doc (fitz.Document): Open PDF document.
        page (fitz.Page): Loaded page.

    Returns:
        bool: True if the document has a form and one of its widgets is on the page.
    """
    if not doc.is_form_pdf:
        return False
    return page.first_widget is not None
