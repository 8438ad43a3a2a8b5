"""Per-page text extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pdfpages.exceptions import TextExtractionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    import fitz


def page_text(doc: fitz.Document, page_number: int) -> str:
    """Return the visible text of a single page.

    Args:
        doc (fitz.Document): Open PDF document.
        page_number (int): Page number (1-based).

    Returns:
        str: Text extracted from that page only.
    """
    page = doc.load_page(page_number - 1)
    return page.get_text("text")


def extract_text(doc: fitz.Document, page_numbers: Iterable[int]) -> str:
    """Extract and join the text of several pages.

    Args:
        doc (fitz.Document): Open PDF document.
        page_numbers (Iterable[int]): Page numbers (1-based) in output order.

    Raises:
        TextExtractionError: If text cannot be read from a page.

    Returns:
        str: Page texts joined by a single newline.
    """
    texts: list[str] = []
    for page_number in page_numbers:
        try:
            texts.append(page_text(doc, page_number))
        except Exception as exc:
            raise TextExtractionError(message=f"Error extracting text from page {page_number}") from exc
    return "\n".join(texts)
