"""In-memory PDF builders shared by the test suites."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import fitz

if TYPE_CHECKING:
    from collections.abc import Callable


def build_pdf(
    page_texts: list[str | None],
    *,
    metadata: dict[str, str] | None = None,
    rotations: dict[int, int] | None = None,
) -> bytes:
    """Build an in-memory PDF with one page per entry of `page_texts`.

    Args:
        page_texts: Text drawn on each page; None leaves the page empty.
        metadata: Optional document-information fields.
        rotations: Optional 1-based page number -> rotation mapping.

    Returns:
        bytes: Serialized PDF.
    """
    with fitz.open() as doc:
        for text in page_texts:
            page = doc.new_page(width=200, height=200)
            if text:
                page.insert_text((20, 50), text)
        for page_number, rotation in (rotations or {}).items():
            doc.load_page(page_number - 1).set_rotation(rotation)
        if metadata:
            doc.set_metadata(metadata)
        return doc.tobytes()


def add_image(page: fitz.Page) -> None:
    """Draw a small solid image on the page."""
    pixmap = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, 4, 4), False)  # noqa: FBT003
    pixmap.clear_with(0)
    page.insert_image(fitz.Rect(20, 20, 60, 60), pixmap=pixmap)


def add_text_widget(page: fitz.Page, name: str = "field") -> None:
    """Place an empty text form field on the page."""
    widget = fitz.Widget()
    widget.field_name = name
    widget.field_type = fitz.PDF_WIDGET_TYPE_TEXT
    widget.rect = fitz.Rect(20, 20, 120, 40)
    page.add_widget(widget)


def edit_pdf(data: bytes, edit: Callable[[fitz.Document], Any]) -> bytes:
    """Open PDF bytes, apply `edit` and serialize the result."""
    with fitz.open(stream=data, filetype="pdf") as doc:
        edit(doc)
        return doc.tobytes()


def page_count(data: bytes) -> int:
    """Return the number of pages of serialized PDF bytes."""
    with fitz.open(stream=data, filetype="pdf") as doc:
        return doc.page_count


def page_rotations(data: bytes) -> list[int]:
    """Return the rotation of every page of serialized PDF bytes."""
    with fitz.open(stream=data, filetype="pdf") as doc:
        return [page.rotation for page in doc]


def page_texts(data: bytes) -> list[str]:
    """Return the stripped text of every page of serialized PDF bytes."""
    with fitz.open(stream=data, filetype="pdf") as doc:
        return [page.get_text("text").strip() for page in doc]
