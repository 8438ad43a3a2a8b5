"""Document composition operations.

Every operation takes fully buffered PDF bytes, opens the documents it needs
inside a `DocumentScope`, and returns a complete result or raises a
`PdfOperationError`. Input that cannot be loaded is reported as `PdfLoadError`;
failures while composing or saving are reported as `ProcessingError`, except
for rotation which keeps reporting them as `PdfLoadError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import fitz

from pdfpages.exceptions import (
    InvalidParameterError,
    PdfLoadError,
    ProcessingError,
)
from pdfpages.logging import get_logger, operation_context
from pdfpages.processing.blank_pages import is_page_blank
from pdfpages.processing.metadata import extract_attributes
from pdfpages.processing.page_ranges import resolve_page_range, validate_page_range
from pdfpages.processing.text import extract_text as extract_page_texts
from pdfpages.resources import DocumentScope
from pdfpages.typing.enums import PageRotation
from pdfpages.typing.models import (
    DocumentResult,
    FileAttributes,
    SplitResult,
    TextResult,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pdfpages.typing.models import FilterOptions

logger = get_logger(__name__)

_INFO_KEYS = ("title", "author", "subject", "keywords", "creator", "producer", "creationDate", "modDate")


def load_document(data: bytes) -> fitz.Document:
    """Open PDF bytes as a document.

    Args:
        data (bytes): Raw PDF content.

    Raises:
        PdfLoadError: If the bytes are not a loadable PDF.

    Returns:
        fitz.Document: Open document. The caller owns and must close it.
    """
    try:
        return fitz.open(stream=data, filetype="pdf")
    except Exception as exc:
        raise PdfLoadError from exc


def get_info(data: bytes) -> DocumentResult:
    """Return the input unchanged together with its attributes.

    Args:
        data (bytes): Raw PDF content.

    Returns:
        DocumentResult: Original bytes and their attributes.
    """
    with operation_context("get_info"), DocumentScope() as scope:
        doc = scope.enter(load_document(data))
        attributes = extract_attributes(doc, len(data))

    logger.info(
        "Extracted PDF info",
        extra={
            "pages": attributes.number_of_pages,
            "size": attributes.pdf_size,
            "title": attributes.title,
            "author": attributes.author,
        },
    )
    return DocumentResult(content=data, attributes=attributes)


def extract_text(data: bytes, page_range: str | None = None) -> TextResult:
    """Extract text from the selected pages.

    Args:
        data (bytes): Raw PDF content.
        page_range (str | None): Range expression; None selects every page.

    Returns:
        TextResult: Page texts joined by newlines and the document attributes.
    """
    validate_page_range(page_range)
    with operation_context("extract_text"), DocumentScope() as scope:
        doc = scope.enter(load_document(data))
        pages = resolve_page_range(page_range, doc.page_count)
        text = extract_page_texts(doc, pages)
        attributes = extract_attributes(doc, len(data))

    logger.info("Extracted text from pages", extra={"pages": pages})
    return TextResult(text=text, attributes=attributes)


def filter_pages(data: bytes, options: FilterOptions) -> DocumentResult:
    """Build a document keeping only the selected and non-blank pages.

    Pages keep their original order. The range is applied first, then blank
    removal when requested.

    Args:
        data (bytes): Raw PDF content.
        options (FilterOptions): Page range and/or blank-page removal.

    Raises:
        ProcessingError: If the filtered document cannot be built or saved.

    Returns:
        DocumentResult: Filtered document and the attributes of that output.
    """
    validate_page_range(options.page_range)
    with operation_context("filter_pages"), DocumentScope() as scope:
        original = scope.enter(load_document(data))
        total_pages = original.page_count
        keep = set(resolve_page_range(options.page_range, total_pages))

        try:
            kept = [
                page_number
                for page_number in range(1, total_pages + 1)
                if page_number in keep
                and not (options.removes_blank_pages and is_page_blank(original, page_number))
            ]
            filtered = scope.enter(fitz.open())
            for first, last in _contiguous_runs(kept):
                filtered.insert_pdf(original, from_page=first - 1, to_page=last - 1)
            # PyMuPDF refuses to save a document with zero pages, so an empty selection fails here.
            content = filtered.tobytes()
        except Exception as exc:
            raise ProcessingError(message=f"Failed to process PDF: {exc}") from exc

        attributes = extract_attributes(filtered, len(content))

    logger.info(
        "Filtered PDF pages",
        extra={
            "input_pages": total_pages,
            "selected_pages": len(keep),
            "output_pages": attributes.number_of_pages,
        },
    )
    return DocumentResult(content=content, attributes=attributes)


def rotate_pages(
    data: bytes,
    rotation: PageRotation | int,
    page_range: str | None = None,
) -> DocumentResult:
    """Set an absolute rotation of 90, 180 or 270 degrees on selected pages.

    Args:
        data (bytes): Raw PDF content.
        rotation (PageRotation | int): Target rotation.
        page_range (str | None): Range expression; None selects every page.

    Raises:
        InvalidParameterError: If the rotation is not a supported angle.

    Returns:
        DocumentResult: Rotated document, its page count and new size.
    """
    try:
        angle = PageRotation(rotation)
    except ValueError as exc:
        raise InvalidParameterError(message=f"Unsupported rotation angle: {rotation}") from exc
    return _rotate(data, int(angle), page_range)


def rotate_pages_by_degrees(data: bytes, degrees: int, page_range: str | None = None) -> DocumentResult:
    """Set an absolute rotation given as a free integer on selected pages.

    The angle is handed to the codec as is; only the codec decides whether
    it is acceptable.

    Args:
        data (bytes): Raw PDF content.
        degrees (int): Target rotation in degrees.
        page_range (str | None): Range expression; None selects every page.

    Returns:
        DocumentResult: Rotated document, its page count and new size.
    """
    return _rotate(data, degrees, page_range)


def _rotate(data: bytes, degrees: int, page_range: str | None) -> DocumentResult:
    """Rotate pages in place and save the same document.

    Raises:
        PdfLoadError: If loading, rotating or saving fails.
    """
    validate_page_range(page_range)
    with operation_context("rotate_pages"), DocumentScope() as scope:
        doc = scope.enter(load_document(data))
        total_pages = doc.page_count
        targets = resolve_page_range(page_range, total_pages)

        try:
            for page_number in targets:
                if 1 <= page_number <= total_pages:
                    doc.load_page(page_number - 1).set_rotation(degrees)
            content = doc.tobytes()
        except Exception as exc:
            raise PdfLoadError(message="Failed to load or process PDF document.") from exc

        attributes = FileAttributes(number_of_pages=doc.page_count, pdf_size=len(content))

    logger.info("Rotated PDF pages", extra={"pages": targets, "degrees": degrees})
    return DocumentResult(content=content, attributes=attributes)


def split_pages(data: bytes, page_increment: int = 1) -> SplitResult:
    """Split a document into consecutive groups of pages.

    Args:
        data (bytes): Raw PDF content.
        page_increment (int): Pages per output document; the last may be shorter.

    Raises:
        ProcessingError: If the increment is not positive or a part cannot be saved.

    Returns:
        SplitResult: Serialized parts in page order and the original attributes.
    """
    if page_increment is None or page_increment <= 0:
        raise ProcessingError(message="Page increment must be a positive integer.")

    with operation_context("split_pages"), DocumentScope() as scope:
        doc = scope.enter(load_document(data))
        attributes = extract_attributes(doc, len(data))
        total_pages = doc.page_count

        if total_pages == 0:
            logger.warning("Input PDF has 0 pages. Returning empty list of split documents.")
            return SplitResult(parts=[], attributes=attributes)

        info = _info_fields([doc])
        parts: list[bytes] = []
        with DocumentScope() as part_scope:
            try:
                for start in range(0, total_pages, page_increment):
                    last = min(start + page_increment, total_pages) - 1
                    part = part_scope.enter(fitz.open())
                    part.insert_pdf(doc, from_page=start, to_page=last)
                    part.set_metadata(info)
                    parts.append(part.tobytes())
            except Exception as exc:
                raise ProcessingError(message="Failed to save a split PDF document part.") from exc

    logger.info(
        "Split PDF into documents",
        extra={"parts": len(parts), "page_increment": page_increment},
    )
    return SplitResult(parts=parts, attributes=attributes)


def merge_pdfs(inputs: Sequence[bytes]) -> DocumentResult:
    """Concatenate several documents into one.

    Document-information fields are taken from the first input that defines
    each of them.

    Args:
        inputs (Sequence[bytes]): At least two raw PDF documents, in merge order.

    Raises:
        ProcessingError: If fewer than two inputs are given or the merge fails.

    Returns:
        DocumentResult: Merged document and the attributes of the merged result.
    """
    if len(inputs) < 2:  # noqa: PLR2004
        raise ProcessingError(message="At least two PDF files are required for merging.")

    with operation_context("merge_pdfs"), DocumentScope() as scope:
        try:
            sources = [scope.enter(fitz.open(stream=data, filetype="pdf")) for data in inputs]
            merged = scope.enter(fitz.open())
            for source in sources:
                merged.insert_pdf(source)
            merged.set_metadata(_info_fields(sources))
            content = merged.tobytes()
            reloaded = scope.enter(fitz.open(stream=content, filetype="pdf"))
        except Exception as exc:
            raise ProcessingError(message="Failed to merge PDF files.") from exc

        attributes = extract_attributes(reloaded, len(content))

    logger.info(
        "Merged PDF files",
        extra={"inputs": len(inputs), "pages": attributes.number_of_pages, "size": attributes.pdf_size},
    )
    return DocumentResult(content=content, attributes=attributes)


def _contiguous_runs(page_numbers: Iterable[int]) -> list[tuple[int, int]]:
    """Group ascending page numbers into inclusive consecutive runs.

    Args:
        page_numbers (Iterable[int]): Ascending page numbers.

    Returns:
        list[tuple[int, int]]: ``(first, last)`` pairs.
    """
    runs: list[tuple[int, int]] = []
    for page_number in page_numbers:
        if runs and runs[-1][1] == page_number - 1:
            runs[-1] = (runs[-1][0], page_number)
        else:
            runs.append((page_number, page_number))
    return runs


def _info_fields(docs: Iterable[fitz.Document]) -> dict[str, str]:
    """Collect document-information fields, first non-empty value winning.

    Args:
        docs (Iterable[fitz.Document]): Source documents in priority order.

    Returns:
        dict[str, str]: Fields accepted by `Document.set_metadata`.
    """
    fields: dict[str, str] = {}
    for doc in docs:
        metadata = doc.metadata or {}
        for key in _INFO_KEYS:
            value = metadata.get(key)
            if value and key not in fields:
                fields[key] = value
    return fields
