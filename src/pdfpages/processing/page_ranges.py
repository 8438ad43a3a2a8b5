"""Page-range expression parsing."""

from __future__ import annotations

import re

from pdfpages.exceptions import InvalidPageRangeError

_SEGMENT_RE = re.compile(r"(\d+)(?:-(\d+))?", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


def resolve_page_range(expression: str | None, total_pages: int) -> list[int]:
    """Resolve a page-range expression against a document length.

    Segments are comma separated and are either a single page (``4``) or an
    inclusive range (``9-12``). Pages outside ``[1, total_pages]`` are dropped
    silently, overlapping segments collapse, and the result is ascending.
    Trailing commas are tolerated.

    Args:
        expression: Range expression such as ``"2,4,9-12"``. ``None`` or a blank
            string selects every page.
        total_pages: Number of pages in the document.

    Raises:
        InvalidPageRangeError: If a segment is malformed or has start > end.

    Returns:
        list[int]: Selected 1-based page numbers in ascending order.
    """
    if expression is None or not expression.strip():
        return list(range(1, total_pages + 1))

    segments = _WHITESPACE_RE.sub("", expression).split(",")
    # Trailing empty segments are ignored ("1,"), interior ones are not.
    while len(segments) > 1 and not segments[-1]:
        segments.pop()

    pages: set[int] = set()
    for segment in segments:
        start, end = _parse_segment(segment)
        first = max(start, 1)
        last = min(end, total_pages)
        pages.update(range(first, last + 1))
    return sorted(pages)


def validate_page_range(expression: str | None) -> None:
    """Check expression syntax without a document.

    Args:
        expression: Range expression, or None.

    Raises:
        InvalidPageRangeError: If a segment is malformed or has start > end.
    """
    resolve_page_range(expression, 0)


def _parse_segment(segment: str) -> tuple[int, int]:
    """Parse one range segment into inclusive bounds.

    Args:
        segment (str): Whitespace-free segment.

    Raises:
        InvalidPageRangeError: If the segment is malformed or inverted.

    Returns:
        tuple[int, int]: Start and end page (unclamped).
    """
    match = _SEGMENT_RE.fullmatch(segment)
    if match is None:
        raise InvalidPageRangeError(
            message=f'Invalid page range segment: "{segment}". Expected format like 2,4,9-12.',
        )

    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) is not None else start
    if start > end:
        raise InvalidPageRangeError(
            message=f'Invalid page range: "{segment}". Start page must not be greater than end page.',
        )
    return start, end
