"""Document-information metadata extraction."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, timezone
from typing import TYPE_CHECKING

from pdfpages.exceptions import MetadataExtractionError
from pdfpages.logging import get_logger
from pdfpages.typing.models import FileAttributes

if TYPE_CHECKING:
    import fitz

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# D:YYYYMMDDHHmmSSOHH'mm' where every part after the year is optional.
_PDF_DATE_RE = re.compile(
    r"""
    ^(?:D:)?
    (?P<year>\d{4})
    (?P<month>\d{2})?
    (?P<day>\d{2})?
    (?P<hour>\d{2})?
    (?P<minute>\d{2})?
    (?P<second>\d{2})?
    (?:
        (?P<utc>Z)(?:00'?(?:00'?)?)?
        |(?P<sign>[+-])(?P<tz_hour>\d{2})'?(?:(?P<tz_minute>\d{2})'?)?
    )?$
    """,
    re.VERBOSE,
)


def extract_attributes(doc: fitz.Document, size_in_bytes: int) -> FileAttributes:
    """Build file attributes from an open document.

    Args:
        doc (fitz.Document): Open PDF document.
        size_in_bytes (int): Size of the serialized document the attributes describe.

    Raises:
        MetadataExtractionError: If the document-information record is missing.

    Returns:
        FileAttributes: Page count, size, info fields and formatted dates.
    """
    info = doc.metadata
    if info is None:
        raise MetadataExtractionError

    return FileAttributes(
        number_of_pages=doc.page_count,
        pdf_size=size_in_bytes,
        title=_text_field(info, "title"),
        author=_text_field(info, "author"),
        subject=_text_field(info, "subject"),
        keywords=_text_field(info, "keywords"),
        creation_date=_date_field(info, "creationDate"),
        modification_date=_date_field(info, "modDate"),
    )


def _text_field(info: dict[str, str], key: str) -> str | None:
    value = info.get(key)
    return value or None


def _date_field(info: dict[str, str], key: str) -> str | None:
    parsed = parse_pdf_date(info.get(key))
    if parsed is None:
        return None
    return format_pdf_date(parsed)


def parse_pdf_date(raw: str | None) -> datetime | None:
    """Parse a PDF date string into an aware datetime.

    Missing month/day default to 1 and missing time parts to 0. A value
    without a zone offset is read as UTC.

    Args:
        raw (str | None): Raw value such as ``D:20240131120000+02'00'``.

    Returns:
        datetime | None: Parsed timestamp, or None if absent or unparseable.
    """
    if not raw:
        return None

    match = _PDF_DATE_RE.match(raw.strip())
    if match is None:
        logger.debug("Ignoring unparseable PDF date", extra={"value": raw})
        return None

    parts = match.groupdict()
    tz = UTC
    if parts["sign"]:
        offset = timedelta(hours=int(parts["tz_hour"]), minutes=int(parts["tz_minute"] or 0))
        tz = timezone(-offset if parts["sign"] == "-" else offset)

    try:
        return datetime(
            int(parts["year"]),
            int(parts["month"] or 1),
            int(parts["day"] or 1),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            tzinfo=tz,
        )
    except ValueError:
        logger.debug("Ignoring out-of-range PDF date", extra={"value": raw})
        return None


def format_pdf_date(value: datetime) -> str:
    """Render a timestamp in the local time zone.

    Args:
        value (datetime): Aware timestamp.

    Returns:
        str: ``YYYY-MM-DD HH:MM:SS`` in local time.
    """
    return value.astimezone().strftime(DATE_FORMAT)
