"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Stable tags identifying the category of an operation failure."""

    INVALID_PAGE_RANGE = "PDF_INVALID_PAGE_RANGE"
    LOAD_FAILED = "PDF_LOAD_FAILED"
    TEXT_EXTRACTION_FAILED = "PDF_TEXT_EXTRACTION_FAILED"
    METADATA_EXTRACTION_FAILED = "PDF_METADATA_EXTRACTION_FAILED"
    PROCESSING_ERROR = "PDF_PROCESSING_ERROR"
    INVALID_PARAMETER = "PDF_INVALID_PARAMETER"
    IO_ERROR = "PDF_IO_ERROR"


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass
class PdfOperationError(PackageError):
    """Base class for failures of a document operation.

    Every subclass pins a stable `kind` tag so callers can branch on the
    failure category without matching on message text.
    """

    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.PROCESSING_ERROR

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message


@dataclass
class InvalidPageRangeError(PdfOperationError):
    """Raised when a page-range expression is malformed or inverted."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_PAGE_RANGE


@dataclass
class PdfLoadError(PdfOperationError):
    """Raised when input bytes cannot be loaded as a PDF document."""

    message: str = "Failed to load PDF document. It may be corrupt or invalid."
    kind: ClassVar[ErrorKind] = ErrorKind.LOAD_FAILED


@dataclass
class TextExtractionError(PdfOperationError):
    """Raised when text cannot be extracted from a page."""

    kind: ClassVar[ErrorKind] = ErrorKind.TEXT_EXTRACTION_FAILED


@dataclass
class MetadataExtractionError(PdfOperationError):
    """Raised when the document-information record is missing."""

    message: str = "Unable to extract PDF metadata."
    kind: ClassVar[ErrorKind] = ErrorKind.METADATA_EXTRACTION_FAILED


@dataclass
class ProcessingError(PdfOperationError):
    """Raised when composing an output document fails."""

    kind: ClassVar[ErrorKind] = ErrorKind.PROCESSING_ERROR


@dataclass
class InvalidParameterError(PdfOperationError):
    """Raised when operation parameters are rejected before processing."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_PARAMETER


@dataclass
class PdfIOError(PdfOperationError):
    """Raised when input bytes cannot be read from their source."""

    kind: ClassVar[ErrorKind] = ErrorKind.IO_ERROR
