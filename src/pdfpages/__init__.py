"""pdfpages package."""

from pdfpages.exceptions import (
    ErrorKind,
    InvalidPageRangeError,
    InvalidParameterError,
    MetadataExtractionError,
    PackageError,
    PdfIOError,
    PdfLoadError,
    PdfOperationError,
    ProcessingError,
    SettingsError,
    TextExtractionError,
)
from pdfpages.logging import configure_logging, get_logger
from pdfpages.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("pdfpages")

__all__ = [
    "ErrorKind",
    "InvalidPageRangeError",
    "InvalidParameterError",
    "MetadataExtractionError",
    "PackageError",
    "PdfIOError",
    "PdfLoadError",
    "PdfOperationError",
    "ProcessingError",
    "Settings",
    "SettingsError",
    "TextExtractionError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
