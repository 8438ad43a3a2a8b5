"""Typing-centric domain modules."""

from pdfpages.typing.enums import PageRotation, RemoveBlankOption
from pdfpages.typing.models import (
    DocumentResult,
    FileAttributes,
    FilterOptions,
    SplitResult,
    TextResult,
)
from pdfpages.typing.protocol import SupportsClose

__all__ = [
    "DocumentResult",
    "FileAttributes",
    "FilterOptions",
    "PageRotation",
    "RemoveBlankOption",
    "SplitResult",
    "SupportsClose",
    "TextResult",
]
