"""Core domain model exports."""

from pdfpages.typing.models.attributes import FileAttributes
from pdfpages.typing.models.options import FilterOptions
from pdfpages.typing.models.results import DocumentResult, SplitResult, TextResult

__all__ = [
    "DocumentResult",
    "FileAttributes",
    "FilterOptions",
    "SplitResult",
    "TextResult",
]
