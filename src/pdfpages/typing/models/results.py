"""Operation result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pdfpages.typing.models.attributes import FileAttributes


class DocumentResult(BaseModel):
    """Serialized PDF document with its attributes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: bytes
    attributes: FileAttributes


class TextResult(BaseModel):
    """Extracted text with the source document attributes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str
    attributes: FileAttributes


class SplitResult(BaseModel):
    """Ordered split parts with the original document attributes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    parts: list[bytes]
    attributes: FileAttributes
