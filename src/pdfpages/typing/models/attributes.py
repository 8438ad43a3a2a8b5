"""Document attribute models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FileAttributes(BaseModel):
    """Attributes reported alongside every operation result.

    Dates are rendered as ``YYYY-MM-DD HH:MM:SS`` in the local time zone and
    are ``None`` when the document carries no matching timestamp.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    number_of_pages: int = Field(ge=0)
    pdf_size: int = Field(ge=0)
    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None
    creation_date: str | None = None
    modification_date: str | None = None
