"""Operation option models."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator

from pdfpages.exceptions import InvalidParameterError
from pdfpages.typing.enums import RemoveBlankOption


class FilterOptions(BaseModel):
    """Filter options: blank-page removal and/or a page range.

    The two options form an exclusive group where at least one must be given.
    When both are supplied the range is applied first.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    remove_blank_pages: RemoveBlankOption | None = None
    page_range: str | None = None

    @model_validator(mode="after")
    def _require_one_option(self) -> Self:
        """Reject option sets where neither filter is present.

        Raises:
            InvalidParameterError: If no filter option was supplied.

        Returns:
            Self: The validated options.
        """
        if self.remove_blank_pages is None and self.page_range is None:
            raise InvalidParameterError(message="Either a page range or blank-page removal must be provided.")
        return self

    @property
    def removes_blank_pages(self) -> bool:
        """Return whether blank pages should be dropped."""
        return RemoveBlankOption.is_yes(self.remove_blank_pages)
