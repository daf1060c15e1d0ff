"""Page data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_ITEMS_PARAM, SKIP_COUNT_PARAM


class PageInfo(BaseModel):
    """Page count and current position of a paged collection."""

    total_pages: int = Field(default=0, ge=0)
    current_page_number: int = Field(default=1, ge=1)

    model_config = ConfigDict(validate_assignment=True)

    @property
    def has_next(self) -> bool:
        """Returns True if the server reported pages after the current one."""
        return self.current_page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Returns True if the current page is not the first one."""
        return self.current_page_number > 1


class PageParams(BaseModel):
    """Page size and offset of one request.

    A value of ``0`` means the parameter was not present in the link it was
    parsed from.
    """

    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    def as_query(self) -> dict[str, str]:
        """Query string parameters for this page."""
        return {MAX_ITEMS_PARAM: str(self.limit), SKIP_COUNT_PARAM: str(self.offset)}


class PageResponse(BaseModel):
    """Result of one transport call: raw items and the raw Link header."""

    items: list[Any] = Field(default_factory=list)
    link_header: str | None = None

    model_config = ConfigDict(frozen=True)


@dataclass
class CachedPage:
    """A page known to the cache.

    Attributes:
        link: Navigation link of the page (carries its maxItems/skipCount)
        items: Stored items, None until the page itself has been fetched
    """

    link: str
    items: list[Any] | None = None

    @property
    def is_fetched(self) -> bool:
        return self.items is not None
