"""Sparse page cache keyed by page number."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..models import CachedPage


class PageCache:
    """Page number to CachedPage mapping.

    Entries are created the first time a page is referenced, either by its
    own fetch or by a relation link of a neighbouring page, and are updated
    in place afterwards. Nothing is ever evicted: the number of entries is
    bounded by the server-reported page count.
    """

    def __init__(self) -> None:
        self._pages: dict[int, CachedPage] = {}

    def get(self, page_number: int) -> CachedPage | None:
        return self._pages.get(page_number)

    def set_link(self, page_number: int, link: str) -> CachedPage:
        """Create or update the entry for a page with its navigation link."""
        page = self._pages.get(page_number)
        if page is None:
            page = CachedPage(link=link)
            self._pages[page_number] = page
        else:
            page.link = link
        return page

    def set_items(self, page_number: int, items: list[Any]) -> None:
        """Attach fetched items to an existing entry."""
        page = self._pages.get(page_number)
        if page is None:
            raise KeyError(page_number)
        page.items = list(items)

    def page_numbers(self) -> list[int]:
        return sorted(self._pages)

    def __contains__(self, page_number: object) -> bool:
        return page_number in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[int]:
        return iter(self.page_numbers())
