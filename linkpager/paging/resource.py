"""Paged resource coordinating navigation, the page cache and the transport.

Architecture:
    PagedResource owns the state of one paged collection:
    - PageInfo: total page count and current page number
    - PageCache: sparse page number -> CachedPage (link + items)
    - the items of the current page

    Each fetch resolves a PageParams value, awaits exactly one transport
    call and then merges the returned Link header relations into the
    cache. Pages are only requested through links the server has already
    handed out; an offset is never guessed.

Request Flow:
    1. Resolve page key -> page number -> cached link -> PageParams
    2. Transport call with the collection URL, PageParams and extra query
    3. Relations from the Link header update the cache and page count
    4. Current items are rebuilt from the cached page

Concurrency:
    Fetches are not serialized. Two overlapping fetches both update the
    current page number and the cache, last writer wins. Callers serialize
    navigation themselves.

See Also:
    - parse_relations / parse_page_parameters: Link parsing
    - PageTransport: Transport protocol
    - IdentityProjection: Optional deduplication of items by key
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping, MutableMapping
from typing import Any

from ..config import DEFAULT_MAX_ITEMS
from ..core.enums import PageRelation
from ..core.exceptions import NavigationError, is_not_modified
from ..models import CachedPage, PageInfo, PageParams, PageResponse
from ..runtime.rest.transport import PageTransport
from .cache import PageCache
from .identity import IdentityProjection
from .links import count_pages, parse_page_parameters, parse_relations

logger = logging.getLogger(__name__)


class PagedResource:
    """Client-side pagination over a collection endpoint with Link headers."""

    def __init__(
        self,
        url: str,
        transport: PageTransport,
        *,
        query: Mapping[str, str] | None = None,
        page_size: int = DEFAULT_MAX_ITEMS,
        object_key: str | None = None,
        identity_store: MutableMapping[str, Any] | None = None,
    ) -> None:
        """Initialize the resource.

        Args:
            url: Collection endpoint, passed to the transport on every call
            transport: Transport issuing the page requests
            query: Extra query parameters sent with every request
            page_size: Page size used by fetch_first_page when no limit is given
            object_key: Item field used as identity key
            identity_store: Shared key -> item store; projection is active only
                when both object_key and identity_store are given
        """
        if page_size <= 0:
            raise ValueError("page_size must be a positive integer")
        self._url = url
        self._transport = transport
        self._query = dict(query or {})
        self._page_size = page_size
        self._object_key = object_key
        self._projection = (
            IdentityProjection(object_key, identity_store)
            if object_key is not None and identity_store is not None
            else None
        )

        self._pages_info = PageInfo()
        self._cache = PageCache()
        self._page_items: list[Any] = []
        self._request_params: PageParams | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def query(self) -> dict[str, str]:
        """Extra query parameters sent with every request."""
        return dict(self._query)

    @property
    def object_key(self) -> str | None:
        return self._object_key

    @property
    def page_size(self) -> int:
        return self._page_size

    async def fetch_first_page(self, limit: int | None = None) -> list[Any]:
        """Fetch the first page and reset navigation to it.

        A 304 response leaves all state untouched and returns the current items.

        Args:
            limit: Page size; becomes the resource's page size when given

        Returns:
            Items of the first page
        """
        if limit is not None:
            if limit <= 0:
                raise ValueError("limit must be a positive integer")
            self._page_size = limit
        params = PageParams(limit=self._page_size, offset=0)
        self._request_params = params

        try:
            response = await self._request(params)
        except Exception as exc:
            if is_not_modified(exc):
                logger.debug("First page not modified")
                return self.get_current_page_items()
            raise

        self._pages_info.current_page_number = 1
        items = self._project(response.items)
        self._page_items = list(items)
        self._merge_relations(parse_relations(response.link_header), items)
        first_page = self._cache.get(1)
        if first_page is not None:
            first_page.items = list(items)
            self._materialize(first_page)
        return self.get_current_page_items()

    async def fetch_page(self, page_key: PageRelation | str | int) -> list[Any]:
        """Fetch a page by relation or page number.

        Args:
            page_key: 'first', 'prev' (or 'previous'), 'next', 'last', or a
                page number as int or numeric string

        Returns:
            Items of the requested page

        Raises:
            NavigationError: If no link to the requested page is known yet
        """
        page_number = self._resolve_page_number(page_key)
        page = self._cache.get(page_number) if page_number is not None else None
        if page is None or not page.link:
            logger.debug(
                "No link for requested page",
                extra={"page_key": str(page_key), "page_number": page_number},
            )
            raise NavigationError(page_key=page_key, page_number=page_number)

        self._pages_info.current_page_number = page_number
        params = parse_page_parameters(page.link)
        self._request_params = params

        try:
            response = await self._request(params)
        except Exception as exc:
            if is_not_modified(exc):
                logger.debug("Page not modified", extra={"page_number": page_number})
                self._materialize(page)
                return self.get_current_page_items()
            raise

        items = self._project(response.items)
        self._merge_relations(parse_relations(response.link_header), items)
        page.items = list(items)
        self._materialize(page)
        return self.get_current_page_items()

    async def iter_pages(self, limit: int | None = None) -> AsyncIterator[list[Any]]:
        """Yield the items of every page, following next links from the first page."""
        yield await self.fetch_first_page(limit)
        while (self._pages_info.current_page_number + 1) in self._cache:
            yield await self.fetch_page(PageRelation.NEXT)

    def get_pages_info(self) -> PageInfo:
        """Snapshot of the page count and current page number."""
        return self._pages_info.model_copy()

    def get_current_page_items(self) -> list[Any]:
        """Items of the current page.

        With identity projection, keys are resolved against the store at
        call time, so the result reflects the store's current values.
        """
        if self._projection is None:
            return list(self._page_items)
        return self._projection.resolve(self._page_items)

    def get_request_params(self) -> PageParams | None:
        """Parameters of the most recent request, None before the first one."""
        return self._request_params

    def get_cached_page(self, page_number: int) -> CachedPage | None:
        return self._cache.get(page_number)

    def cached_page_numbers(self) -> list[int]:
        return self._cache.page_numbers()

    async def close(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> PagedResource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, params: PageParams) -> PageResponse:
        logger.debug("Fetching page", extra={"limit": params.limit, "offset": params.offset})
        return await self._transport.get_page(self._url, params, self._query or None)

    def _resolve_page_number(self, page_key: PageRelation | str | int) -> int | None:
        current = self._pages_info.current_page_number
        if isinstance(page_key, bool):
            return None
        if isinstance(page_key, int):
            return page_key

        relation = (
            page_key if isinstance(page_key, PageRelation) else PageRelation.from_str(page_key)
        )
        if relation is PageRelation.FIRST:
            return 1
        if relation is PageRelation.PREVIOUS:
            return max(current - 1, 1)
        if relation is PageRelation.NEXT:
            return current + 1
        if relation is PageRelation.LAST:
            return self._pages_info.total_pages

        key = page_key.strip()
        return int(key) if key.isascii() and key.isdecimal() else None

    def _merge_relations(self, relations: dict[str, str], items: list[Any]) -> None:
        """Record relation links of a fetched page in the cache.

        Only the first and last pages can receive items here, and only when
        they are the current page. Neighbour entries get their link alone.
        """
        if not relations:
            return
        current = self._pages_info.current_page_number

        first_link = relations.get(PageRelation.FIRST.value)
        if first_link:
            self._cache.set_link(1, first_link)
            if current == 1:
                self._cache.set_items(1, items)

        last_link = relations.get(PageRelation.LAST.value)
        if last_link:
            total_pages = count_pages(parse_page_parameters(last_link))
            self._pages_info.total_pages = total_pages
            if total_pages > 0:
                self._cache.set_link(total_pages, last_link)
                if current == total_pages:
                    self._cache.set_items(total_pages, items)

        previous_link = relations.get(PageRelation.PREVIOUS.value)
        if previous_link and current > 1:
            self._cache.set_link(current - 1, previous_link)

        next_link = relations.get(PageRelation.NEXT.value)
        if next_link:
            self._cache.set_link(current + 1, next_link)

        logger.debug(
            "Merged page relations",
            extra={
                "relations": sorted(relations),
                "page_number": current,
                "total_pages": self._pages_info.total_pages,
            },
        )

    def _materialize(self, page: CachedPage) -> None:
        self._page_items = list(page.items or [])

    def _project(self, items: list[Any]) -> list[Any]:
        if self._projection is None:
            return list(items)
        return self._projection.project(items)
