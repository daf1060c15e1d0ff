"""REST transport for paged collections.

Architecture:
    PageTransport is the seam between PagedResource and the network. The
    resource hands every call an explicit PageParams value; the transport
    turns it into query parameters, issues one GET and returns a
    PageResponse with the raw items and the raw Link header.

    RESTTransport is the bundled aiohttp implementation. It remembers the
    ETag of every (url, query) it has seen and sends it back as
    If-None-Match, so unchanged pages come back as 304 and surface as
    NotModifiedError.

See Also:
    - HTTPClient: Session management and status mapping
    - PagedResource: Consumer of PageTransport
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ...config import (
    ETAG_HEADER,
    IF_NONE_MATCH_HEADER,
    LINK_HEADER,
    MAX_ETAG_CACHE_SIZE,
)
from ...models import PageParams, PageResponse
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


@runtime_checkable
class PageTransport(Protocol):
    """Issues one page request and returns items plus the Link header."""

    async def get_page(
        self,
        url: str,
        params: PageParams,
        query: Mapping[str, str] | None = None,
    ) -> PageResponse: ...


class RESTTransport:
    """PageTransport over aiohttp with ETag conditional requests."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http: HTTPClient | None = None,
        max_etags: int = MAX_ETAG_CACHE_SIZE,
    ) -> None:
        self._http = http or HTTPClient(base_url=base_url)
        self._max_etags = max_etags
        self._etags: dict[tuple[str, tuple[tuple[str, str], ...]], str] = {}

    async def get_page(
        self,
        url: str,
        params: PageParams,
        query: Mapping[str, str] | None = None,
    ) -> PageResponse:
        request_query = build_query(params, query)
        cache_key = (url, tuple(sorted(request_query.items())))

        headers: dict[str, str] = {}
        etag = self._etags.get(cache_key)
        if etag:
            headers[IF_NONE_MATCH_HEADER] = etag

        logger.debug(
            "Requesting page",
            extra={"url": url, "limit": params.limit, "offset": params.offset},
        )
        body, response_headers = await self._http.get(
            url, params=request_query, headers=headers or None
        )
        self._remember_etag(cache_key, response_headers.get(ETAG_HEADER))

        return PageResponse(
            items=body if isinstance(body, list) else [],
            link_header=response_headers.get(LINK_HEADER),
        )

    def _remember_etag(self, cache_key: Any, etag: str | None) -> None:
        if not etag:
            return
        if cache_key not in self._etags and len(self._etags) >= self._max_etags:
            # Evict the oldest quarter; dicts keep insertion order
            for key in list(self._etags)[: max(self._max_etags // 4, 1)]:
                del self._etags[key]
        self._etags[cache_key] = etag

    async def close(self) -> None:
        await self._http.close()


def build_query(params: PageParams, query: Mapping[str, str] | None = None) -> dict[str, str]:
    """Merge extra query parameters with the page size and offset."""
    merged = {key: str(value) for key, value in (query or {}).items()}
    merged.update(params.as_query())
    return merged
