"""HTTP client helper."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT, NOT_MODIFIED_STATUS
from ...core.exceptions import NotModifiedError, TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def resolve_url(self, url: str) -> str:
        """Prefix relative URLs with base_url."""
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[Any, Mapping[str, str]]:
        """GET request returning the decoded JSON body and the response headers.

        Raises:
            NotModifiedError: On HTTP 304
            TransportError: On any other HTTP status >= 400
        """
        url = self.resolve_url(url)

        async with self.session.get(url, params=params, headers=headers) as response:
            logger.debug("GET %s -> %s", url, response.status)
            if response.status == NOT_MODIFIED_STATUS:
                raise NotModifiedError()
            if response.status >= 400:
                raise TransportError(
                    f"GET {url} failed with status {response.status}",
                    status_code=response.status,
                )
            body = await response.json(content_type=None)
            return body, response.headers

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
