"""Precise unit tests for RESTTransport.

Tests focus on query building, Link header extraction and ETag handling.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from linkpager.core import NotModifiedError
from linkpager.models import PageParams, PageResponse
from linkpager.runtime.rest import HTTPClient, PageTransport, RESTTransport, build_query

LINK = '<http://api/x?maxItems=10&skipCount=0>; rel="first"'


@pytest.fixture
def http():
    client = HTTPClient(base_url="https://api.example.com")
    client.get = AsyncMock(return_value=([{"id": "a"}], {"Link": LINK}))
    return client


def test_build_query_merges_and_stringifies():
    """Test extra query keys are kept and page keys win."""
    query = build_query(PageParams(limit=10, offset=20), {"status": 1, "maxItems": "99"})
    assert query == {"status": "1", "maxItems": "10", "skipCount": "20"}


def test_rest_transport_is_page_transport():
    """Test RESTTransport satisfies the PageTransport protocol."""
    assert isinstance(RESTTransport(), PageTransport)


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        """Test RESTTransport builds an HTTPClient for base_url."""
        transport = RESTTransport(base_url="https://api.example.com")
        assert transport._http.base_url == "https://api.example.com"

    @pytest.mark.asyncio
    async def test_get_page(self, http):
        """Test get_page delegates to HTTPClient and wraps the result."""
        transport = RESTTransport(http=http)

        result = await transport.get_page(
            "/workspaces", PageParams(limit=10, offset=0), {"status": "RUNNING"}
        )

        assert result == PageResponse(items=[{"id": "a"}], link_header=LINK)
        http.get.assert_awaited_once_with(
            "/workspaces",
            params={"status": "RUNNING", "maxItems": "10", "skipCount": "0"},
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_non_list_body_has_no_items(self, http):
        """Test an object body yields no items."""
        http.get.return_value = ({"message": "oops"}, {})
        transport = RESTTransport(http=http)

        result = await transport.get_page("/workspaces", PageParams(limit=10))

        assert result.items == []
        assert result.link_header is None

    @pytest.mark.asyncio
    async def test_etag_sent_on_repeat_request(self, http):
        """Test the ETag of a response is sent back for the same page."""
        http.get.return_value = ([], {"ETag": '"v1"'})
        transport = RESTTransport(http=http)
        params = PageParams(limit=10, offset=0)

        await transport.get_page("/workspaces", params)
        await transport.get_page("/workspaces", params)
        await transport.get_page("/workspaces", PageParams(limit=10, offset=10))

        calls = http.get.await_args_list
        assert calls[0].kwargs["headers"] is None
        assert calls[1].kwargs["headers"] == {"If-None-Match": '"v1"'}
        assert calls[2].kwargs["headers"] is None

    @pytest.mark.asyncio
    async def test_not_modified_propagates(self, http):
        """Test NotModifiedError from HTTPClient reaches the caller."""
        http.get.side_effect = NotModifiedError()
        transport = RESTTransport(http=http)

        with pytest.raises(NotModifiedError):
            await transport.get_page("/workspaces", PageParams(limit=10))

    @pytest.mark.asyncio
    async def test_etag_cache_evicts_oldest(self, http):
        """Test the ETag cache stays within its bound."""
        http.get.return_value = ([], {"ETag": '"v"'})
        transport = RESTTransport(http=http, max_etags=4)

        for offset in range(0, 50, 10):
            await transport.get_page("/workspaces", PageParams(limit=10, offset=offset))

        assert len(transport._etags) == 4
        assert all(key[1] != (("maxItems", "10"), ("skipCount", "0")) for key in transport._etags)

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self, http):
        """Test close() delegates to HTTPClient."""
        http.close = AsyncMock()
        transport = RESTTransport(http=http)

        await transport.close()

        http.close.assert_awaited_once()
