"""Precise unit tests for HTTPClient.

Tests focus on session management and status mapping.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from linkpager.core import NotModifiedError, TransportError
from linkpager.runtime.rest import HTTPClient


def mock_response(status: int = 200, body=None, headers=None):
    response = AsyncMock()
    response.status = status
    response.headers = headers or {}
    response.json = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def client_with(response, base_url: str | None = None) -> tuple[HTTPClient, MagicMock]:
    client = HTTPClient(base_url=base_url)
    session = MagicMock()
    session.closed = False
    # get() returns the response directly for the async context manager
    session.get = MagicMock(return_value=response)
    client._session = session
    return client, session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientGet:
    """Test HTTPClient.get."""

    @pytest.mark.asyncio
    async def test_returns_body_and_headers(self):
        """Test get() returns decoded body and response headers."""
        headers = {"Link": '<http://api/x?maxItems=1&skipCount=0>; rel="first"'}
        client, session = client_with(mock_response(body=[{"id": "a"}], headers=headers))

        body, response_headers = await client.get(
            "http://api/x", params={"maxItems": "1"}, headers={"If-None-Match": '"v1"'}
        )

        assert body == [{"id": "a"}]
        assert response_headers == headers
        session.get.assert_called_once_with(
            "http://api/x", params={"maxItems": "1"}, headers={"If-None-Match": '"v1"'}
        )

    @pytest.mark.asyncio
    async def test_not_modified(self):
        """Test 304 raises NotModifiedError without reading the body."""
        response = mock_response(status=304)
        client, _ = client_with(response)

        with pytest.raises(NotModifiedError):
            await client.get("http://api/x")

        response.json.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_status(self):
        """Test statuses >= 400 raise TransportError with the status code."""
        client, _ = client_with(mock_response(status=404))

        with pytest.raises(TransportError) as exc_info:
            await client.get("http://api/x")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_get_with_base_url(self):
        """Test get() combines base_url with relative path."""
        client, session = client_with(mock_response(body=[]), base_url="https://api.example.com")

        await client.get("/workspaces")

        assert "https://api.example.com/workspaces" in str(session.get.call_args)

    @pytest.mark.asyncio
    async def test_get_with_absolute_url(self):
        """Test get() doesn't combine base_url with absolute URL."""
        client, session = client_with(mock_response(body=[]), base_url="https://api.example.com")

        await client.get("https://other.com/test")

        call_args = session.get.call_args
        assert "https://other.com/test" in str(call_args)
        assert "api.example.com" not in str(call_args)
