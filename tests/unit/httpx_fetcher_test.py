"""Tests for the httpx-backed content fetcher."""

from __future__ import annotations

import httpx
import pytest

from snippet_resolver.config import Settings
from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.fetch.httpx_fetcher import HttpxContentFetcher


def _client(handler) -> httpx.AsyncClient:  # type: ignore[no-untyped-def]
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpxContentFetcher:
    def test_implements_protocol(self) -> None:
        fetcher: ContentFetcher = HttpxContentFetcher(_client(lambda request: httpx.Response(200)))
        assert hasattr(fetcher, "fetch")
        assert hasattr(fetcher, "aclose")

    @pytest.mark.asyncio
    async def test_returns_status_and_text(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url == "https://raw.githubusercontent.com/u/r/main/f.go"
            return httpx.Response(200, text="package main")

        async with _client(handler) as client:
            response = await HttpxContentFetcher(client).fetch("https://raw.githubusercontent.com/u/r/main/f.go")

        assert response is not None
        assert response.ok
        assert response.text == "package main"

    @pytest.mark.asyncio
    async def test_non_success_status_is_reported(self) -> None:
        async with _client(lambda request: httpx.Response(404, text="404: Not Found")) as client:
            response = await HttpxContentFetcher(client).fetch("https://raw.githubusercontent.com/u/r/main/x")

        assert response is not None
        assert response.status == 404
        assert not response.ok

    @pytest.mark.asyncio
    async def test_transport_error_returns_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with _client(handler) as client:
            assert await HttpxContentFetcher(client).fetch("https://api.github.com/gists/abc") is None

    @pytest.mark.asyncio
    async def test_owned_client_uses_settings(self) -> None:
        fetcher = HttpxContentFetcher(settings=Settings(http_timeout=3.5, user_agent="tests/1.0"))
        try:
            assert fetcher._client.timeout.read == 3.5
            assert fetcher._client.headers["User-Agent"] == "tests/1.0"
        finally:
            await fetcher.aclose()
        assert fetcher._client.is_closed

    @pytest.mark.asyncio
    async def test_invalid_url_returns_none(self) -> None:
        async with _client(lambda request: httpx.Response(200, text="unreachable")) as client:
            assert await HttpxContentFetcher(client).fetch("https://raw.githubusercontent.com/u/r/main/b\x01d.go") is None
