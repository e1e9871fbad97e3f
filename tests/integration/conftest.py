"""Fixtures for integration tests that talk to the real GitHub endpoints."""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from snippet_resolver.fetch.httpx_fetcher import HttpxContentFetcher


@pytest.fixture(autouse=True)
def _require_live_opt_in() -> None:
    if not os.getenv("SNIPPET_RESOLVER_LIVE_TESTS"):
        pytest.skip("set SNIPPET_RESOLVER_LIVE_TESTS=1 to run tests against github.com")


@pytest_asyncio.fixture
async def live_fetcher() -> AsyncGenerator[HttpxContentFetcher, None]:
    fetcher = HttpxContentFetcher()
    yield fetcher
    await fetcher.aclose()
