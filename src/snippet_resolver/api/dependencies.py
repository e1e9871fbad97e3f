from __future__ import annotations

from collections.abc import AsyncIterator

from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.fetch.httpx_fetcher import HttpxContentFetcher

_fetcher: HttpxContentFetcher | None = None


async def get_fetcher() -> AsyncIterator[ContentFetcher]:
    """Yield a ``ContentFetcher``, creating it lazily on first call."""
    global _fetcher  # noqa: PLW0603
    if _fetcher is None:
        _fetcher = HttpxContentFetcher()
    yield _fetcher


async def shutdown_fetcher() -> None:
    global _fetcher  # noqa: PLW0603
    if _fetcher is not None:
        await _fetcher.aclose()
        _fetcher = None
