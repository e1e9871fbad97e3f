import logging

import httpx

from snippet_resolver.config import Settings, get_settings
from snippet_resolver.core.ports.fetcher import FetchResponse

logger = logging.getLogger(__name__)


class HttpxContentFetcher:
    """Fetch remote content over HTTP with a shared ``httpx.AsyncClient``.

    Transport errors and timeouts are logged and reported as ``None`` so a single
    unreachable link never fails the whole resolution.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=settings.http_timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )

    async def fetch(self, url: str) -> FetchResponse | None:
        try:
            response = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            return None
        logger.debug("GET %s -> %d", url, response.status_code)
        return FetchResponse(status=response.status_code, text=response.text)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
