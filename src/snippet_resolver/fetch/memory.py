from dataclasses import dataclass, field

from snippet_resolver.core.ports.fetcher import FetchResponse


@dataclass
class InMemoryContentFetcher:
    """Serve canned responses keyed by URL; unknown URLs answer 404."""

    responses: dict[str, FetchResponse] = field(default_factory=dict)
    requested: list[str] = field(default_factory=list)

    def add(self, url: str, text: str, status: int = 200) -> None:
        self.responses[url] = FetchResponse(status=status, text=text)

    async def fetch(self, url: str) -> FetchResponse | None:
        self.requested.append(url)
        return self.responses.get(url, FetchResponse(status=404, text="Not Found"))

    async def aclose(self) -> None:
        return None
