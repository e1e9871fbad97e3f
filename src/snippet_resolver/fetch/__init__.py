from snippet_resolver.fetch.httpx_fetcher import HttpxContentFetcher
from snippet_resolver.fetch.memory import InMemoryContentFetcher

__all__ = [
    "HttpxContentFetcher",
    "InMemoryContentFetcher",
]
