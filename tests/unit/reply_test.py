"""Tests for combining resolved snippets into a single reply."""

from __future__ import annotations

import pytest

from snippet_resolver.core.reply import NO_RESULTS_MESSAGE, build_reply, resolve_text
from snippet_resolver.fetch.memory import InMemoryContentFetcher
from snippet_resolver.models import Attachment, ResolvedSnippet


class TestBuildReply:
    def test_no_snippets(self) -> None:
        reply = build_reply([])
        assert reply.found is False
        assert reply.content == NO_RESULTS_MESSAGE
        assert reply.files == []

    def test_contents_are_joined_and_files_collected(self) -> None:
        first = ResolvedSnippet(content="one")
        second = ResolvedSnippet(content="two", files=[Attachment(data=b"x", name="x.md")])
        reply = build_reply([first, second])
        assert reply.found is True
        assert reply.content == "one\ntwo"
        assert [f.name for f in reply.files] == ["x.md"]

    def test_content_is_capped(self) -> None:
        reply = build_reply([ResolvedSnippet(content="a" * 1_500), ResolvedSnippet(content="b" * 1_500)])
        assert len(reply.content) == 2_000


class TestResolveText:
    @pytest.mark.asyncio
    async def test_without_links_does_not_fetch(self, fetcher: InMemoryContentFetcher) -> None:
        reply = await resolve_text("nothing to see", fetcher)
        assert reply.found is False
        assert fetcher.requested == []

    @pytest.mark.asyncio
    async def test_unresolvable_links(self, fetcher: InMemoryContentFetcher) -> None:
        reply = await resolve_text("https://github.com/u/r/blob/main/gone.py#L1", fetcher)
        assert reply.found is False
        assert fetcher.requested == ["https://raw.githubusercontent.com/u/r/main/gone.py"]

    @pytest.mark.asyncio
    async def test_resolves_links(self, fetcher: InMemoryContentFetcher, go_file: str) -> None:
        reply = await resolve_text(f"check {go_file}#L3", fetcher)
        assert reply.found is True
        assert reply.content == "`/u/r/blob/main/f.go` L3\n```go\n3 | line 3\n```"
