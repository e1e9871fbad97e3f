"""FastMCP server exposing snippet-resolver tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from snippet_resolver.core.matcher import match_github_urls
from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.core.reply import resolve_text


def match_links_payload(text: str) -> list[dict[str, str | None]]:
    return [
        {"shape": m.shape.value, "url": m.url, "opts": m.opts, "fetch_url": m.converter(m.url)}
        for m in match_github_urls(text)
    ]


async def resolve_links_payload(text: str, fetcher: ContentFetcher) -> dict[str, Any]:
    """Resolve links and return attachments as decoded text, which MCP clients can display."""
    reply = await resolve_text(text, fetcher)
    return {
        "found": reply.found,
        "content": reply.content,
        "attachments": [{"name": a.name, "content": a.data.decode("utf-8", errors="replace")} for a in reply.files],
    }


def create_mcp_server(fetcher: ContentFetcher) -> FastMCP:
    """Create a FastMCP server wired to the given fetcher."""

    mcp = FastMCP("snippet-resolver", instructions="Resolve GitHub and Gist links into code excerpts.")

    @mcp.tool()
    async def match_links(text: str) -> list[dict[str, str | None]]:
        """List the GitHub and Gist links found in a message."""
        return match_links_payload(text)

    @mcp.tool()
    async def resolve_links(text: str) -> dict[str, Any]:
        """Resolve GitHub and Gist links in a message into code excerpts."""
        return await resolve_links_payload(text, fetcher)

    return mcp
