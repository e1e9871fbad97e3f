from __future__ import annotations

from fastapi import APIRouter, Depends

from snippet_resolver.api.dependencies import get_fetcher
from snippet_resolver.api.schemas import MatchItem, MatchResponse, ResolveRequest
from snippet_resolver.core.matcher import match_github_urls
from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.core.reply import resolve_text
from snippet_resolver.models import Reply

router = APIRouter(tags=["resolve"])


@router.post("/match", response_model=MatchResponse)
async def match(body: ResolveRequest) -> MatchResponse:
    """List the GitHub and Gist links found in the text, without fetching them."""
    return MatchResponse(
        matches=[
            MatchItem(shape=found.shape.value, url=found.url, opts=found.opts, fetch_url=found.converter(found.url))
            for found in match_github_urls(body.text)
        ]
    )


@router.post("/resolve", response_model=Reply)
async def resolve(
    body: ResolveRequest,
    fetcher: ContentFetcher = Depends(get_fetcher),
) -> Reply:
    """Resolve every link into a code excerpt. Attachments are base64-encoded."""
    return await resolve_text(body.text, fetcher)
