from collections.abc import Sequence

from snippet_resolver.core.matcher import match_github_urls
from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.core.render import MESSAGE_LIMIT
from snippet_resolver.core.resolve import resolve_github_results
from snippet_resolver.models import Attachment, Reply, ResolvedSnippet

NO_RESULTS_MESSAGE = "No GitHub links with specified lines to resolve found in this message."


def build_reply(snippets: Sequence[ResolvedSnippet]) -> Reply:
    """Combine resolved snippets into a single reply capped at the message limit."""
    if not snippets:
        return Reply(content=NO_RESULTS_MESSAGE, found=False)
    files: list[Attachment] = []
    for snippet in snippets:
        files.extend(snippet.files)
    content = "\n".join(snippet.content for snippet in snippets)
    return Reply(content=content[:MESSAGE_LIMIT], files=files)


async def resolve_text(text: str, fetcher: ContentFetcher) -> Reply:
    """Match, fetch and render every GitHub link in ``text``."""
    matches = match_github_urls(text)
    if not matches:
        return build_reply([])
    return build_reply(await resolve_github_results(matches, fetcher))
