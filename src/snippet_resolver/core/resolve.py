import asyncio
import logging
import posixpath
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from snippet_resolver.core.languages import NO_HIGHLIGHT, resolve_file_language
from snippet_resolver.core.lines import resolve_lines, strip_line_markers
from snippet_resolver.core.matcher import LinkShape, Match
from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.core.render import (
    EMPTY_PLACEHOLDER,
    FENCE,
    MESSAGE_LIMIT,
    SAFE_BOUNDARY,
    code_block,
    format_line,
    generate_header,
    trim_leading_indent,
    truncate_lines,
)
from snippet_resolver.models import Attachment, LineRange, ResolvedSnippet

logger = logging.getLogger(__name__)

_GIST_FILE_PREFIX = "file-"


@dataclass(frozen=True)
class FetchedFile:
    text: str
    path: str
    name: str


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------


def normalize_gist_name(name: str) -> str:
    """Normalize a Gist filename or anchor so ``foo.py`` and ``file-foo-py-L3`` compare equal."""
    name = strip_line_markers(name).lower()
    if name.startswith(_GIST_FILE_PREFIX):
        name = name[len(_GIST_FILE_PREFIX) :]
    return re.sub(r"[^\w]", "-", name)


async def _fetch_text(fetcher: ContentFetcher, url: str) -> str | None:
    response = await fetcher.fetch(url)
    if response is None or not response.ok:
        logger.debug("No content at %s (status %s)", url, response.status if response else "error")
        return None
    return response.text


async def _fetch_normal(match: Match, raw_url: str, fetcher: ContentFetcher) -> FetchedFile | None:
    text = await _fetch_text(fetcher, raw_url)
    if text is None:
        return None
    path = urlsplit(match.url).path
    return FetchedFile(text=text, path=path, name=posixpath.basename(path))


def _find_gist_file(files: dict[str, Any], qualifier: str) -> tuple[str, dict[str, Any]] | None:
    wanted = normalize_gist_name(qualifier)
    for filename, entry in files.items():
        if isinstance(entry, dict) and normalize_gist_name(filename) == wanted:
            return filename, entry
    return None


async def _fetch_gist(match: Match, api_url: str, fetcher: ContentFetcher) -> FetchedFile | None:
    response = await fetcher.fetch(api_url)
    if response is None or not response.ok:
        return None
    try:
        metadata = response.json()
    except ValueError:
        logger.warning("Gist metadata at %s is not valid JSON", api_url)
        return None

    files = metadata.get("files") if isinstance(metadata, dict) else None
    if not isinstance(files, dict) or not match.opts:
        return None
    found = _find_gist_file(files, match.opts)
    if found is None:
        logger.debug("Gist %s has no file matching %r", api_url, match.opts)
        return None
    filename, entry = found

    text = entry.get("content")
    if entry.get("truncated") or not isinstance(text, str):
        raw_url = entry.get("raw_url")
        if not raw_url:
            return None
        text = await _fetch_text(fetcher, raw_url)
        if text is None:
            return None

    path = f"{urlsplit(match.url).path.rstrip('/')}/{filename}"
    return FetchedFile(text=text, path=path, name=filename)


# ---------------------------------------------------------------------------
# Slicing and rendering
# ---------------------------------------------------------------------------


def clamp_line_range(line_range: LineRange, line_count: int) -> tuple[int, int]:
    """Clamp a requested range to ``[1, line_count]``; a missing end means a single line."""
    if line_range.full_file:
        return 1, line_count
    start_line = min(max(line_range.start_line, 1), line_count)
    end_line = line_range.end_line if line_range.end_line is not None else start_line
    return start_line, min(end_line, line_count)


def _as_attachment(header: str, lines: Sequence[str], name: str) -> ResolvedSnippet:
    return ResolvedSnippet(
        content=header,
        files=[Attachment(data="\n".join(lines).encode("utf-8"), name=name)],
    )


def render_snippet(
    lines: Sequence[str],
    start_line: int,
    end_line: int,
    path: str,
    name: str,
    language: str,
) -> ResolvedSnippet:
    """Render sliced lines as an inline code block, or as an attachment when that is not possible.

    Slices containing a code fence, or too long to show even one line, are sent
    as a header plus the untouched lines in an attachment.
    """
    header = generate_header(path, start_line, end_line)
    if any(FENCE in line for line in lines):
        return _as_attachment(header, lines, name)

    formatted = [
        format_line(line, start_line, end_line, index, ansi=language == NO_HIGHLIGHT)
        for index, line in enumerate(trim_leading_indent(lines))
    ]
    rendered = truncate_lines(formatted, MESSAGE_LIMIT - (len(header) + SAFE_BOUNDARY + len(language)))
    if lines and not rendered:
        return _as_attachment(header, lines, name)

    content = "\n".join(
        [
            generate_header(
                path,
                start_line,
                start_line + len(rendered) - 1,
                ellipsed=len(rendered) != len(lines),
            ),
            code_block(language, "\n".join(rendered) or EMPTY_PLACEHOLDER),
        ]
    )
    if len(content) >= MESSAGE_LIMIT:
        return _as_attachment(header, lines, name)
    return ResolvedSnippet(content=content)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


async def resolve_match(match: Match, fetcher: ContentFetcher) -> ResolvedSnippet | None:
    raw_url = match.converter(match.url)
    if not raw_url:
        logger.debug("Dropping %s: no fetchable URL", match.url)
        return None

    if match.shape is LinkShape.GIST:
        fetched = await _fetch_gist(match, raw_url, fetcher)
    else:
        fetched = await _fetch_normal(match, raw_url, fetcher)
    if fetched is None:
        return None

    lines = fetched.text.split("\n")
    start_line, end_line = clamp_line_range(resolve_lines(match.opts), len(lines))
    return render_snippet(
        lines[start_line - 1 : end_line],
        start_line,
        end_line,
        fetched.path,
        fetched.name,
        resolve_file_language(fetched.name),
    )


async def _resolve_isolated(match: Match, fetcher: ContentFetcher) -> ResolvedSnippet | None:
    try:
        return await resolve_match(match, fetcher)
    except Exception:
        logger.exception("Error resolving %s", match.url)
        return None


async def resolve_github_results(matches: Sequence[Match], fetcher: ContentFetcher) -> list[ResolvedSnippet]:
    """Resolve every match concurrently, keeping input order and dropping failures."""
    resolved = await asyncio.gather(*(_resolve_isolated(match, fetcher) for match in matches))
    results = [snippet for snippet in resolved if snippet is not None]
    logger.info("Resolved %d of %d link(s)", len(results), len(matches))
    return results
