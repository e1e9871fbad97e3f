import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from snippet_resolver.core.matcher import match_github_urls
from snippet_resolver.core.ports.fetcher import ContentFetcher
from snippet_resolver.core.reply import resolve_text
from snippet_resolver.models import Reply

console = Console()

TextArgument = Annotated[
    str | None,
    typer.Argument(help="Message text to scan for links. Read from stdin when omitted."),
]


def _read_text(text: str | None) -> str:
    if text is not None:
        return text
    if sys.stdin.isatty():
        raise typer.BadParameter("Provide TEXT or pipe a message on stdin.")
    return sys.stdin.read()


def _get_fetcher() -> ContentFetcher:
    from snippet_resolver.fetch.httpx_fetcher import HttpxContentFetcher

    return HttpxContentFetcher()


def resolve(
    text: TextArgument = None,
    out_dir: Annotated[Path | None, typer.Option("--out-dir", help="Directory to write attachments to.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the reply as JSON.")] = False,
) -> None:
    """Resolve GitHub and Gist links into code excerpts."""
    message = _read_text(text)
    fetcher = _get_fetcher()

    async def _run() -> Reply:
        try:
            return await resolve_text(message, fetcher)
        finally:
            await fetcher.aclose()

    reply = asyncio.run(_run())

    if as_json:
        typer.echo(reply.model_dump_json(indent=2))
        if not reply.found:
            raise typer.Exit(code=1)
        return

    if not reply.found:
        console.print(f"[red]{reply.content}[/red]")
        raise typer.Exit(code=1)

    typer.echo(reply.content)
    for attachment in reply.files:
        if out_dir is None:
            console.print(f"[dim]attachment[/dim] {attachment.name} ({len(attachment.data)} bytes)")
            continue
        out_dir.mkdir(parents=True, exist_ok=True)
        target = out_dir / attachment.name
        target.write_bytes(attachment.data)
        console.print(f"[green]Wrote[/green] {target}")


def match(text: TextArgument = None) -> None:
    """List the links that would be resolved, without fetching them."""
    matches = match_github_urls(_read_text(text))
    table = Table(show_lines=False)
    for header in ("shape", "url", "opts", "fetch url"):
        table.add_column(header)
    for found in matches:
        table.add_row(found.shape.value, found.url, found.opts or "", found.converter(found.url) or "-")
    console.print(table)
    console.print(f"({len(matches)} links)")
