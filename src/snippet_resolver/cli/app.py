import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from snippet_resolver.cli.resolve import match, resolve
from snippet_resolver.cli.serve import serve_app

app = typer.Typer(
    name="snippet-resolver",
    help="Snippet Resolver CLI — turn GitHub and Gist links into code excerpts.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


app.command("resolve")(resolve)
app.command("match")(match)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
