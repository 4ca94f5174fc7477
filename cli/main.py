"""Faleproxy CLI: run the service or rewrite pages from the terminal.

Usage:
    python cli/main.py --help

Commands:
    serve      → run the HTTP service under uvicorn
    rewrite    → fetch a URL and print the rewritten page
    transform  → rewrite a local HTML file (or stdin)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from faleproxy.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
from typing import Optional

import typer

from faleproxy.config import settings
from faleproxy.errors import FetchError
from faleproxy.logging_setup import configure_logging

app = typer.Typer(
    name="faleproxy",
    help="Faleproxy CLI.",
    no_args_is_help=True,
)


@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes (development)."),
) -> None:
    """Run the Faleproxy HTTP service."""
    import uvicorn

    typer.echo(f"[serve] Faleproxy listening on http://{host}:{port}")
    uvicorn.run("faleproxy.api.app:app", host=host, port=port, reload=reload)


@app.command("rewrite")
def rewrite(
    url: str = typer.Option(..., help="URL to fetch and rewrite."),
    title_only: bool = typer.Option(False, "--title-only", help="Print only the rewritten title."),
) -> None:
    """Fetch a URL and print the rewritten page to stdout."""
    from faleproxy.pipeline import proxy_page

    configure_logging(settings.log_level, settings.log_file)
    typer.echo(f"[rewrite] Fetching {url!r} …", err=True)
    try:
        page = asyncio.run(proxy_page(url, timeout=settings.fetch_timeout))
    except FetchError as exc:
        typer.echo(f"[rewrite] {exc.to_payload()['error']}", err=True)
        raise typer.Exit(1)

    typer.echo(f"[rewrite] Title  : {page.title or '(none)'}", err=True)
    if title_only:
        typer.echo(page.title)
        return
    typer.echo(page.content)


@app.command("transform")
def transform_cmd(
    file: Optional[Path] = typer.Option(
        None, "--file", exists=True, dir_okay=False, help="HTML file to rewrite (default: stdin)."
    ),
) -> None:
    """Rewrite a local HTML document and print the result."""
    from faleproxy.rewriter import transform

    html = file.read_text(encoding="utf-8") if file else sys.stdin.read()
    result = transform(html)
    typer.echo(result.content)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
