"""Class/job scraper CLI - entry-point for fetching, parsing and serving.

Usage:
    python cli/main.py --help

Commands:
    fetch   → scrape a character's class/job page from the Lodestone
    parse   → run the extractor on a saved page (plain or view-source)
    serve   → start the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from classjob.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
import logging
from typing import Optional

import typer

from classjob.config import settings
from classjob.log import configure_logging
from classjob.scraper import ClassJobError, build_profile, fetch_class_job_page

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="classjob",
    help="Lodestone class/job profile scraper.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    configure_logging(log_level)


@app.command("fetch")
def fetch(
    character_id: str = typer.Argument(..., help="Lodestone character ID."),
    indent: int = typer.Option(2, help="JSON indentation."),
) -> None:
    """Fetch a character's class/job page and print the parsed profile as JSON."""
    try:
        raw = asyncio.run(fetch_class_job_page(character_id))
    except ClassJobError as exc:
        suffix = f" ({exc.url})" if exc.url else ""
        typer.echo(f"[fetch] {exc.message}{suffix}", err=True)
        raise typer.Exit(1)

    try:
        profile = build_profile(raw.html)
    except Exception:
        logger.exception("Unexpected failure while parsing %s", raw.url)
        typer.echo(f"[fetch] Fetch/parse failed ({raw.url})", err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(profile.to_dict(), indent=indent, ensure_ascii=False))


@app.command("parse")
def parse(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Saved page HTML."),
    indent: int = typer.Option(2, help="JSON indentation."),
) -> None:
    """Parse a saved class/job page (or its view-source dump) and print JSON."""
    page = path.read_text(encoding="utf-8", errors="replace")
    profile = build_profile(page)
    typer.echo(json.dumps(profile.to_dict(), indent=indent, ensure_ascii=False))


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: settings.host)."),
    port: Optional[int] = typer.Option(None, help="Bind port (default: settings.port)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"[serve] Scraper API listening on http://{bind_host}:{bind_port}")
    uvicorn.run("classjob.api.app:app", host=bind_host, port=bind_port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
