"""Readability proxy CLI — entry-point for running and exercising the proxy.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP proxy under uvicorn
    extract   → fetch one URL and print the JSON payload
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from readproxy.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Any, Optional

import typer

from readproxy.config import settings
from readproxy.proxy import read_article
from readproxy.scraper.fetcher import build_client
from readproxy.scraper.models import FetchRequest

app = typer.Typer(
    name="readproxy",
    help="Readability proxy CLI.",
    no_args_is_help=True,
)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind (default: $HOST)."),
    port: Optional[int] = typer.Option(None, help="Port to listen on (default: $PORT or 80)."),
) -> None:
    """Run the proxy HTTP server."""
    import uvicorn

    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port

    uvicorn.run(
        "readproxy.api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


async def _extract(url: str) -> dict[str, Any]:
    async with build_client(settings) as client:
        return await read_article(client, FetchRequest(url))


@app.command("extract")
def extract(
    url: str = typer.Option(..., help="URL of the article to extract."),
) -> None:
    """Fetch a URL once and print the same JSON payload the server returns."""
    payload = asyncio.run(_extract(url))
    typer.echo(json.dumps(payload, ensure_ascii=False))
    if payload["status"] != "success":
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
