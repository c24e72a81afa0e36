"""FastAPI application factory.

Lifespan
--------
On startup the app configures the ``readproxy`` log stream and opens a
single ``httpx.AsyncClient`` (shared across all requests via
``request.app.state.http_client`` so upstream connections are kept alive).
On shutdown it closes the client.

Routers
-------
    /      — article fetch + readability extraction
    /ok    — liveness check
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from readproxy.config import settings
from readproxy.logging_utils import setup_logging
from readproxy.scraper.fetcher import build_client

from readproxy.api.routers import article as article_router
from readproxy.api.routers import health as health_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and open the outbound client; close it on shutdown."""
    logger = setup_logging(settings)
    client = build_client(settings)
    app.state.http_client = client
    logger.info("Server is listening on %s", settings.port)
    try:
        yield
    finally:
        await client.aclose()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Readability Proxy",
        description=(
            "Fetches a web page and returns its main readable article "
            "(title and cleaned HTML) as JSON."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health_router.router, tags=["health"])
    app.include_router(article_router.router, tags=["article"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn readproxy.api.app:app
app = create_app()
