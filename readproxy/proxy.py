"""The request flow behind ``GET /``: fetch → parse → extract → payload.

Each call is independent; nothing is shared between requests except the
outbound HTTP client.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi.concurrency import run_in_threadpool

from readproxy.config import Settings, settings
from readproxy.logging_utils import get_logger
from readproxy.scraper.errors import ProxyError
from readproxy.scraper.extractor import extract_article
from readproxy.scraper.fetcher import fetch_html
from readproxy.scraper.models import FetchRequest


async def read_article(
    client: httpx.AsyncClient,
    request: FetchRequest,
    *,
    cfg: Settings = settings,
    logger: logging.Logger | None = None,
) -> dict[str, Any]:
    """Fetch *request*'s target and return the JSON payload for the caller.

    Fetch and parse failures become ``{"status": "fail", ...}`` payloads; any
    other exception propagates.
    """
    log = logger or get_logger()
    url = request.encoded_url
    log.info("%s: Request initiated", url)

    try:
        result = await fetch_html(client, url, cfg=cfg, logger=log)
        # lxml + readability are CPU bound; keep them off the event loop.
        article = await run_in_threadpool(extract_article, result, cfg=cfg, logger=log)
    except ProxyError as exc:
        return exc.to_payload()

    return article.to_payload()
