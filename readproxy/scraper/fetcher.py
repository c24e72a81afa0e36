"""Async HTTP fetcher for article pages."""

from __future__ import annotations

import logging

import httpx

from readproxy.config import Settings, settings
from readproxy.logging_utils import get_logger
from readproxy.scraper.errors import FetchError
from readproxy.scraper.models import FetchResult


def build_client(cfg: Settings = settings) -> httpx.AsyncClient:
    """Return the shared outbound client.

    httpx sends ``Accept-Encoding: gzip, deflate`` and decodes the body
    transparently.
    """
    return httpx.AsyncClient(
        headers={"user-agent": cfg.user_agent},
        timeout=cfg.request_timeout,
        follow_redirects=True,
    )


def _is_html(content_type: str) -> bool:
    # A missing header is given the benefit of the doubt.
    return not content_type or "text/html" in content_type.lower()


async def fetch_html(
    client: httpx.AsyncClient,
    url: str,
    *,
    cfg: Settings = settings,
    logger: logging.Logger | None = None,
) -> FetchResult:
    """GET *url* and return its body as a :class:`FetchResult`.

    When ``cfg.restrict_content`` is set the response must be HTML and no
    larger than ``cfg.max_content_bytes``; the body is streamed so oversized
    pages are abandoned early.

    Raises:
        FetchError: On transport errors, a non-200 status, a rejected content
            type or size, or an empty body.
    """
    log = logger or get_logger()
    limit = cfg.max_content_bytes if cfg.restrict_content else None

    try:
        async with client.stream("GET", url) as response:
            if response.status_code != 200:
                log.info("%s: Response %s", url, response.status_code)
                raise FetchError(f"Response {response.status_code}")

            content_type = response.headers.get("content-type", "")
            if cfg.restrict_content and not _is_html(content_type):
                log.info("%s: Unsupported content type %s", url, content_type)
                raise FetchError(f"Unsupported content type: {content_type}")

            body = bytearray()
            async for chunk in response.aiter_bytes():
                body.extend(chunk)
                if limit is not None and len(body) > limit:
                    log.info("%s: Response exceeds %d bytes", url, limit)
                    raise FetchError(f"Response exceeds {limit} bytes")
            final_url = str(response.url)
            encoding = response.charset_encoding
            status_code = response.status_code
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        reason = str(exc) or type(exc).__name__
        log.info("%s: error detail: %s", url, reason)
        raise FetchError(f"Error: {reason}") from exc

    if not body:
        log.info("%s: Empty body received", url)
        raise FetchError("Empty response")

    log.info("%s: %d bytes received", url, len(body))
    return FetchResult(
        url=final_url,
        status_code=status_code,
        content_type=content_type,
        body=bytes(body),
        encoding=encoding,
    )
