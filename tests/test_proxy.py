"""Tests for the fetch → extract → payload flow in :mod:`readproxy.proxy`.

The outbound client runs on an ``httpx.MockTransport`` and the logger is
injected so records can be checked with ``caplog``.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx
import pytest

from readproxy.config import Settings
from readproxy.proxy import read_article
from readproxy.scraper.models import FetchRequest

_ARTICLE_HTML = (
    "<html><head><title>T</title></head><body><article>"
    "<p>Hello world, this is a long paragraph of real content for extraction.</p>"
    "</article></body></html>"
)


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture()
def cfg() -> Settings:
    return Settings(restrict_content=True, min_text_length=25)


@pytest.fixture()
def log() -> logging.Logger:
    return logging.getLogger("tests.proxy")


class TestReadArticle:
    async def test_success_payload(self, cfg, log) -> None:
        async with _client(lambda req: httpx.Response(200, html=_ARTICLE_HTML)) as client:
            payload = await read_article(
                client, FetchRequest("http://example.com/article"), cfg=cfg, logger=log
            )

        assert payload["status"] == "success"
        assert payload["title"] == "T"
        assert "Hello world" in payload["content"]
        assert set(payload) == {"status", "title", "content"}

    async def test_utf8_page_without_meta_charset(self, cfg, log) -> None:
        html = (
            "<html><head><title>Résumé</title></head><body><article>"
            "<p>Café Zürich — a naïve tour of the old town, its bakeries and its bridges.</p>"
            "</article></body></html>"
        )
        async with _client(lambda req: httpx.Response(200, html=html)) as client:
            payload = await read_article(
                client, FetchRequest("http://example.com/cafe"), cfg=cfg, logger=log
            )

        assert payload["status"] == "success"
        assert payload["title"] == "Résumé"
        assert "Café Zürich — a naïve tour" in payload["content"]

    async def test_fetch_failure_payload(self, cfg, log) -> None:
        async with _client(lambda req: httpx.Response(404)) as client:
            payload = await read_article(
                client, FetchRequest("http://example.com/gone"), cfg=cfg, logger=log
            )

        assert payload == {"status": "fail", "error": "FETCH_FAILURE", "detail": "Response 404"}

    async def test_parse_failure_payload(self, cfg, log) -> None:
        async with _client(lambda req: httpx.Response(200, html="<html><body></body></html>")) as client:
            payload = await read_article(
                client, FetchRequest("http://example.com/blank"), cfg=cfg, logger=log
            )

        assert payload == {
            "status": "fail",
            "error": "PARSE_FAILURE",
            "detail": "Readability returned empty",
        }

    async def test_requests_encoded_url(self, cfg, log) -> None:
        seen: list[str] = []

        def handler(req: httpx.Request) -> httpx.Response:
            seen.append(str(req.url))
            return httpx.Response(200, html=_ARTICLE_HTML)

        async with _client(handler) as client:
            await read_article(
                client, FetchRequest("http://example.com/a b"), cfg=cfg, logger=log
            )

        assert seen == ["http://example.com/a%20b"]

    async def test_same_target_gives_same_payload(self, cfg, log) -> None:
        async with _client(lambda req: httpx.Response(200, html=_ARTICLE_HTML)) as client:
            first = await read_article(client, FetchRequest("http://example.com/a"), cfg=cfg, logger=log)
            second = await read_article(client, FetchRequest("http://example.com/a"), cfg=cfg, logger=log)

        assert first == second

    async def test_logs_each_step(self, cfg, log, caplog) -> None:
        caplog.set_level(logging.INFO, logger="tests.proxy")
        async with _client(lambda req: httpx.Response(200, html=_ARTICLE_HTML)) as client:
            await read_article(
                client, FetchRequest("http://example.com/article"), cfg=cfg, logger=log
            )

        messages = [r.getMessage() for r in caplog.records if r.name == "tests.proxy"]
        assert messages == [
            "http://example.com/article: Request initiated",
            f"http://example.com/article: {len(_ARTICLE_HTML)} bytes received",
            "http://example.com/article: document parsed",
            "http://example.com/article: Readability title: T",
        ]

    async def test_broken_log_handler_does_not_fail_request(self, cfg) -> None:
        class _FullDisk:
            def write(self, text: str) -> None:
                raise OSError("disk full")

            def flush(self) -> None:
                pass

        broken = logging.getLogger("tests.proxy.broken")
        broken.setLevel(logging.INFO)
        broken.addHandler(logging.StreamHandler(_FullDisk()))
        broken.propagate = False
        try:
            async with _client(lambda req: httpx.Response(200, html=_ARTICLE_HTML)) as client:
                payload = await read_article(
                    client, FetchRequest("http://example.com/article"), cfg=cfg, logger=broken
                )
        finally:
            broken.handlers.clear()

        assert payload["status"] == "success"
