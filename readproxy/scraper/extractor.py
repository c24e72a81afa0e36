"""Content extraction: turns a :class:`FetchResult` into an :class:`Article`."""

from __future__ import annotations

import logging
import re

from lxml import etree
from lxml import html as lxml_html
from readability import Document
from readability.readability import Unparseable

from readproxy.config import Settings, settings
from readproxy.logging_utils import get_logger
from readproxy.scraper.errors import ParseError
from readproxy.scraper.models import Article, FetchResult

_NO_TITLE = "[no-title]"
_EMPTY_DETAIL = "Readability returned empty"
_BODY_TAG = re.compile(r"</?body\b[^>]*>", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _build_document(body: bytes, encoding: str | None = None) -> lxml_html.HtmlElement:
    """Parse *body* into an lxml tree without touching the network.

    A charset sent in the HTTP headers wins over any ``<meta>`` declaration;
    an unknown charset name falls back to lxml's own detection.  Scripts,
    stylesheets and images referenced by the page are never loaded.
    """
    try:
        parser = lxml_html.HTMLParser(no_network=True, encoding=encoding)
    except LookupError:
        parser = lxml_html.HTMLParser(no_network=True)
    return lxml_html.document_fromstring(body, parser=parser)


def _unwrap_body(fragment: str) -> str:
    """Drop the ``<body id="readabilityBody">`` readability leaves inside its ``<div>``."""
    return _BODY_TAG.sub("", fragment)


def _text_length(fragment: str) -> int:
    if not fragment.strip():
        return 0
    try:
        return len(lxml_html.fromstring(fragment).text_content().strip())
    except (etree.ParserError, ValueError):
        return 0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_article(
    result: FetchResult,
    *,
    cfg: Settings = settings,
    logger: logging.Logger | None = None,
) -> Article:
    """Run readability over *result* and return its title and cleaned HTML.

    The content is readability's partial HTML, a ``<div>`` wrapping the
    article, returned without further sanitizing.

    Raises:
        ParseError: If the page cannot be parsed or holds less than
            ``cfg.min_text_length`` characters of readable text.
    """
    log = logger or get_logger()

    try:
        tree = _build_document(result.body, result.encoding)
    except (etree.ParserError, ValueError) as exc:
        log.info("%s: document could not be parsed: %s", result.url, exc)
        raise ParseError(_EMPTY_DETAIL) from exc
    log.info("%s: document parsed", result.url)

    doc = Document(tree, url=result.url)
    try:
        title = doc.title()
        content = _unwrap_body(doc.summary(html_partial=True))
    except Unparseable as exc:
        log.info("%s: Readability failed: %s", result.url, exc)
        raise ParseError(_EMPTY_DETAIL) from exc

    if _text_length(content) < cfg.min_text_length:
        log.info("%s: Readability returned empty", result.url)
        raise ParseError(_EMPTY_DETAIL)

    if title == _NO_TITLE:
        title = ""
    log.info("%s: Readability title: %s", result.url, title)
    return Article(title=title, content=content)
