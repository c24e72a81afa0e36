"""Scraper package — article fetch & readability extraction."""

from readproxy.scraper.errors import FetchError, ParseError, ProxyError
from readproxy.scraper.extractor import extract_article
from readproxy.scraper.fetcher import build_client, fetch_html
from readproxy.scraper.models import Article, FetchRequest, FetchResult

__all__ = [
    "build_client",
    "fetch_html",
    "extract_article",
    "FetchRequest",
    "FetchResult",
    "Article",
    "ProxyError",
    "FetchError",
    "ParseError",
]
