"""Data models for the fetch → extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

# Characters ``encodeURI`` leaves alone, plus ``%`` so existing escapes survive.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#%"


@dataclass
class FetchRequest:
    """The target locator taken from an inbound request."""

    target_url: str

    def __post_init__(self) -> None:
        if not self.target_url:
            raise ValueError("target_url must not be empty")

    @property
    def encoded_url(self) -> str:
        """Return :attr:`target_url` percent-encoded for the outbound request."""
        return quote(self.target_url, safe=_URI_SAFE)


@dataclass
class FetchResult:
    """The raw HTTP response for a single URL fetch."""

    url: str
    status_code: int
    content_type: str
    body: bytes
    # charset from the Content-Type header, None when the page did not send one
    encoding: str | None = None


@dataclass
class Article:
    """Readable content extracted from a :class:`FetchResult`."""

    title: str
    content: str

    def to_payload(self) -> dict[str, str]:
        return {"status": "success", "title": self.title, "content": self.content}
