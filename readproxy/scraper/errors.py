"""Errors raised by the fetch and extract steps.

Each error carries the machine-readable code and the human-readable detail
that end up in the ``fail`` JSON payload.
"""

from __future__ import annotations

FETCH_FAILURE = "FETCH_FAILURE"
PARSE_FAILURE = "PARSE_FAILURE"


class ProxyError(Exception):
    code: str = ""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_payload(self) -> dict[str, str]:
        return {"status": "fail", "error": self.code, "detail": self.detail}


class FetchError(ProxyError):
    """The target resource could not be obtained."""

    code = FETCH_FAILURE


class ParseError(ProxyError):
    """The document was fetched but holds no extractable article."""

    code = PARSE_FAILURE
