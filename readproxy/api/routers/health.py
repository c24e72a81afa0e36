"""Liveness check.

Routes
------
GET /ok    → plaintext ``ok``
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/ok", response_class=PlainTextResponse)
def ok() -> str:
    return "ok"
