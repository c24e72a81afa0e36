"""Article endpoint.

Routes
------
GET /?url=<target>    → fetch the target and return its readable article
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from readproxy.logging_utils import get_logger
from readproxy.proxy import read_article
from readproxy.scraper.models import FetchRequest

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ArticleResponse(BaseModel):
    status: Literal["success"]
    title: str
    content: str


class FailureResponse(BaseModel):
    status: Literal["fail"]
    error: Literal["FETCH_FAILURE", "PARSE_FAILURE"]
    detail: str


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get(
    "/",
    response_model=Union[ArticleResponse, FailureResponse],
    responses={400: {"description": "The `url` query parameter is missing."}},
)
async def read(request: Request, url: Optional[str] = None) -> Response:
    """Fetch *url* and return its title and cleaned article HTML.

    Fetch and parse failures are reported in the body with HTTP 200.  A
    missing ``url`` gets a bare 400 with no body.
    """
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    get_logger().info("Incoming request: %s", target)

    if not url:
        return Response(status_code=400)

    payload = await read_article(request.app.state.http_client, FetchRequest(url))
    return JSONResponse(payload)
