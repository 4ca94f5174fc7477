"""Fetch-and-rewrite endpoint.

Routes
------
POST /fetch    Body: {"url": "https://..."}  (JSON or form-encoded)  → proxy_page

Responses
---------
200  {"success": true, "content": "...", "title": "...", "originalUrl": "..."}
400  {"error": "URL is required"}
500  {"error": "Failed to fetch content: <message>"}
"""

from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from faleproxy.errors import ValidationError
from faleproxy.pipeline import proxy_page

router = APIRouter()

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class FetchRequest(BaseModel):
    # Optional so a missing url reaches our own validation message.
    url: Optional[str] = None


class FetchResponse(BaseModel):
    success: bool
    content: str
    title: str
    originalUrl: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _read_fetch_request(request: Request) -> FetchRequest:
    """Parse the body as a form post or JSON.

    Anything unreadable (missing body, broken JSON, non-string url) yields an
    empty request, which the endpoint reports as a missing URL.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        payload: Any = {"url": form.get("url")}
    else:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = {}
    try:
        return FetchRequest.model_validate(payload)
    except SchemaError:
        return FetchRequest()


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post("/fetch", response_model=FetchResponse)
async def fetch_endpoint(request: Request) -> dict[str, Any]:
    """Fetch *url*, rewrite the target word in its text, and return the page.

    ``originalUrl`` echoes the URL exactly as submitted, before scheme
    normalization.
    """
    body = await _read_fetch_request(request)
    if not body.url:
        raise ValidationError()

    page = await proxy_page(
        body.url,
        timeout=request.app.state.fetch_timeout,
        limiter=request.app.state.fetch_limiter,
    )
    return {
        "success": True,
        "content": page.content,
        "title": page.title,
        "originalUrl": body.url,
    }
