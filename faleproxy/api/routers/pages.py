"""Landing page and liveness endpoints.

Routes
------
GET /          The bundled front-end page (``public/index.html``)
GET /health    {"status": "ok"}
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import FileResponse

from faleproxy.config import settings

router = APIRouter()


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the landing page."""
    return FileResponse(settings.index_path, media_type="text/html")


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
