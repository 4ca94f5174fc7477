"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and prepares the per-app fetch
settings (``app.state.fetch_timeout`` and the optional
``app.state.fetch_limiter`` semaphore).  Nothing else is shared between
requests.

Errors
------
:class:`~faleproxy.errors.FaleproxyError` subclasses are rendered as
``{"error": "..."}`` with their status code.  A ``/fetch`` body that cannot be
read is reported the same way as a missing URL.

Routes
------
    GET  /          landing page
    GET  /health    liveness probe
    POST /fetch     fetch and rewrite a page
    GET  /<asset>   static files from the public directory
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from faleproxy.config import settings
from faleproxy.errors import FaleproxyError
from faleproxy.logging_setup import configure_logging

from faleproxy.api.routers import fetch as fetch_router
from faleproxy.api.routers import pages as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and fetch limits on startup."""
    configure_logging(settings.log_level, settings.log_file)
    app.state.fetch_timeout = settings.fetch_timeout
    app.state.fetch_limiter = (
        asyncio.Semaphore(settings.max_concurrent_fetches)
        if settings.max_concurrent_fetches > 0
        else None
    )
    logger.info("Faleproxy ready (public dir: %s)", settings.public_dir)
    yield


async def _faleproxy_error_handler(request: Request, exc: FaleproxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Faleproxy",
        description=(
            "Fetches a web page and returns a copy with 'Yale' replaced by "
            "'Fale' in its visible text, leaving URLs and attributes intact."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    # Defaults for apps used without running the lifespan.
    app.state.fetch_timeout = settings.fetch_timeout
    app.state.fetch_limiter = None

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FaleproxyError, _faleproxy_error_handler)

    app.include_router(pages_router.router, tags=["pages"])
    app.include_router(fetch_router.router, tags=["fetch"])

    # Mounted last so the routes above win.
    app.mount("/", StaticFiles(directory=settings.public_dir), name="public")

    return app


# Module-level instance used by uvicorn:
#   uvicorn faleproxy.api.app:app --reload
app = create_app()
