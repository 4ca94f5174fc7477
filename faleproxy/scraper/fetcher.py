"""Async HTTP fetcher for the pages Faleproxy rewrites."""

from __future__ import annotations

import logging

import httpx

from faleproxy.errors import FetchError
from faleproxy.scraper.models import RawPage

logger = logging.getLogger(__name__)

_SCHEMES = ("http://", "https://")


def normalize_url(url: str) -> str:
    """Prefix *url* with ``http://`` unless it already names http(s).

    The check is case-insensitive; a URL that already has a scheme is
    returned unchanged.
    """
    if url.lower().startswith(_SCHEMES):
        return url
    return f"http://{url}"


def _describe(exc: Exception) -> str:
    """Return a human-readable message for an httpx failure."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"Request failed with status code {exc.response.status_code}"
    return str(exc) or type(exc).__name__


async def fetch_html(url: str, *, client: httpx.AsyncClient | None = None) -> RawPage:
    """Fetch *url* (after :func:`normalize_url`) and return a :class:`RawPage`.

    Redirects are followed and the httpx default timeout applies.  An injected
    *client* is used as-is and left open.

    Raises:
        FetchError: On transport/DNS failures, timeouts, invalid URLs or a
            non-2xx response.
    """
    target = normalize_url(url)
    try:
        if client is not None:
            response = await client.get(target)
            response.raise_for_status()
        else:
            async with httpx.AsyncClient(follow_redirects=True) as own_client:
                response = await own_client.get(target)
                response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Error fetching URL %s: %s", target, exc)
        raise FetchError(_describe(exc)) from exc

    logger.debug("Fetched %s (HTTP %d, %d chars)", target, response.status_code, len(response.text))
    return RawPage(url=target, html=response.text, status_code=response.status_code)
