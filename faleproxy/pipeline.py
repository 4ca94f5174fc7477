"""Proxy pipeline: fetch a page, then rewrite it.

``proxy_page`` runs two explicit stages::

    fetch (async, the only await point) → transform (sync, CPU only)

Timeouts and the concurrency limiter apply to the fetch stage alone.  A
failing fetch produces no content at all.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import httpx

from faleproxy.errors import FetchError
from faleproxy.rewriter import transform
from faleproxy.rewriter.backend import HtmlBackend
from faleproxy.scraper.fetcher import fetch_html
from faleproxy.scraper.models import RawPage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProxiedPage:
    original_url: str
    fetched_url: str
    content: str
    title: str


async def fetch_stage(
    url: str,
    *,
    timeout: float | None = None,
    limiter: asyncio.Semaphore | None = None,
    client: httpx.AsyncClient | None = None,
) -> RawPage:
    """Stage 1: retrieve the raw document.

    Args:
        url: URL as submitted (normalized by the fetcher).
        timeout: Upper bound in seconds for the whole fetch; ``None`` leaves
            the transport default in charge.
        limiter: Optional semaphore bounding simultaneous fetches.
        client: Optional shared ``httpx.AsyncClient``.

    Raises:
        FetchError: If the fetch fails or exceeds *timeout*.
    """
    async def _fetch() -> RawPage:
        if timeout is None:
            return await fetch_html(url, client=client)
        try:
            return await asyncio.wait_for(fetch_html(url, client=client), timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("Error fetching URL %s: timed out after %ss", url, timeout)
            raise FetchError(f"timeout of {timeout}s exceeded") from exc

    if limiter is None:
        return await _fetch()
    async with limiter:
        return await _fetch()


def transform_stage(raw: RawPage, original_url: str, backend: HtmlBackend | None = None) -> ProxiedPage:
    """Stage 2: rewrite the fetched document."""
    result = transform(raw.html, backend=backend)
    return ProxiedPage(
        original_url=original_url,
        fetched_url=raw.url,
        content=result.content,
        title=result.title,
    )


async def proxy_page(
    url: str,
    *,
    timeout: float | None = None,
    limiter: asyncio.Semaphore | None = None,
    client: httpx.AsyncClient | None = None,
) -> ProxiedPage:
    """Fetch *url* and return the rewritten page."""
    raw = await fetch_stage(url, timeout=timeout, limiter=limiter, client=client)
    page = transform_stage(raw, original_url=url)
    logger.info("Rewrote %s (title=%r)", raw.url, page.title)
    return page
