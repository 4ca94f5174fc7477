"""Tests for the two-stage proxy pipeline (fetch → transform).

``fetch_html`` is patched where a test needs to control timing; the happy
path goes through ``respx`` so the real fetcher runs.
"""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import httpx
import pytest
import respx

from faleproxy.errors import FetchError
from faleproxy.pipeline import ProxiedPage, fetch_stage, proxy_page, transform_stage
from faleproxy.scraper.models import RawPage


_HTML = "<html><head><title>Yale Links</title></head><body><a href='https://www.yale.edu'>Yale</a></body></html>"


class TestProxyPage:
    async def test_fetches_and_rewrites(self) -> None:
        with respx.mock:
            respx.get("http://example.com/").mock(return_value=httpx.Response(200, text=_HTML))
            page = await proxy_page("example.com")

        assert isinstance(page, ProxiedPage)
        assert page.original_url == "example.com"
        assert page.fetched_url == "http://example.com"
        assert page.title == "Fale Links"
        assert '<a href="https://www.yale.edu">Fale</a>' in page.content

    async def test_fetch_failure_yields_no_page(self) -> None:
        with respx.mock:
            respx.get("http://down.example.com/").mock(side_effect=httpx.ConnectError("refused"))
            with patch("faleproxy.pipeline.transform") as mock_transform:
                with pytest.raises(FetchError):
                    await proxy_page("down.example.com")

        mock_transform.assert_not_called()


class TestFetchStage:
    async def test_timeout_raises_fetch_error(self) -> None:
        async def _slow(url, client=None):
            await asyncio.sleep(1)

        with patch("faleproxy.pipeline.fetch_html", side_effect=_slow):
            with pytest.raises(FetchError) as excinfo:
                await fetch_stage("http://slow.example.com", timeout=0.01)

        assert "timeout" in excinfo.value.message

    async def test_limiter_bounds_concurrency(self) -> None:
        active = 0
        peak = 0

        async def _tracked(url, client=None):
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return RawPage(url=url, html="<p>x</p>", status_code=200)

        limiter = asyncio.Semaphore(1)
        with patch("faleproxy.pipeline.fetch_html", side_effect=_tracked):
            await asyncio.gather(
                *(fetch_stage(f"http://e{i}.example.com", limiter=limiter) for i in range(3))
            )

        assert peak == 1

    async def test_without_timeout_delegates_directly(self) -> None:
        raw = RawPage(url="http://example.com", html="<p>x</p>", status_code=200)

        async def _fetch(url, client=None):
            return raw

        with patch("faleproxy.pipeline.fetch_html", side_effect=_fetch) as mock_fetch:
            result = await fetch_stage("example.com")

        assert result is raw
        mock_fetch.assert_called_once_with("example.com", client=None)


class TestTransformStage:
    def test_builds_proxied_page(self) -> None:
        raw = RawPage(url="http://example.com", html="<title>Yale</title><p>yale</p>", status_code=200)
        page = transform_stage(raw, original_url="example.com")
        assert page == ProxiedPage(
            original_url="example.com",
            fetched_url="http://example.com",
            content="<title>Fale</title><p>fale</p>",
            title="Fale",
        )
