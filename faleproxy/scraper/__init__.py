"""Scraper package: outbound page fetch."""

from faleproxy.scraper.fetcher import fetch_html, normalize_url
from faleproxy.scraper.models import RawPage

__all__ = ["fetch_html", "normalize_url", "RawPage"]
