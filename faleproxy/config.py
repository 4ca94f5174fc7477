"""Centralised settings for the Faleproxy service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3001")))
    public_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("PUBLIC_DIR", Path(__file__).resolve().parent / "public")
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    log_file: str | None = field(default_factory=lambda: os.environ.get("LOG_FILE") or None)

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    # None keeps the httpx default timeout.
    fetch_timeout: float | None = field(
        default_factory=lambda: _optional_float("FETCH_TIMEOUT")
    )
    # 0 means no limit on simultaneous outbound fetches.
    max_concurrent_fetches: int = field(
        default_factory=lambda: int(os.environ.get("MAX_CONCURRENT_FETCHES", "0"))
    )

    @property
    def index_path(self) -> Path:
        """Absolute path to the landing page served at ``GET /``."""
        return self.public_dir / "index.html"


# Module-level singleton, import this everywhere:
#   from faleproxy.config import settings
settings = Settings()
