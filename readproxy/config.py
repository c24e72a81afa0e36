"""Runtime settings for the proxy.

Every knob (listening port, outbound fetch limits, extraction threshold, log
output) reads an environment variable.  A `.env` next to the package is
loaded at import time and never overrides variables already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/60.0.3112.113 Safari/537.36"
)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "80")))

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("USER_AGENT", DEFAULT_USER_AGENT)
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    restrict_content: bool = field(
        default_factory=lambda: _env_flag("RESTRICT_CONTENT", "true")
    )
    max_content_bytes: int = field(
        default_factory=lambda: int(os.environ.get("MAX_CONTENT_BYTES", str(5 * 1024 * 1024)))
    )

    # ------------------------------------------------------------------
    # Extractor
    # ------------------------------------------------------------------
    min_text_length: int = field(
        default_factory=lambda: int(os.environ.get("MIN_TEXT_LENGTH", "25"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    log_rich: bool = field(default_factory=lambda: _env_flag("LOG_RICH", "false"))


# Module-level singleton, import this everywhere:
#   from readproxy.config import settings
settings = Settings()
