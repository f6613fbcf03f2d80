"""Centralised settings for the Page Inspector.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Page fetching
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT", "Mozilla/5.0 (compatible; PageInspector/1.0)"
        )
    )
    follow_redirects: bool = field(
        default_factory=lambda: _env_flag("FOLLOW_REDIRECTS", "true")
    )
    html_parser: str = field(
        default_factory=lambda: os.environ.get("HTML_PARSER", "html5lib")
    )

    # ------------------------------------------------------------------
    # Identity service (optional users listing)
    # ------------------------------------------------------------------
    identity_endpoint: str = field(
        default_factory=lambda: os.environ.get("APPWRITE_FUNCTION_API_ENDPOINT", "")
    )
    identity_project_id: str = field(
        default_factory=lambda: os.environ.get("APPWRITE_FUNCTION_PROJECT_ID", "")
    )
    identity_api_key: str = field(
        default_factory=lambda: os.environ.get("APPWRITE_API_KEY", "")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    @property
    def identity_enabled(self) -> bool:
        """``True`` when an identity service endpoint is configured."""
        return bool(self.identity_endpoint)


# Module-level singleton, import this everywhere:
#   from inspector.config import settings
settings = Settings()


def configure_logging(verbose: bool = False) -> None:
    """Configure the root logger from :data:`settings` (``verbose`` forces DEBUG)."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
