from __future__ import annotations

import logging
import os
from dotenv import load_dotenv
from dataclasses import dataclass


DEFAULT_BASE_URL = "https://api.weatherapi.com/v1/current.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(value: str | None) -> str:
    """Return an upper-cased level name logging knows, else the default."""
    name = (value or "").strip().upper()
    # getLevelName maps known names to their int value
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    api_key: str | None
    location: str | None
    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls) -> "Settings":
        # Load .env file if present (no-op if not). Variables already set in
        # the environment win over the file.
        load_dotenv()

        return cls(
            api_key=os.getenv("API_KEY") or os.getenv("WEATHERAPI_KEY"),
            location=os.getenv("LOCATION"),
            base_url=os.getenv("WEATHERAPI_BASE_URL") or DEFAULT_BASE_URL,
            log_level=_log_level(os.getenv("LOG_LEVEL")),
        )


settings = Settings.load()
