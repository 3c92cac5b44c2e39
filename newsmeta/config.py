"""Runtime settings loaded from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/129.0.0.0 Safari/537.36"
)
DEFAULT_LOG_LEVEL = "INFO"
MAX_SNIPPET_LENGTH = 100


@dataclass(frozen=True)
class Settings:
    """Configuration for fetching and extraction."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL
    snippet_length: int = MAX_SNIPPET_LENGTH


def _read_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid {env_var}={raw!r}; using default {default}")
        return default
    if value <= 0:
        logger.warning(f"{env_var} must be positive; using default {default}")
        return default
    return value


def _read_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid {env_var}={raw!r}; using default {default}")
        return default


def load_settings() -> Settings:
    """Build settings from ``NEWSMETA_*`` environment variables."""
    snippet_length = _read_int("NEWSMETA_SNIPPET_LENGTH", MAX_SNIPPET_LENGTH)
    snippet_length = max(0, min(snippet_length, MAX_SNIPPET_LENGTH))

    return Settings(
        timeout=_read_float("NEWSMETA_TIMEOUT", DEFAULT_TIMEOUT),
        user_agent=os.getenv("NEWSMETA_USER_AGENT") or DEFAULT_USER_AGENT,
        log_level=(os.getenv("NEWSMETA_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        snippet_length=snippet_length,
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
