"""
Settings for fetching recipe files, loaded from environment variables.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class FetcherSettings:
    """Captures tunable settings for the default recipe transports."""
    timeout: Optional[float] = None
    check_status: bool = False
    log_level: str = "INFO"


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got '{raw}'")


def load_fetcher_settings() -> FetcherSettings:
    """Load fetcher-related settings from environment variables."""
    return FetcherSettings(
        timeout=_env_float("RECIPE_FETCH_TIMEOUT"),
        check_status=os.getenv("RECIPE_FETCH_CHECK_STATUS", "").strip().lower() in _TRUE_VALUES,
        log_level=os.getenv("RECIPE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
