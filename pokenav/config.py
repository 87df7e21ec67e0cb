"""Settings read from the environment."""
import logging
import math
import os

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def pokeapi_base_url() -> str:
    return os.getenv("POKEAPI_BASE_URL", "").strip().rstrip("/") or DEFAULT_BASE_URL


def pokeapi_timeout() -> float:
    """Per-request timeout in seconds. Invalid or non-positive values fall back to the default."""
    raw = os.getenv("POKEAPI_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid POKEAPI_TIMEOUT={raw!r}")
        return DEFAULT_TIMEOUT
    if value <= 0 or not math.isfinite(value):
        logger.warning(f"Ignoring non-positive or non-finite POKEAPI_TIMEOUT={raw!r}")
        return DEFAULT_TIMEOUT
    return value


def log_level() -> str:
    return os.getenv("POKENAV_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
