"""Runtime configuration (environment variables, optionally loaded from a .env file) and logging setup."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Self

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    api_prefix: str = ""
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from GAMES_API_* variables. Invalid values fall back to the defaults."""
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("GAMES_API_HOST", "").strip() or DEFAULT_HOST,
            port=_parse_port(env.get("GAMES_API_PORT")),
            api_prefix=_normalize_prefix(env.get("GAMES_API_PREFIX", "")),
            log_level=_parse_log_level(env.get("GAMES_API_LOG_LEVEL")),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings for the running process (.env is loaded first, real environment variables win)."""
    load_dotenv()
    return Settings.from_env()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Attach a single stream handler to the root logger. Calling it again only updates the level."""
    root = logging.getLogger()
    root.setLevel(level)
    if _handler not in root.handlers:
        root.addHandler(_handler)


# --- Helpers ---
def _parse_port(raw: str | None) -> int:
    if raw is None or raw.strip() == "":
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning(
            f"Invalid GAMES_API_PORT value: {raw!r}. Using default: {DEFAULT_PORT}"
        )
        return DEFAULT_PORT
    if not 1 <= port <= 65535:
        logger.warning(
            f"GAMES_API_PORT value {port} is outside 1..65535. Using default: {DEFAULT_PORT}"
        )
        return DEFAULT_PORT
    return port


def _parse_log_level(raw: str | None) -> str:
    if raw is None or raw.strip() == "":
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(
            f"Unknown GAMES_API_LOG_LEVEL value: {raw!r}. Using default: {DEFAULT_LOG_LEVEL}"
        )
        return DEFAULT_LOG_LEVEL
    return level


def _normalize_prefix(raw: str) -> str:
    """'api/' -> '/api', '/' -> '' (routes are mounted at the root)."""
    prefix = raw.strip().strip("/")
    return f"/{prefix}" if prefix else ""
