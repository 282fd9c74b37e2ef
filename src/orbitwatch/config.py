"""Runtime settings read from the environment (populated from .env by the entry points)."""

import logging
import os
from dataclasses import dataclass

DEFAULT_SOURCE_URL = "http://localhost:3000/debris"
DEFAULT_UPSTREAM_URL = (
    "https://celestrak.org/NORAD/elements/gp.php?GROUP=active&FORMAT=json"
)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    source_url: str  # Feed the app loads from (normally the local proxy)
    upstream_url: str  # Public catalog the proxy forwards to
    proxy_host: str
    proxy_port: int
    http_timeout: float  # Seconds
    log_level: str


def _env_number(name: str, default: str, cast: type) -> int | float:
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings() -> Settings:
    """Build Settings from ORBITWATCH_* environment variables.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    return Settings(
        source_url=os.environ.get("ORBITWATCH_SOURCE_URL", DEFAULT_SOURCE_URL),
        upstream_url=os.environ.get("ORBITWATCH_UPSTREAM_URL", DEFAULT_UPSTREAM_URL),
        proxy_host=os.environ.get("ORBITWATCH_PROXY_HOST", "127.0.0.1"),
        proxy_port=int(_env_number("ORBITWATCH_PROXY_PORT", "3000", int)),
        http_timeout=float(_env_number("ORBITWATCH_HTTP_TIMEOUT", "10", float)),
        log_level=os.environ.get("ORBITWATCH_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
