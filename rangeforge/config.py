"""RangeForge — application configuration.

Loads .env variables into a typed config object.
Validates values on startup.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from rangeforge.engine.policy import METHOD_POLICIES
from rangeforge.engine.pricing import normalize_pair


@dataclass(frozen=True)
class Config:
    """Typed configuration loaded from environment variables."""

    default_pair: str
    default_method: str  # "cbdr", "asian" or "flout"
    log_level: str
    api_host: str
    api_port: int

    @property
    def api_base_url(self) -> str:
        """Return the URL the internal API is served on."""
        return f"http://{self.api_host}:{self.api_port}"


def load_config(env_path: str | None = None) -> Config:
    """Load configuration from environment variables.

    Raises ``ValueError`` with a message naming the variable when a value
    is not usable.
    """
    load_dotenv(dotenv_path=env_path)

    default_method = os.environ.get("RANGEFORGE_DEFAULT_METHOD", "cbdr").lower()
    if default_method not in METHOD_POLICIES:
        raise ValueError(
            f"RANGEFORGE_DEFAULT_METHOD must be one of "
            f"{', '.join(METHOD_POLICIES.keys())}, got '{default_method}'"
        )

    raw_port = os.environ.get("API_PORT", "8080")
    try:
        api_port = int(raw_port)
    except ValueError:
        raise ValueError(f"API_PORT must be an integer, got '{raw_port}'") from None
    if not 1 <= api_port <= 65535:
        raise ValueError(f"API_PORT must be 1-65535, got {api_port}")

    return Config(
        default_pair=normalize_pair(os.environ.get("RANGEFORGE_DEFAULT_PAIR", "EURUSD")),
        default_method=default_method,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        api_host=os.environ.get("API_HOST", "127.0.0.1"),
        api_port=api_port,
    )
