"""Client settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env during development (no-op when the file is missing)
load_dotenv()


def env_float(name: str, default: float) -> float:
    """Parse a float from an environment variable, falling back to ``default``.

    Unparseable values are ignored rather than raised so a typo in ``.env``
    never prevents the client from starting.
    """
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        return default


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_URL: str
        Scheme and authority of the users backend.
    USERS_PATH: str
        Resource path appended to ``API_BASE_URL`` for every user route.
    REQUEST_TIMEOUT: float
        Seconds passed to ``requests`` as connect/read timeout.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
    USERS_PATH = os.getenv("USERS_PATH", "/users")
    REQUEST_TIMEOUT = env_float("REQUEST_TIMEOUT", 10.0)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Pins the backend to a fixed fake host so mocked routes never depend on
      the developer's ``.env``.
    - Keeps timeouts short.
    """

    API_BASE_URL = "http://users.test"
    USERS_PATH = "/users"
    REQUEST_TIMEOUT = 1.0
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Configuration class consumed by :func:`userdesk.factory.create_editor`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
