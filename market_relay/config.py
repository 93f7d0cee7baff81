"""Application configuration settings.

This module provides centralized configuration management using environment
variables with sensible defaults. A single Settings value is built at startup
and handed to the adapters that need it.
"""

import os
from dataclasses import dataclass, field

DEFAULT_RAPIDAPI_HOST = "yahoo-finance166.p.rapidapi.com"


def _get_float_env(name: str, default: float) -> float:
    """Get a float value from environment variable.

    Args:
        name: Environment variable name.
        default: Default value if not set or not parseable.

    Returns:
        Float value from environment.
    """
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_int_env(name: str, default: int) -> int:
    """Get an integer value from environment variable."""
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_list_env(name: str, default: list[str]) -> list[str]:
    """Get a comma separated list from environment variable."""
    value = os.getenv(name)
    if not value:
        return list(default)
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item] or list(default)


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        RAPIDAPI_KEY: RapidAPI key for the chart and news provider.
        RAPIDAPI_HOST: RapidAPI host of the chart and news provider.
        FMP_API_KEY: Financial Modeling Prep API key for financial summaries.
        COHERE_API_KEY: Cohere API key for text generation.
        QUOTES_FILE: Path of the local quotes JSON file.
        PUBLIC_DIR: Directory served under /public.
        HOST: Interface the server binds to.
        PORT: Port the server listens on.
        HTTP_TIMEOUT: Timeout in seconds for each outbound call.
        LOG_LEVEL: Logging level.
        CORS_ORIGINS: Allowed CORS origins.
    """

    # Upstream credentials
    RAPIDAPI_KEY: str | None = None
    RAPIDAPI_HOST: str = DEFAULT_RAPIDAPI_HOST
    FMP_API_KEY: str | None = None
    COHERE_API_KEY: str | None = None

    # Local resources
    QUOTES_FILE: str = "data/quotes.json"
    PUBLIC_DIR: str = "public"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    HTTP_TIMEOUT: float = 30.0
    CORS_ORIGINS: list[str] = field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Returns:
            Settings instance populated from environment.
        """
        return cls(
            RAPIDAPI_KEY=os.getenv("RAPIDAPI_KEY"),
            RAPIDAPI_HOST=os.getenv("RAPIDAPI_HOST") or DEFAULT_RAPIDAPI_HOST,
            FMP_API_KEY=os.getenv("FMP_API_KEY"),
            COHERE_API_KEY=os.getenv("COHERE_API_KEY"),
            QUOTES_FILE=os.getenv("QUOTES_FILE", "data/quotes.json"),
            PUBLIC_DIR=os.getenv("PUBLIC_DIR", "public"),
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=_get_int_env("PORT", 4000),
            HTTP_TIMEOUT=_get_float_env("HTTP_TIMEOUT", 30.0),
            CORS_ORIGINS=_get_list_env("CORS_ORIGINS", ["*"]),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        )
