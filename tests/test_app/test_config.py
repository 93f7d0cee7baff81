"""Tests for application settings."""

import os
from unittest.mock import patch

from market_relay.config import DEFAULT_RAPIDAPI_HOST, Settings


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        """Test defaults when the environment is empty."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        assert settings.RAPIDAPI_KEY is None
        assert settings.FMP_API_KEY is None
        assert settings.COHERE_API_KEY is None
        assert settings.RAPIDAPI_HOST == DEFAULT_RAPIDAPI_HOST
        assert settings.QUOTES_FILE == "data/quotes.json"
        assert settings.PUBLIC_DIR == "public"
        assert settings.PORT == 4000
        assert settings.HTTP_TIMEOUT == 30.0
        assert settings.CORS_ORIGINS == ["*"]
        assert settings.LOG_LEVEL == "INFO"

    def test_from_env(self) -> None:
        """Test values are read from the environment."""
        env = {
            "RAPIDAPI_KEY": "rapid",
            "RAPIDAPI_HOST": "other.p.rapidapi.com",
            "FMP_API_KEY": "fmp",
            "COHERE_API_KEY": "cohere",
            "QUOTES_FILE": "/srv/quotes.json",
            "PORT": "8080",
            "HTTP_TIMEOUT": "5.5",
            "CORS_ORIGINS": "http://a.example, http://b.example",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        assert settings.RAPIDAPI_KEY == "rapid"
        assert settings.RAPIDAPI_HOST == "other.p.rapidapi.com"
        assert settings.FMP_API_KEY == "fmp"
        assert settings.COHERE_API_KEY == "cohere"
        assert settings.QUOTES_FILE == "/srv/quotes.json"
        assert settings.PORT == 8080
        assert settings.HTTP_TIMEOUT == 5.5
        assert settings.CORS_ORIGINS == ["http://a.example", "http://b.example"]
        assert settings.LOG_LEVEL == "DEBUG"

    def test_unparseable_numbers_fall_back(self) -> None:
        """Test bad numeric values use the defaults."""
        with patch.dict(os.environ, {"PORT": "abc", "HTTP_TIMEOUT": "soon"}, clear=True):
            settings = Settings.from_env()

        assert settings.PORT == 4000
        assert settings.HTTP_TIMEOUT == 30.0

    def test_empty_rapidapi_host_uses_default(self) -> None:
        """Test an empty RAPIDAPI_HOST does not blank the host."""
        with patch.dict(os.environ, {"RAPIDAPI_HOST": ""}, clear=True):
            assert Settings.from_env().RAPIDAPI_HOST == DEFAULT_RAPIDAPI_HOST

    def test_blank_cors_origins(self) -> None:
        with patch.dict(os.environ, {"CORS_ORIGINS": " , "}, clear=True):
            assert Settings.from_env().CORS_ORIGINS == ["*"]
