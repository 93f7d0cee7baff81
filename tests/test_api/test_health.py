"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from market_relay.api.health import ServiceStatus, readiness_report
from market_relay.api.routes import create_app
from market_relay.config import Settings
from market_relay.data.registry import RelayAdapters


def _settings(tmp_path, **overrides) -> Settings:
    return Settings(PUBLIC_DIR=str(tmp_path / "public"), QUOTES_FILE=str(tmp_path / "q.json"), **overrides)


class TestServiceStatus:
    """Tests for ServiceStatus enum."""

    def test_values(self) -> None:
        """Should have expected values."""
        assert ServiceStatus.READY.value == "ready"
        assert ServiceStatus.DEGRADED.value == "degraded"


class TestReadinessReport:
    """Tests for readiness_report."""

    def test_all_configured(self) -> None:
        adapters = RelayAdapters.from_settings(
            Settings(RAPIDAPI_KEY="r", FMP_API_KEY="f", COHERE_API_KEY="c")
        )

        report = readiness_report(adapters, "1.2.3")

        assert report["status"] == "ready"
        assert report["version"] == "1.2.3"
        assert set(report["checks"]) == {"market_summary", "chart", "news", "chat"}

    def test_missing_credentials(self) -> None:
        adapters = RelayAdapters.from_settings(Settings(RAPIDAPI_KEY="r"))

        report = readiness_report(adapters, "1.0.0")

        assert report["status"] == "degraded"
        assert report["checks"]["chart"] == {"configured": True}
        assert report["checks"]["chat"] == {"configured": False}


class TestHealthEndpoints:
    """Tests for /health routes."""

    def test_liveness(self, tmp_path) -> None:
        client = TestClient(create_app(settings=_settings(tmp_path), version="9.9.9"))

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "9.9.9"
        assert "timestamp" in data

    def test_readiness(self, tmp_path) -> None:
        settings = _settings(tmp_path, RAPIDAPI_KEY="r", FMP_API_KEY="f", COHERE_API_KEY="c")
        client = TestClient(create_app(settings=settings))

        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
