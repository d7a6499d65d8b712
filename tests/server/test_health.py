"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from corsguard import __version__
from corsguard.config import CorsguardConfig
from corsguard.server.app import create_app

client = TestClient(create_app(CorsguardConfig()))


def test_health_endpoint():
    """Test the health check endpoint returns proper status."""
    response = client.get("/api/v1/health")

    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == __version__
    assert "uptime" in data
    assert isinstance(data["uptime"], (int, float))
    assert data["uptime"] >= 0


def test_root_endpoint():
    """Test the root endpoint returns server information."""
    response = client.get("/")

    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "corsguard Server"
    assert data["version"] == __version__
    assert data["docs_url"] == "/docs"
    assert data["health_url"] == "/api/v1/health"


def test_default_config_denies_cross_origin_requests():
    """With no configured origins, responses carry no CORS headers."""
    response = client.get("/api/v1/health", headers={"Origin": "https://cors.test"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_health_reports_origin_allow_list():
    config = CorsguardConfig()
    config.cors.allowed_origins = ["https://cors.test", "*"]

    response = TestClient(create_app(config)).get("/api/v1/health")

    data = response.json()
    assert data["allowed_origins"] == 2
    assert data["wildcard_origin"] is True


def test_health_with_empty_allow_list():
    data = client.get("/api/v1/health").json()

    assert data["allowed_origins"] == 0
    assert data["wildcard_origin"] is False


def test_process_time_header():
    response = client.get("/api/v1/health")

    assert float(response.headers["x-process-time"]) >= 0


def test_request_debug_line(monkeypatch, capsys):
    monkeypatch.setenv("CORSGUARD_DEBUG", "1")

    client.get("/api/v1/health", headers={"Origin": "https://cors.test"})

    err = capsys.readouterr().err
    assert "[DEBUG] GET /api/v1/health status=200 origin=https://cors.test" in err
    assert "Health check: CORS policy allows no origins" in err
    assert "CORS origin not allowed origin=https://cors.test" in err
