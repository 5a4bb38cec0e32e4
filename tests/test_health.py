"""Tests for the liveness endpoint."""

from fastapi.testclient import TestClient


def test_health_reports_service_and_version(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "cultural-signals", "version": "0.1.0"}


def test_health_rejects_post(client: TestClient):
    assert client.post("/health").status_code == 405
