"""Health endpoint tests."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.phonebook.core.services import DbSessionService


def test_liveness(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "phonebook"}


def test_readiness_when_database_answers(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["database"]["status"] == "healthy"
    assert body["checks"]["database"]["type"] == "sqlite"


def test_readiness_when_database_is_down(client: TestClient):
    with patch.object(DbSessionService, "health_check", return_value=False):
        response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
