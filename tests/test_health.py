"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


@pytest.fixture
def client():
    """
    Create a test client with only the health endpoint.

    Returns:
        TestClient: FastAPI test client instance.
    """
    from querypage.api.http.health import router

    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app)


def test_health_endpoint_database_healthy(client):
    mock_conn = AsyncMock()
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.return_value = mock_conn

    with patch("querypage.api.http.health.engine", mock_engine):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "healthy"}


def test_health_endpoint_database_unhealthy(client):
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.side_effect = (
        OperationalError("SELECT 1", {}, Exception("refused"))
    )

    with patch("querypage.api.http.health.engine", mock_engine):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["database"] == "unhealthy"
