"""Tests for the /health endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_reports_database(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["version"] == "1.0.0"
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_unknown_api_route(test_client):
    response = await test_client.get("/api/students")

    assert response.status_code == 404
