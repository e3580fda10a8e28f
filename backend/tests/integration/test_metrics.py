"""Integration tests for health, metrics and request logging."""

import pytest
from httpx import AsyncClient

from tests.conftest import valid_answers


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["service"] == "AI Risk Assessment API"
    assert data["timestamp"]


@pytest.mark.asyncio
async def test_metrics_endpoint_returns_prometheus_metrics(client: AsyncClient):
    # Touch the scorer so the per-tier counter has a sample
    body = valid_answers()
    body.pop("project_type")
    scored = await client.post("/api/risk/score", json=body)
    assert scored.status_code == 200

    response = await client.get("/api/metrics")
    assert response.status_code == 200
    text = response.text

    assert "airisk_http_requests_total" in text
    assert "airisk_http_request_duration_seconds" in text
    assert 'airisk_assessments_scored_total{tier="minimal"}' in text


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "trace-42"})

    assert response.headers["X-Request-ID"] == "trace-42"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "x" * 200})

    assert response.headers["X-Request-ID"]
    assert response.headers["X-Request-ID"] != "x" * 200
