"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient

from travlr import __version__


@pytest.mark.asyncio
async def test_liveness_endpoint(client: AsyncClient):
    """Test that liveness endpoint returns 200."""
    response = await client.get("/health/live")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


@pytest.mark.asyncio
async def test_readiness_endpoint(client: AsyncClient):
    """Test that readiness endpoint returns 200 with healthy checks."""
    response = await client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"] == "ok"


@pytest.mark.asyncio
async def test_info_endpoint(client: AsyncClient):
    """Test that info endpoint returns application metadata."""
    response = await client.get("/info")

    assert response.status_code == 200
    data = response.json()
    assert data["app"] == "Travlr API"
    assert data["version"] == __version__
    assert "environment" in data


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient):
    """Every response carries an X-Request-ID header."""
    response = await client.get("/health/live")

    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    """A client-supplied request ID is returned unchanged."""
    response = await client.get("/health/live", headers={"X-Request-ID": "trace-42"})

    assert response.headers["X-Request-ID"] == "trace-42"


@pytest.mark.asyncio
async def test_unknown_route_returns_404(client: AsyncClient):
    response = await client.get("/api/v1/nothing-here")

    assert response.status_code == 404
