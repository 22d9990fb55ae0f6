"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests for /health and /ready."""

    @pytest.mark.asyncio
    async def test_health_check(self, anonymous_client: AsyncClient) -> None:
        """Should return healthy status."""
        response = await anonymous_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "storefront-admin"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_readiness_check(self, anonymous_client: AsyncClient) -> None:
        """Should return ready when the database answers."""
        response = await anonymous_client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}
