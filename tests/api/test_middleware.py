"""Tests for request id, caller identity and error handling middleware."""

import pytest
from httpx import AsyncClient

from storeadmin.api.middleware import is_public_path
from storeadmin.products.service import ProductService


class TestRequestId:
    """Tests for RequestIdMiddleware."""

    @pytest.mark.asyncio
    async def test_echoes_request_id(self, anonymous_client: AsyncClient) -> None:
        """Should echo a caller-supplied request id."""
        response = await anonymous_client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    @pytest.mark.asyncio
    async def test_generates_request_id(self, anonymous_client: AsyncClient) -> None:
        """Should generate a request id when none is sent."""
        response = await anonymous_client.get("/health")

        assert response.headers["X-Request-ID"]


class TestCallerIdentity:
    """Tests for CallerIdentityMiddleware."""

    @pytest.mark.asyncio
    async def test_store_paths_need_identity(self, anonymous_client: AsyncClient) -> None:
        """Should reject store-scoped requests without a caller id."""
        response = await anonymous_client.get(
            "/stores/store-1/products", headers={"X-Request-ID": "req-401"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "error_code": "UNAUTHENTICATED",
            "message": "Missing X-User-ID header",
            "details": [],
            "request_id": "req-401",
        }
        assert response.headers["X-Request-ID"] == "req-401"

    @pytest.mark.asyncio
    async def test_blank_identity_rejected(self, anonymous_client: AsyncClient) -> None:
        """Should treat a blank caller id as missing."""
        response = await anonymous_client.get(
            "/stores/store-1/dashboard", headers={"X-User-ID": "  "}
        )

        assert response.status_code == 401

    @pytest.mark.parametrize(
        ("path", "public"),
        [
            ("/health", True),
            ("/catalog", True),
            ("/categories/", True),
            ("/sku/preview", True),
            ("/docs/oauth2-redirect", True),
            ("/stores/store-1/products", False),
            ("/", False),
        ],
    )
    def test_public_paths(self, path: str, public: bool) -> None:
        """Should only exempt health, docs and catalog paths."""
        assert is_public_path(path) is public


class TestErrorHandler:
    """Tests for ErrorHandlerMiddleware."""

    @pytest.mark.asyncio
    async def test_unexpected_error_is_opaque(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should answer 500 INTERNAL_ERROR without leaking the cause."""

        async def broken(self: ProductService, store_id: str) -> list:
            raise RuntimeError("connection string with secrets")

        monkeypatch.setattr(ProductService, "list_products", broken)

        response = await client.get(
            "/stores/store-1/products", headers={"X-Request-ID": "req-500"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": "req-500",
        }
        assert response.headers["X-Request-ID"] == "req-500"
