"""Tests for the public catalog endpoints."""

import pytest
from httpx import AsyncClient


class TestCatalogEndpoints:
    """Tests for /catalog, /categories and /sku/preview."""

    @pytest.mark.asyncio
    async def test_catalog(self, anonymous_client: AsyncClient) -> None:
        """Should return all reference data without a caller identity."""
        response = await anonymous_client.get("/catalog")

        assert response.status_code == 200
        data = response.json()
        assert {c["id"] for c in data["categories"]} == {"cat-mens", "cat-electronics"}
        assert {o["id"] for o in data["options"]} == {"opt-color", "opt-size", "opt-material"}
        assert len(data["option_values"]) == 5
        nike = next(b for b in data["brands"] if b["id"] == "brand-nike")
        assert nike["category_ids"] == ["cat-mens"]

    @pytest.mark.asyncio
    async def test_categories(self, anonymous_client: AsyncClient) -> None:
        """Should nest subcategories and brands under their category."""
        response = await anonymous_client.get("/categories")

        assert response.status_code == 200
        electronics = next(c for c in response.json() if c["id"] == "cat-electronics")
        assert [s["name"] for s in electronics["subcategories"]] == ["Laptops"]
        assert [b["name"] for b in electronics["brands"]] == ["Dell"]

    @pytest.mark.asyncio
    async def test_sku_preview(self, anonymous_client: AsyncClient) -> None:
        """Should build the SKU the server would generate."""
        response = await anonymous_client.post(
            "/sku/preview",
            json={
                "name": "Classic Tee",
                "category": "Men's Fashion",
                "brand": "Nike",
                "values": ["Red", "S"],
            },
        )

        assert response.status_code == 200
        assert response.json() == {"sku": "CLA-MEN-NIK-RED-S"}

    @pytest.mark.asyncio
    async def test_sku_preview_skips_empty_codes(self, anonymous_client: AsyncClient) -> None:
        """Should leave out segments that reduce to nothing."""
        response = await anonymous_client.post("/sku/preview", json={"name": "Tee", "brand": "!!"})

        assert response.json() == {"sku": "TEE"}
