"""Tests for the product endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient

BASE = "/stores/store-1/products"


async def create(client: AsyncClient, payload: dict[str, Any]) -> dict[str, Any]:
    response = await client.post(BASE, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProductEndpoint:
    """Tests for POST /stores/{store_id}/products."""

    @pytest.mark.asyncio
    async def test_create_with_camel_case_body(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should create the product and return it as stored."""
        data = await create(client, product_payload)

        assert data["name"] == "Classic Tee"
        assert data["slug"] == "classic-tee"
        assert data["store_id"] == "store-1"
        assert data["price"] == 19.99
        assert data["status"] == "DRAFT"
        assert data["images"] == ["https://img.example.com/tee-front.jpg"]
        assert data["option_ids"] == ["opt-color", "opt-size"]
        assert [v["selections"] for v in data["variants"]] == [
            [
                {"option_id": "opt-color", "option_value_id": "val-red"},
                {"option_id": "opt-size", "option_value_id": "val-s"},
            ],
            [{"option_id": "opt-color", "option_value_id": "val-blue"}],
        ]
        assert [v["stock"] for v in data["variants"]] == [5, 3]

    @pytest.mark.asyncio
    async def test_create_with_explicit_selections(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should accept variants that list their selections explicitly."""
        product_payload["variants"] = [
            {
                "price": 12.5,
                "stock": 2,
                "sku": "TEE-M",
                "images": [{"url": "https://img.example.com/tee-m.jpg"}],
                "selections": [{"optionId": "opt-size", "optionValueId": "val-m"}],
            }
        ]

        data = await create(client, product_payload)

        variant = data["variants"][0]
        assert variant["sku"] == "TEE-M"
        assert variant["price"] == 12.5
        assert variant["images"] == ["https://img.example.com/tee-m.jpg"]
        assert data["option_ids"] == ["opt-size"]

    @pytest.mark.asyncio
    async def test_ignores_echoed_variant_ids(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should not treat id-like keys on a variant as options."""
        product_payload["variants"][0]["id"] = "old-variant"
        product_payload["variants"][0]["productId"] = "old-product"

        data = await create(client, product_payload)

        assert data["option_ids"] == ["opt-color", "opt-size"]

    @pytest.mark.asyncio
    async def test_foreign_option_rejected_with_details(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return 400 INVALID_OPTION_SET naming the foreign option."""
        product_payload["variants"].append({"price": 10, "opt-material": "val-aluminium"})

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "INVALID_OPTION_SET"
        assert data["details"][0]["field"] == "variants"
        assert "opt-material" in data["details"][0]["message"]
        assert data["request_id"]

        listing = await client.get(BASE)
        assert listing.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_value_mismatch_rejected(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return 400 OPTION_VALUE_MISMATCH pointing at the variant."""
        product_payload["variants"][1]["opt-color"] = "val-s"

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "OPTION_VALUE_MISMATCH"
        assert data["details"][0]["field"] == "variants[1].opt-color"

    @pytest.mark.asyncio
    async def test_missing_field(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return 400 VALIDATION_ERROR for a missing required field."""
        del product_payload["name"]

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "name"

    @pytest.mark.asyncio
    async def test_price_out_of_range(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should reject a price too large for the stored precision with 400."""
        product_payload["price"] = 10**12

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"][0]["field"] == "price"

        listing = await client.get(BASE)
        assert listing.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_variant_price_out_of_range(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should point at the variant whose price does not fit."""
        product_payload["variants"][1]["price"] = 10**12

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "variants.1.price"

    @pytest.mark.asyncio
    async def test_name_too_long(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should reject a name longer than the stored column."""
        product_payload["name"] = "x" * 501

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "name"

    @pytest.mark.asyncio
    async def test_missing_images(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should reject a product without images."""
        product_payload["images"] = []

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        assert response.json()["details"] == [
            {"field": "images", "message": "At least one image is required"}
        ]

    @pytest.mark.asyncio
    async def test_unlinked_brand(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return 400 INVALID_BRAND_CATEGORY_LINK."""
        product_payload["brandId"] = "brand-dell"

        response = await client.post(BASE, json=product_payload)

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_BRAND_CATEGORY_LINK"
        assert response.json()["details"][0]["field"] == "brand_id"

    @pytest.mark.asyncio
    async def test_foreign_store(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return 403 for a store the caller does not own."""
        response = await client.post("/stores/store-2/products", json=product_payload)

        assert response.status_code == 403
        assert response.json()["error_code"] == "FORBIDDEN"

    @pytest.mark.asyncio
    async def test_unknown_store(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return 404 for an unknown store."""
        response = await client.post("/stores/store-404/products", json=product_payload)

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"


class TestProductLifecycleEndpoints:
    """Tests for reading, updating and deleting products."""

    @pytest.mark.asyncio
    async def test_get_and_list(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return the product and list it with stock totals."""
        created = await create(client, product_payload)

        response = await client.get(f"{BASE}/{created['id']}")
        assert response.status_code == 200
        assert response.json()["variants"] == created["variants"]

        listing = (await client.get(BASE)).json()
        assert listing["total"] == 1
        assert listing["items"][0]["variant_count"] == 2
        assert listing["items"][0]["total_stock"] == 8

    @pytest.mark.asyncio
    async def test_get_unknown_product(self, client: AsyncClient) -> None:
        """Should return 404 for an unknown product."""
        response = await client.get(f"{BASE}/missing")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_patch_replaces_variants(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should merge base fields and replace the variants."""
        created = await create(client, product_payload)

        response = await client.patch(
            f"{BASE}/{created['id']}",
            json={"name": "Vintage Tee", "variants": [{"price": 12, "opt-size": "val-m"}]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Vintage Tee"
        assert data["description"] == "A soft cotton tee"
        assert data["option_ids"] == ["opt-size"]
        assert len(data["variants"]) == 1
        assert data["variants"][0]["id"] not in {v["id"] for v in created["variants"]}

    @pytest.mark.asyncio
    async def test_patch_clears_discount_with_empty_type(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should treat an empty discount type as removing the discount."""
        product_payload.update({"discountType": "PERCENTAGE", "discountValue": 10})
        created = await create(client, product_payload)
        assert created["discount_type"] == "PERCENTAGE"

        response = await client.patch(f"{BASE}/{created['id']}", json={"discountType": ""})

        assert response.status_code == 200
        assert response.json()["discount_type"] is None
        assert response.json()["discount_value"] is None

    @pytest.mark.asyncio
    async def test_patch_price_out_of_range(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should reject an oversized price on update and keep the stored one."""
        created = await create(client, product_payload)

        response = await client.patch(f"{BASE}/{created['id']}", json={"price": 10**12})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "price"
        stored = (await client.get(f"{BASE}/{created['id']}")).json()
        assert stored["price"] == 19.99

    @pytest.mark.asyncio
    async def test_patch_by_other_user(
        self,
        client: AsyncClient,
        product_payload: dict[str, Any],
    ) -> None:
        """Should return 403 when another user patches the product."""
        created = await create(client, product_payload)

        response = await client.patch(
            f"{BASE}/{created['id']}",
            json={"name": "Hijacked"},
            headers={"X-User-ID": "user-2"},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, product_payload: dict[str, Any]) -> None:
        """Should delete the product and then report it missing."""
        created = await create(client, product_payload)

        response = await client.delete(f"{BASE}/{created['id']}")
        assert response.status_code == 204

        assert (await client.get(f"{BASE}/{created['id']}")).status_code == 404
        assert (await client.delete(f"{BASE}/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_regenerate_skus(
        self, client: AsyncClient, product_payload: dict[str, Any]
    ) -> None:
        """Should return and store a generated SKU per variant."""
        created = await create(client, product_payload)

        response = await client.post(f"{BASE}/{created['id']}/regenerate-skus")

        assert response.status_code == 200
        assert [v["sku"] for v in response.json()["variants"]] == [
            "CLA-MEN-NIK-RED-S",
            "CLA-MEN-NIK-BLU",
        ]
        stored = (await client.get(f"{BASE}/{created['id']}")).json()
        assert [v["sku"] for v in stored["variants"]] == ["CLA-MEN-NIK-RED-S", "CLA-MEN-NIK-BLU"]
