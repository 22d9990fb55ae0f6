"""Catalog API endpoints.

Public, read-only reference data used by the product form, and the
SKU preview.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from storeadmin.api.dependencies import get_catalog_service
from storeadmin.api.schemas import (
    CatalogResponse,
    CategoryTreeResponse,
    SkuPreviewRequest,
    SkuPreviewResponse,
)
from storeadmin.catalog.service import CatalogService
from storeadmin.products.sku import generate_sku

router = APIRouter(tags=["Catalog"])

CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


@router.get(
    "/catalog",
    response_model=CatalogResponse,
    summary="Get the full catalog",
    description="Categories, subcategories, options, option values and brands.",
)
async def get_catalog(service: CatalogServiceDep) -> CatalogResponse:
    """Get the catalog snapshot (served from a short-TTL cache)."""
    snapshot = await service.get_snapshot()
    return CatalogResponse(**snapshot.to_dict())


@router.get(
    "/categories",
    response_model=list[CategoryTreeResponse],
    summary="List categories",
    description="Categories with their subcategories and linked brands.",
)
async def list_categories(service: CatalogServiceDep) -> list[CategoryTreeResponse]:
    """List categories as a tree."""
    tree = await service.list_categories_tree()
    return [CategoryTreeResponse(**category) for category in tree]


@router.post(
    "/sku/preview",
    response_model=SkuPreviewResponse,
    summary="Preview a SKU",
)
async def preview_sku(request: SkuPreviewRequest) -> SkuPreviewResponse:
    """Build the SKU a variant would get, without touching storage."""
    return SkuPreviewResponse(
        sku=generate_sku(request.name, request.category, request.brand, request.values)
    )
