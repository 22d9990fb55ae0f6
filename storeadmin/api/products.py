"""Product API endpoints.

Store-scoped product authoring: create, read, update, delete and SKU
regeneration. Writes require the caller to own the store.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from storeadmin.api.dependencies import CallerId, get_product_service
from storeadmin.api.schemas import (
    ErrorResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductSummary,
    ProductUpdateRequest,
    RegeneratedSkuSchema,
    RegenerateSkusResponse,
    SelectionSchema,
    VariantResponse,
)
from storeadmin.products.models import Product, Variant
from storeadmin.products.service import ProductService

router = APIRouter(prefix="/stores/{store_id}/products", tags=["Products"])

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]


# ============================================================================
# Converters
# ============================================================================


def variant_to_response(variant: Variant) -> VariantResponse:
    """Convert Variant model to response schema."""
    return VariantResponse(
        id=variant.id,
        price=float(variant.price),
        stock=variant.stock,
        sku=variant.sku,
        images=[image.url for image in variant.images],
        selections=[
            SelectionSchema(option_id=s.option_id, option_value_id=s.option_value_id)
            for s in variant.selections
        ],
    )


def product_to_response(product: Product) -> ProductResponse:
    """Convert fully loaded Product model to response schema."""
    return ProductResponse(
        id=product.id,
        store_id=product.store_id,
        name=product.name,
        slug=product.slug,
        description=product.description,
        price=float(product.price),
        subcategory_id=product.subcategory_id,
        brand_id=product.brand_id,
        is_featured=product.is_featured,
        status=product.status,
        discount_type=product.discount_type,
        discount_value=(
            float(product.discount_value) if product.discount_value is not None else None
        ),
        images=[image.url for image in product.images],
        option_ids=[o.option_id for o in product.options],
        variants=[variant_to_response(v) for v in product.variants],
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def product_to_summary(product: Product) -> ProductSummary:
    """Convert Product model (variants loaded) to a listing row."""
    return ProductSummary(
        id=product.id,
        name=product.name,
        slug=product.slug,
        price=float(product.price),
        status=product.status,
        is_featured=product.is_featured,
        subcategory_id=product.subcategory_id,
        brand_id=product.brand_id,
        variant_count=len(product.variants),
        total_stock=product.total_stock,
        created_at=product.created_at,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="List products",
)
async def list_products(
    store_id: str,
    caller_id: CallerId,
    service: ProductServiceDep,
) -> ProductListResponse:
    """List a store's products, newest first."""
    products = await service.list_products(store_id)
    return ProductListResponse(
        items=[product_to_summary(p) for p in products],
        total=len(products),
    )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create a product",
    description=(
        "Create a product with its images and variants in one transaction. "
        "The product's option set is derived from the variants."
    ),
)
async def create_product(
    store_id: str,
    request: ProductCreateRequest,
    caller_id: CallerId,
    service: ProductServiceDep,
) -> ProductResponse:
    """Create a product.

    Args:
        store_id: Owning store.
        request: Product submission.
        caller_id: Authenticated caller.
        service: Product service.

    Returns:
        The created product as stored.
    """
    product_id = await service.create_product(store_id, caller_id, request.to_draft())
    product = await service.get_product(store_id, product_id)
    return product_to_response(product)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a product",
)
async def get_product(
    store_id: str,
    product_id: str,
    caller_id: CallerId,
    service: ProductServiceDep,
) -> ProductResponse:
    """Get a product with images, options and variants."""
    product = await service.get_product(store_id, product_id)
    return product_to_response(product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update a product",
    description=(
        "Merge base fields. Images and variants, when sent, replace the "
        "stored sets; variant ids change."
    ),
)
async def update_product(
    store_id: str,
    product_id: str,
    request: ProductUpdateRequest,
    caller_id: CallerId,
    service: ProductServiceDep,
) -> ProductResponse:
    """Update a product."""
    await service.update_product(store_id, product_id, caller_id, request.to_patch())
    product = await service.get_product(store_id, product_id)
    return product_to_response(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    store_id: str,
    product_id: str,
    caller_id: CallerId,
    service: ProductServiceDep,
) -> Response:
    """Delete a product with all its images, options and variants."""
    await service.delete_product(store_id, product_id, caller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{product_id}/regenerate-skus",
    response_model=RegenerateSkusResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Regenerate variant SKUs",
)
async def regenerate_skus(
    store_id: str,
    product_id: str,
    caller_id: CallerId,
    service: ProductServiceDep,
) -> RegenerateSkusResponse:
    """Recompute every variant's SKU from product, category, brand and option values."""
    regenerated = await service.regenerate_skus(store_id, product_id, caller_id)
    return RegenerateSkusResponse(
        product_id=product_id,
        variants=[
            RegeneratedSkuSchema(variant_id=r.variant_id, sku=r.sku) for r in regenerated
        ],
    )
