"""API schemas for the store admin API.

Pydantic models for request/response validation and serialization.
Request bodies accept camelCase or snake_case field names; responses
are snake_case.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storeadmin.domain.value_objects import (
    DiscountType,
    OptionSelection,
    ProductDraft,
    ProductPatch,
    ProductStatus,
    VariantDraft,
)

# Variant keys that are never option ids (echoed back by clients that
# resubmit a loaded product)
IGNORED_VARIANT_KEYS = frozenset(
    {"id", "productId", "product_id", "variantId", "variant_id", "createdAt", "updatedAt"}
)


# ============================================================================
# Common Schemas
# ============================================================================


class RequestModel(BaseModel):
    """Base for request bodies."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Store Schemas
# ============================================================================


class StoreCreateRequest(RequestModel):
    """Request to create a store."""

    name: str = Field(..., max_length=200, description="Store name")


class StoreUpdateRequest(RequestModel):
    """Request to rename a store."""

    name: str = Field(..., max_length=200, description="New store name")


class StoreResponse(BaseModel):
    id: str
    name: str
    user_id: str
    created_at: datetime


class StoreListResponse(BaseModel):
    """The caller's stores."""

    items: list[StoreResponse]
    total: int


# ============================================================================
# Product Request Schemas
# ============================================================================


class ImagePayload(RequestModel):
    """Image reference produced by the upload service."""

    url: str = Field(..., min_length=1, max_length=1000, description="Image URL")


class SelectionPayload(RequestModel):
    """Explicit (option, value) pair of a variant."""

    option_id: str = Field(..., description="Option ID")
    option_value_id: str = Field(..., description="Option value ID")


class VariantPayload(RequestModel):
    """Proposed variant.

    Option choices may be sent as an ordered ``selections`` list or as
    extra ``"<optionId>": "<optionValueId>"`` keys on the variant object.
    Both are accepted; explicit selections come first.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    price: Decimal = Field(..., max_digits=10, decimal_places=2, description="Variant price")
    stock: int = Field(default=0, description="Units in stock")
    sku: str | None = Field(default=None, max_length=100, description="Display SKU")
    images: list[ImagePayload] = Field(default_factory=list, description="Variant images")
    selections: list[SelectionPayload] = Field(
        default_factory=list, description="Ordered option selections"
    )

    def to_draft(self) -> VariantDraft:
        """Convert to a variant draft, keeping option order."""
        selections = [OptionSelection(s.option_id, s.option_value_id) for s in self.selections]
        for key, value in (self.model_extra or {}).items():
            if key in IGNORED_VARIANT_KEYS:
                continue
            selections.append(OptionSelection(key, "" if value is None else str(value)))

        return VariantDraft(
            price=self.price,
            stock=self.stock,
            sku=self.sku,
            images=tuple(image.url for image in self.images),
            selections=tuple(selections),
        )


class ProductFieldsMixin(RequestModel):
    """Validators shared by create and update bodies."""

    @field_validator("discount_type", mode="before", check_fields=False)
    @classmethod
    def blank_discount_type(cls, value: Any) -> Any:
        """Treat an empty discount type as no discount."""
        return None if value == "" else value


class ProductCreateRequest(ProductFieldsMixin):
    """Request to create a product."""

    name: str = Field(..., max_length=500, description="Product name")
    description: str = Field(..., description="Product description")
    price: Decimal = Field(
        ..., max_digits=10, decimal_places=2, description="Base price (> 0)"
    )
    category_id: str | None = Field(default=None, description="Category ID")
    subcategory_id: str = Field(..., description="Subcategory ID")
    brand_id: str = Field(..., description="Brand ID")
    is_featured: bool = Field(default=False, description="Featured flag")
    status: ProductStatus = Field(default=ProductStatus.DRAFT, description="Publication status")
    options: list[str] = Field(
        default_factory=list,
        description="Ignored; the option set is derived from the variants",
    )
    variants: list[VariantPayload] = Field(default_factory=list, description="Variants")
    images: list[ImagePayload] = Field(default_factory=list, description="Product images")
    discount_type: DiscountType | None = Field(default=None, description="Discount kind")
    discount_value: Decimal | None = Field(
        default=None, max_digits=10, decimal_places=2, description="Discount amount"
    )

    def to_draft(self) -> ProductDraft:
        """Convert to a product draft."""
        return ProductDraft(
            name=self.name,
            description=self.description,
            price=self.price,
            subcategory_id=self.subcategory_id,
            brand_id=self.brand_id,
            images=tuple(image.url for image in self.images),
            variants=tuple(v.to_draft() for v in self.variants),
            category_id=self.category_id,
            is_featured=self.is_featured,
            status=self.status,
            discount_type=self.discount_type,
            discount_value=self.discount_value,
        )


class ProductUpdateRequest(ProductFieldsMixin):
    """Request to update a product; omitted fields keep their value."""

    name: str | None = Field(default=None, max_length=500)
    description: str | None = None
    price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    category_id: str | None = None
    subcategory_id: str | None = None
    brand_id: str | None = None
    is_featured: bool | None = None
    status: ProductStatus | None = None
    options: list[str] | None = Field(
        default=None,
        description="Ignored; the option set is derived from the variants",
    )
    variants: list[VariantPayload] | None = None
    images: list[ImagePayload] | None = None
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)

    def to_patch(self) -> ProductPatch:
        """Convert to a product patch, remembering explicitly sent fields."""
        return ProductPatch(
            name=self.name,
            description=self.description,
            price=self.price,
            subcategory_id=self.subcategory_id,
            brand_id=self.brand_id,
            category_id=self.category_id,
            images=(
                tuple(image.url for image in self.images) if self.images is not None else None
            ),
            variants=(
                tuple(v.to_draft() for v in self.variants) if self.variants is not None else None
            ),
            is_featured=self.is_featured,
            status=self.status,
            discount_type=self.discount_type,
            discount_value=self.discount_value,
            fields_set=frozenset(self.model_fields_set),
        )


# ============================================================================
# Product Response Schemas
# ============================================================================


class SelectionSchema(BaseModel):
    """Stored (option, value) pair of a variant."""

    option_id: str
    option_value_id: str


class VariantResponse(BaseModel):
    """Variant as stored."""

    id: str
    price: float
    stock: int
    sku: str | None
    images: list[str]
    selections: list[SelectionSchema]


class ProductResponse(BaseModel):
    """Product with its images, derived options and variants."""

    id: str
    store_id: str
    name: str
    slug: str
    description: str
    price: float
    subcategory_id: str
    brand_id: str
    is_featured: bool
    status: ProductStatus
    discount_type: DiscountType | None
    discount_value: float | None
    images: list[str]
    option_ids: list[str] = Field(..., description="Options used by any variant")
    variants: list[VariantResponse]
    created_at: datetime
    updated_at: datetime


class ProductSummary(BaseModel):
    """Product row for listings."""

    id: str
    name: str
    slug: str
    price: float
    status: ProductStatus
    is_featured: bool
    subcategory_id: str
    brand_id: str
    variant_count: int
    total_stock: int
    created_at: datetime


class ProductListResponse(BaseModel):
    """Store product listing."""

    items: list[ProductSummary]
    total: int


class RegeneratedSkuSchema(BaseModel):
    variant_id: str
    sku: str


class RegenerateSkusResponse(BaseModel):
    """New SKUs, one per variant in variant order."""

    product_id: str
    variants: list[RegeneratedSkuSchema]


# ============================================================================
# SKU Preview Schemas
# ============================================================================


class SkuPreviewRequest(RequestModel):
    """Names to build a SKU preview from."""

    name: str = Field(..., description="Product name")
    category: str = Field(default="", description="Category name")
    brand: str = Field(default="", description="Brand name")
    values: list[str] = Field(
        default_factory=list, description="Option value strings, in selection order"
    )


class SkuPreviewResponse(BaseModel):
    sku: str


# ============================================================================
# Catalog Schemas
# ============================================================================


class CategorySchema(BaseModel):
    id: str
    name: str
    slug: str


class SubcategorySchema(BaseModel):
    id: str
    name: str
    category_id: str


class OptionSchema(BaseModel):
    id: str
    name: str
    subcategory_id: str


class OptionValueSchema(BaseModel):
    id: str
    value: str
    option_id: str


class BrandSchema(BaseModel):
    id: str
    name: str
    slug: str
    category_ids: list[str] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    """Full catalog reference data."""

    categories: list[CategorySchema]
    subcategories: list[SubcategorySchema]
    options: list[OptionSchema]
    option_values: list[OptionValueSchema]
    brands: list[BrandSchema]


class CategoryTreeBrand(BaseModel):
    id: str
    name: str
    slug: str


class CategoryTreeResponse(BaseModel):
    """Category with its subcategories and linked brands."""

    id: str
    name: str
    slug: str
    subcategories: list[SubcategorySchema]
    brands: list[CategoryTreeBrand]


# ============================================================================
# Dashboard Schemas
# ============================================================================


class DailySalesSchema(BaseModel):
    date: str = Field(..., description="Weekday name")
    total: float


class CategorySalesSchema(BaseModel):
    category: str
    sales: int


class RecentOrderSchema(BaseModel):
    id: str
    user_id: str
    total: float
    status: str
    date: str = Field(..., description="Order date, YYYY-MM-DD")


class TopProductSchema(BaseModel):
    name: str
    sold: int


class DashboardResponse(BaseModel):
    """Store sales dashboard."""

    total_revenue: float
    total_sales: int
    new_customers: int
    avg_order_value: float
    sales_data: list[DailySalesSchema]
    category_sales: list[CategorySalesSchema]
    recent_orders: list[RecentOrderSchema]
    top_products: list[TopProductSchema]
