"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. Product and variant submissions travel through the
composer and the product service as these types, never as raw dicts.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


# ============================================================================
# Enumerations
# ============================================================================


class ProductStatus(str, Enum):
    """Product publication states."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class DiscountType(str, Enum):
    """Flat discount kinds."""

    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


# ============================================================================
# Variant Submissions
# ============================================================================


@dataclass(frozen=True)
class OptionSelection:
    """One option of a variant set to one of its values.

    Attributes:
        option_id: Option (axis of variation) identifier.
        option_value_id: Chosen value identifier.
    """

    option_id: str
    option_value_id: str


@dataclass(frozen=True)
class VariantDraft:
    """A proposed variant as submitted by the caller.

    ``selections`` keeps submission order, which is the order option
    values appear in the variant's generated SKU.

    Attributes:
        price: Variant price (>= 0).
        stock: Units in stock (>= 0).
        sku: Optional display SKU.
        images: Ordered image URLs.
        selections: Ordered option selections.
    """

    price: Decimal
    stock: int = 0
    sku: str | None = None
    images: tuple[str, ...] = ()
    selections: tuple[OptionSelection, ...] = ()

    @property
    def option_ids(self) -> tuple[str, ...]:
        """Option ids in selection order."""
        return tuple(s.option_id for s in self.selections)


@dataclass(frozen=True)
class ProductDraft:
    """A complete product submission for creation.

    Attributes:
        name: Product name.
        description: Product description.
        price: Base price (> 0).
        subcategory_id: Owning subcategory (fixes the category).
        brand_id: Brand, must be linked to the category.
        images: Ordered product image URLs (at least one).
        variants: Proposed variants (at least one).
        category_id: Optional category, must own the subcategory if sent.
        is_featured: Featured flag.
        status: Publication status.
        discount_type: Optional discount kind.
        discount_value: Discount amount, meaningful only with a type.
    """

    name: str
    description: str
    price: Decimal
    subcategory_id: str
    brand_id: str
    images: tuple[str, ...]
    variants: tuple[VariantDraft, ...]
    category_id: str | None = None
    is_featured: bool = False
    status: ProductStatus = ProductStatus.DRAFT
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = None


@dataclass(frozen=True)
class ProductPatch:
    """A partial product submission for update.

    Fields left as ``None`` keep their stored value. ``images`` and
    ``variants`` replace the stored sets wholesale when present.
    """

    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    subcategory_id: str | None = None
    brand_id: str | None = None
    category_id: str | None = None
    images: tuple[str, ...] | None = None
    variants: tuple[VariantDraft, ...] | None = None
    is_featured: bool | None = None
    status: ProductStatus | None = None
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = None
    fields_set: frozenset[str] = field(default_factory=frozenset)

    def is_set(self, name: str) -> bool:
        """Whether the caller sent a field, even as an explicit null."""
        return name in self.fields_set or getattr(self, name) is not None


# ============================================================================
# Slugs
# ============================================================================


def slugify(text: str) -> str:
    """Derive a URL slug.

    Lowercases, turns whitespace runs into dashes, drops non-word
    characters and collapses/trims dashes.

    Args:
        text: Display name.

    Returns:
        Slug (e.g., "Men's Fashion" becomes "mens-fashion").
    """
    slug = text.lower()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w-]+", "", slug)
    slug = re.sub(r"--+", "-", slug)
    return slug.strip("-")
