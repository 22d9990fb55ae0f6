"""SQLAlchemy models for products and their variants.

A product and all of its child rows (images, derived product options,
variants with their option-value links and images) are written together
by the product service. Updates delete and recreate children, so variant
ids do not survive an update; nothing should store a variant id across
one.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storeadmin.catalog.models import Brand, OptionValue, Subcategory, new_id
from storeadmin.domain.value_objects import ProductStatus
from storeadmin.infrastructure.database import Base
from storeadmin.stores import models as store_models  # noqa: F401  registers "stores" for the FK


class Product(Base):
    """Product entity owned by a store.

    Attributes:
        id: Unique product identifier.
        store_id: Owning store (tenant).
        name: Product name.
        slug: Slug derived from the name.
        description: Product description.
        price: Base price (> 0).
        subcategory_id: Subcategory; fixes category and legal options.
        brand_id: Brand, linked to the subcategory's category.
        is_featured: Featured flag.
        status: DRAFT, PUBLISHED or ARCHIVED.
        discount_type: PERCENTAGE, FIXED or None.
        discount_value: Discount amount, None unless discount_type is set.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    store_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("stores.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    slug: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    subcategory_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("subcategories.id"), nullable=False, index=True
    )
    brand_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("brands.id"), nullable=False, index=True
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProductStatus.DRAFT.value, index=True
    )
    discount_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    discount_value: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    images: Mapped[list["Image"]] = relationship(
        "Image",
        primaryjoin="Product.id == Image.product_id",
        order_by="Image.position",
        viewonly=True,
    )
    options: Mapped[list["ProductOption"]] = relationship(
        "ProductOption",
        order_by="ProductOption.position",
        viewonly=True,
    )
    variants: Mapped[list["Variant"]] = relationship(
        "Variant",
        order_by="Variant.position",
        viewonly=True,
    )
    subcategory: Mapped["Subcategory"] = relationship(Subcategory, viewonly=True)
    brand: Mapped["Brand"] = relationship(Brand, viewonly=True)

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]})>"

    @property
    def total_stock(self) -> int:
        """Sum of variant stock."""
        return sum(v.stock or 0 for v in self.variants)


class Image(Base):
    """Image owned by exactly one product or one variant."""

    __tablename__ = "images"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    product_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=True, index=True
    )
    variant_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("variants.id", ondelete="CASCADE"), nullable=True, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint(
            "(product_id IS NULL) <> (variant_id IS NULL)",
            name="ck_images_single_owner",
        ),
    )


class ProductOption(Base):
    """Option exercised by at least one of a product's variants.

    Derived from the variant set on every write, never authored directly.
    """

    __tablename__ = "product_options"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    option_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("options.id"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("product_id", "option_id", name="uq_product_options_product_option"),
    )


class Variant(Base):
    """One purchasable configuration of a product.

    Attributes:
        id: Variant identifier (changes on every product update).
        product_id: Parent product.
        price: Variant price (>= 0).
        stock: Units in stock (>= 0).
        sku: Optional display SKU.
        position: Submission order within the product.
    """

    __tablename__ = "variants"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sku: Mapped[str | None] = mapped_column(String(100), nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    images: Mapped[list["Image"]] = relationship(
        "Image",
        primaryjoin="Variant.id == Image.variant_id",
        order_by="Image.position",
        viewonly=True,
    )
    selections: Mapped[list["VariantOption"]] = relationship(
        "VariantOption",
        order_by="VariantOption.position",
        viewonly=True,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_variants_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_variants_stock_non_negative"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Variant(id={self.id}, sku={self.sku})>"

    @property
    def option_values(self) -> dict[str, str]:
        """Option id to option value id, in selection order."""
        return {s.option_id: s.option_value_id for s in self.selections}


class VariantOption(Base):
    """Link from a variant to the option value it uses for one option."""

    __tablename__ = "variant_options"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    variant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("variants.id", ondelete="CASCADE"), nullable=False, index=True
    )
    option_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("options.id"), nullable=False
    )
    option_value_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("option_values.id"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    option_value: Mapped["OptionValue"] = relationship(OptionValue, viewonly=True)

    __table_args__ = (
        UniqueConstraint("variant_id", "option_id", name="uq_variant_options_variant_option"),
    )
