"""Product application service.

Orchestrates product writes end to end:
- Ownership and input validation, all before the first write
- Variant composition against a fresh catalog scope
- One atomic unit of work per create/update/delete, rolled back on
  any failure (including cancellation)
- Server-side SKU regeneration

Updates replace child rows wholesale (images, product options,
variants), so variant ids change on every update that sends variants.
"""

from dataclasses import dataclass
from decimal import Decimal

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.catalog.repository import CatalogRepository
from storeadmin.catalog.snapshot import CatalogSnapshot, SubcategoryRef
from storeadmin.domain.exceptions import (
    EmptyVariantSetError,
    InvalidBrandCategoryLinkError,
    NotFoundError,
    PersistenceError,
    ProductCreationFailedError,
    ValidationError,
)
from storeadmin.domain.value_objects import (
    DiscountType,
    ProductDraft,
    ProductPatch,
    slugify,
)
from storeadmin.infrastructure.config import settings
from storeadmin.infrastructure.database import transaction
from storeadmin.products.composer import ComposedProduct, VariantComposer
from storeadmin.products.models import Product
from storeadmin.products.repository import ProductRepository
from storeadmin.products.sku import generate_sku
from storeadmin.stores.repository import StoreRepository

logger = structlog.get_logger()


@dataclass
class RegeneratedSku:
    """SKU assigned to one variant by regeneration."""

    variant_id: str
    sku: str


class ProductService:
    """Service for product authoring.

    Example usage:
        async with async_session_factory() as session:
            service = ProductService(session)
            product_id = await service.create_product(store_id, user_id, draft)
            product = await service.get_product(store_id, product_id)
    """

    def __init__(
        self,
        session: AsyncSession,
        lenient_updates: bool | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            lenient_updates: Option-value policy for updates; defaults to
                ``settings.lenient_variant_updates``.
        """
        self.session = session
        self.products = ProductRepository(session)
        self.catalog = CatalogRepository(session)
        self.stores = StoreRepository(session)
        self.lenient_updates = (
            settings.lenient_variant_updates if lenient_updates is None else lenient_updates
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_product(self, store_id: str, product_id: str) -> Product:
        """Get a product with images, options and variants.

        Raises:
            NotFoundError: If the store has no such product.
        """
        product = await self.products.get_detail(store_id, product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    async def list_products(self, store_id: str) -> list[Product]:
        """List a store's products, newest first.

        Raises:
            NotFoundError: If the store does not exist.
        """
        if await self.stores.get(store_id) is None:
            raise NotFoundError("Store", store_id)
        return list(await self.products.list_by_store(store_id))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_product(
        self,
        store_id: str,
        caller_id: str,
        draft: ProductDraft,
    ) -> str:
        """Create a product with its images, options and variants.

        Args:
            store_id: Target store.
            caller_id: Authenticated caller.
            draft: Complete product submission.

        Returns:
            The new product id.

        Raises:
            NotFoundError: If the store does not exist.
            OwnershipError: If the caller does not own the store.
            ValidationError: On missing or invalid fields.
            InvalidBrandCategoryLinkError: If the brand is not offered
                for the subcategory's category.
            InvalidOptionSetError: If a variant uses a foreign option.
            OptionValueMismatchError: If a value does not belong to its option.
            ProductCreationFailedError: If the transaction failed; nothing
                was persisted.
        """
        await self.stores.get_owned(store_id, caller_id)

        self._require_text("name", draft.name)
        self._require_text("description", draft.description)
        self._require_price(draft.price)
        self._require_text("subcategory_id", draft.subcategory_id)
        self._require_text("brand_id", draft.brand_id)
        self._require_images(draft.images)
        if not draft.variants:
            raise EmptyVariantSetError()
        discount_type, discount_value = self._check_discount(
            draft.discount_type, draft.discount_value
        )

        scope = await self.catalog.load_scope(draft.subcategory_id)
        self._check_placement(scope, draft.subcategory_id, draft.brand_id, draft.category_id)
        composed = VariantComposer(scope).compose(
            draft.subcategory_id, draft.variants, lenient=False
        )

        product = Product(
            store_id=store_id,
            name=draft.name.strip(),
            slug=slugify(draft.name),
            description=draft.description,
            price=draft.price,
            subcategory_id=draft.subcategory_id,
            brand_id=draft.brand_id,
            is_featured=bool(draft.is_featured),
            status=draft.status.value,
            discount_type=discount_type.value if discount_type else None,
            discount_value=discount_value,
        )

        async with transaction(self.session, ProductCreationFailedError, store_id=store_id):
            await self.products.add(product)
            await self.products.add_images(draft.images, product_id=product.id)
            await self._write_variants(product.id, composed)

        logger.info(
            "Product created",
            product_id=product.id,
            store_id=store_id,
            variant_count=len(composed.variants),
            option_count=len(composed.option_ids),
        )
        return product.id

    async def update_product(
        self,
        store_id: str,
        product_id: str,
        caller_id: str,
        patch: ProductPatch,
    ) -> None:
        """Merge base fields and replace images, options and variants.

        Args:
            store_id: Owning store.
            product_id: Product to update.
            caller_id: Authenticated caller.
            patch: Partial submission; ``images`` and ``variants``
                replace the stored sets when present.

        Raises:
            NotFoundError: If the store or product does not exist.
            OwnershipError: If the caller does not own the store.
            ValidationError: On invalid fields, or a subcategory change
                without resubmitted variants.
            InvalidBrandCategoryLinkError: If the merged brand is not
                offered for the merged category.
            InvalidOptionSetError: If a variant uses a foreign option.
            OptionValueMismatchError: Only when updates are not lenient.
            PersistenceError: If the transaction failed; nothing changed.
        """
        await self.stores.get_owned(store_id, caller_id)

        product = await self.products.get(store_id, product_id)
        if product is None:
            raise NotFoundError("Product", product_id)

        if patch.name is not None:
            self._require_text("name", patch.name)
        if patch.description is not None:
            self._require_text("description", patch.description)
        if patch.price is not None:
            self._require_price(patch.price)
        if patch.images is not None:
            self._require_images(patch.images)
        if patch.variants is not None and not patch.variants:
            raise EmptyVariantSetError()

        subcategory_id = patch.subcategory_id or product.subcategory_id
        brand_id = patch.brand_id or product.brand_id
        if subcategory_id != product.subcategory_id and patch.variants is None:
            raise ValidationError(
                "variants",
                "Variants must be resubmitted when the subcategory changes",
            )

        if patch.is_set("discount_type"):
            discount_type = patch.discount_type
            discount_value = patch.discount_value
        else:
            discount_type = DiscountType(product.discount_type) if product.discount_type else None
            discount_value = (
                patch.discount_value if patch.is_set("discount_value") else product.discount_value
            )
        discount_type, discount_value = self._check_discount(discount_type, discount_value)

        scope = await self.catalog.load_scope(subcategory_id)
        self._check_placement(scope, subcategory_id, brand_id, patch.category_id)

        composed = None
        if patch.variants is not None:
            composed = VariantComposer(scope).compose(
                subcategory_id, patch.variants, lenient=self.lenient_updates
            )
            if composed.skipped_count:
                logger.warning(
                    "Option values skipped on update",
                    product_id=product_id,
                    skipped=composed.skipped_count,
                )

        async with transaction(
            self.session, PersistenceError, store_id=store_id, product_id=product_id
        ):
            if patch.name is not None:
                product.name = patch.name.strip()
                product.slug = slugify(patch.name)
            if patch.description is not None:
                product.description = patch.description
            if patch.price is not None:
                product.price = patch.price
            if patch.is_featured is not None:
                product.is_featured = patch.is_featured
            if patch.status is not None:
                product.status = patch.status.value
            product.subcategory_id = subcategory_id
            product.brand_id = brand_id
            product.discount_type = discount_type.value if discount_type else None
            product.discount_value = discount_value
            await self.session.flush()

            if patch.images is not None:
                await self.products.delete_images(product_id)
                await self.products.add_images(patch.images, product_id=product_id)

            if composed is not None:
                await self.products.delete_product_options(product_id)
                await self.products.delete_variants(product_id)
                await self._write_variants(product_id, composed)

        logger.info(
            "Product updated",
            product_id=product_id,
            store_id=store_id,
            variant_count=len(composed.variants) if composed else None,
            images_replaced=patch.images is not None,
        )

    async def delete_product(self, store_id: str, product_id: str, caller_id: str) -> None:
        """Delete a product and all rows hanging off it.

        Raises:
            NotFoundError: If the store or product does not exist.
            OwnershipError: If the caller does not own the store.
            PersistenceError: If the transaction failed; nothing changed.
        """
        await self.stores.get_owned(store_id, caller_id)

        product = await self.products.get(store_id, product_id)
        if product is None:
            raise NotFoundError("Product", product_id)

        async with transaction(
            self.session, PersistenceError, store_id=store_id, product_id=product_id
        ):
            await self.products.delete(product_id)

        logger.info("Product deleted", product_id=product_id, store_id=store_id)

    async def regenerate_skus(
        self,
        store_id: str,
        product_id: str,
        caller_id: str,
    ) -> list[RegeneratedSku]:
        """Recompute and store every variant's SKU.

        Codes come from the product name, category name, brand name and
        the variant's option values in selection order.

        Returns:
            The new SKU of each variant, in variant order.
        """
        await self.stores.get_owned(store_id, caller_id)
        product = await self.get_product(store_id, product_id)

        scope = await self.catalog.load_scope(product.subcategory_id)
        subcategory = scope.subcategory(product.subcategory_id)
        category = scope.category(subcategory.category_id) if subcategory else None
        category_name = category.name if category else ""
        brand_name = product.brand.name if product.brand else ""

        regenerated = [
            RegeneratedSku(
                variant_id=variant.id,
                sku=generate_sku(
                    product.name,
                    category_name,
                    brand_name,
                    [s.option_value.value for s in variant.selections],
                ),
            )
            for variant in product.variants
        ]

        async with transaction(
            self.session, PersistenceError, store_id=store_id, product_id=product_id
        ):
            await self.products.update_variant_skus({r.variant_id: r.sku for r in regenerated})

        logger.info(
            "Variant SKUs regenerated",
            product_id=product_id,
            store_id=store_id,
            variant_count=len(regenerated),
        )
        return regenerated

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _write_variants(self, product_id: str, composed: ComposedProduct) -> None:
        await self.products.add_product_options(product_id, composed.option_ids)
        for variant in composed.variants:
            await self.products.add_variant(product_id, variant)

    @staticmethod
    def _check_placement(
        scope: CatalogSnapshot,
        subcategory_id: str,
        brand_id: str,
        category_id: str | None,
    ) -> SubcategoryRef:
        subcategory = scope.subcategory(subcategory_id)
        if subcategory is None:
            raise ValidationError("subcategory_id", f"Unknown subcategory: {subcategory_id}")

        if category_id and category_id != subcategory.category_id:
            raise ValidationError(
                "category_id",
                f"Subcategory {subcategory_id} does not belong to category {category_id}",
            )

        if not scope.brand_offers_category(brand_id, subcategory.category_id):
            raise InvalidBrandCategoryLinkError(brand_id, subcategory.category_id)

        return subcategory

    @staticmethod
    def _check_discount(
        discount_type: DiscountType | None,
        discount_value: Decimal | None,
    ) -> tuple[DiscountType | None, Decimal | None]:
        if discount_type is None:
            return None, None
        if discount_value is None:
            raise ValidationError("discount_value", "Discount value is required with a discount type")
        if discount_value < 0:
            raise ValidationError("discount_value", "Discount value must be >= 0")
        if discount_type is DiscountType.PERCENTAGE and discount_value > 100:
            raise ValidationError("discount_value", "Percentage discount must be <= 100")
        return discount_type, discount_value

    @staticmethod
    def _require_text(field: str, value: str | None) -> None:
        if not value or not value.strip():
            raise ValidationError(field, f"{field} is required")

    @staticmethod
    def _require_price(price: Decimal | None) -> None:
        if price is None or price <= 0:
            raise ValidationError("price", "Valid price is required (> 0)")

    @staticmethod
    def _require_images(images: tuple[str, ...] | None) -> None:
        if not images:
            raise ValidationError("images", "At least one image is required")
        for index, url in enumerate(images):
            if not url or not url.strip():
                raise ValidationError(f"images[{index}]", "Image URL is required")
