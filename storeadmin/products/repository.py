"""Product repository for database operations.

Writes only flush; committing (or rolling back) the unit of work is the
product service's job.
"""

from collections.abc import Sequence

from sqlalchemy import Delete, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storeadmin.products.composer import ComposedVariant
from storeadmin.products.models import Image, Product, ProductOption, Variant, VariantOption


class ProductRepository:
    """Repository for Product and child-row operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.get_detail(store_id, product_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get(self, store_id: str, product_id: str) -> Product | None:
        """Get a store's product without children.

        Args:
            store_id: Owning store.
            product_id: Product ID.

        Returns:
            Product if found in that store, None otherwise.
        """
        query = select(Product).where(
            Product.id == product_id,
            Product.store_id == store_id,
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_detail(self, store_id: str, product_id: str) -> Product | None:
        """Get a store's product with every child collection loaded.

        Args:
            store_id: Owning store.
            product_id: Product ID.

        Returns:
            Product if found in that store, None otherwise.
        """
        query = (
            select(Product)
            .where(Product.id == product_id, Product.store_id == store_id)
            .options(
                selectinload(Product.images),
                selectinload(Product.options),
                selectinload(Product.subcategory),
                selectinload(Product.brand),
                selectinload(Product.variants).selectinload(Variant.images),
                selectinload(Product.variants)
                .selectinload(Variant.selections)
                .selectinload(VariantOption.option_value),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_by_store(self, store_id: str) -> Sequence[Product]:
        """Get a store's products, newest first, with variants loaded."""
        query = (
            select(Product)
            .where(Product.store_id == store_id)
            .options(
                selectinload(Product.variants),
                selectinload(Product.brand),
                selectinload(Product.subcategory),
            )
            .order_by(Product.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def list_ids_by_store(self, store_id: str) -> list[str]:
        """Get the ids of every product in a store."""
        result = await self.session.execute(
            select(Product.id).where(Product.store_id == store_id)
        )
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def add(self, product: Product) -> Product:
        """Insert a product row."""
        self.session.add(product)
        await self.session.flush()
        return product

    async def add_images(
        self,
        urls: Sequence[str],
        product_id: str | None = None,
        variant_id: str | None = None,
    ) -> list[Image]:
        """Bulk-insert ordered images for a product or a variant."""
        images = [
            Image(url=url, product_id=product_id, variant_id=variant_id, position=position)
            for position, url in enumerate(urls)
        ]
        if images:
            self.session.add_all(images)
            await self.session.flush()
        return images

    async def add_product_options(
        self,
        product_id: str,
        option_ids: Sequence[str],
    ) -> list[ProductOption]:
        """Bulk-insert the derived product-option links."""
        rows = [
            ProductOption(product_id=product_id, option_id=option_id, position=position)
            for position, option_id in enumerate(option_ids)
        ]
        if rows:
            self.session.add_all(rows)
            await self.session.flush()
        return rows

    async def add_variant(self, product_id: str, composed: ComposedVariant) -> Variant:
        """Insert one variant, then its images, then its option-value links.

        Args:
            product_id: Parent product.
            composed: Validated variant.

        Returns:
            The inserted variant row.
        """
        variant = Variant(
            product_id=product_id,
            price=composed.price,
            stock=composed.stock,
            sku=composed.sku,
            position=composed.position,
        )
        self.session.add(variant)
        await self.session.flush()

        await self.add_images(composed.images, variant_id=variant.id)

        links = [
            VariantOption(
                variant_id=variant.id,
                option_id=selection.option_id,
                option_value_id=selection.option_value_id,
                position=position,
            )
            for position, selection in enumerate(composed.selections)
        ]
        if links:
            self.session.add_all(links)
            await self.session.flush()

        return variant

    async def delete_images(self, product_id: str) -> None:
        """Delete a product's own images."""
        await self._bulk_delete(delete(Image).where(Image.product_id == product_id))

    async def delete_product_options(self, product_id: str) -> None:
        """Delete a product's derived option links."""
        await self._bulk_delete(
            delete(ProductOption).where(ProductOption.product_id == product_id)
        )

    async def delete_variants(self, product_id: str) -> None:
        """Delete all variants of a product with their links and images.

        Order: variant option links, variant images, variants.
        """
        variant_ids = select(Variant.id).where(Variant.product_id == product_id)
        await self._bulk_delete(
            delete(VariantOption).where(VariantOption.variant_id.in_(variant_ids))
        )
        await self._bulk_delete(delete(Image).where(Image.variant_id.in_(variant_ids)))
        await self._bulk_delete(delete(Variant).where(Variant.product_id == product_id))

    async def delete(self, product_id: str) -> None:
        """Delete a product and everything hanging off it.

        Order: product images, product options, each variant's option
        links and images, variants, product.
        """
        await self.delete_images(product_id)
        await self.delete_product_options(product_id)
        await self.delete_variants(product_id)
        await self._bulk_delete(delete(Product).where(Product.id == product_id))

    async def update_variant_skus(self, skus: dict[str, str]) -> None:
        """Set the SKU of several variants by id."""
        for variant_id, sku in skus.items():
            variant = await self.session.get(Variant, variant_id)
            if variant is not None:
                variant.sku = sku
        await self.session.flush()

    async def _bulk_delete(self, statement: Delete) -> None:
        # Reads after a bulk delete re-query with populate_existing,
        # so the identity map is not synchronized here.
        await self.session.execute(
            statement.execution_options(synchronize_session=False)
        )
