"""Catalog service for reference-data reads and seeding.

Serves the catalog to product forms and SKU previews through a
short-TTL read-through cache. Validation of product writes does not go
through the cache; it reads a fresh scope per request.
"""

from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.catalog.models import Brand, Category, Option, OptionValue, Subcategory, new_id
from storeadmin.catalog.repository import CatalogRepository
from storeadmin.catalog.snapshot import CatalogSnapshot
from storeadmin.catalog.taxonomy import BRANDS, CATEGORIES, OPTION_VALUES, SUBCATEGORIES
from storeadmin.domain.value_objects import slugify
from storeadmin.infrastructure.cache import TTLCache
from storeadmin.infrastructure.config import settings

logger = structlog.get_logger()

CATALOG_CACHE_KEY = "catalog"

catalog_cache = TTLCache(ttl_seconds=settings.catalog_cache_ttl_seconds)


class CatalogService:
    """Service for catalog reads.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            snapshot = await service.get_snapshot()
            brands = snapshot.brands_for(category_id)
    """

    def __init__(self, session: AsyncSession, cache: TTLCache | None = None) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            cache: Cache to use; the module-level catalog cache by default.
        """
        self.session = session
        self.repository = CatalogRepository(session)
        self.cache = catalog_cache if cache is None else cache

    async def get_snapshot(self) -> CatalogSnapshot:
        """Get the whole catalog, cached.

        Returns:
            Catalog snapshot.
        """
        return await self.cache.get_or_load(CATALOG_CACHE_KEY, self.repository.load_snapshot)

    async def list_categories_tree(self) -> list[dict[str, Any]]:
        """Get categories with their subcategories and brands.

        Returns:
            List of category dicts.
        """
        categories = await self.repository.list_categories_with_children()
        return [
            {
                "id": category.id,
                "name": category.name,
                "slug": category.slug,
                "subcategories": [
                    {"id": s.id, "name": s.name, "category_id": s.category_id}
                    for s in category.subcategories
                ],
                "brands": [
                    {"id": b.id, "name": b.name, "slug": b.slug} for b in category.brands
                ],
            }
            for category in categories
        ]

    async def seed_catalog(self) -> dict[str, int]:
        """Insert the default taxonomy rows that do not exist yet.

        Rows are matched by natural key (slug, or name within the parent),
        so seeding twice creates nothing the second time.

        Returns:
            Number of rows created per kind.
        """
        existing = await self.repository.load_snapshot()
        created: dict[str, int] = {}

        # Categories
        category_ids = {c.slug: c.id for c in existing.categories}
        categories = []
        for name in CATEGORIES:
            slug = slugify(name)
            if slug not in category_ids:
                category = Category(id=new_id(), name=name, slug=slug)
                category_ids[slug] = category.id
                categories.append(category)
        await self.repository.add_all(categories)
        created["categories"] = len(categories)

        # Brands and their category links
        brand_links = {b.slug: (b.id, set(b.category_ids)) for b in existing.brands}
        brands, links = [], []
        for name, category_names in BRANDS.items():
            slug = slugify(name)
            if slug not in brand_links:
                brand = Brand(id=new_id(), name=name, slug=slug)
                brand_links[slug] = (brand.id, set())
                brands.append(brand)
            brand_id, linked = brand_links[slug]
            for category_name in category_names:
                category_id = category_ids[slugify(category_name)]
                if category_id not in linked:
                    linked.add(category_id)
                    links.append((brand_id, category_id))
        await self.repository.add_all(brands)
        await self.repository.link_brands(links)
        created["brands"] = len(brands)
        created["brand_links"] = len(links)

        # Subcategories, options and values
        subcategory_ids = {(s.category_id, s.name): s.id for s in existing.subcategories}
        option_ids = {(o.subcategory_id, o.name): o.id for o in existing.options}
        value_keys = {(v.option_id, v.value) for v in existing.option_values}
        subcategories, options, values = [], [], []
        for category_name, definitions in SUBCATEGORIES.items():
            category_id = category_ids[slugify(category_name)]
            for definition in definitions:
                key = (category_id, definition.name)
                if key not in subcategory_ids:
                    subcategory = Subcategory(
                        id=new_id(), name=definition.name, category_id=category_id
                    )
                    subcategory_ids[key] = subcategory.id
                    subcategories.append(subcategory)

                for option_name in definition.options:
                    option_key = (subcategory_ids[key], option_name)
                    if option_key not in option_ids:
                        option = Option(
                            id=new_id(), name=option_name, subcategory_id=subcategory_ids[key]
                        )
                        option_ids[option_key] = option.id
                        options.append(option)

                    option_id = option_ids[option_key]
                    for value in OPTION_VALUES.get(option_name, ()):
                        if (option_id, value) not in value_keys:
                            value_keys.add((option_id, value))
                            values.append(OptionValue(value=value, option_id=option_id))

        await self.repository.add_all(subcategories)
        await self.repository.add_all(options)
        await self.repository.add_all(values)
        created["subcategories"] = len(subcategories)
        created["options"] = len(options)
        created["option_values"] = len(values)

        await self.session.commit()
        self.invalidate()

        logger.info("Catalog seeded", **created)
        return created

    def invalidate(self) -> None:
        """Drop the cached catalog so the next read reflects committed writes."""
        self.cache.invalidate(CATALOG_CACHE_KEY)
        logger.info("Catalog cache invalidated")
