"""Catalog repository.

Product authoring only reads the catalog; rows are written by catalog
administration or by seeding.
"""

from collections import defaultdict
from collections.abc import Sequence

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storeadmin.catalog.models import (
    Brand,
    Category,
    Option,
    OptionValue,
    Subcategory,
    brand_categories,
)
from storeadmin.catalog.snapshot import (
    BrandRef,
    CatalogSnapshot,
    CategoryRef,
    OptionRef,
    OptionValueRef,
    SubcategoryRef,
)


class CatalogRepository:
    """Repository for catalog reference data.

    Example usage:
        async with async_session_factory() as session:
            repo = CatalogRepository(session)
            scope = await repo.load_scope(subcategory_id)
            options = scope.options_for(subcategory_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_categories(self) -> Sequence[Category]:
        """Get all categories ordered by name."""
        result = await self.session.execute(select(Category).order_by(Category.name))
        return result.scalars().all()

    async def list_categories_with_children(self) -> Sequence[Category]:
        """Get all categories with their subcategories and brands loaded."""
        query = (
            select(Category)
            .options(selectinload(Category.subcategories), selectinload(Category.brands))
            .order_by(Category.name)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def list_brands(self) -> list[tuple[Brand, frozenset[str]]]:
        """Get all brands with the ids of their linked categories.

        Returns:
            List of (brand, category ids) pairs ordered by brand name.
        """
        result = await self.session.execute(select(Brand).order_by(Brand.name))
        brands = result.scalars().all()
        links = await self._brand_links([b.id for b in brands])
        return [(b, frozenset(links.get(b.id, ()))) for b in brands]

    async def list_subcategories(self, category_id: str | None = None) -> Sequence[Subcategory]:
        """Get subcategories, optionally for one category."""
        query = select(Subcategory).order_by(Subcategory.name)
        if category_id is not None:
            query = query.where(Subcategory.category_id == category_id)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def list_options(self, subcategory_id: str | None = None) -> Sequence[Option]:
        """Get options, optionally for one subcategory."""
        query = select(Option).order_by(Option.name)
        if subcategory_id is not None:
            query = query.where(Option.subcategory_id == subcategory_id)
        result = await self.session.execute(query)
        return result.scalars().all()

    async def list_option_values(
        self,
        option_ids: Sequence[str] | None = None,
    ) -> Sequence[OptionValue]:
        """Get option values, optionally restricted to some options."""
        query = select(OptionValue).order_by(OptionValue.value)
        if option_ids is not None:
            if not option_ids:
                return []
            query = query.where(OptionValue.option_id.in_(option_ids))
        result = await self.session.execute(query)
        return result.scalars().all()

    async def load_snapshot(self) -> CatalogSnapshot:
        """Read the whole catalog into a snapshot."""
        categories = await self.list_categories()
        brands = await self.list_brands()
        subcategories = await self.list_subcategories()
        options = await self.list_options()
        option_values = await self.list_option_values()
        return self._build_snapshot(categories, brands, subcategories, options, option_values)

    async def load_scope(self, subcategory_id: str) -> CatalogSnapshot:
        """Read the slice of the catalog a product in one subcategory needs.

        The slice holds the subcategory, its category, the brands linked
        to that category, and the subcategory's options with their values.
        An unknown subcategory yields an empty snapshot.

        Args:
            subcategory_id: Product subcategory.

        Returns:
            Snapshot restricted to the subcategory.
        """
        subcategory = await self.session.get(Subcategory, subcategory_id)
        if subcategory is None:
            return CatalogSnapshot()

        category = await self.session.get(Category, subcategory.category_id)
        brand_query = (
            select(Brand)
            .join(brand_categories, brand_categories.c.brand_id == Brand.id)
            .where(brand_categories.c.category_id == subcategory.category_id)
            .order_by(Brand.name)
        )
        result = await self.session.execute(brand_query)
        brands = result.scalars().all()
        links = await self._brand_links([b.id for b in brands])

        options = await self.list_options(subcategory_id)
        option_values = await self.list_option_values([o.id for o in options])

        return self._build_snapshot(
            [category] if category is not None else [],
            [(b, frozenset(links.get(b.id, ()))) for b in brands],
            [subcategory],
            options,
            option_values,
        )

    async def add_all(self, rows: Sequence[object]) -> None:
        """Insert catalog rows (seeding only)."""
        if rows:
            self.session.add_all(rows)
            await self.session.flush()

    async def link_brands(self, links: Sequence[tuple[str, str]]) -> None:
        """Insert (brand id, category id) links (seeding only)."""
        if links:
            await self.session.execute(
                insert(brand_categories),
                [{"brand_id": b, "category_id": c} for b, c in links],
            )

    async def _brand_links(self, brand_ids: list[str]) -> dict[str, list[str]]:
        """Map brand id to linked category ids."""
        if not brand_ids:
            return {}
        result = await self.session.execute(
            select(brand_categories.c.brand_id, brand_categories.c.category_id).where(
                brand_categories.c.brand_id.in_(brand_ids)
            )
        )
        links: dict[str, list[str]] = defaultdict(list)
        for row in result.all():
            links[row.brand_id].append(row.category_id)
        return links

    @staticmethod
    def _build_snapshot(
        categories: Sequence[Category],
        brands: Sequence[tuple[Brand, frozenset[str]]],
        subcategories: Sequence[Subcategory],
        options: Sequence[Option],
        option_values: Sequence[OptionValue],
    ) -> CatalogSnapshot:
        return CatalogSnapshot(
            categories=tuple(CategoryRef(c.id, c.name, c.slug) for c in categories),
            subcategories=tuple(
                SubcategoryRef(s.id, s.name, s.category_id) for s in subcategories
            ),
            options=tuple(OptionRef(o.id, o.name, o.subcategory_id) for o in options),
            option_values=tuple(
                OptionValueRef(v.id, v.value, v.option_id) for v in option_values
            ),
            brands=tuple(
                BrandRef(b.id, b.name, b.slug, category_ids) for b, category_ids in brands
            ),
        )
