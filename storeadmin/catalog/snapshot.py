"""Immutable catalog snapshot.

A snapshot is what one validation or composition pass reads. It is
detached from the ORM session, so it can be cached and shared between
requests without lazy-loading surprises.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CategoryRef:
    """Category as seen by a snapshot."""

    id: str
    name: str
    slug: str


@dataclass(frozen=True)
class SubcategoryRef:
    """Subcategory as seen by a snapshot."""

    id: str
    name: str
    category_id: str


@dataclass(frozen=True)
class OptionRef:
    """Option as seen by a snapshot."""

    id: str
    name: str
    subcategory_id: str


@dataclass(frozen=True)
class OptionValueRef:
    """Option value as seen by a snapshot."""

    id: str
    value: str
    option_id: str


@dataclass(frozen=True)
class BrandRef:
    """Brand with the ids of the categories it is offerable for."""

    id: str
    name: str
    slug: str
    category_ids: frozenset[str] = frozenset()


@dataclass(frozen=True)
class CatalogSnapshot:
    """Consistent read of the catalog, indexed by id.

    Attributes:
        categories: All categories in the snapshot.
        subcategories: All subcategories in the snapshot.
        options: All options in the snapshot.
        option_values: All option values in the snapshot.
        brands: All brands in the snapshot.
    """

    categories: tuple[CategoryRef, ...] = ()
    subcategories: tuple[SubcategoryRef, ...] = ()
    options: tuple[OptionRef, ...] = ()
    option_values: tuple[OptionValueRef, ...] = ()
    brands: tuple[BrandRef, ...] = ()

    _categories: dict[str, CategoryRef] = field(init=False, repr=False, compare=False)
    _subcategories: dict[str, SubcategoryRef] = field(init=False, repr=False, compare=False)
    _options: dict[str, OptionRef] = field(init=False, repr=False, compare=False)
    _option_values: dict[str, OptionValueRef] = field(init=False, repr=False, compare=False)
    _brands: dict[str, BrandRef] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_categories", {c.id: c for c in self.categories})
        object.__setattr__(self, "_subcategories", {s.id: s for s in self.subcategories})
        object.__setattr__(self, "_options", {o.id: o for o in self.options})
        object.__setattr__(self, "_option_values", {v.id: v for v in self.option_values})
        object.__setattr__(self, "_brands", {b.id: b for b in self.brands})

    def category(self, category_id: str) -> CategoryRef | None:
        return self._categories.get(category_id)

    def subcategory(self, subcategory_id: str) -> SubcategoryRef | None:
        return self._subcategories.get(subcategory_id)

    def option(self, option_id: str) -> OptionRef | None:
        return self._options.get(option_id)

    def option_value(self, option_value_id: str) -> OptionValueRef | None:
        return self._option_values.get(option_value_id)

    def brand(self, brand_id: str) -> BrandRef | None:
        return self._brands.get(brand_id)

    def options_for(self, subcategory_id: str) -> list[OptionRef]:
        """Options owned by a subcategory, in snapshot order."""
        return [o for o in self.options if o.subcategory_id == subcategory_id]

    def values_for(self, option_id: str) -> list[OptionValueRef]:
        """Values owned by an option, in snapshot order."""
        return [v for v in self.option_values if v.option_id == option_id]

    def brands_for(self, category_id: str) -> list[BrandRef]:
        """Brands offerable for a category."""
        return [b for b in self.brands if category_id in b.category_ids]

    def brand_offers_category(self, brand_id: str, category_id: str) -> bool:
        """Check the brand/category link."""
        brand = self._brands.get(brand_id)
        return brand is not None and category_id in brand.category_ids

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation with one list per entity kind.
        """
        return {
            "categories": [
                {"id": c.id, "name": c.name, "slug": c.slug} for c in self.categories
            ],
            "brands": [
                {
                    "id": b.id,
                    "name": b.name,
                    "slug": b.slug,
                    "category_ids": sorted(b.category_ids),
                }
                for b in self.brands
            ],
            "subcategories": [
                {"id": s.id, "name": s.name, "category_id": s.category_id}
                for s in self.subcategories
            ],
            "options": [
                {"id": o.id, "name": o.name, "subcategory_id": o.subcategory_id}
                for o in self.options
            ],
            "option_values": [
                {"id": v.id, "value": v.value, "option_id": v.option_id}
                for v in self.option_values
            ],
        }
