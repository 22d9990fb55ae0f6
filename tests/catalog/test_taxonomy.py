"""Tests for the default seeding taxonomy."""

from storeadmin.catalog.taxonomy import BRANDS, CATEGORIES, OPTION_VALUES, SUBCATEGORIES
from storeadmin.domain.value_objects import slugify


class TestTaxonomy:
    """Consistency checks for the seed data."""

    def test_category_slugs_are_unique(self) -> None:
        """Should give every category its own slug."""
        slugs = [slugify(name) for name in CATEGORIES]

        assert len(set(slugs)) == len(CATEGORIES)

    def test_brands_reference_known_categories(self) -> None:
        """Should only link brands to seeded categories."""
        for brand, categories in BRANDS.items():
            assert categories, brand
            assert set(categories) <= set(CATEGORIES), brand

    def test_subcategories_reference_known_categories(self) -> None:
        """Should only nest subcategories under seeded categories."""
        assert set(SUBCATEGORIES) <= set(CATEGORIES)

    def test_subcategory_options_are_unique(self) -> None:
        """Should not repeat an option name within one subcategory."""
        for definitions in SUBCATEGORIES.values():
            for definition in definitions:
                assert len(set(definition.options)) == len(definition.options), definition.name

    def test_option_values_are_unique(self) -> None:
        """Should not repeat a value within one option."""
        for option, values in OPTION_VALUES.items():
            assert len(set(values)) == len(values), option
