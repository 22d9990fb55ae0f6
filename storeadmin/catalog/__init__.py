"""Product Catalog.

Reference hierarchy (categories, subcategories, options, option values,
brands), its immutable snapshot, and option-key validation.
"""

from storeadmin.catalog.models import Brand, Category, Option, OptionValue, Subcategory
from storeadmin.catalog.repository import CatalogRepository
from storeadmin.catalog.service import CatalogService
from storeadmin.catalog.snapshot import (
    BrandRef,
    CatalogSnapshot,
    CategoryRef,
    OptionRef,
    OptionValueRef,
    SubcategoryRef,
)
from storeadmin.catalog.validator import validate_option_keys

__all__ = [
    # Models
    "Brand",
    "Category",
    "Option",
    "OptionValue",
    "Subcategory",
    # Snapshot
    "BrandRef",
    "CatalogSnapshot",
    "CategoryRef",
    "OptionRef",
    "OptionValueRef",
    "SubcategoryRef",
    # Validation
    "validate_option_keys",
    # Repository / Service
    "CatalogRepository",
    "CatalogService",
]
