"""Domain layer module.

Contains value objects and the error taxonomy shared by the catalog,
product and reporting services.
"""

from storeadmin.domain.exceptions import (
    DomainError,
    DuplicateVariantError,
    EmptyVariantSetError,
    InvalidBrandCategoryLinkError,
    InvalidOptionSetError,
    NotFoundError,
    OptionValueMismatchError,
    OwnershipError,
    PersistenceError,
    ProductCreationFailedError,
    ValidationError,
    VariantOptionKeyInvalidError,
)
from storeadmin.domain.value_objects import (
    DiscountType,
    OptionSelection,
    ProductDraft,
    ProductPatch,
    ProductStatus,
    VariantDraft,
    slugify,
)

__all__ = [
    # Exceptions
    "DomainError",
    "DuplicateVariantError",
    "EmptyVariantSetError",
    "InvalidBrandCategoryLinkError",
    "InvalidOptionSetError",
    "NotFoundError",
    "OptionValueMismatchError",
    "OwnershipError",
    "PersistenceError",
    "ProductCreationFailedError",
    "ValidationError",
    "VariantOptionKeyInvalidError",
    # Value objects
    "DiscountType",
    "OptionSelection",
    "ProductDraft",
    "ProductPatch",
    "ProductStatus",
    "VariantDraft",
    "slugify",
]
