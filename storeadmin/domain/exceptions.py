"""Domain exceptions.

All domain-level errors that represent business rule violations.
These exceptions are raised by the catalog validator, the variant
composer and the product service; the API layer maps them to HTTP
responses by ``error_code``.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Input Validation Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when caller input is missing or malformed.

    Always raised before any persistence attempt.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str) -> None:
        """Initialize validation error.

        Args:
            field: Name of the offending field.
            message: What is wrong with it.
        """
        super().__init__(message, details={"field": field})
        self.field = field


class EmptyVariantSetError(ValidationError):
    """Raised when a product is submitted without variants."""

    error_code = "EMPTY_VARIANT_SET"

    def __init__(self) -> None:
        super().__init__("variants", "At least one variant is required")


class DuplicateVariantError(ValidationError):
    """Raised when two variants carry the same option-value assignment."""

    error_code = "DUPLICATE_VARIANT"

    def __init__(self, first_index: int, second_index: int) -> None:
        """Initialize duplicate variant error.

        Args:
            first_index: Position of the first variant with the assignment.
            second_index: Position of the variant repeating it.
        """
        super().__init__(
            f"variants[{second_index}]",
            f"Variant {second_index} repeats the option values of variant {first_index}",
        )
        self.details.update(
            {"first_index": first_index, "second_index": second_index}
        )


# ============================================================================
# Catalog Constraint Errors
# ============================================================================


class InvalidOptionSetError(DomainError):
    """Raised when variant option ids are not options of the subcategory."""

    error_code = "INVALID_OPTION_SET"

    def __init__(self, subcategory_id: str, invalid_ids: list[str]) -> None:
        """Initialize invalid option set error.

        Args:
            subcategory_id: Subcategory the product belongs to.
            invalid_ids: Candidate option ids that did not match.
        """
        super().__init__(
            f"Options {invalid_ids} are not valid for subcategory {subcategory_id}",
            details={"subcategory_id": subcategory_id, "invalid_ids": invalid_ids},
        )
        self.subcategory_id = subcategory_id
        self.invalid_ids = invalid_ids


class VariantOptionKeyInvalidError(DomainError):
    """Raised when a variant carries an option id outside the validated set.

    Signals an internal consistency bug, not a caller input fault.
    """

    error_code = "VARIANT_OPTION_KEY_INVALID"

    def __init__(self, variant_index: int, option_ids: list[str]) -> None:
        super().__init__(
            f"Variant {variant_index} contains unvalidated option keys {option_ids}",
            details={"variant_index": variant_index, "option_ids": option_ids},
        )


class OptionValueMismatchError(DomainError):
    """Raised when an option value does not belong to its claimed option."""

    error_code = "OPTION_VALUE_MISMATCH"

    def __init__(self, variant_index: int, option_id: str, option_value_id: str) -> None:
        """Initialize option value mismatch error.

        Args:
            variant_index: Position of the variant in the submission.
            option_id: The option the value was submitted under.
            option_value_id: The offending option value id.
        """
        super().__init__(
            f"Option value '{option_value_id}' does not belong to option "
            f"'{option_id}' (variant {variant_index})",
            details={
                "variant_index": variant_index,
                "option_id": option_id,
                "option_value_id": option_value_id,
            },
        )
        self.variant_index = variant_index
        self.option_id = option_id
        self.option_value_id = option_value_id


class InvalidBrandCategoryLinkError(DomainError):
    """Raised when a brand is not offerable for the product's category."""

    error_code = "INVALID_BRAND_CATEGORY_LINK"

    def __init__(self, brand_id: str, category_id: str) -> None:
        super().__init__(
            f"Brand {brand_id} is not linked to category {category_id}",
            details={"brand_id": brand_id, "category_id": category_id},
        )


# ============================================================================
# Access Errors
# ============================================================================


class OwnershipError(DomainError):
    """Raised when the caller does not own the target store."""

    error_code = "FORBIDDEN"

    def __init__(self, store_id: str) -> None:
        super().__init__(
            f"Caller does not own store {store_id}",
            details={"store_id": store_id},
        )


class NotFoundError(DomainError):
    """Raised when a referenced store, product or catalog entry is missing."""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: str) -> None:
        """Initialize not found error.

        Args:
            resource: Kind of resource (e.g., "Product", "Store").
            resource_id: Identifier that was looked up.
        """
        super().__init__(
            f"{resource} not found: {resource_id}",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


# ============================================================================
# Persistence Errors
# ============================================================================


class PersistenceError(DomainError):
    """Raised when a transaction failed after passing validation.

    The transaction is rolled back before this is raised. The message
    is safe to show to callers; the cause is only logged.
    """

    error_code = "PERSISTENCE_ERROR"

    def __init__(self, message: str = "Could not save changes, please try again") -> None:
        super().__init__(message)


class ProductCreationFailedError(PersistenceError):
    """Raised when the create-product transaction failed and rolled back."""

    error_code = "PRODUCT_CREATION_FAILED"

    def __init__(self) -> None:
        super().__init__("Could not create product, please try again")
