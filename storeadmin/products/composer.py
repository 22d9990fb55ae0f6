"""Variant composition.

Turns a list of proposed variants into the validated shape the product
service persists: the derived product-level option set plus, per
variant, the checked (option, value) pairs in submission order.

All checks run against one catalog snapshot and finish before any
write, so a rejected submission never leaves rows behind.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

import structlog

from storeadmin.catalog.snapshot import CatalogSnapshot
from storeadmin.catalog.validator import validate_option_keys
from storeadmin.domain.exceptions import (
    DuplicateVariantError,
    EmptyVariantSetError,
    OptionValueMismatchError,
    ValidationError,
    VariantOptionKeyInvalidError,
)
from storeadmin.domain.value_objects import OptionSelection, VariantDraft

logger = structlog.get_logger()


@dataclass(frozen=True)
class ComposedVariant:
    """A variant ready for persistence.

    Attributes:
        position: Index in the submitted list.
        price: Variant price.
        stock: Units in stock.
        sku: Optional display SKU.
        images: Ordered image URLs.
        selections: Validated selections in submission order.
        skipped: Selections dropped under the lenient policy.
    """

    position: int
    price: Decimal
    stock: int
    sku: str | None
    images: tuple[str, ...]
    selections: tuple[OptionSelection, ...]
    skipped: tuple[OptionSelection, ...] = ()

    @property
    def assignment(self) -> frozenset[OptionSelection]:
        """Order-insensitive identity of the variant within its product."""
        return frozenset(self.selections)


@dataclass(frozen=True)
class ComposedProduct:
    """Result of composing a product's variants.

    Attributes:
        option_ids: Deduplicated option ids used by the variants, first
            seen first. One ProductOption row is written per id.
        variants: Composed variants in submission order.
    """

    option_ids: tuple[str, ...]
    variants: tuple[ComposedVariant, ...]

    @property
    def skipped_count(self) -> int:
        """Number of selections dropped under the lenient policy."""
        return sum(len(v.skipped) for v in self.variants)


class VariantComposer:
    """Validates proposed variants against a catalog snapshot.

    Example usage:
        composer = VariantComposer(await repository.load_scope(subcategory_id))
        composed = composer.compose(subcategory_id, drafts)
        for variant in composed.variants:
            ...
    """

    def __init__(self, catalog: CatalogSnapshot) -> None:
        """Initialize composer.

        Args:
            catalog: Snapshot holding at least the subcategory's options
                and their values.
        """
        self.catalog = catalog

    def compose(
        self,
        subcategory_id: str,
        variants: Sequence[VariantDraft],
        *,
        lenient: bool = False,
    ) -> ComposedProduct:
        """Validate and shape a variant list.

        Args:
            subcategory_id: Product subcategory.
            variants: Proposed variants in submission order.
            lenient: Skip (and log) option values that do not belong to
                their option instead of rejecting the whole submission.

        Returns:
            The composed product.

        Raises:
            EmptyVariantSetError: If no variants were submitted.
            ValidationError: On negative price/stock or a repeated option.
            InvalidOptionSetError: If any variant uses an option that is
                not an option of the subcategory.
            VariantOptionKeyInvalidError: If a variant escapes the
                validated option set (internal consistency failure).
            OptionValueMismatchError: If a value does not belong to its
                option and ``lenient`` is false.
            DuplicateVariantError: If two variants end up with the same
                set of option values.
        """
        if not variants:
            raise EmptyVariantSetError()

        for index, draft in enumerate(variants):
            self._check_fields(index, draft)

        candidates = [option_id for draft in variants for option_id in draft.option_ids]
        valid_ids = validate_option_keys(
            subcategory_id,
            candidates,
            self.catalog.options_for(subcategory_id),
        )

        composed: list[ComposedVariant] = []
        seen: dict[frozenset[OptionSelection], int] = {}
        used_option_ids: dict[str, None] = {}

        for index, draft in enumerate(variants):
            stray = [option_id for option_id in draft.option_ids if option_id not in valid_ids]
            if stray:
                raise VariantOptionKeyInvalidError(index, stray)

            kept, skipped = self._check_values(index, draft, lenient)
            variant = ComposedVariant(
                position=index,
                price=draft.price,
                stock=draft.stock,
                sku=draft.sku or None,
                images=tuple(draft.images),
                selections=kept,
                skipped=skipped,
            )

            if variant.assignment in seen:
                raise DuplicateVariantError(seen[variant.assignment], index)
            seen[variant.assignment] = index

            for selection in kept:
                used_option_ids.setdefault(selection.option_id, None)
            composed.append(variant)

        return ComposedProduct(option_ids=tuple(used_option_ids), variants=tuple(composed))

    def _check_fields(self, index: int, draft: VariantDraft) -> None:
        if draft.price is None or draft.price < 0:
            raise ValidationError(f"variants[{index}].price", "Variant price must be >= 0")
        if draft.stock is None or draft.stock < 0:
            raise ValidationError(f"variants[{index}].stock", "Variant stock must be >= 0")

        option_ids = draft.option_ids
        if len(set(option_ids)) != len(option_ids):
            raise ValidationError(
                f"variants[{index}]",
                "Variant sets the same option more than once",
            )

    def _check_values(
        self,
        index: int,
        draft: VariantDraft,
        lenient: bool,
    ) -> tuple[tuple[OptionSelection, ...], tuple[OptionSelection, ...]]:
        kept: list[OptionSelection] = []
        skipped: list[OptionSelection] = []

        for selection in draft.selections:
            value = self.catalog.option_value(selection.option_value_id)
            if value is not None and value.option_id == selection.option_id:
                kept.append(selection)
                continue

            if not lenient:
                raise OptionValueMismatchError(
                    index, selection.option_id, selection.option_value_id
                )

            logger.warning(
                "Skipping option value not owned by its option",
                variant_index=index,
                option_id=selection.option_id,
                option_value_id=selection.option_value_id,
            )
            skipped.append(selection)

        return tuple(kept), tuple(skipped)
