"""Deterministic SKU generation.

A SKU is built from short codes of the product name, category name,
brand name and the variant's option values, in that order:

    generate_sku("Classic Tee", "Men's Fashion", "Nike", ["Red", "S"])
    -> "CLA-MEN-NIK-RED-S"

No randomness and no counters: identical inputs give identical SKUs,
so previews and server-side regeneration agree.
"""

import re
from collections.abc import Iterable

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")

CODE_LENGTH = 3


def sku_code(text: str, length: int = CODE_LENGTH) -> str:
    """Reduce text to an uppercase alphanumeric code.

    Args:
        text: Source text.
        length: Maximum code length.

    Returns:
        Code, possibly empty (e.g., for "!!!").
    """
    return _NON_ALPHANUMERIC.sub("", text or "")[:length].upper()


def generate_sku(
    name: str,
    category: str,
    brand: str,
    values: Iterable[str] = (),
) -> str:
    """Build a dash-joined SKU.

    Empty codes are left out rather than producing empty segments.

    Args:
        name: Product name.
        category: Category name.
        brand: Brand name.
        values: Variant option-value strings, in selection order.

    Returns:
        The SKU string.
    """
    parts = [sku_code(name), sku_code(category), sku_code(brand)]
    parts.extend(sku_code(value) for value in values)
    return "-".join(part for part in parts if part)
