"""Option-key validation.

Decides whether a set of option identifiers is legal for a subcategory.
"""

from collections.abc import Iterable

from storeadmin.catalog.snapshot import OptionRef
from storeadmin.domain.exceptions import InvalidOptionSetError


def validate_option_keys(
    subcategory_id: str,
    candidate_ids: Iterable[str],
    options: Iterable[OptionRef],
) -> frozenset[str]:
    """Check that every candidate is an option of the subcategory.

    Options are matched by identifier; the check is all-or-nothing.

    Args:
        subcategory_id: Subcategory the product belongs to.
        candidate_ids: Proposed option ids (duplicates are ignored).
        options: Options to match against, typically a catalog snapshot's.

    Returns:
        The matched option ids (equal to the candidate set).

    Raises:
        InvalidOptionSetError: If any candidate is not an option of the
            subcategory, including unknown or empty ids.
    """
    candidates = list(dict.fromkeys(candidate_ids))
    wanted = set(candidates)
    matched = {
        option.id
        for option in options
        if option.subcategory_id == subcategory_id and option.id in wanted
    }

    if len(matched) != len(wanted):
        invalid = [option_id for option_id in candidates if option_id not in matched]
        raise InvalidOptionSetError(subcategory_id, invalid)

    return frozenset(matched)
