"""Natural sorting for strings (e.g., z9 before z10)."""

import logging
from collections.abc import Iterable
from functools import cmp_to_key

from natural_order.core.compare import compare_strings


logger = logging.getLogger(__name__)

# Key wrapper for sorted(), list.sort(), min(), max()
natural_sort_key = cmp_to_key(compare_strings)


def natural_sort(items: Iterable[str], reverse: bool = False) -> list[str]:
    """Sort strings using natural (human-friendly) ordering.

    Digit runs are compared by value, everything else by code point.
    The sort is stable, so strings that compare equal (e.g. "a07" and "a7")
    keep their input order.

    Args:
        items: Strings to sort
        reverse: Sort in descending order

    Returns:
        New sorted list

    Raises:
        NumberOverflowError: If any digit run exceeds 2**64 - 1

    Example:
        >>> natural_sort(["z10", "z9", "b23g"])
        ['b23g', 'z9', 'z10']
    """
    result = sorted(items, key=natural_sort_key, reverse=reverse)
    logger.debug(f"Natural-sorted {len(result)} items")
    return result


def natural_sort_inplace(items: list[str], reverse: bool = False) -> None:
    """Sort a list in place using natural ordering.

    Args:
        items: List to reorder
        reverse: Sort in descending order
    """
    items.sort(key=natural_sort_key, reverse=reverse)
    logger.debug(f"Natural-sorted {len(items)} items in place")
