"""Three-way natural-order comparison of segments."""

from enum import IntEnum

from natural_order.core.segment import Segment, segment


class Ordering(IntEnum):
    """Result of a comparison; plugs straight into functools.cmp_to_key."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _order(a, b) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare(a: Segment, b: Segment) -> Ordering:
    """Compare two segments in natural order.

    Rules, first one that differs decides:
        1. Prefixes, by code point
        2. Numbers, missing before present, otherwise numerically
        3. Remainders, missing before present, otherwise the remainders
           are segmented and compared by these same rules

    Args:
        a: Left-hand segment
        b: Right-hand segment

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        NumberOverflowError: If a remainder holds a digit run over 2**64 - 1
    """
    while True:
        if a.prefix != b.prefix:
            return _order(a.prefix, b.prefix)

        if a.number != b.number:
            if a.number is None:
                return Ordering.LESS
            if b.number is None:
                return Ordering.GREATER
            return _order(a.number, b.number)

        if a.remainder == b.remainder:
            return Ordering.EQUAL
        if a.remainder is None:
            return Ordering.LESS
        if b.remainder is None:
            return Ordering.GREATER

        # Descend one step into the remainders
        a, b = segment(a.remainder), segment(b.remainder)


def compare_strings(a: str, b: str) -> Ordering:
    """Segment two strings and compare them in natural order."""
    return compare(segment(a), segment(b))
