from functools import cmp_to_key
from itertools import product

import pytest

from natural_order.core.compare import Ordering, compare, compare_strings
from natural_order.core.segment import NumberOverflowError, segment


LESS, EQUAL, GREATER = Ordering.LESS, Ordering.EQUAL, Ordering.GREATER


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        ("asdf", "asdf", EQUAL),
        ("asd", "asdf", LESS),
        ("asff", "asef", GREATER),
        ("asdf1", "asdf", GREATER),
        ("123", "123", EQUAL),
        ("123", "321", LESS),
        ("123", "12", GREATER),
        ("1", "11", LESS),
        ("asd123", "asd123", EQUAL),
        ("asd123", "asd124", LESS),
        ("asd123", "asd122", GREATER),
        ("asd122", "asd13", GREATER),
        ("asd122", "asd1111", LESS),
        ("123a7", "123b1", LESS),
        ("124a7", "123b1", GREATER),
        ("a23b7", "a24b8", LESS),
        ("1", "a", LESS),
        ("a", "1", GREATER),
    ],
)
def test_compare_pairs(lhs, rhs, expected):
    assert compare(segment(lhs), segment(rhs)) == expected


def test_numeric_beats_lexical():
    assert compare(segment("z9"), segment("z10")) == LESS


def test_prefix_beats_number():
    assert compare(segment("a1"), segment("b1")) == LESS
    assert compare(segment("a100"), segment("b1")) == LESS


def test_remainders_compare_recursively():
    assert compare(segment("a1b2"), segment("a1b3")) == LESS
    assert compare(segment("a1b2c10"), segment("a1b2c9")) == GREATER


def test_missing_remainder_sorts_first():
    assert compare_strings("z10", "z10a") == LESS
    assert compare_strings("z10a", "z10") == GREATER


def test_leading_zeros_compare_equal():
    assert compare_strings("a07", "a7") == EQUAL


def test_ordering_works_with_cmp_to_key():
    assert sorted(["b", "a10", "a9"], key=cmp_to_key(compare_strings)) == ["a9", "a10", "b"]
    assert int(LESS) == -1 and int(EQUAL) == 0 and int(GREATER) == 1


def test_deep_alternation_does_not_recurse():
    left = "a1" * 1500 + "b"
    right = "a1" * 1500 + "c"
    assert compare_strings(left, right) == LESS


def test_overflow_in_remainder_propagates():
    with pytest.raises(NumberOverflowError):
        compare_strings("a1b" + "9" * 25, "a1b" + "9" * 26)


def test_overflow_in_unreached_remainder_is_not_raised():
    assert compare_strings("a1b" + "9" * 25, "b") == LESS


SAMPLE = [
    "", "a", "b", "1", "01", "9", "10", "a1", "a01", "a1b", "a1b2", "a1b10",
    "a2", "a10", "z9", "z10", "z10a", "x12z34", "x12z101", "asd", "asdf1",
]


def test_compare_is_antisymmetric():
    for a, b in product(SAMPLE, repeat=2):
        assert compare_strings(a, b) == -compare_strings(b, a)


def test_compare_is_transitive():
    for a, b, c in product(SAMPLE, repeat=3):
        if compare_strings(a, b) <= EQUAL and compare_strings(b, c) <= EQUAL:
            assert compare_strings(a, c) <= EQUAL
