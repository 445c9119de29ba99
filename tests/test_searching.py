from functools import reduce
from operator import and_

import pytest

from contestkit.searching import (
    MountainArray,
    find_in_mountain_array,
    range_bitwise_and,
    reverse_integer,
    search_rotated,
)

MOUNTAINS = [
    [1, 2, 3, 4, 5, 3, 1],
    [0, 1, 2, 4, 2, 1],
    [1, 5, 2],
    [3, 5, 3, 2, 0],
    [0, 5, 3, 1],
    [1, 2, 5, 1],
]


@pytest.mark.parametrize("values", MOUNTAINS)
def test_find_in_mountain_matches_first_occurrence(values):
    for target in range(-1, max(values) + 2):
        mountain = MountainArray(values)
        expected = values.index(target) if target in values else None
        assert find_in_mountain_array(target, mountain) == expected


def test_find_in_mountain_prefers_left_side():
    values = [1, 2, 3, 4, 5, 3, 1]
    assert find_in_mountain_array(3, MountainArray(values)) == values.index(3)


def test_find_in_mountain_few_reads_on_large_array():
    values = list(range(5000)) + list(range(4998, -1, -1))
    mountain = MountainArray(values)
    index = find_in_mountain_array(1234, mountain)
    assert index == 1234
    assert 0 < mountain.calls <= 100


def test_find_in_mountain_empty_raises():
    with pytest.raises(ValueError):
        find_in_mountain_array(1, MountainArray([]))


def test_mountain_array_get_counts_and_bounds():
    mountain = MountainArray([1, 3, 2])
    assert mountain.get(1) == 3
    assert mountain.calls == 1
    assert len(mountain) == 3
    with pytest.raises(IndexError):
        mountain.get(3)
    with pytest.raises(IndexError):
        mountain.get(-1)


def _rotations(values):
    return [values[k:] + values[:k] for k in range(len(values))]


@pytest.mark.parametrize(
    "base",
    [
        [0, 0, 1, 2, 2, 5, 6],
        [1, 1, 1, 1, 2],
        [1, 3, 5],
        [2, 2, 2, 2],
        [4],
        [1, 1, 3, 3, 3, 7, 8, 8],
    ],
)
def test_search_rotated_agrees_with_membership(base):
    for nums in _rotations(base):
        for target in range(-1, max(base) + 2):
            assert search_rotated(nums, target) == (target in nums)


def test_search_rotated_hidden_by_duplicates():
    assert search_rotated([1, 0, 1, 1, 1], 0)
    assert not search_rotated([1, 1, 1, 1, 1], 0)


def test_search_rotated_empty():
    assert not search_rotated([], 3)


@pytest.mark.parametrize("left", range(0, 20))
def test_range_bitwise_and_against_brute_force(left):
    for right in range(left, 40):
        assert range_bitwise_and(left, right) == reduce(and_, range(left, right + 1))


def test_range_bitwise_and_single_value():
    assert range_bitwise_and(2**30 + 5, 2**30 + 5) == 2**30 + 5


def test_range_bitwise_and_invalid():
    with pytest.raises(ValueError):
        range_bitwise_and(-1, 3)
    with pytest.raises(ValueError):
        range_bitwise_and(7, 5)


def test_reverse_integer_examples():
    assert reverse_integer(123) == 321
    assert reverse_integer(-123) == -321
    assert reverse_integer(0) == 0


@pytest.mark.parametrize("x", [1, 12, 123, 4567, -89, 120034, 1463847412, -7])
def test_reverse_integer_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


@pytest.mark.parametrize("x", [5, 123, 98765])
def test_reverse_integer_sign_symmetry(x):
    assert reverse_integer(-x) == -reverse_integer(x)


def test_reverse_integer_trailing_zeros_dropped():
    assert reverse_integer(1200) == reverse_integer(12)


def test_reverse_integer_overflow():
    assert reverse_integer(2147483647) == 0
    assert reverse_integer(-2147483648) == 0
    assert reverse_integer(8463847412) == 0
    assert reverse_integer(-8463847412) == -2147483648