import pytest

from contestkit.hackerrank import compare_triplets, plus_minus, staircase


def test_compare_triplets_example():
    assert compare_triplets((5, 6, 7), (3, 6, 10)) == (1, 1)


def test_compare_triplets_swap_swaps_scores():
    a, b = (17, 28, 30), (99, 16, 8)
    alice, bob = compare_triplets(a, b)
    assert compare_triplets(b, a) == (bob, alice)
    assert alice + bob <= len(a)


def test_compare_triplets_equal_ratings_score_nothing():
    assert compare_triplets((4, 4, 4), (4, 4, 4)) == (0, 0)


def test_compare_triplets_length_mismatch():
    with pytest.raises(ValueError):
        compare_triplets((1, 2, 3), (1, 2))


def test_plus_minus_fractions_sum_to_one():
    values = [-4, 3, -9, 0, 4, 1]
    pos, neg, zero = plus_minus(values)
    assert pos + neg + zero == pytest.approx(1.0)
    assert pos * len(values) == pytest.approx(sum(v > 0 for v in values))
    assert neg * len(values) == pytest.approx(sum(v < 0 for v in values))


def test_plus_minus_all_positive():
    assert plus_minus([1, 2, 3]) == (1.0, 0.0, 0.0)


def test_plus_minus_empty_raises():
    with pytest.raises(ValueError):
        plus_minus([])


def test_staircase_small():
    assert staircase(3) == "  #\n ##\n###\n"


@pytest.mark.parametrize("n", [1, 4, 6])
def test_staircase_shape(n):
    lines = staircase(n).splitlines()
    assert len(lines) == n
    for step, line in enumerate(lines, start=1):
        assert len(line) == n
        assert line.endswith("#" * step)
        assert line.count("#") == step


def test_staircase_zero_is_empty():
    assert staircase(0) == ""