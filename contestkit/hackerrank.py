"""Warm-up problems: triplet comparison, sign ratios and a right-aligned staircase."""

from collections.abc import Iterable, Sequence


def compare_triplets(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Score two ratings position by position.

    Returns ``(alice, bob)``: how many positions each side wins outright.
    Ties score nothing.
    """
    if len(a) != len(b):
        raise ValueError("ratings must have the same length")
    alice = sum(1 for x, y in zip(a, b) if x > y)
    bob = sum(1 for x, y in zip(a, b) if y > x)
    return alice, bob


def plus_minus(values: Iterable[int]) -> tuple[float, float, float]:
    """Return the fractions of positive, negative and zero values."""
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    total = len(items)
    positive = sum(1 for v in items if v > 0)
    negative = sum(1 for v in items if v < 0)
    zero = total - positive - negative
    return positive / total, negative / total, zero / total


def staircase(n: int) -> str:
    """Draw a right-aligned staircase of ``#`` with ``n`` steps.

    Every line, the last included, ends with a newline.
    """
    return "".join(" " * (n - i) + "#" * i + "\n" for i in range(1, n + 1))