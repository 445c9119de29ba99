"""Introductory problem-set solutions: counting, constructions and sequences."""

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

MOD = 10**9 + 7
_GRAY_WIDTH = 16
_SMALL_KNIGHTS = (0, 6, 28, 96)


def bit_strings(n: int) -> int:
    """Number of bit strings of length ``n``, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return pow(2, n, MOD)


def coin_piles(a: int, b: int) -> bool:
    """Whether both piles can be emptied by removing (1, 2) or (2, 1) coins per move."""
    if a < 0 or b < 0:
        raise ValueError("pile sizes must be non-negative")
    if a > 2 * b or b > 2 * a:
        return False
    return (2 * a - b) % 3 == 0 and (2 * b - a) % 3 == 0


def gray_code(n: int) -> list[str]:
    """All ``n``-bit Gray code words in reflected order."""
    if not 0 <= n <= _GRAY_WIDTH:
        raise ValueError(f"width must be between 0 and {_GRAY_WIDTH}")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def increasing_array(values: Iterable[int]) -> int:
    """Minimum total increments needed to make the sequence non-decreasing."""
    moves = 0
    ceiling = None
    for value in values:
        if ceiling is not None and value < ceiling:
            moves += ceiling - value
        else:
            ceiling = value
    return moves


def missing_number(n: int, numbers: Sequence[int]) -> int:
    """The one number in ``1..n`` absent from ``numbers``."""
    if len(numbers) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(numbers)}")
    return n * (n + 1) // 2 - sum(numbers)


def number_spiral(y: int, x: int) -> int:
    """Value at row ``y``, column ``x`` of the number spiral (1-based)."""
    if y >= x:
        base = (y - 1) * (y - 1)
        return base + 2 * y - x if y % 2 == 0 else base + x
    base = (x - 1) * (x - 1)
    return base + y if x % 2 == 0 else base + 2 * x - y


def palindrome_reorder(text: str) -> str | None:
    """Rearrange upper-case letters into a palindrome, or ``None`` if impossible.

    A string that already reads the same both ways is returned unchanged.
    """
    if text == text[::-1]:
        return text
    if any(not ("A" <= ch <= "Z") for ch in text):
        raise ValueError("text must consist of upper-case letters A-Z")
    counts = Counter(text)
    odd = [ch for ch, count in counts.items() if count % 2]
    if len(odd) > 1:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]


def permutations(n: int) -> list[int] | None:
    """A permutation of ``1..n`` with no adjacent values differing by one.

    Returns ``None`` when no such permutation exists.
    """
    if n >= 5:
        return list(range(1, n + 1, 2)) + list(range(2, n + 1, 2))
    if n == 4:
        return [3, 1, 4, 2]
    if n == 1:
        return [1]
    return None


def repetitions(text: str) -> int:
    """Length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=0)


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros in ``n!``."""
    count = 0
    power = 5
    while n // power > 0:
        count += n // power
        power *= 5
    return count


def two_knights(n: int) -> list[int]:
    """Placement counts of two knights for board sizes ``1..n``."""
    result = []
    for k in range(1, n + 1):
        if k <= len(_SMALL_KNIGHTS):
            result.append(_SMALL_KNIGHTS[k - 1])
        else:
            result.append((k * k * (k * k - 1) // 2 - 16) * (k - 4) * (k - 4))
    return result


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split ``1..n`` into two sets of equal sum, or ``None`` if impossible."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n % 4 == 0:
        quarter = n // 4
        first = list(range(1, quarter + 1)) + list(range(3 * n // 4 + 1, n + 1))
        second = list(range(quarter + 1, 3 * n // 4 + 1))
        return first, second
    if n % 4 == 3:
        first = [1, n - 1]
        second = [n]
        for i in range(2, n // 2, 2):
            first += [i, n - i]
            second += [i + 1, n - i - 1]
        return sorted(first), sorted(second)
    return None


def weird_algorithm(n: int) -> list[int]:
    """The Collatz sequence starting at ``n`` and ending at 1."""
    if n < 1:
        raise ValueError("start must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence