"""Solutions to a selection of short rated contest problems."""

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, count, islice, permutations, product
from math import isqrt

_FULL_TURN = 360
_GRID_SIZE = 5
_GRID_CENTRE = 3
_WEEK_DAYS = 5


def combination_lock(angles: Sequence[int]) -> bool:
    """Whether each rotation can be turned one way or the other to end at zero."""
    return any(
        sum(sign * angle for sign, angle in zip(signs, angles)) % _FULL_TURN == 0
        for signs in product((-1, 1), repeat=len(angles))
    )


def product_of_three_numbers(n: int) -> tuple[int, int, int] | None:
    """Three distinct factors ``a * b * c == n``, each at least 2, or ``None``."""
    i = 2
    while i * i <= n:
        if n % i == 0:
            rest = n // i
            j = 2
            while j * j <= rest:
                if j != i and rest % j == 0:
                    c = rest // j
                    if len({i, j, c}) == 3:
                        return i, j, c
                j += 1
        i += 1
    return None


def presents(givers: Sequence[int]) -> list[int]:
    """For every friend, who gave them a present.

    ``givers[i]`` is the friend that friend ``i + 1`` gave a present to.
    """
    n = len(givers)
    if sorted(givers) != list(range(1, n + 1)):
        raise ValueError("givers must be a permutation of 1..n")
    received = [0] * n
    for giver, receiver in enumerate(givers, start=1):
        received[receiver - 1] = giver
    return received


def song_query_lengths(
    song: str, queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Length of each 1-based inclusive segment when letter k is repeated k times."""
    if any(not ("a" <= ch <= "z") for ch in song):
        raise ValueError("song must consist of lower-case letters a-z")
    prefix = [0, *accumulate(ord(ch) - ord("a") + 1 for ch in song)]
    result = []
    for left, right in queries:
        if not 1 <= left <= right <= len(song):
            raise ValueError(f"query ({left}, {right}) is out of range")
        result.append(prefix[right] - prefix[left - 1])
    return result


def dislike_of_threes(k: int) -> int:
    """The ``k``-th positive integer neither divisible by 3 nor ending in 3."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    liked = (v for v in count(1) if v % 3 != 0 and v % 10 != 3)
    return next(islice(liked, k - 1, None))


def infinity_table(k: int) -> tuple[int, int]:
    """Row and column where ``k`` is written in the infinite filling table."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    p = isqrt(k)
    if p * p == k:
        return p, 1
    t = k - p * p - p - 1
    if t > 0:
        return p + 1, p + 1 - t
    return t + p + 1, p + 1


def computer_game(row1: str, row2: str) -> bool:
    """Whether the two-row level can be crossed from left to right.

    A column whose two cells are both traps (``"1"``) blocks the way.
    """
    if len(row1) != len(row2):
        raise ValueError("rows must have the same length")
    return all(a == "0" or b == "0" for a, b in zip(row1[1:], row2[1:]))


def split_into_groups(students: Sequence[Sequence[int]]) -> bool:
    """Whether the students split into two equal groups on two different weekdays.

    Each student is a row of five 0/1 flags, one per weekday they can attend.
    """
    if any(len(row) != _WEEK_DAYS for row in students):
        raise ValueError(f"each student needs exactly {_WEEK_DAYS} flags")
    half = len(students) // 2
    for i, j in ((i, j) for i in range(_WEEK_DAYS) for j in range(i + 1, _WEEK_DAYS)):
        both = sum(1 for row in students if row[i] == 1 and row[j] == 1)
        only_i = sum(row[i] for row in students if not (row[i] == 1 and row[j] == 1))
        only_j = sum(row[j] for row in students if not (row[i] == 1 and row[j] == 1))
        if only_i < half and both >= half - only_i:
            both -= half - only_i
            only_i = half
        if only_j < half and both >= half - only_j:
            only_j = half
        if only_i >= half and only_j >= half:
            return True
    return False


def beautiful_matrix(matrix: Sequence[Sequence[int]]) -> int:
    """Moves needed to bring the single 1 of a 5x5 grid to its centre."""
    if len(matrix) != _GRID_SIZE or any(len(row) != _GRID_SIZE for row in matrix):
        raise ValueError(f"matrix must be {_GRID_SIZE}x{_GRID_SIZE}")
    ones = [
        (r, c)
        for r, row in enumerate(matrix, start=1)
        for c, value in enumerate(row, start=1)
        if value == 1
    ]
    if len(ones) != 1:
        raise ValueError("matrix must hold exactly one 1")
    (r, c), = ones
    return abs(r - _GRID_CENTRE) + abs(c - _GRID_CENTRE)


def uniforms(teams: Sequence[tuple[int, int]]) -> int:
    """Games in which the host wears its away uniform.

    Each team is ``(home, away)``; every team hosts every other team once.
    """
    return sum(
        1 for (host_home, _), (_, guest_away) in permutations(teams, 2)
        if host_home == guest_away
    )


def game_with_sticks(n: int, m: int) -> str:
    """Winner of the stick-grid game on ``n`` by ``m`` sticks.

    Every move removes one horizontal and one vertical stick, so the game
    lasts exactly ``min(n, m)`` moves; Akshat moves first.
    """
    if n < 1 or m < 1:
        raise ValueError("n and m must be positive integers")
    moves = min(n, m)
    return "Akshat" if moves % 2 == 1 else "Malvika"


def registration_system(names: Iterable[str]) -> list[str]:
    """Responses to registration requests: ``OK`` or the name with a suffix."""
    seen: Counter[str] = Counter()
    responses = []
    for name in names:
        responses.append("OK" if seen[name] == 0 else f"{name}{seen[name]}")
        seen[name] += 1
    return responses