"""Consistency check of a log of check-ins and check-outs."""

from collections.abc import Iterable


def check_consistency(capacity: int, operations: Iterable[tuple[str, int]]) -> bool:
    """Whether a log of ``("+", item)`` and ``("-", item)`` entries is possible.

    An item can only leave if present, and nothing enters while ``capacity``
    items are already inside.
    """
    present: set[int] = set()
    for op, item in operations:
        if op == "-":
            if item not in present:
                return False
            present.remove(item)
        elif op == "+":
            if len(present) == capacity:
                return False
            present.add(item)
        else:
            raise ValueError(f"unknown operation {op!r}")
    return True