"""String problems: bracket matching, word concatenation, windows and zigzag."""

from collections import Counter
from collections.abc import Sequence
from itertools import chain, cycle

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def is_valid_parentheses(text: str) -> bool:
    """Whether every bracket in ``text`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[ch]:
                return False
    return not stack


def find_substring(text: str, words: Sequence[str]) -> list[int]:
    """Start offsets of every concatenation of all ``words`` inside ``text``.

    All words must have the same non-zero length. Offsets are grouped by
    their remainder modulo the word length, ascending within each group.
    """
    if not text or not words:
        return []
    width = len(words[0])
    if width == 0:
        raise ValueError("words must not be empty strings")
    if any(len(word) != width for word in words):
        raise ValueError("all words must have the same length")
    needed = Counter(words)
    total = len(words)
    result: list[int] = []
    for offset in range(width):
        found: Counter[str] = Counter()
        left = offset
        count = 0
        for j in range(offset, len(text) - width + 1, width):
            word = text[j:j + width]
            if word in needed:
                found[word] += 1
                count += 1
                while found[word] > needed[word]:
                    found[text[left:left + width]] -= 1
                    count -= 1
                    left += width
                if count == total:
                    result.append(left)
            else:
                found.clear()
                count = 0
                left = j + width
    return result


def length_of_longest_substring(text: str) -> int:
    """Length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(text):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best


def zigzag_convert(text: str, num_rows: int) -> str:
    """Write ``text`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be a positive integer")
    if num_rows == 1 or num_rows >= len(text):
        return text
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    pattern = cycle(chain(range(num_rows), range(num_rows - 2, 0, -1)))
    for ch, row in zip(text, pattern):
        rows[row].append(ch)
    return "".join(chain.from_iterable(rows))