"""Array and matrix problems: two pointers, greedy covers and grid walks."""

from collections import Counter
from collections.abc import Sequence
from itertools import combinations


def max_area(heights: Sequence[int]) -> int:
    """Largest water area held between two of the vertical lines."""
    if len(heights) < 2:
        raise ValueError("at least two heights are required")
    i, j = 0, len(heights) - 1
    best = -1
    while i < j:
        best = max(best, min(heights[i], heights[j]) * (j - i))
        if heights[i] < heights[j]:
            i += 1
        else:
            j -= 1
    return best


def min_taps(n: int, ranges: Sequence[int]) -> int | None:
    """Fewest taps that water the whole garden ``[0, n]``, or ``None`` if impossible."""
    if len(ranges) != n + 1:
        raise ValueError(f"expected {n + 1} ranges, got {len(ranges)}")
    spans = [(i - r, i + r) for i, r in enumerate(ranges)]
    covered = reach = 0
    taps = 0
    while reach < n:
        for low, high in spans:
            if low <= covered and high > reach:
                reach = high
        if reach == covered:
            return None
        taps += 1
        covered = reach
    return taps


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets summing to zero, each sorted, in ascending order."""
    values = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(values):
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[j] + values[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                found.add((first, values[j], values[k]))
                j += 1
                k -= 1
    return [list(t) for t in sorted(found)]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three elements closest to ``target``; the first such triple wins ties."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    sums = (sum(triple) for triple in combinations(nums, 3))
    return min(sums, key=lambda s: abs(s - target))


def trap(heights: Sequence[int]) -> int:
    """Units of rain water held between the bars."""
    water = 0
    low, high = 0, len(heights) - 1
    left_max = right_max = 0
    while low < high:
        if heights[low] <= heights[high]:
            if heights[low] >= left_max:
                left_max = heights[low]
            else:
                water += left_max - heights[low]
            low += 1
        else:
            if heights[high] >= right_max:
                right_max = heights[high]
            else:
                water += right_max - heights[high]
            high -= 1
    return water


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0, 1 and 2 in place by counting."""
    counts = Counter(nums)
    if set(counts) - {0, 1, 2}:
        raise ValueError("colours must be 0, 1 or 2")
    nums[:] = [colour for colour in (0, 1, 2) for _ in range(counts[colour])]


def max_increase_keeping_skyline(grid: Sequence[Sequence[int]]) -> int:
    """Total height that can be added without changing either skyline."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    row_max = [max(0, *row) for row in grid]
    col_max = [max(0, *column) for column in zip(*grid)]
    return sum(
        max(0, min(row_max[i], col_max[j]) - value)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
    )


def restore_matrix(row_sum: Sequence[int], col_sum: Sequence[int]) -> list[list[int]]:
    """A non-negative matrix with the given row and column sums."""
    rows = list(row_sum)
    cols = list(col_sum)
    result = [[0] * len(cols) for _ in rows]
    for i, out_row in enumerate(result):
        for j in range(len(cols)):
            value = min(rows[i], cols[j])
            out_row[j] = value
            rows[i] -= value
            cols[j] -= value
    return result


def matrix_reshape(mat: Sequence[Sequence[int]], r: int, c: int) -> list[list[int]]:
    """Refill the elements row by row into ``r`` rows of ``c``.

    If the element counts differ, a copy of the original matrix is returned.
    """
    m = len(mat)
    n = len(mat[0]) if mat else 0
    if m * n != r * c:
        return [list(row) for row in mat]
    flat = [value for row in mat for value in row]
    return [flat[k * c:(k + 1) * c] for k in range(r)]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements in clockwise spiral order, starting at the top left."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while left <= right and top <= bottom:
        result.extend(matrix[top][left:right + 1])
        result.extend(matrix[r][right] for r in range(top + 1, bottom + 1))
        if top != bottom:
            result.extend(matrix[bottom][c] for c in range(right - 1, left - 1, -1))
        if left != right:
            result.extend(matrix[r][left] for r in range(bottom - 1, top, -1))
        top += 1
        bottom -= 1
        left += 1
        right -= 1
    return result


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix sorted along rows and columns."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False