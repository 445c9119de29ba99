"""Binary-search problems and small bit and digit manipulations."""

from collections.abc import Iterable, Sequence

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class MountainArray:
    """A read-only array read one element at a time, counting every read."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = tuple(values)
        self.calls = 0

    def get(self, index: int) -> int:
        """Return the element at ``index`` and count the read."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} is out of range")
        self.calls += 1
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)


def _bisect_mountain(
    mountain: MountainArray, target: int, lo: int, hi: int, ascending: bool
) -> int | None:
    while lo <= hi:
        mid = (lo + hi) // 2
        value = mountain.get(mid)
        if value == target:
            return mid
        if (value < target) == ascending:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def find_in_mountain_array(target: int, mountain: MountainArray) -> int | None:
    """Smallest index holding ``target`` in a mountain array, or ``None``."""
    n = len(mountain)
    if n == 0:
        raise ValueError("mountain array must not be empty")
    lo, hi = 0, n - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if mountain.get(mid) > mountain.get(mid + 1):
            hi = mid
        else:
            lo = mid + 1
    peak = lo
    found = _bisect_mountain(mountain, target, 0, peak, ascending=True)
    if found is None:
        found = _bisect_mountain(mountain, target, peak, n - 1, ascending=False)
    return found


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[lo] == nums[mid] == nums[hi]:
            lo += 1
            hi -= 1
        elif nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def range_bitwise_and(left: int, right: int) -> int:
    """Bitwise AND of every integer from ``left`` to ``right`` inclusive."""
    if left < 0 or right < 0:
        raise ValueError("bounds must be non-negative")
    if left > right:
        raise ValueError("left must not exceed right")
    if left == 0:
        return 0
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result