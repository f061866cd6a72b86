"""Array problems: prefix sums, two pointers, sliding windows and stacks."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate


class NumArray:
    """Immutable array answering range-sum queries in constant time."""

    def __init__(self, nums: Sequence[int]) -> None:
        if not nums:
            raise ValueError("NumArray needs at least one value")
        self._prefix = list(accumulate(nums))

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of the values from ``left`` to ``right`` inclusive."""
        if not 0 <= left <= right < len(self._prefix):
            raise IndexError(f"invalid range [{left}, {right}]")
        total = self._prefix[right]
        return total - self._prefix[left - 1] if left else total


def remove_duplicates(nums: Sequence[int]) -> list[int]:
    """Drop consecutive repeats from a sorted sequence."""
    result: list[int] = []
    for value in nums:
        if not result or result[-1] != value:
            result.append(value)
    return result


def rotate(nums: Sequence[int], k: int) -> list[int]:
    """Return ``nums`` rotated ``k`` steps to the right."""
    if not nums:
        return []
    shift = k % len(nums)
    items = list(nums)
    return items[len(items) - shift:] + items[: len(items) - shift]


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray needs at least one value")
    best = float("-inf")
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return int(best)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other values."""
    prefix = [1, *accumulate(nums[:-1], lambda a, b: a * b)] if nums else []
    result = []
    suffix = 1
    for value, before in zip(reversed(nums), reversed(prefix)):
        result.append(before * suffix)
        suffix *= value
    result.reverse()
    return result


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    if not intervals:
        raise ValueError("merge_intervals needs at least one interval")
    ordered = sorted(intervals, key=lambda interval: interval[0])
    merged = [list(ordered[0])]
    for start, end in ordered[1:]:
        last = merged[-1]
        if start <= last[1]:
            last[1] = max(last[1], end)
        else:
            merged.append([start, end])
    return merged


def move_zeroes(nums: Sequence[int]) -> list[int]:
    """Move every zero to the end, keeping the order of the other values."""
    nonzero = [value for value in nums if value != 0]
    return nonzero + [0] * (len(nums) - len(nonzero))


def third_max(nums: Sequence[int]) -> int:
    """Return the third largest distinct value, or the largest if there are fewer than three."""
    if not nums:
        raise ValueError("third_max needs at least one value")
    distinct = sorted(set(nums), reverse=True)
    return distinct[2] if len(distinct) >= 3 else distinct[0]


def max_area(heights: Sequence[int]) -> int:
    """Return the most water two lines can hold between them."""
    if not heights:
        raise ValueError("max_area needs at least one height")
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] <= heights[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet summing to zero, in sorted order."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered):
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total == 0:
                found.add((first, ordered[left], ordered[right]))
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return [list(triplet) for triplet in sorted(found)]


def mini_max_sum(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest sums of all values but one."""
    if not values:
        raise ValueError("mini_max_sum needs at least one value")
    ordered = sorted(values)
    return sum(ordered[:-1]), sum(ordered[1:])


def kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a list of n+1 values drawn from 1..n."""
    if not nums:
        raise ValueError("find_duplicate needs at least one value")
    slow = nums[0]
    fast = nums[nums[0]]
    while fast != slow:
        slow = nums[slow]
        fast = nums[nums[fast]]
    slow = 0
    while fast != slow:
        slow = nums[slow]
        fast = nums[fast]
    return fast


def find_max_length(nums: Sequence[int]) -> int:
    """Return the length of the longest subarray with equal 0s and 1s."""
    first_seen = {0: -1}
    balance = 0
    longest = 0
    for index, value in enumerate(nums):
        balance += 1 if value == 0 else -1
        if balance in first_seen:
            longest = max(longest, index - first_seen[balance])
        else:
            first_seen[balance] = index
    return longest


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Return, for each day, how many days until a warmer one (0 if never)."""
    answer = [0] * len(temperatures)
    pending: list[tuple[int, int]] = []
    for day, temperature in enumerate(temperatures):
        while pending and pending[-1][1] < temperature:
            previous_day, _ = pending.pop()
            answer[previous_day] = day - previous_day
        pending.append((day, temperature))
    return answer


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the largest average of any ``k`` consecutive values."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    window = sum(nums[:k])
    best = window
    for entering, leaving in zip(nums[k:], nums):
        window += entering - leaving
        best = max(best, window)
    return best / k


def diagonal_difference(matrix: Sequence[Sequence[int]]) -> int:
    """Return the absolute difference between the sums of a square matrix's diagonals."""
    size = len(matrix)
    primary = sum(row[i] for i, row in enumerate(matrix))
    secondary = sum(row[size - 1 - i] for i, row in enumerate(matrix))
    return abs(primary - secondary)