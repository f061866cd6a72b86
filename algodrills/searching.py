"""Binary search over sorted sequences and row-sorted matrices."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if it is absent."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows are sorted and chained.

    Each row is sorted and every row starts above the last value of the row
    before it, so the matrix reads as one sorted sequence.
    """
    if not matrix:
        return False
    firsts = [row[0] for row in matrix if row]
    if len(firsts) != len(matrix):
        return False
    row_index = bisect_right(firsts, target) - 1
    if row_index < 0:
        return False
    return binary_search(matrix[row_index], target) != -1