"""Problems solved with hash maps, hash sets and counting."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Hashable, Iterable, Sequence
from itertools import takewhile


def contains_duplicate(nums: Iterable[Hashable]) -> bool:
    """Return True if any value appears more than once."""
    return any(count > 1 for count in Counter(nums).values())


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return sorted(s) == sorted(t)


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups appear in the order their first word was seen, and words keep
    their input order inside each group.
    """
    groups: dict[str, list[str]] = defaultdict(list)
    for word in words:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values with equal counts are ordered from the largest value down.
    """
    counts = Counter(nums)
    if k < 0 or k > len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    ranked = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in ranked]


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    best = 0
    for start in values:
        if start - 1 in values:
            continue
        length = 1
        while start + length in values:
            length += 1
        best = max(best, length)
    return best


def longest_common_prefix(words: Sequence[str]) -> str:
    """Return the longest prefix shared by every word."""
    if not words:
        raise ValueError("longest_common_prefix needs at least one word")
    ordered = sorted(words)
    first, last = ordered[0], ordered[-1]
    return "".join(a for a, _ in takewhile(lambda pair: pair[0] == pair[1], zip(first, last)))


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return two distinct indices whose values add up to ``target``.

    An empty list is returned when no such pair exists.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        other = last_index.get(target - value)
        if other is not None and other != index:
            return [index, other]
    return []


def lonely_integer(values: Iterable[int]) -> int:
    """Return the value that occurs exactly once, or 0 if there is none."""
    return next((value for value, count in Counter(values).items() if count == 1), 0)


def unique_values(values: Iterable[Hashable]) -> list:
    """Return each distinct value once, in order of first appearance."""
    return list(dict.fromkeys(values))


def singletons(values: Iterable[Hashable]) -> list:
    """Return the values that occur exactly once, in order of appearance."""
    return [value for value, count in Counter(values).items() if count == 1]