"""String problems: sliding windows and clock conversion."""

from __future__ import annotations

import re
from collections import Counter

_TWELVE_HOUR = re.compile(r"(\d\d)(:\d\d:\d\d)(AM|PM)")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Repeated characters in ``t`` must be matched as often as they occur.
    An empty string is returned when no such window exists.
    """
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    start = 0
    best_start, best_length = 0, None
    for end, char in enumerate(s, start=1):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            if best_length is None or end - start < best_length:
                best_start, best_length = start, end - start
            need[s[start]] += 1
            if need[s[start]] > 0:
                missing += 1
            start += 1
    if best_length is None:
        return ""
    return s[best_start:best_start + best_length]


def time_conversion(s: str) -> str:
    """Convert a ``hh:mm:ssAM``/``hh:mm:ssPM`` time to 24-hour ``hh:mm:ss``."""
    match = _TWELVE_HOUR.fullmatch(s)
    if match is None:
        raise ValueError(f"not a 12-hour time: {s!r}")
    hour_text, rest, period = match.groups()
    hour = int(hour_text)
    if period == "AM":
        return ("00" if hour == 12 else hour_text) + rest
    return ("12" if hour == 12 else str(hour + 12)) + rest