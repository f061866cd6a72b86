"""Contest problems: gapped pattern counting, missing binary blocks, flooding and "wow" windows."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Iterator, Sequence

MODULO = 1_000_000_007
PATTERN = "orbitaxian"
_UNREACHED_OUTPUT = 2**31 - 1
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def count_pattern_subsequences(text: str, max_gap: int) -> int:
    """Count occurrences of ``PATTERN`` as a subsequence of ``text``.

    Consecutive chosen positions may be at most ``max_gap`` apart. The count
    is taken modulo ``MODULO``.
    """
    if max_gap < 0:
        raise ValueError(f"max_gap must not be negative, got {max_gap}")
    previous = [1 if char == PATTERN[0] else 0 for char in text]
    for letter in PATTERN[1:]:
        window = 0
        current = []
        for index, char in enumerate(text):
            if index - max_gap - 1 >= 0:
                window = (window - previous[index - max_gap - 1]) % MODULO
            current.append(window if char == letter else 0)
            window = (window + previous[index]) % MODULO
        previous = current
    return sum(previous) % MODULO


def smallest_missing_block(text: str, k: int) -> str | None:
    """Return the smallest binary string of length ``k`` not found in ``text``.

    ``None`` is returned when every such string occurs in ``text``.
    """
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if set(text) - {"0", "1"}:
        raise ValueError(f"text must be binary: {text!r}")
    if k == 0:
        return None
    seen = {text[start:start + k] for start in range(len(text) - k + 1)}
    for value in range(2**k):
        candidate = format(value, f"0{k}b")
        if candidate not in seen:
            return candidate
    return None


def _check_cell(cell: tuple[int, int], rows: int, cols: int) -> tuple[int, int]:
    row, col = cell
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"cell {cell!r} lies outside a {rows}x{cols} grid")
    return row, col


def water_reach_time(
    grid: Sequence[Sequence[int]],
    border_cells: Sequence[tuple[int, int]],
    queries: Sequence[tuple[int, int]],
) -> list[int | None]:
    """Return, for each queried cell, when water flowing from the border cells reaches it.

    Water leaving a cell takes that cell's value in time to reach a
    neighbouring cell. Cells the water never reaches give ``None``.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    best = [[math.inf] * cols for _ in range(rows)]
    frontier: list[tuple[int, int, int]] = []
    for cell in border_cells:
        row, col = _check_cell(cell, rows, cols)
        best[row][col] = 0
        heapq.heappush(frontier, (0, row, col))

    while frontier:
        time, row, col = heapq.heappop(frontier)
        if time > best[row][col]:
            continue
        arrival = time + grid[row][col]
        for d_row, d_col in _STEPS:
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < rows and 0 <= n_col < cols and arrival < best[n_row][n_col]:
                best[n_row][n_col] = arrival
                heapq.heappush(frontier, (arrival, n_row, n_col))

    results: list[int | None] = []
    for cell in queries:
        row, col = _check_cell(cell, rows, cols)
        time = best[row][col]
        results.append(None if time == math.inf else int(time))
    return results


def wow_prefix_counts(text: str) -> list[int]:
    """Return the number of "wow" subsequences in every prefix of ``text``.

    Item ``i`` of the result is the count for the first ``i`` characters.
    """
    counts = [0]
    w = wo = wow = 0
    for char in text:
        if char == "w":
            wow += wo
            w += 1
        elif char == "o":
            wo += w
        counts.append(wow)
    return counts


def longest_wow_window(text: str, x: int) -> tuple[int, int] | None:
    """Return the 1-based bounds of the longest window whose prefix-count difference is ``x``.

    The difference is taken between the "wow" prefix counts at the window's
    ends. ``None`` is returned when no window matches.
    """
    prefix = wow_prefix_counts(text)
    start = 0
    best_length = 0
    best: tuple[int, int] | None = None
    for end, total in enumerate(prefix[1:], start=1):
        while start < end and total - prefix[start] > x:
            start += 1
        if total - prefix[start] == x and end - start > best_length:
            best_length = end - start
            best = (start + 1, end)
    return best


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _run_subsequences(tokens: Iterator[str]) -> None:
    for _ in range(int(next(tokens))):
        length, max_gap = _ints(tokens, 2)
        text = next(tokens)[:length]
        print(count_pattern_subsequences(text, max_gap))


def _run_missing_block(tokens: Iterator[str]) -> None:
    for _ in range(int(next(tokens))):
        length, k = _ints(tokens, 2)
        block = smallest_missing_block(next(tokens)[:length], k)
        print("-1" if block is None else block)


def _run_flood(tokens: Iterator[str]) -> None:
    rows, cols = _ints(tokens, 2)
    grid = [_ints(tokens, cols) for _ in range(rows)]
    border = [tuple(_ints(tokens, 2)) for _ in range(int(next(tokens)))]
    queries = [tuple(_ints(tokens, 2)) for _ in range(int(next(tokens)))]
    for time in water_reach_time(grid, border, queries):
        print(_UNREACHED_OUTPUT if time is None else time)


def _run_wow(tokens: Iterator[str]) -> None:
    for _ in range(int(next(tokens))):
        text = next(tokens)
        x = int(next(tokens))
        window = longest_wow_window(text, x)
        print("-1" if window is None else f"{window[0]} {window[1]}")


_PROBLEMS = {
    "subsequences": _run_subsequences,
    "missing-block": _run_missing_block,
    "flood": _run_flood,
    "wow": _run_wow,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one of the problems for the input read from standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills-orbitax",
        description="Read a problem's input from standard input and print its answers.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        _PROBLEMS[args.problem](tokens)
    except StopIteration:
        parser.error("input ended early")
    return 0


if __name__ == "__main__":
    sys.exit(main())