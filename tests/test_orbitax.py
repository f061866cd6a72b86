import io

import pytest

from algodrills.orbitax import (
    MODULO,
    PATTERN,
    count_pattern_subsequences,
    longest_wow_window,
    main,
    smallest_missing_block,
    water_reach_time,
    wow_prefix_counts,
)


def _run_main(monkeypatch, capsys, problem, data):
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    status = main([problem])
    return status, capsys.readouterr().out.split()


# count_pattern_subsequences

def test_exact_pattern_counts_once():
    assert count_pattern_subsequences(PATTERN, 1) == 1


def test_gap_zero_allows_nothing():
    assert count_pattern_subsequences(PATTERN, 0) == count_pattern_subsequences("", 5)


def test_count_grows_with_gap():
    text = "oorrbbiittaaxxiiaann"
    counts = [count_pattern_subsequences(text, gap) for gap in range(len(text) + 1)]
    assert counts == sorted(counts)
    assert counts[-1] == count_pattern_subsequences(text, len(text) + 10)


def test_missing_letter_gives_no_matches():
    text = "orbitaxian" * 3
    assert count_pattern_subsequences(text.replace("x", "z"), 100) == count_pattern_subsequences("", 1)


def test_count_stays_below_modulo():
    assert 0 <= count_pattern_subsequences("orbitaxian" * 20, 200) < MODULO


def test_negative_gap_rejected():
    with pytest.raises(ValueError):
        count_pattern_subsequences(PATTERN, -1)


# smallest_missing_block

def test_missing_block_is_smallest_absent():
    text = "00011101"
    block = smallest_missing_block(text, 3)
    assert len(block) == 3
    assert block not in text
    assert all(format(v, "03b") in text for v in range(int(block, 2)))


def test_all_blocks_present_gives_none():
    assert smallest_missing_block("00110", 2) is None


def test_short_text_gives_zero_block():
    assert smallest_missing_block("1", 4) == "0" * 4


def test_zero_length_block_is_always_present():
    assert smallest_missing_block("0101", 0) is None


def test_non_binary_text_rejected():
    with pytest.raises(ValueError):
        smallest_missing_block("012", 2)


def test_negative_block_length_rejected():
    with pytest.raises(ValueError):
        smallest_missing_block("01", -1)


# water_reach_time

def test_single_row_flood():
    assert water_reach_time([[2, 3, 4]], [(0, 0)], [(0, 0), (0, 1), (0, 2)]) == [0, 2, 5]


def test_border_cells_are_reached_at_once():
    grid = [[5, 1], [7, 3]]
    border = [(0, 1), (1, 0)]
    assert water_reach_time(grid, border, border) == [0] * len(border)


def test_times_respect_neighbour_bound():
    grid = [[1, 4, 2], [3, 1, 5], [2, 2, 1]]
    cells = [(r, c) for r in range(3) for c in range(3)]
    times = dict(zip(cells, water_reach_time(grid, [(0, 0)], cells)))
    for (r, c), time in times.items():
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            neighbour = (r + dr, c + dc)
            if neighbour in times:
                assert times[neighbour] <= time + grid[r][c]


def test_no_sources_leaves_cells_unreached():
    assert water_reach_time([[1, 1]], [], [(0, 0), (0, 1)]) == [None, None]


def test_query_outside_grid_rejected():
    with pytest.raises(IndexError):
        water_reach_time([[1]], [(0, 0)], [(1, 0)])


# wow_prefix_counts and longest_wow_window

def test_prefix_counts_shape():
    text = "wowowwoow"
    counts = wow_prefix_counts(text)
    assert len(counts) == len(text) + 1
    assert counts[0] == 0
    assert counts == sorted(counts)


def test_prefix_counts_ignore_other_letters():
    assert wow_prefix_counts("wxoyw")[-1] == wow_prefix_counts("wow")[-1]


def test_longest_window_on_wow():
    assert longest_wow_window("wow", 1) == (1, 3)


def test_window_matches_requested_difference():
    text = "wowowow"
    start, end = longest_wow_window(text, 3)
    prefix = wow_prefix_counts(text)
    assert prefix[end] - prefix[start - 1] == 3
    assert 1 <= start <= end <= len(text)


def test_window_missing_when_x_too_large():
    text = "wowow"
    assert longest_wow_window(text, wow_prefix_counts(text)[-1] + 1) is None


# main

def test_main_subsequences(monkeypatch, capsys):
    status, out = _run_main(monkeypatch, capsys, "subsequences", "1\n10 1\norbitaxian\n")
    assert status == 0
    assert out == [str(count_pattern_subsequences(PATTERN, 1))]


def test_main_missing_block(monkeypatch, capsys):
    _, out = _run_main(monkeypatch, capsys, "missing-block", "2\n4 2\n0000\n5 2\n00110\n")
    assert out == [smallest_missing_block("0000", 2), "-1"]


def test_main_flood(monkeypatch, capsys):
    data = "1 3\n2 3 4\n1\n0 0\n2\n0 1\n0 2\n"
    _, out = _run_main(monkeypatch, capsys, "flood", data)
    expected = water_reach_time([[2, 3, 4]], [(0, 0)], [(0, 1), (0, 2)])
    assert out == [str(t) for t in expected]


def test_main_wow(monkeypatch, capsys):
    _, out = _run_main(monkeypatch, capsys, "wow", "2\nwow 1\nwo 5\n")
    start, end = longest_wow_window("wow", 1)
    assert out == [str(start), str(end), "-1"]