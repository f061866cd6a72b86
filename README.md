# algodrills

A collection of classic interview and programming-contest algorithms,
written as small, plain Python functions with no third-party dependencies.

## Installation

    pip install .

For running the test suite:

    pip install ".[test]"
    pytest

## Modules

- `algodrills.hashing`: `contains_duplicate`, `is_anagram`, `group_anagrams`,
  `top_k_frequent`, `longest_consecutive`, `longest_common_prefix`, `two_sum`,
  `lonely_integer`, `unique_values`, `singletons`.
- `algodrills.arrays`: `NumArray` (prefix-sum range queries via `sum_range`),
  `remove_duplicates`, `rotate`, `max_subarray`, `product_except_self`,
  `merge_intervals`, `move_zeroes`, `third_max`, `max_area`, `three_sum`,
  `mini_max_sum`, `kth_largest`, `find_duplicate`, `find_max_length`,
  `daily_temperatures`, `find_max_average`, `diagonal_difference`.
  Functions that rearrange a sequence return a new list instead of
  changing their argument.
- `algodrills.searching`: `binary_search`, `search_matrix`.
- `algodrills.strings`: `length_of_longest_substring`, `min_window`,
  `time_conversion`.
- `algodrills.structures`: `ListNode`, `TreeNode`, `linked_list`,
  `list_values`, `has_cycle`, `reverse_list` (reverses in place),
  `reverse_inorder` (a generator).
- `algodrills.basics`: `centered_triangle`, `can_split_watermelon`,
  `fibonacci`, `gcd`, `is_prime`, `insertion_sort`, `delete_middle`.
- `algodrills.orbitax`: contest problems: `count_pattern_subsequences`
  (gapped subsequences of `"orbitaxian"`, modulo 1 000 000 007),
  `smallest_missing_block`, `water_reach_time`, `wow_prefix_counts`,
  `longest_wow_window`, and `main` for the command below.

Invalid input (an empty sequence where a value is needed, an out-of-range
`k` or index, a malformed time) raises `ValueError` or `IndexError`.

## Examples

    >>> from algodrills.hashing import is_anagram, two_sum
    >>> is_anagram("listen", "silent")
    True
    >>> two_sum([2, 7, 11, 15], 9)
    [0, 1]

    >>> from algodrills.arrays import NumArray, merge_intervals
    >>> NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 2)
    1
    >>> merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
    [[1, 6], [8, 10], [15, 18]]

    >>> from algodrills.strings import time_conversion
    >>> time_conversion("07:05:45PM")
    '19:05:45'

    >>> from algodrills.structures import linked_list, list_values, reverse_list
    >>> list_values(reverse_list(linked_list([1, 2, 3])))
    [3, 2, 1]

## Command line

Installing the package provides the `algodrills-orbitax` command. It takes
the name of one problem, reads that problem's input as whitespace-separated
tokens from standard input, and prints one answer per line:

    algodrills-orbitax subsequences < input.txt
    algodrills-orbitax missing-block < input.txt
    algodrills-orbitax flood < input.txt
    algodrills-orbitax wow < input.txt

Input formats:

- `subsequences`: a test count, then for each test `N K S`; prints the
  number of gapped `"orbitaxian"` subsequences of the first `N` characters
  of `S`, with at most `K` between chosen positions.
- `missing-block`: a test count, then for each test `N K S`; prints the
  smallest binary string of length `K` missing from `S`, or `-1`.
- `flood`: `n m`, then an `n`-by-`m` grid of integers, then a count and
  that many `row col` border cells, then a count and that many `row col`
  queries; prints the time water reaches each queried cell, or
  `2147483647` for a cell it never reaches.
- `wow`: a test count, then for each test `S X`; prints the 1-based bounds
  of the longest matching window, or `-1`.

Input that ends early is reported as a usage error.

## What it does not do

Apart from `algodrills-orbitax`, the package offers no commands: the other
modules are libraries to import and call, with no interactive prompts or
input reading of their own.