"""Small warm-up exercises: patterns, number theory, sorting and stacks."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, Sequence
from math import isqrt


def centered_triangle(base_width: int) -> list[str]:
    """Return the rows of a centred triangle of counting numbers.

    Row ``i`` holds the numbers 1 to ``i``, each followed by a space, and is
    indented so that the rows are centred on the widest one.
    """
    return [
        " " * (base_width - row) + "".join(f"{number} " for number in range(1, row + 1))
        for row in range(1, base_width + 1)
    ]


def can_split_watermelon(weight: int) -> bool:
    """Return True if the weight divides into two even parts."""
    return weight % 2 == 0


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from 0."""
    numbers = []
    a, b = 0, 1
    for _ in range(count):
        numbers.append(a)
        a, b = b, a + b
    return numbers


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    while b != 0:
        a, b = b, a % b
    return a


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, inserting them one at a time."""
    ordered: list[int] = []
    for value in values:
        insort(ordered, value)
    return ordered


def delete_middle(stack: Sequence[int]) -> list[int]:
    """Return the stack without its middle element.

    The stack's top is its last item; the middle is ``len(stack) // 2``
    places below the top.
    """
    if not stack:
        raise IndexError("cannot delete from an empty stack")
    position = len(stack) - 1 - len(stack) // 2
    return [*stack[:position], *stack[position + 1:]]