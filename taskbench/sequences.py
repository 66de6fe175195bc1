"""Small routines over integers, strings and ordered sequences."""

from __future__ import annotations

import bisect
from itertools import groupby
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def binary_digits(number: int, bits: int = 32) -> str:
    """Return the lowest ``bits`` bits of ``number`` in two's complement, MSB first."""
    if bits <= 0:
        raise ValueError("bit width must be positive")
    return "".join(str((number >> shift) & 1) for shift in range(bits - 1, -1, -1))


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer without leading zeros."""
    if n < 0:
        raise ValueError("number must not be negative")
    return format(n, "b")


def remove_duplicates(text: str) -> str:
    """Collapse every run of equal adjacent characters into one."""
    return "".join(symbol for symbol, _ in groupby(text))


def recursive_sum(items: Iterable[int]) -> int:
    """Sum of the items; zero for none."""
    return sum(items)


def recursive_count(items: Iterable[object]) -> int:
    """Number of items produced by the iterable."""
    return sum(1 for _ in items)


def recursive_max(items: Iterable[T]) -> T | None:
    """Largest item, the last one among equals; ``None`` when there are none."""
    best: T | None = None
    found = False
    for item in items:
        if not found or not best > item:
            best = item
            found = True
    return best


def larger(a: int, b: float) -> float:
    """The larger of ``a`` and ``b`` as a float; ``b`` when they are equal."""
    return float(a) if a > b else float(b)


def lower_bound(data: Sequence[T], value: T) -> int:
    """Index of the first element not less than ``value``."""
    return bisect.bisect_left(data, value)


def upper_bound(data: Sequence[T], value: T) -> int:
    """Index of the first element greater than ``value``."""
    return bisect.bisect_right(data, value)