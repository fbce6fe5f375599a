"""
Three-way comparison for ``sort``.

A comparator takes two elements and answers LESS, EQUAL or GREATER. Plain
ints (negative / zero / positive) are accepted too, so ``functools``-style
``cmp`` functions work unchanged.

Examples:
    >>> compare_natural(1, 2)
    <Ordering.LESS: -1>
    >>> reverse_order(compare_natural)(1, 2)
    <Ordering.GREATER: 1>
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")

Comparator = Callable[[T, T], "Ordering | int"]


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> Ordering:
        """Normalise a cmp-style int to an Ordering."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        return Ordering(-self.value)


def compare_natural(left: Any, right: Any) -> Ordering:
    """Compare with ``<``; the default comparator for ``sort``."""
    if left < right:
        return Ordering.LESS
    if right < left:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_by(key: Callable[[T], Any]) -> Callable[[T, T], Ordering]:
    """Build a comparator that compares ``key(element)`` naturally."""

    def compare(left: T, right: T) -> Ordering:
        return compare_natural(key(left), key(right))

    return compare


def reverse_order(compare: Callable[[T, T], Ordering | int]) -> Callable[[T, T], Ordering]:
    """Flip a comparator so ``sort`` yields descending order (still stable)."""

    def reversed_compare(left: T, right: T) -> Ordering:
        return Ordering.of(compare(left, right)).reverse()

    return reversed_compare


__all__ = [
    "Comparator",
    "Ordering",
    "compare_natural",
    "compare_by",
    "reverse_order",
]
