"""
Read-only access to a NonEmpty.

``first`` and ``last`` need no fallback value because a NonEmpty always has an
element to return. ``take`` and ``drop`` hand back plain lists: removing
elements can exhaust the sequence, so their results are not NonEmpty.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from nonempty import plain
from nonempty.sequence import NonEmpty, to_plain

T = TypeVar("T")


def first(seq: NonEmpty[T]) -> T:
    """The head. O(1)."""
    return seq.head


def rest(seq: NonEmpty[T]) -> tuple[T, ...]:
    """Everything after the head (possibly empty). O(1): the stored tuple itself."""
    return seq.tail


def last(seq: NonEmpty[T]) -> T:
    """The last tail element, or the head when the tail is empty."""
    if seq.tail:
        return seq.tail[-1]
    return seq.head


def take(seq: NonEmpty[T], count: int) -> list[T]:
    """At most ``count`` leading elements; negative counts take nothing."""
    return plain.take(to_plain(seq), count)


def drop(seq: NonEmpty[T], count: int) -> list[T]:
    """What remains after removing at most ``count`` leading elements."""
    return plain.drop(to_plain(seq), count)


def length(seq: NonEmpty[T]) -> int:
    return len(seq)


def exists(seq: NonEmpty[T], predicate: Callable[[T], bool]) -> bool:
    return any(predicate(item) for item in seq)


def for_all(seq: NonEmpty[T], predicate: Callable[[T], bool]) -> bool:
    return all(predicate(item) for item in seq)


def contains(seq: NonEmpty[T], value: T) -> bool:
    return seq.head == value or value in seq.tail


def try_find(seq: NonEmpty[T], predicate: Callable[[T], bool]) -> T | None:
    """First element matching ``predicate``, or None."""
    return next((item for item in seq if predicate(item)), None)


__all__ = [
    "first",
    "rest",
    "last",
    "take",
    "drop",
    "length",
    "exists",
    "for_all",
    "contains",
    "try_find",
]
