"""
Reordering, deduplication, grouping and folding.

Most functions here convert to plain form, delegate to ``nonempty.plain`` and
rebuild a NonEmpty from the result. The rebuild cannot fail: reordering keeps
every element and deduplication always keeps the first one, so the plain result
is never empty.

Grouping
--------
``group`` partitions elements into buckets keyed by ``key_fn``. Each bucket is a
NonEmpty (a key only exists because some element produced it). Inside a bucket
the elements appear in the REVERSE of their order in the input::

    group(new(Ok(3), [Error("X"), Ok(200), Ok(73)]), classify)
    {"Successful": NonEmpty(Ok(73), [Ok(200), Ok(3)]),
     "Failed":     NonEmpty(Error("X"), [])}

That is the order a bucket gets when every element is pushed onto the front of
its bucket while folding left over the input. Callers that need input order can
``reverse`` each bucket.

Examples:
    >>> from nonempty.sequence import new
    >>> intersperse(new(1, [2, 3, 4]), 0)
    NonEmpty(1, [0, 2, 0, 3, 0, 4])
    >>> reduce(new(1, [2, 3]), lambda a, b: a - b)
    -4
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Hashable, TypeVar

from nonempty import plain
from nonempty.core.random_source import RandomSource, default_source
from nonempty.ordering import Comparator, compare_natural
from nonempty.sequence import NonEmpty, to_plain

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def _rebuild(items: list[T]) -> NonEmpty[T]:
    # callers only pass lists derived from a NonEmpty without dropping everything
    return NonEmpty(items[0], tuple(items[1:]))


def reverse(seq: NonEmpty[T]) -> NonEmpty[T]:
    """Mirror-order copy; ``reverse(reverse(x)) == x``."""
    if not seq.tail:
        return seq
    return NonEmpty(seq.tail[-1], (*seq.tail[-2::-1], seq.head))


def sort(
    seq: NonEmpty[T],
    compare: Comparator[T] = compare_natural,
) -> NonEmpty[T]:
    """
    Stable ascending sort by a three-way comparator.

    Elements that compare EQUAL keep their relative order, and duplicates are
    kept.
    """
    return _rebuild(plain.sort_with(to_plain(seq), compare))


def sort_by(seq: NonEmpty[T], key: Callable[[T], Any], reverse: bool = False) -> NonEmpty[T]:
    """Stable sort by ``key(element)``."""
    return _rebuild(plain.sort_by(to_plain(seq), key, reverse=reverse))


def unique(seq: NonEmpty[T]) -> NonEmpty[T]:
    """Drop later duplicates, keeping each first occurrence in order."""
    return _rebuild(plain.unique(to_plain(seq)))


def unique_by(seq: NonEmpty[T], key: Callable[[T], Any]) -> NonEmpty[T]:
    """Like :func:`unique`, comparing ``key(element)`` instead of elements."""
    return _rebuild(plain.unique_by(to_plain(seq), key))


def shuffle(seq: NonEmpty[T], source: RandomSource | None = None) -> NonEmpty[T]:
    """
    Uniformly random permutation.

    Draws from ``source`` when given, otherwise from the process-wide default
    source (seeded by ``NONEMPTY_SHUFFLE_SEED`` when set).
    """
    if source is None:
        source = default_source()
    return _rebuild(plain.shuffled(to_plain(seq), source))


def intersperse(seq: NonEmpty[T], separator: T) -> NonEmpty[T]:
    """Insert ``separator`` between each pair of adjacent elements."""
    spread = []
    for item in seq.tail:
        spread.append(separator)
        spread.append(item)
    return NonEmpty(seq.head, tuple(spread))


def group(seq: NonEmpty[T], key_fn: Callable[[T], K]) -> dict[K, NonEmpty[T]]:
    """
    Partition elements into NonEmpty buckets by ``key_fn``.

    Keys appear in the mapping in order of first appearance. Within a bucket,
    elements are in reverse order of appearance (see the module docstring).
    """
    return {
        key: _rebuild(members[::-1])
        for key, members in plain.group_into(to_plain(seq), key_fn).items()
    }


def reduce(seq: NonEmpty[T], f: Callable[[T, T], T]) -> T:
    """Left fold over the tail, seeded with the head."""
    return functools.reduce(f, seq.tail, seq.head)


def min_by(seq: NonEmpty[T], key: Callable[[T], Any]) -> T:
    """Element with the smallest ``key``; the first one wins ties."""
    return min(seq, key=key)


def max_by(seq: NonEmpty[T], key: Callable[[T], Any]) -> T:
    """Element with the largest ``key``; the first one wins ties."""
    return max(seq, key=key)


__all__ = [
    "reverse",
    "sort",
    "sort_by",
    "unique",
    "unique_by",
    "shuffle",
    "intersperse",
    "group",
    "reduce",
    "min_by",
    "max_by",
]
