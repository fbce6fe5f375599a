"""
Plain-sequence primitives.

The non-empty operations convert to a plain list, delegate to one of these
functions, and convert back. Every function accepts any finite iterable and
returns a new list; none of them mutates its input. Empty input is fine here:
emptiness only matters once a result is turned back into a ``NonEmpty``.

Contract:
    - ``take``/``drop`` are bounded: asking for more than there is is not an error
    - ``sort_with``/``sort_by`` are stable
    - ``unique``/``unique_by`` keep the first occurrence, in order
    - ``zip_truncating`` stops at the shorter input
    - ``group_into`` keeps appearance order inside each list and first-appearance
      order of keys
"""

from __future__ import annotations

import functools
import itertools
from collections import defaultdict
from typing import Any, Callable, Hashable, Iterable, TypeVar

from nonempty.core.random_source import RandomSource
from nonempty.ordering import Comparator

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


def append(left: Iterable[T], right: Iterable[T]) -> list[T]:
    return [*left, *right]


def take(items: Iterable[T], count: int) -> list[T]:
    """First ``count`` items, or all of them if there are fewer."""
    return list(itertools.islice(items, max(count, 0)))


def drop(items: Iterable[T], count: int) -> list[T]:
    """Everything after the first ``count`` items (empty if there are fewer)."""
    return list(itertools.islice(items, max(count, 0), None))


def sort_with(items: Iterable[T], compare: Comparator[T]) -> list[T]:
    # sorted() is stable, so equal elements keep their relative order
    return sorted(items, key=functools.cmp_to_key(compare))


def sort_by(items: Iterable[T], key: Callable[[T], Any], reverse: bool = False) -> list[T]:
    return sorted(items, key=key, reverse=reverse)


def unique(items: Iterable[T]) -> list[T]:
    """Drop repeated elements, keeping first occurrences in order."""
    return unique_by(items, lambda item: item)


def unique_by(items: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """
    Keep the first item for each distinct ``key(item)``.

    Hashable markers are tracked in a set; unhashable ones (lists, dicts) fall
    back to an equality scan over the unhashable markers seen so far.
    """
    seen: set[Hashable] = set()
    seen_unhashable: list[Any] = []
    kept = []
    for item in items:
        marker = key(item)
        if isinstance(marker, Hashable):
            try:
                if marker in seen:
                    continue
                seen.add(marker)
                kept.append(item)
                continue
            except TypeError:
                # hashable type holding unhashable parts, e.g. a tuple of lists
                pass
        if marker not in seen_unhashable:
            seen_unhashable.append(marker)
            kept.append(item)
    return kept


def zip_truncating(left: Iterable[T], right: Iterable[U]) -> list[tuple[T, U]]:
    return list(zip(left, right))


def group_into(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    groups: defaultdict[K, list[T]] = defaultdict(list)
    for item in items:
        groups[key(item)].append(item)
    return dict(groups)


def shuffled(items: Iterable[T], source: RandomSource) -> list[T]:
    """A shuffled copy of ``items``; the input is left untouched."""
    copy = list(items)
    source.shuffle(copy)
    return copy


__all__ = [
    "append",
    "take",
    "drop",
    "sort_with",
    "sort_by",
    "unique",
    "unique_by",
    "zip_truncating",
    "group_into",
    "shuffled",
]
