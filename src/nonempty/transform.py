"""
Element-wise transformations.

Every function here maps a NonEmpty to a NonEmpty of the same length (``map``,
``index_map``, ``map_fold``, ``scan``) or of at least the same length
(``flat_map``, ``flatten``), so none of them can fail or needs an emptiness
check. All traverse their input once, left to right.

Architecture:
    ::

        map        [a, b, c]            ──> [f(a), f(b), f(c)]
        index_map  [a, b, c]            ──> [f(0,a), f(1,b), f(2,c)]
        scan       [a, b, c], s         ──> [s1=f(s,a), s2=f(s1,b), f(s2,c)]
        map_fold   [a, b, c], s         ──> (s3, [m1, m2, m3])
        flatten    [[a, b], [c], [d]]   ──> [a, b, c, d]

Examples:
    >>> from nonempty.sequence import new
    >>> scan(new(1, [2, 3]), 0, lambda acc, x: acc + x)
    NonEmpty(1, [3, 6])
    >>> map_fold(new(1, [2, 3]), 0, lambda acc, x: (acc + x, x * 10))
    (6, NonEmpty(10, [20, 30]))
"""

from __future__ import annotations

from typing import Callable, TypeVar

from nonempty.sequence import NonEmpty

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")


def map(seq: NonEmpty[T], f: Callable[[T], U]) -> NonEmpty[U]:
    """Apply ``f`` to every element, keeping order and length."""
    return NonEmpty(f(seq.head), tuple(f(item) for item in seq.tail))


def index_map(seq: NonEmpty[T], f: Callable[[int, T], U]) -> NonEmpty[U]:
    """Like :func:`map`, but ``f`` also receives the zero-based position."""
    return NonEmpty(f(0, seq.head), tuple(f(index, item) for index, item in enumerate(seq.tail, start=1)))


def map_fold(
    seq: NonEmpty[T],
    seed: S,
    f: Callable[[S, T], tuple[S, U]],
) -> tuple[S, NonEmpty[U]]:
    """
    Map while threading an accumulator left to right.

    ``f(acc, element)`` returns ``(new_acc, mapped_element)``. The result is the
    final accumulator and the mapped elements in their original order.
    """
    acc, head = f(seed, seq.head)
    mapped = []
    for item in seq.tail:
        acc, value = f(acc, item)
        mapped.append(value)
    return acc, NonEmpty(head, tuple(mapped))


def scan(seq: NonEmpty[T], seed: S, f: Callable[[S, T], S]) -> NonEmpty[S]:
    """
    Inclusive running fold.

    Position ``i`` holds the fold of ``seed`` over elements ``0..i``; the seed
    itself is not part of the output, so the result has the input's length.
    """
    acc = f(seed, seq.head)
    head = acc
    states = []
    for item in seq.tail:
        acc = f(acc, item)
        states.append(acc)
    return NonEmpty(head, tuple(states))


def flatten(seqs: NonEmpty[NonEmpty[T]]) -> NonEmpty[T]:
    """
    Concatenate nested NonEmpty values in order.

    The head of the first inner sequence becomes the head of the result; the
    remaining elements are gathered into a single list, so the whole
    flattening is linear in the total element count.
    """
    outer = seqs.head
    elements = list(outer.tail)
    for inner in seqs.tail:
        elements.append(inner.head)
        elements.extend(inner.tail)
    return NonEmpty(outer.head, tuple(elements))


def flat_map(seq: NonEmpty[T], f: Callable[[T], NonEmpty[U]]) -> NonEmpty[U]:
    """Map each element to a NonEmpty and concatenate the results in order."""
    return flatten(map(seq, f))


__all__ = [
    "map",
    "index_map",
    "map_fold",
    "scan",
    "flatten",
    "flat_map",
]
