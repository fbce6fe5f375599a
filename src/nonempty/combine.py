"""
Combining two sequences.

Concatenation and prepending always succeed. Pairwise combination comes in two
flavours:

- **Truncating** (``zip``, ``map2``): the longer operand's excess is dropped.
  Both operands have at least one element, so the result does too.
- **Strict** (``strict_zip``): differing lengths are reported as
  ``Err(LengthMismatchError)`` instead of being truncated.

Architecture:
    ::

        zip        [1, 2, 3] × [a, b]      ──> [(1,a), (2,b)]
        strict_zip [1, 2, 3] × [a, b]      ──> Err(LengthMismatchError(3, 2))
        strict_zip [1, 2]    × [a, b]      ──> Ok([(1,a), (2,b)])
        unzip      [(1,a), (2,b)]          ──> ([1, 2], [a, b])

Examples:
    >>> from nonempty.sequence import new
    >>> append(new(1, [2, 3, 4]), new(5, [6, 7]))
    NonEmpty(1, [2, 3, 4, 5, 6, 7])
    >>> strict_zip(new(1, [2]), new("a")).is_err()
    True
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from nonempty import plain
from nonempty.core.errors import LengthMismatchError
from nonempty.core.result import Err, Ok, Result
from nonempty.sequence import NonEmpty

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def append(left: NonEmpty[T], right: NonEmpty[T]) -> NonEmpty[T]:
    """``left`` followed by ``right``."""
    return NonEmpty(left.head, (*left.tail, right.head, *right.tail))


def append_list(left: NonEmpty[T], right: Iterable[T]) -> NonEmpty[T]:
    """``left`` followed by the elements of a plain sequence (possibly empty)."""
    return NonEmpty(left.head, tuple(plain.append(left.tail, right)))


def prepend(seq: NonEmpty[T], item: T) -> NonEmpty[T]:
    """``item`` becomes the head; the old sequence becomes the tail."""
    return NonEmpty(item, (seq.head, *seq.tail))


def zip(left: NonEmpty[T], right: NonEmpty[U]) -> NonEmpty[tuple[T, U]]:
    """Pair elements positionally, stopping at the shorter operand."""
    return NonEmpty((left.head, right.head), tuple(plain.zip_truncating(left.tail, right.tail)))


def map2(left: NonEmpty[T], right: NonEmpty[U], f: Callable[[T, U], V]) -> NonEmpty[V]:
    """Combine elements positionally with ``f``, truncating like :func:`zip`."""
    return NonEmpty(
        f(left.head, right.head),
        tuple(f(a, b) for a, b in plain.zip_truncating(left.tail, right.tail)),
    )


def strict_zip(left: NonEmpty[T], right: NonEmpty[U]) -> Result[NonEmpty[tuple[T, U]]]:
    """
    Pair elements positionally, requiring equal lengths.

    Returns ``Err(LengthMismatchError)`` carrying both lengths when they differ;
    otherwise ``Ok`` of exactly what :func:`zip` returns.
    """
    left_length, right_length = len(left), len(right)
    if left_length != right_length:
        return Err(LengthMismatchError(left_length, right_length))
    return Ok(zip(left, right))


def unzip(pairs: NonEmpty[tuple[T, U]]) -> tuple[NonEmpty[T], NonEmpty[U]]:
    """Split a NonEmpty of pairs into two NonEmpty of matching order and length."""
    first_head, second_head = pairs.head
    firsts = []
    seconds = []
    for a, b in pairs.tail:
        firsts.append(a)
        seconds.append(b)
    return NonEmpty(first_head, tuple(firsts)), NonEmpty(second_head, tuple(seconds))


__all__ = [
    "append",
    "append_list",
    "prepend",
    "zip",
    "map2",
    "strict_zip",
    "unzip",
]
