"""
The non-empty sequence record and its constructors.

``NonEmpty[T]`` is a head element plus a (possibly empty) tuple of tail
elements, so its length is always at least one. The only way to obtain one from
arbitrary data is ``from_plain``, which returns ``Err(EmptyInputError)`` for an
empty input; once a ``NonEmpty`` exists, every other operation in the library
can assume the invariant and is total.

Manifesto:
    - **Invariant by construction:** There is no way to build an empty value
    - **One fallible door:** ``from_plain`` is the only constructor that can fail
    - **Immutability:** Frozen dataclass with a tuple tail, every operation
      returns a new value

Architecture:
    ::

        ┌────────────────────────────────────────────┐
        │               NonEmpty[T]                   │
        ├────────────────────────────────────────────┤
        │  head: T                                    │
        │  tail: tuple[T, ...]     (may be empty)     │
        ├────────────────────────────────────────────┤
        │  new(head, tail)   ──> NonEmpty   (total)   │
        │  single(head)      ──> NonEmpty   (total)   │
        │  from_plain(seq)   ──> Ok | Err(EmptyInput) │
        │  to_plain(nes)     ──> list       (total)   │
        └────────────────────────────────────────────┘

Examples:
    >>> nes = new(1, [2, 3, 4])
    >>> nes
    NonEmpty(1, [2, 3, 4])
    >>> to_plain(nes)
    [1, 2, 3, 4]
    >>> from_plain([1, 2, 3, 4]) == Ok(nes)
    True
    >>> from_plain([]).is_err()
    True

Performance:
    - **new/single:** O(len(tail)) to freeze the tail into a tuple
    - **from_plain/to_plain:** O(n)

Tags:
    non-empty, immutable, value-type, smart-constructor, nonempty
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, TypeVar

from nonempty.core.errors import EmptyInputError
from nonempty.core.result import Err, Ok, Result

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True, slots=True)
class NonEmpty(Generic[T]):
    """
    A sequence holding at least one element.

    Build instances with :func:`new`, :func:`single` or :func:`from_plain`.
    Calling the class directly works too; any iterable tail is frozen into a
    tuple.

    Examples:
        >>> seq = NonEmpty(1, (2, 3))
        >>> len(seq)
        3
        >>> list(seq)
        [1, 2, 3]
        >>> seq == new(1, [2, 3])
        True
    """

    head: T
    tail: tuple[T, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.tail, tuple):
            object.__setattr__(self, "tail", tuple(self.tail))

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __repr__(self) -> str:
        return f"NonEmpty({self.head!r}, {list(self.tail)!r})"


def new(head: T, tail: Iterable[T] = ()) -> NonEmpty[T]:
    """Build a NonEmpty from a head and any finite iterable of tail elements."""
    return NonEmpty(head, tuple(tail))


def single(head: T) -> NonEmpty[T]:
    """A one-element NonEmpty."""
    return NonEmpty(head, ())


def from_plain(items: Iterable[T]) -> Result[NonEmpty[T]]:
    """
    Convert a plain sequence into a NonEmpty.

    Returns ``Err(EmptyInputError)`` when ``items`` yields nothing; otherwise the
    first element becomes the head and the rest, in order, the tail.

    Examples:
        >>> from_plain("abc").unwrap()
        NonEmpty('a', ['b', 'c'])
        >>> from_plain(iter([])).error
        EmptyInputError('Cannot build a non-empty sequence from empty input', category=VALIDATION)
    """
    iterator = iter(items)
    head = next(iterator, _MISSING)
    if head is _MISSING:
        return Err(EmptyInputError())
    return Ok(NonEmpty(head, tuple(iterator)))


def to_plain(seq: NonEmpty[T]) -> list[T]:
    """``[head, *tail]``; the inverse of :func:`from_plain` on non-empty input."""
    return [seq.head, *seq.tail]


__all__ = [
    "NonEmpty",
    "new",
    "single",
    "from_plain",
    "to_plain",
]
