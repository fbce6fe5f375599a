"""nonempty -- an immutable sequence that always holds at least one element.

Manifesto:
    Code that asks for the first element, the last element, or a fold without a
    seed has to decide what to do with an empty collection. ``NonEmpty[T]`` moves
    that decision to the single place where arbitrary data enters the type
    (``from_plain``), so every other operation is total.

    - **Invariant by construction:** No operation can produce an empty value
    - **Failures as values:** ``from_plain`` and ``strict_zip`` return ``Result``
    - **Pure functions:** Every operation returns a new value

Architecture::

    core/              errors, Result envelope, settings, logging, RandomSource
    plain.py           plain-sequence primitives the operations delegate to
    ordering.py        Ordering (LESS / EQUAL / GREATER) + comparator helpers
    sequence.py        NonEmpty record, new / single / from_plain / to_plain
    inspection.py      first / rest / last / take / drop / predicates
    transform.py       map / index_map / map_fold / scan / flat_map / flatten
    combine.py         append / prepend / zip / map2 / strict_zip / unzip
    reorder.py         reverse / sort / unique / shuffle / intersperse / group / reduce

Usage::

    import nonempty as ne

    match ne.from_plain(rows):
        case ne.Ok(seq):
            newest = ne.last(ne.sort_by(seq, key=lambda r: r.updated_at))
        case ne.Err(error):
            ...
"""

from nonempty.combine import append, append_list, map2, prepend, strict_zip, unzip, zip
from nonempty.core.errors import (
    EmptyInputError,
    ErrorCategory,
    LengthMismatchError,
    NonEmptyError,
)
from nonempty.core.random_source import RandomSource, SeededRandomSource
from nonempty.core.result import Err, Ok, Result
from nonempty.inspection import (
    contains,
    drop,
    exists,
    first,
    for_all,
    last,
    length,
    rest,
    take,
    try_find,
)
from nonempty.ordering import Ordering, compare_by, compare_natural, reverse_order
from nonempty.reorder import (
    group,
    intersperse,
    max_by,
    min_by,
    reduce,
    reverse,
    shuffle,
    sort,
    sort_by,
    unique,
    unique_by,
)
from nonempty.sequence import NonEmpty, from_plain, new, single, to_plain
from nonempty.transform import flat_map, flatten, index_map, map, map_fold, scan

__version__ = "0.1.0"

__all__ = [
    # Type
    "NonEmpty",
    # Construction / conversion
    "new",
    "single",
    "from_plain",
    "to_plain",
    # Inspection / access
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
    # Transformation
    "map",
    "index_map",
    "map_fold",
    "scan",
    "flat_map",
    "flatten",
    # Combination
    "append",
    "append_list",
    "prepend",
    "zip",
    "map2",
    "strict_zip",
    "unzip",
    # Reordering / grouping
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
    # Ordering
    "Ordering",
    "compare_natural",
    "compare_by",
    "reverse_order",
    # Results and errors
    "Result",
    "Ok",
    "Err",
    "NonEmptyError",
    "EmptyInputError",
    "LengthMismatchError",
    "ErrorCategory",
    # Randomness
    "RandomSource",
    "SeededRandomSource",
]
