"""
Injectable randomness for ``shuffle``.

``shuffle`` is the only operation in the library that is not a deterministic
function of its inputs. It draws from a ``RandomSource``: either one passed in by
the caller (a seeded source in tests) or a process-wide default built lazily
from ``NonEmptySettings.shuffle_seed``.

Architecture:
    ::

        shuffle(seq, source=None)
                │
                ├── source given ──────────> source.shuffle(items)
                │
                └── None ──> default_source() ──> SeededRandomSource(settings.shuffle_seed)
                                   ▲
                    set_default_source() / reset_default_source()

Examples:
    >>> from nonempty.core.random_source import SeededRandomSource
    >>> items = [1, 2, 3, 4]
    >>> SeededRandomSource(seed=1).shuffle(items)
    >>> sorted(items)
    [1, 2, 3, 4]

Tags:
    randomness, dependency-injection, shuffle, nonempty
"""

from __future__ import annotations

import random
import threading
from typing import Any, Protocol, runtime_checkable

from nonempty.core.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can permute a list in place, uniformly at random."""

    def shuffle(self, items: list[Any]) -> None: ...


class SeededRandomSource:
    """``RandomSource`` backed by its own ``random.Random`` instance.

    ``seed=None`` seeds from the operating system; any int makes the sequence of
    permutations reproducible.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def shuffle(self, items: list[Any]) -> None:
        self._rng.shuffle(items)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


# ── Process-wide default ─────────────────────────────────────────────────

_default_source: RandomSource | None = None
_default_lock = threading.Lock()


def default_source() -> RandomSource:
    """Return the process-wide random source, creating it on first use."""
    global _default_source

    with _default_lock:
        if _default_source is None:
            from nonempty.core.settings import get_settings

            seed = get_settings().shuffle_seed
            _default_source = SeededRandomSource(seed)
            logger.debug("random_source_created", seeded=seed is not None)
        return _default_source


def set_default_source(source: RandomSource) -> None:
    """Replace the process-wide random source."""
    global _default_source

    with _default_lock:
        _default_source = source
    logger.debug("random_source_replaced", source=repr(source))


def reset_default_source() -> None:
    """Drop the process-wide source; the next use rebuilds it from settings."""
    global _default_source

    with _default_lock:
        _default_source = None


__all__ = [
    "RandomSource",
    "SeededRandomSource",
    "default_source",
    "set_default_source",
    "reset_default_source",
]
