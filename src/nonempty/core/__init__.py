"""Ambient layer for nonempty: errors, results, settings, logging, randomness.

Architecture::

    errors.py          Structured error hierarchy (NonEmptyError, EmptyInputError, ...)
    result.py          Result[T] envelope (Ok / Err)
    settings.py        NonEmptySettings (pydantic-settings, NONEMPTY_ prefix)
    logging.py         Structured logging (structlog)
    random_source.py   Injectable RandomSource + process-wide default

The sequence modules depend on ``errors`` and ``result``; only ``shuffle``
reaches ``random_source``, which in turn reads ``settings`` and logs.
"""

from nonempty.core.errors import (
    EmptyInputError,
    ErrorCategory,
    ErrorContext,
    InvalidConfigError,
    LengthMismatchError,
    NonEmptyError,
)
from nonempty.core.result import Err, Ok, Result

__all__ = [
    "EmptyInputError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidConfigError",
    "LengthMismatchError",
    "NonEmptyError",
    "Err",
    "Ok",
    "Result",
]
