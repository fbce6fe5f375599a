"""
Structured error types for the nonempty library.

Provides a small hierarchy of typed errors with metadata for categorisation,
reporting, and root cause analysis through error chaining.

Only two things can go wrong when working with a non-empty sequence: building
one from a plain sequence that has no elements, and strictly pairing two
sequences whose lengths differ. Everything else is total by construction. Those
two failures travel as values inside a ``Result`` (see ``nonempty.core.result``),
so the error classes here are mostly carried, not raised.

Manifesto:
    - **Typed Error Hierarchy:** One class per failure kind, one common base
    - **Rich Context:** Errors carry the lengths and inputs that caused them
    - **Error Chaining:** Preserve original exceptions while adding context
    - **Values, not control flow:** Data errors are returned inside ``Err``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      NonEmptyError                           │
        │              (category, context, cause)                      │
        ├──────────────────────────────┬──────────────────────────────┤
        │  ValidationError             │  ConfigError                 │
        │  (VALIDATION)                │  (CONFIG)                    │
        │       │                      │       │                      │
        │  EmptyInputError             │  InvalidConfigError          │
        │  LengthMismatchError         │                              │
        └──────────────────────────────┴──────────────────────────────┘

Examples:
    Describing a failed conversion:

    >>> error = EmptyInputError()
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.to_dict()["error_type"]
    'EmptyInputError'

    Carrying both operand lengths:

    >>> error = LengthMismatchError(2, 1)
    >>> (error.left_length, error.right_length)
    (2, 1)

Guardrails:
    ❌ DON'T: Raise EmptyInputError from operations on an existing NonEmpty
    ✅ DO: Return it inside Err from ``from_plain`` only

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, nonempty
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    Categories group errors by who has to act on them: VALIDATION errors are
    malformed caller input, CONFIG errors are bad settings, INTERNAL errors are
    bugs.

    Examples:
        >>> ErrorCategory.VALIDATION.value
        'VALIDATION'
    """

    VALIDATION = "VALIDATION"     # Malformed caller input
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"           # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    ``operation`` names the library call that produced the error; anything else
    goes into ``metadata``. ``to_dict()`` drops unset fields so the output can be
    passed straight to a structured logger.

    Examples:
        >>> ctx = ErrorContext(operation="strict_zip")
        >>> ctx.metadata["left_length"] = 3
        >>> ctx.to_dict()
        {'operation': 'strict_zip', 'left_length': 3}
    """

    operation: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        result: dict[str, Any] = {}
        if self.operation is not None:
            result["operation"] = self.operation
        result.update(self.metadata)
        return result


class NonEmptyError(Exception):
    """
    Base class for all nonempty errors.

    Every error carries a category, a structured context and an optional cause.
    Subclasses set ``default_category`` instead of passing it on every
    construction.

    Examples:
        Adding context fluently:

        >>> error = NonEmptyError("Something failed")
        >>> error.with_context(operation="sort", comparator="by_name")
        NonEmptyError('Something failed', category=INTERNAL)
        >>> error.context.metadata["comparator"]
        'by_name'

        Chaining errors:

        >>> try:
        ...     raise KeyError("missing")
        ... except KeyError as e:
        ...     error = NonEmptyError("Lookup failed", cause=e)
        >>> error.cause
        KeyError('missing')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> NonEmptyError:
        """
        Add context to this error (fluent API).

        Known ``ErrorContext`` fields are set directly, everything else lands
        in ``context.metadata``.
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }

        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict

        if self.cause is not None:
            result["cause"] = str(self.cause)

        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS (caller input)
# =============================================================================


class ValidationError(NonEmptyError):
    """Caller supplied input that violates an operation's contract."""

    default_category = ErrorCategory.VALIDATION


class EmptyInputError(ValidationError):
    """
    A plain sequence with zero elements was offered where a NonEmpty is built.

    Produced only by ``from_plain``.
    """

    def __init__(self, message: str = "Cannot build a non-empty sequence from empty input", **kwargs: Any):
        super().__init__(message, **kwargs)
        if self.context.operation is None:
            self.context.operation = "from_plain"


class LengthMismatchError(ValidationError):
    """
    Two sequences paired strictly had different lengths.

    Produced only by ``strict_zip``. Both lengths are kept as attributes and in
    the error context.
    """

    def __init__(self, left_length: int, right_length: int, message: str | None = None, **kwargs: Any):
        super().__init__(
            message or f"Cannot pair sequences of length {left_length} and {right_length}",
            **kwargs,
        )
        self.left_length = left_length
        self.right_length = right_length
        if self.context.operation is None:
            self.context.operation = "strict_zip"
        self.context.metadata["left_length"] = left_length
        self.context.metadata["right_length"] = right_length


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(NonEmptyError):
    """Configuration errors."""

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        super().__init__(message or f"Invalid value for {key}: {value!r}")
        self.context.metadata["config_key"] = key
        self.context.metadata["config_value"] = str(value)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error; plain exceptions are UNKNOWN."""
    if isinstance(error, NonEmptyError):
        return error.category
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "NonEmptyError",
    "ValidationError",
    "EmptyInputError",
    "LengthMismatchError",
    "ConfigError",
    "InvalidConfigError",
    "categorize_error",
]
