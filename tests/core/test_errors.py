"""Tests for nonempty.core.errors module."""

import pytest

from nonempty.core.errors import (
    EmptyInputError,
    ErrorCategory,
    ErrorContext,
    InvalidConfigError,
    LengthMismatchError,
    NonEmptyError,
    ValidationError,
    categorize_error,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        """Create context with no fields set."""
        ctx = ErrorContext()
        assert ctx.operation is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_to_dict_merges_metadata(self):
        """Metadata keys sit next to the operation name."""
        ctx = ErrorContext(operation="strict_zip", metadata={"left_length": 2})
        assert ctx.to_dict() == {"operation": "strict_zip", "left_length": 2}


class TestNonEmptyError:
    """Test NonEmptyError base class."""

    def test_defaults(self):
        error = NonEmptyError("boom")
        assert error.message == "boom"
        assert str(error) == "boom"
        assert error.category == ErrorCategory.INTERNAL
        assert error.cause is None

    def test_with_context_sets_known_and_extra_fields(self):
        error = NonEmptyError("boom").with_context(operation="sort", comparator="by_name")
        assert error.context.operation == "sort"
        assert error.context.metadata["comparator"] == "by_name"

    def test_cause_is_chained(self):
        cause = KeyError("missing")
        error = NonEmptyError("lookup failed", cause=cause)
        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == str(cause)

    def test_repr(self):
        assert repr(NonEmptyError("boom")) == "NonEmptyError('boom', category=INTERNAL)"


class TestEmptyInputError:
    """Test EmptyInputError."""

    def test_is_validation_error(self):
        error = EmptyInputError()
        assert isinstance(error, ValidationError)
        assert error.category == ErrorCategory.VALIDATION

    def test_records_operation(self):
        d = EmptyInputError().to_dict()
        assert d["error_type"] == "EmptyInputError"
        assert d["context"]["operation"] == "from_plain"


class TestLengthMismatchError:
    """Test LengthMismatchError."""

    def test_carries_lengths(self):
        error = LengthMismatchError(2, 1)
        assert error.left_length == 2
        assert error.right_length == 1
        assert "2" in error.message and "1" in error.message

    def test_lengths_in_context(self):
        d = LengthMismatchError(3, 5).to_dict()
        assert d["context"] == {"operation": "strict_zip", "left_length": 3, "right_length": 5}

    def test_can_be_raised(self):
        with pytest.raises(ValidationError):
            raise LengthMismatchError(1, 2)


class TestInvalidConfigError:
    """Test InvalidConfigError."""

    def test_records_key_and_value(self):
        error = InvalidConfigError("log_level", "LOUD")
        assert error.category == ErrorCategory.CONFIG
        assert error.context.metadata == {"config_key": "log_level", "config_value": "LOUD"}


class TestCategorizeError:
    def test_library_error(self):
        assert categorize_error(EmptyInputError()) == ErrorCategory.VALIDATION

    def test_plain_exception(self):
        assert categorize_error(ValueError("x")) == ErrorCategory.UNKNOWN
