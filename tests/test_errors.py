"""Tests for order_spine.errors module."""

import sqlite3

import pytest

from order_spine.errors import (
    ConfigError,
    DatabaseConnectionError,
    ErrorCategory,
    ErrorContext,
    OrderSpineError,
    PersistenceError,
    ValidationError,
)


class TestErrorContext:
    """Test ErrorContext dataclass."""

    def test_create_empty_context(self):
        ctx = ErrorContext()
        assert ctx.operation is None
        assert ctx.metadata == {}
        assert ctx.to_dict() == {}

    def test_to_dict_skips_unset_fields(self):
        ctx = ErrorContext(operation="save", order_id="o1")
        assert ctx.to_dict() == {"operation": "save", "order_id": "o1"}

    def test_metadata_merged(self):
        ctx = ErrorContext(table="orders", metadata={"attempt": 1})
        assert ctx.to_dict() == {"table": "orders", "attempt": 1}


class TestOrderSpineError:
    """Test the base error class."""

    def test_defaults(self):
        error = OrderSpineError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.category == ErrorCategory.INTERNAL
        assert error.retryable is False
        assert error.cause is None
        assert str(error) == "Something went wrong"

    def test_cause_chained(self):
        cause = sqlite3.OperationalError("no such table: orders")
        error = OrderSpineError("wrapped", cause=cause)
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_with_context_known_and_extra_keys(self):
        error = OrderSpineError("x").with_context(operation="save", driver="sqlite3")
        assert error.context.operation == "save"
        assert error.context.metadata == {"driver": "sqlite3"}

    def test_to_dict(self):
        error = PersistenceError("failed", cause=ValueError("bad")).with_context(table="orders")
        d = error.to_dict()
        assert d == {
            "error_type": "PersistenceError",
            "message": "failed",
            "category": "DATABASE",
            "retryable": False,
            "context": {"table": "orders"},
            "cause": "bad",
        }

    def test_repr(self):
        assert repr(PersistenceError("boom")) == "PersistenceError('boom', category=DATABASE)"


class TestSubclasses:
    @pytest.mark.parametrize(
        ("cls", "category", "retryable"),
        [
            (PersistenceError, ErrorCategory.DATABASE, False),
            (DatabaseConnectionError, ErrorCategory.DATABASE, True),
            (ConfigError, ErrorCategory.CONFIG, False),
            (ValidationError, ErrorCategory.VALIDATION, False),
        ],
    )
    def test_defaults(self, cls, category, retryable):
        error = cls("x")
        assert isinstance(error, OrderSpineError)
        assert error.category == category
        assert error.retryable is retryable

    def test_validation_error_field(self):
        error = ValidationError("Price must be greater than zero", field="price", value=-1.0)
        d = error.to_dict()
        assert d["field"] == "price"
        assert d["value"] == "-1.0"
