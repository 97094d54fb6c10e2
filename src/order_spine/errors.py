"""
Structured error types for order-spine.

Every failure raised by order-spine is an :class:`OrderSpineError`.  The
storage layer narrows this to a single kind, :class:`PersistenceError`,
which covers statement preparation, execution, query and row decoding.
Callers never need to catch driver exceptions (``sqlite3.Error``,
``psycopg.Error``): the original exception is preserved as ``cause``
and ``__cause__``.

Manifesto:
    - **One storage error:** Transient and permanent database failures
      propagate identically as ``PersistenceError``
    - **Rich Context:** Errors carry the operation, table and order id
    - **Error Chaining:** The driver exception is never swallowed

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                    OrderSpineError                        │
        │         (category, retryable, context, cause)             │
        ├──────────────────────────────────────────────────────────┤
        │  PersistenceError     DatabaseConnectionError             │
        │  (DATABASE)           (DATABASE, adapter connect)         │
        │                                                           │
        │  ConfigError          ValidationError                     │
        │  (CONFIG)             (VALIDATION)                        │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> try:
    ...     raise sqlite3.IntegrityError("UNIQUE constraint failed: orders.id")
    ... except sqlite3.Error as e:
    ...     err = PersistenceError("Failed to save order", cause=e)
    >>> err.category
    <ErrorCategory.DATABASE: 'DATABASE'>
    >>> err.retryable
    False

Guardrails:
    ❌ DON'T: Let driver exceptions escape the repository
    ✅ DO: Wrap them in PersistenceError with cause=

Tags:
    error-handling, exception-hierarchy, persistence, order-spine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Examples:
        >>> ErrorCategory.DATABASE.value
        'DATABASE'
    """

    DATABASE = "DATABASE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only fields that are set appear in :meth:`to_dict`, so log lines stay
    small.  Anything without a dedicated field goes into ``metadata``.

    Examples:
        >>> ctx = ErrorContext(operation="save", table="orders", order_id="o1")
        >>> ctx.to_dict()
        {'operation': 'save', 'table': 'orders', 'order_id': 'o1'}

    Attributes:
        operation: Repository operation that failed (save, count_all, list_all)
        table: Table being accessed
        order_id: Order identifier, when the operation concerns one order
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    table: str | None = None
    order_id: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "table", "order_id"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class OrderSpineError(Exception):
    """
    Base exception for all order-spine errors.

    Subclasses set ``default_category`` and ``default_retryable`` so that
    call sites only pass a message and, when wrapping, the cause.

    Examples:
        >>> error = OrderSpineError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(operation="save").context.operation
        'save'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> OrderSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise PersistenceError("Failed").with_context(
                operation="save", order_id="o1"
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
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
            "retryable": self.retryable,
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
# STORAGE ERRORS
# =============================================================================


class PersistenceError(OrderSpineError):
    """Storage-layer failure: prepare, execute, query or row decode."""

    default_category = ErrorCategory.DATABASE
    default_retryable = False


class DatabaseConnectionError(OrderSpineError):
    """Could not open a database connection."""

    default_category = ErrorCategory.DATABASE
    default_retryable = True


# =============================================================================
# CALLER-SIDE ERRORS
# =============================================================================


class ConfigError(OrderSpineError):
    """Invalid or unsupported configuration."""

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class ValidationError(OrderSpineError):
    """Order values rejected before they reach the store."""

    default_category = ErrorCategory.VALIDATION
    default_retryable = False

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field is not None:
            result["field"] = self.field
            result["value"] = repr(self.value)
        return result


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "OrderSpineError",
    "PersistenceError",
    "DatabaseConnectionError",
    "ConfigError",
    "ValidationError",
]
