"""Exceptions for tablestream."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TableStreamError(Exception):
    """
    Base exception for all tablestream errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.

    Failures of the output sink itself (closed stream, broken pipe, disk
    full) are NOT wrapped; they reach the caller as the original OSError.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(TableStreamError):
    """
    Base exception for table configuration errors.

    Raised while a table or column is being set up, before any output
    has been written.
    """

    pass


class UsageError(TableStreamError):
    """
    Base exception for programmer errors while driving a table.

    These are not recoverable data problems: the calling code is using
    the table in a way its lifecycle does not allow.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ValidationError(ConfigurationError, ValueError):
    """
    Raised when a configuration value is out of range or unparseable.

    Attributes:
        field: Name of the offending setting
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


# ---------------------------------------------------------------------------
# Usage Exceptions
# ---------------------------------------------------------------------------


class TableFinishedError(UsageError):
    """Raised when a finished table is asked to write more output."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}(): table is already finished")


class RowShapeError(UsageError):
    """
    Raised when a row does not supply one value per column.

    Attributes:
        expected: Number of configured columns
        actual: Number of values found in the row
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row has {actual} values but the table has {expected} columns")
