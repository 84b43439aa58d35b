"""Exceptions raised by schema builders."""

from typing import Optional


class SchemaError(Exception):
    """Base class for schema builder errors."""


class MissingFieldError(SchemaError, ValueError):
    """Raised when a column definition lacks its name or type."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Column {field} not specified")


class UnsupportedOperationError(SchemaError, NotImplementedError):
    """Raised when a dialect cannot express the requested operation."""

    def __init__(self, dialect: str, operation: str, reason: Optional[str] = None):
        self.dialect = dialect
        self.operation = operation
        message = f"{dialect} does not support {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConnectionNotBoundError(SchemaError):
    """Raised when introspection is attempted without a bound connection."""
