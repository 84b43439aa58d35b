"""
SQL module for identifier quoting, literal formatting, the connection
collaborator and the per-engine dialects.

Dialect classes live in ``ddlkit.sql.dialects`` and are imported from there.
"""

from .connection import Connection, SqlAlchemyConnection
from .core.identifier import quote_identifier
from .core.literals import EscapingLiteralFormatter, UnsafeLiteralFormatter, column_value

__all__ = [
    "Connection",
    "SqlAlchemyConnection",
    "quote_identifier",
    "UnsafeLiteralFormatter",
    "EscapingLiteralFormatter",
    "column_value",
]
