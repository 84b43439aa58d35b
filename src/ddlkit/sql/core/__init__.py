"""Core SQL utilities package."""

from .identifier import quote_identifier
from .literals import EscapingLiteralFormatter, UnsafeLiteralFormatter, column_value

__all__ = [
    "quote_identifier",
    "UnsafeLiteralFormatter",
    "EscapingLiteralFormatter",
    "column_value",
]
