"""
SQL literal formatting for column defaults.

Defaults end up spliced into DDL text, so literal construction is kept behind
a small formatter object. ``UnsafeLiteralFormatter`` reproduces the historic
output byte for byte and does NOT escape embedded quotes: a value such as
``O'Brien`` corrupts the statement. Schema builders accept any formatter, so
``EscapingLiteralFormatter`` (or a project-specific one) can be swapped in
without touching statement assembly.
"""

from typing import Any


class UnsafeLiteralFormatter:
    """Formats values as SQL literals by plain interpolation.

    Example:
        >>> fmt = UnsafeLiteralFormatter()
        >>> fmt.value(None), fmt.value(5), fmt.value("abc")
        ('NULL', '5', "'abc'")
    """

    def value(self, value: Any) -> str:
        """Render a value as a literal: NULL, bare integer, or quoted text."""
        if value is None:
            return "NULL"
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return self.quote(value)

    def quote(self, value: Any) -> str:
        """Wrap a value in single quotes, whatever its type."""
        return f"'{self.text(value)}'"

    def text(self, value: Any) -> str:
        """Text of a value as it appears between the quotes."""
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)


class EscapingLiteralFormatter(UnsafeLiteralFormatter):
    """Formatter that doubles embedded single quotes (standard SQL escaping)."""

    def text(self, value: Any) -> str:
        return super().text(value).replace("'", "''")


_DEFAULT_FORMATTER = UnsafeLiteralFormatter()


def column_value(value: Any) -> str:
    """Format a value with the default (unescaped) formatter."""
    return _DEFAULT_FORMATTER.value(value)
