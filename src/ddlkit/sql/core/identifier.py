"""
SQL identifier handling utilities.

Provides quoting of SQL identifiers (table names, column
names, index names) for the introspection statements that have to splice an
identifier into SQL text (``SHOW COLUMNS FROM``, ``PRAGMA table_info(...)``).
DDL statements produced by the schema builders keep raw identifiers.
"""

BACKTICK_DIALECTS = ("mysql", "mariadb")


def quote_identifier(name: str, dialect: str = "postgresql") -> str:
    """
    Quote a SQL identifier.

    Args:
        name: The identifier to quote
        dialect: Database dialect ("postgresql", "mysql", "sqlite")

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("users")
        '"users"'
        >>> quote_identifier("order", dialect="mysql")
        '`order`'
        >>> quote_identifier('odd"name', dialect="sqlite")
        '"odd""name"'
    """
    if dialect in BACKTICK_DIALECTS:
        escaped = name.replace("`", "``")
        return f"`{escaped}`"
    # PostgreSQL and SQLite both use standard double quotes
    escaped = name.replace('"', '""')
    return f'"{escaped}"'
