"""
Stateless ALTER TABLE, index and foreign-key statement builders.

Only the statements whose syntax is shared across engines live here; renames,
column changes and index removal are dialect methods.
"""

from typing import Sequence, Union

from .core import join_columns


def add_column(table: str, definition: str) -> str:
    """ALTER TABLE ... ADD COLUMN for an already-built column fragment."""
    return f"ALTER TABLE {table} ADD COLUMN {definition}"


def remove_column(table: str, column: str) -> str:
    return f"ALTER TABLE {table} DROP COLUMN {column}"


def remove_columns(table: str, columns: Sequence[str]) -> str:
    """Drop several columns in one statement, one DROP COLUMN per line.

    Example:
        >>> print(remove_columns("users", ["a", "b"]))
        ALTER TABLE users
        DROP COLUMN a,
        DROP COLUMN b
    """
    if not columns:
        raise ValueError(f"No columns given to remove from {table}")
    drops = ",".join(f"\nDROP COLUMN {column}" for column in columns)
    return f"ALTER TABLE {table}{drops}"


def add_index(
    table: str, column: Union[str, Sequence[str]], name: str, unique: bool = False
) -> str:
    unique_str = "UNIQUE " if unique else ""
    return f"CREATE {unique_str}INDEX {name} ON {table} ({join_columns(column)})"


def add_foreign_key(
    from_table: str, to_table: str, name: str, column: str, primary_key: str
) -> str:
    return (
        f"ALTER TABLE {from_table} ADD CONSTRAINT {name} "
        f"FOREIGN KEY ({column}) REFERENCES {to_table} ({primary_key})"
    )


def remove_foreign_key(from_table: str, constraint: str) -> str:
    """MySQL-family form; PostgreSQL drops the constraint instead."""
    return f"ALTER TABLE {from_table} DROP FOREIGN KEY {constraint}"


def drop_table(table: str) -> str:
    return f"DROP TABLE {table}"


__all__ = [
    "add_column",
    "remove_column",
    "remove_columns",
    "add_index",
    "add_foreign_key",
    "remove_foreign_key",
    "drop_table",
]
