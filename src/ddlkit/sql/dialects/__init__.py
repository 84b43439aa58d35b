"""
Per-engine schema builders.

Importing this package registers every dialect (and its aliases) in the
dialect registry.
"""

from ddlkit.schema.registry import register_dialect

from .mysql import MySQLSchema
from .postgresql import PostgreSQLSchema
from .sqlite import SQLiteSchema

register_dialect("mysql", MySQLSchema)
register_dialect("mariadb", MySQLSchema)
register_dialect("postgresql", PostgreSQLSchema)
register_dialect("postgres", PostgreSQLSchema)
register_dialect("sqlite", SQLiteSchema)

__all__ = [
    "MySQLSchema",
    "PostgreSQLSchema",
    "SQLiteSchema",
]
