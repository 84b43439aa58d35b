"""
ddlkit - Dialect-aware DDL builder and schema introspection.

Builds CREATE/ALTER/DROP statements from declarative column and table
definitions for MySQL, PostgreSQL and SQLite, and reads existing table
structure back through an injected connection.
"""

from .schema import (
    BaseSchema,
    ColumnDefinition,
    ForeignKeyDefinition,
    IndexDefinition,
    TableBlueprint,
    create_schema,
    generate_table_sql,
    get_dialect,
    list_dialects,
)
from .sql.connection import SqlAlchemyConnection
from .sql.dialects import MySQLSchema, PostgreSQLSchema, SQLiteSchema

__version__ = "0.1.0"

__all__ = [
    "BaseSchema",
    "ColumnDefinition",
    "ForeignKeyDefinition",
    "IndexDefinition",
    "TableBlueprint",
    "create_schema",
    "generate_table_sql",
    "get_dialect",
    "list_dialects",
    "SqlAlchemyConnection",
    "MySQLSchema",
    "PostgreSQLSchema",
    "SQLiteSchema",
]
