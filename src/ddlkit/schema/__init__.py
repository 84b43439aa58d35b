"""Dialect-agnostic schema definitions and statement builders.

Concrete dialects live in ``ddlkit.sql.dialects`` and register themselves in
the dialect registry exposed here.
"""

from .base import BaseSchema
from .core import (
    PRIMARY_KEY_TYPE,
    ColumnDefinition,
    ForeignKeyDefinition,
    IndexDefinition,
    TableBlueprint,
    TableDefinition,
    TypeMapping,
)
from .ddl_generator import generate_table_ddl, generate_table_sql
from .exceptions import (
    ConnectionNotBoundError,
    MissingFieldError,
    SchemaError,
    UnsupportedOperationError,
)
from .registry import create_schema, get_dialect, list_dialects, register_dialect
from .type_mapper import TypeMapper, parse_native_type

__all__ = [
    "BaseSchema",
    "PRIMARY_KEY_TYPE",
    "ColumnDefinition",
    "ForeignKeyDefinition",
    "IndexDefinition",
    "TableBlueprint",
    "TableDefinition",
    "TypeMapping",
    "TypeMapper",
    "parse_native_type",
    "generate_table_ddl",
    "generate_table_sql",
    "SchemaError",
    "MissingFieldError",
    "UnsupportedOperationError",
    "ConnectionNotBoundError",
    "register_dialect",
    "get_dialect",
    "list_dialects",
    "create_schema",
]
