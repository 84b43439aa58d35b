"""
Abstract schema builder shared by every dialect.

Known limitations:
- The length of a ``primaryKey`` column cannot be set.
- PostgreSQL primary keys are only detected for sequence-backed columns;
  spotting other key columns needs a second query against the constraints.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Union

from ddlkit.config import get_settings
from ddlkit.sql.connection import Connection
from ddlkit.sql.core.identifier import quote_identifier
from ddlkit.sql.core.literals import UnsafeLiteralFormatter
from ddlkit.utils.logging import get_logger

from . import alter, builders
from .core import PRIMARY_KEY_TYPE, ColumnDefinition, TableDefinition, TypeMapping
from .exceptions import ConnectionNotBoundError, UnsupportedOperationError
from .type_mapper import TypeMapper

logger = get_logger(__name__)

# 'abc'::character varying -> abc, 'abc' -> abc
_QUOTED_DEFAULT = re.compile(r"^'(?P<value>.*)'(?:::[\w\s]+)?$", re.DOTALL)


class BaseSchema(ABC):
    """
    Schema builder for one database dialect.

    Subclasses provide the dialect ``name``, its ``type_mappings`` table and
    implementations of the abstract introspection and alter methods. Every
    other statement is built by the shared code below.

    Attributes:
        datasource: Name of the datasource this builder describes. Informational;
            the connection itself is injected, never looked up by name.
        literals: Formatter for default values. Swap in
            ``EscapingLiteralFormatter`` to escape embedded quotes.

    Example:
        >>> from ddlkit.sql.dialects import PostgreSQLSchema
        >>> schema = PostgreSQLSchema()
        >>> schema.build_column({"name": "age", "type": "integer", "default": 0, "null": False})
        'age INTEGER DEFAULT 0 NOT NULL'
    """

    name: ClassVar[str] = ""
    type_mappings: ClassVar[Mapping[str, TypeMapping]] = {}
    native_aliases: ClassVar[Mapping[str, str]] = {}

    def __init__(
        self,
        connection: Optional[Connection] = None,
        datasource: Optional[str] = None,
        literals: Optional[UnsafeLiteralFormatter] = None,
    ):
        self.datasource = datasource or get_settings().default_datasource
        self._connection = connection
        self.type_mapper = TypeMapper(self.type_mappings, self.native_aliases)
        self.literals = literals or UnsafeLiteralFormatter()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(datasource={self.datasource!r})"

    # --- connection ---

    @property
    def connection(self) -> Connection:
        if self._connection is None:
            raise ConnectionNotBoundError(
                f"No connection bound to {self.name} schema for datasource '{self.datasource}'"
            )
        return self._connection

    def bind(self, connection: Connection) -> BaseSchema:
        """Bind (or replace) the connection used for introspection."""
        self._connection = connection
        return self

    def _fetch_row(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        connection = self.connection
        connection.execute(sql, params)
        return connection.fetch()

    def _fetch_all(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        connection = self.connection
        connection.execute(sql, params)
        return connection.fetch_all() or []

    def quote(self, identifier: str) -> str:
        """Quote an identifier for introspection statements."""
        return quote_identifier(identifier, dialect=self.name)

    def unsupported(self, operation: str, reason: Optional[str] = None) -> UnsupportedOperationError:
        logger.warning("schema.operation.unsupported", dialect=self.name, operation=operation)
        return UnsupportedOperationError(self.name, operation, reason)

    # --- column and table statements ---

    def column_name(self, name: str) -> str:
        """Render a column name inside a column fragment."""
        return name

    def column_value(self, value: Any) -> str:
        """Render a value as a SQL literal (NULL, bare integer or quoted text)."""
        return self.literals.value(value)

    def build_column(self, column: Union[ColumnDefinition, Mapping[str, Any]]) -> str:
        """Build the SQL fragment for one column definition."""
        return builders.build_column(column, self.type_mapper, self.literals, self.column_name)

    def create_table(self, table: str, columns: TableDefinition, options: Optional[str] = None) -> str:
        """Build a CREATE TABLE statement; ``options`` is appended verbatim."""
        return builders.create_table(
            table, columns, self.type_mapper, self.literals, options=options, dialect=self.name
        )

    def drop_table(self, table: str) -> str:
        return alter.drop_table(table)

    def add_column(self, table: str, name: str, column_type: str, **options: Any) -> str:
        """
        ALTER TABLE statement adding a column.

        Args:
            table: Table name
            name: Column name
            column_type: Logical type (string, text, integer, bigint, float,
                decimal, datetime, timestamp, time, date, binary, boolean) or a
                native type
            **options: limit, precision, scale, default, null
        """
        definition = self.build_column({**options, "name": name, "type": column_type})
        return alter.add_column(table, definition)

    def remove_column(self, table: str, column: str) -> str:
        return alter.remove_column(table, column)

    def remove_columns(self, table: str, columns: Sequence[str]) -> str:
        return alter.remove_columns(table, columns)

    def add_index(
        self, table: str, column: Union[str, Sequence[str]], name: str, unique: bool = False
    ) -> str:
        return alter.add_index(table, column, name, unique=unique)

    def add_foreign_key(
        self, from_table: str, to_table: str, *, name: str, column: str, primary_key: str = "id"
    ) -> str:
        return alter.add_foreign_key(from_table, to_table, name, column, primary_key)

    def remove_foreign_key(self, from_table: str, constraint: str) -> str:
        return alter.remove_foreign_key(from_table, constraint)

    def foreign_key_exists(
        self, table: str, column: Optional[str] = None, name: Optional[str] = None
    ) -> bool:
        """Check for a foreign key on ``table`` by column or by constraint name."""
        for foreign_key in self.foreign_keys(table):
            if column and foreign_key.get("column_name") == column:
                return True
            if name and foreign_key.get("constraint_name") == name:
                return True
        return False

    # --- derived introspection ---

    def tables(self) -> List[str]:
        return list(self.connection.tables())

    def table_exists(self, name: str) -> bool:
        return name in self.tables()

    def columns(self, table: str) -> List[str]:
        return list(self.schema(table).keys())

    def column_exists(self, table: str, column: str) -> bool:
        return column in self.columns(table)

    def _primary_key_info(self) -> Dict[str, Any]:
        """``schema()`` entry for an auto-incrementing primary key column."""
        return {
            "type": PRIMARY_KEY_TYPE,
            "limit": None,
            "precision": None,
            "scale": None,
            "default": None,
            "null": None,
            "key": True,
        }

    @staticmethod
    def _index_info(name: str, columns: Sequence[str], unique: bool) -> Dict[str, Any]:
        """``indexes()`` entry; single-column indexes report the column as a string."""
        column: Union[str, List[str]] = columns[0] if len(columns) == 1 else list(columns)
        return {"name": name, "column": column, "unique": unique}

    def _column_info(
        self,
        native_name: str,
        args: Sequence[int],
        null: bool,
        default: Any,
        key: bool,
    ) -> Dict[str, Any]:
        """Assemble one ``schema()`` entry from what the engine reported."""
        info = self.type_mapper.logical_type(native_name, args)
        info.update({"default": _unquote_default(default), "null": null, "key": key or None})
        return info

    # --- dialect specific ---

    @abstractmethod
    def schema(self, table: str) -> Dict[str, Dict[str, Any]]:
        """Column name -> attributes (type, limit, precision, scale, default, null, key)."""

    @abstractmethod
    def indexes(self, table: str) -> List[Dict[str, Any]]:
        """Indexes on a table as ``{"name", "column", "unique"}`` dicts."""

    @abstractmethod
    def foreign_keys(self, table: str) -> List[Dict[str, Any]]:
        """Foreign keys as ``{"constraint_name", "column_name", ...}`` dicts."""

    @abstractmethod
    def show_create_table(self, table: str) -> str:
        """The CREATE TABLE statement of an existing table."""

    @abstractmethod
    def change_column(self, table: str, name: str, column_type: str, **options: Any) -> str:
        """Statement changing a column to a new definition."""

    @abstractmethod
    def rename_column(self, table: str, old_name: str, new_name: str) -> str:
        ...

    @abstractmethod
    def rename_table(self, old_name: str, new_name: str) -> str:
        ...

    @abstractmethod
    def rename_index(self, table: str, old_name: str, new_name: str) -> str:
        ...

    @abstractmethod
    def remove_index(self, table: str, name: str) -> str:
        ...


def _unquote_default(default: Any) -> Any:
    """Strip the quoting/casts engines put around reported column defaults."""
    if not isinstance(default, str):
        return default
    match = _QUOTED_DEFAULT.match(default)
    if match:
        return match.group("value").replace("''", "'")
    return default
