"""Pytest configuration: per-dialect schema builders and connection doubles.

``FakeConnection`` records every statement it is handed and replays canned
rows chosen by a SQL fragment, so introspection can be tested without a
database server. ``sqlite_connection`` is a real in-memory SQLite database
behind ``SqlAlchemyConnection``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import pytest

from ddlkit.config import get_settings
from ddlkit.sql.connection import SqlAlchemyConnection
from ddlkit.sql.dialects import MySQLSchema, PostgreSQLSchema, SQLiteSchema


class FakeConnection:
    """
    Connection double for introspection tests.

    Args:
        results: SQL fragment -> rows. The first fragment contained in an
            executed statement decides which rows the next fetch returns.
        tables: Names reported by ``tables()``
        dialect_name: Reported dialect, used by ``create_schema`` inference
    """

    def __init__(
        self,
        results: Optional[Mapping[str, List[Dict[str, Any]]]] = None,
        tables: Optional[List[str]] = None,
        dialect_name: Optional[str] = None,
    ):
        self.results = list((results or {}).items())
        self.executed: List[Tuple[str, Dict[str, Any]]] = []
        self._tables = list(tables or [])
        self._rows: List[Dict[str, Any]] = []
        if dialect_name is not None:
            self.dialect_name = dialect_name

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> None:
        self.executed.append((sql, dict(params or {})))
        self._rows = []
        for fragment, rows in self.results:
            if fragment in sql:
                self._rows = [dict(row) for row in rows]
                break

    def fetch(self) -> Dict[str, Any]:
        return self._rows[0] if self._rows else {}

    def fetch_all(self) -> List[Dict[str, Any]]:
        return list(self._rows)

    def tables(self) -> List[str]:
        return list(self._tables)

    @property
    def statements(self) -> List[str]:
        return [sql for sql, _ in self.executed]


@pytest.fixture
def fake_connection_factory():
    """Build a FakeConnection from canned results."""
    return FakeConnection


@pytest.fixture
def mysql_schema() -> MySQLSchema:
    return MySQLSchema()


@pytest.fixture
def postgres_schema() -> PostgreSQLSchema:
    return PostgreSQLSchema()


@pytest.fixture
def sqlite_schema() -> SQLiteSchema:
    return SQLiteSchema()


@pytest.fixture
def sqlite_connection() -> Iterator[SqlAlchemyConnection]:
    """In-memory SQLite database; one pooled connection keeps the data alive."""
    connection = SqlAlchemyConnection.from_url("sqlite://", echo=False)
    yield connection
    connection.engine.dispose()


@pytest.fixture
def clean_settings() -> Iterator[None]:
    """Reload settings from the environment before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
