"""
Connection collaborator for schema introspection.

Schema builders never open connections themselves: they are handed an object
satisfying :class:`Connection` and issue one statement at a time through it.
:class:`SqlAlchemyConnection` is the stock implementation over a SQLAlchemy
``Engine``.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from sqlalchemy import Engine, create_engine, inspect, text

from ddlkit.config import get_settings
from ddlkit.utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Connection(Protocol):
    """Protocol for the database handle used by schema builders."""

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> None:
        """Run a statement, raising on failure. Result rows are kept for fetch."""
        ...

    def fetch(self) -> Dict[str, Any]:
        """First row of the last result, or an empty dict."""
        ...

    def fetch_all(self) -> List[Dict[str, Any]]:
        """All rows of the last result."""
        ...

    def tables(self) -> List[str]:
        """Names of the tables in the connected database."""
        ...


class SqlAlchemyConnection:
    """
    Connection backed by a SQLAlchemy Engine.

    Every ``execute`` runs in its own ``engine.begin()`` block, so DDL is
    committed immediately and rows are materialised as plain dicts before the
    underlying DBAPI connection goes back to the pool.

    Example:
        >>> conn = SqlAlchemyConnection.from_url("sqlite://")
        >>> conn.execute("SELECT 1 AS one")
        >>> conn.fetch()
        {'one': 1}
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._rows: List[Dict[str, Any]] = []

    @classmethod
    def from_url(cls, url: str, echo: Optional[bool] = None) -> "SqlAlchemyConnection":
        """Create a connection from a database URL.

        Args:
            url: SQLAlchemy database URL
            echo: Echo emitted SQL; defaults to the ``sql_echo`` setting
        """
        if echo is None:
            echo = get_settings().sql_echo
        return cls(create_engine(url, echo=echo))

    @property
    def dialect_name(self) -> str:
        """SQLAlchemy dialect name of the engine (mysql, postgresql, sqlite...)."""
        return self.engine.dialect.name

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> None:
        logger.debug("connection.execute", dialect=self.dialect_name, sql=sql)
        with self.engine.begin() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            if result.returns_rows:
                self._rows = [dict(row) for row in result.mappings()]
            else:
                self._rows = []

    def fetch(self) -> Dict[str, Any]:
        if self._rows:
            return self._rows[0]
        return {}

    def fetch_all(self) -> List[Dict[str, Any]]:
        return list(self._rows)

    def tables(self) -> List[str]:
        return inspect(self.engine).get_table_names()
