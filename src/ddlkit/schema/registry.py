"""Dialect registry: maps engine names to schema builder classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Type

if TYPE_CHECKING:
    from ddlkit.sql.connection import Connection

    from .base import BaseSchema


_DIALECT_REGISTRY: Dict[str, Type["BaseSchema"]] = {}


def register_dialect(name: str, schema_cls: Type["BaseSchema"]) -> None:
    """Register a schema builder class under a dialect name."""
    if name in _DIALECT_REGISTRY:
        raise ValueError(
            f"Dialect '{name}' is already registered. "
            "Use a different name or unregister first."
        )
    _DIALECT_REGISTRY[name] = schema_cls


def unregister_dialect(name: str) -> None:
    _DIALECT_REGISTRY.pop(name, None)


def get_dialect(name: str) -> Type["BaseSchema"]:
    """Retrieve a schema builder class by dialect name."""
    if name not in _DIALECT_REGISTRY:
        available = list_dialects()
        raise KeyError(f"Dialect '{name}' not found in registry. Available: {available}")
    return _DIALECT_REGISTRY[name]


def list_dialects() -> List[str]:
    """List all registered dialect names."""
    return sorted(_DIALECT_REGISTRY.keys())


def create_schema(
    dialect: Optional[str] = None,
    connection: Optional["Connection"] = None,
    datasource: Optional[str] = None,
) -> "BaseSchema":
    """
    Instantiate the schema builder for a dialect.

    Args:
        dialect: Registered dialect name; inferred from
            ``connection.dialect_name`` when omitted
        connection: Connection used for introspection
        datasource: Datasource name recorded on the builder

    Raises:
        ValueError: If no dialect is given and none can be inferred
        KeyError: If the dialect is not registered
    """
    if dialect is None:
        dialect = getattr(connection, "dialect_name", None)
        if dialect is None:
            raise ValueError("A dialect name is required when the connection does not report one")
    return get_dialect(dialect)(connection=connection, datasource=datasource)


__all__ = [
    "register_dialect",
    "unregister_dialect",
    "get_dialect",
    "list_dialects",
    "create_schema",
]
