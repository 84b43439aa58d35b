"""Core schema definition types for ddlkit.

Columns, tables, indexes and foreign keys are described with plain dataclasses.
Callers may also hand in dicts (``{"type": "string", "limit": 50}``) or bare
type strings; ``ColumnDefinition.from_dict`` and ``expand_column`` turn those
into definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .exceptions import MissingFieldError

# Logical type rendered as the dialect's auto-incrementing primary key
PRIMARY_KEY_TYPE = "primaryKey"

# Column attributes a native type may or may not accept
SIZE_ATTRIBUTES = ("limit", "precision", "scale")


@dataclass(frozen=True)
class TypeMapping:
    """Native type for one logical type.

    An attribute left as None is not accepted by the native type; a value
    supplied for it on a column is dropped rather than emitted.
    """

    name: str
    limit: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None

    def supports(self, attribute: str) -> bool:
        return getattr(self, attribute) is not None


@dataclass(frozen=True)
class ColumnDefinition:
    """Definition of a single column."""

    name: str
    type: str
    limit: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    default: Any = None
    null: Optional[bool] = None
    key: Optional[bool] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise MissingFieldError("name")
        if not self.type:
            raise MissingFieldError("type")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColumnDefinition:
        """Build a definition from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        values.setdefault("name", None)
        values.setdefault("type", None)
        return cls(**values)


ColumnSpec = Union[ColumnDefinition, Mapping[str, Any], str]

# Ordered field name -> column spec; insertion order is column order
TableDefinition = Mapping[str, ColumnSpec]


def expand_column(name: str, spec: ColumnSpec) -> ColumnDefinition:
    """Expand a table entry (definition, dict or shorthand type) for a field."""
    if isinstance(spec, ColumnDefinition):
        return spec if spec.name == name else replace(spec, name=name)
    if isinstance(spec, str):
        return ColumnDefinition(name=name, type=spec)
    return ColumnDefinition.from_dict({**spec, "name": name})


@dataclass
class IndexDefinition:
    """Definition of a database index."""

    columns: Union[str, List[str]]
    unique: bool = False
    name: Optional[str] = None

    def column_names(self) -> List[str]:
        if isinstance(self.columns, str):
            return [self.columns]
        return list(self.columns)

    def resolved_name(self, table: str) -> str:
        return self.name or f"idx_{table}_{'_'.join(self.column_names())}"


@dataclass
class ForeignKeyDefinition:
    """Definition of a foreign key from a column to another table's key."""

    column: str
    to_table: str
    primary_key: str = "id"
    name: Optional[str] = None

    def resolved_name(self, from_table: str) -> str:
        return self.name or f"fk_{from_table}_{self.column}"


@dataclass
class TableBlueprint:
    """Complete declarative description of one table."""

    table: str
    columns: Dict[str, ColumnSpec] = field(default_factory=dict)
    indexes: List[IndexDefinition] = field(default_factory=list)
    foreign_keys: List[ForeignKeyDefinition] = field(default_factory=list)
    options: Optional[str] = None


def join_columns(columns: Union[str, Sequence[str]]) -> str:
    """Render one column or a column list for an index/constraint clause."""
    if isinstance(columns, str):
        return columns
    return ", ".join(columns)


__all__ = [
    "PRIMARY_KEY_TYPE",
    "SIZE_ATTRIBUTES",
    "TypeMapping",
    "ColumnDefinition",
    "ColumnSpec",
    "TableDefinition",
    "expand_column",
    "IndexDefinition",
    "ForeignKeyDefinition",
    "TableBlueprint",
    "join_columns",
]
