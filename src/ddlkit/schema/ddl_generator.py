"""DDL SQL generation for table blueprints.

Combines the CREATE TABLE statement with the index and foreign-key statements
a blueprint declares, in the order they have to run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .core import TableBlueprint

if TYPE_CHECKING:
    from .base import BaseSchema


def generate_create_table_ddl(schema: "BaseSchema", blueprint: TableBlueprint) -> str:
    """Generate just the CREATE TABLE statement."""
    return schema.create_table(blueprint.table, blueprint.columns, options=blueprint.options)


def generate_indexes_ddl(schema: "BaseSchema", blueprint: TableBlueprint) -> List[str]:
    """Generate INDEX creation statements."""
    return [
        schema.add_index(
            blueprint.table,
            idx.columns,
            idx.resolved_name(blueprint.table),
            unique=idx.unique,
        )
        for idx in blueprint.indexes
    ]


def generate_foreign_keys_ddl(schema: "BaseSchema", blueprint: TableBlueprint) -> List[str]:
    """Generate foreign-key constraint statements."""
    return [
        schema.add_foreign_key(
            blueprint.table,
            fk.to_table,
            name=fk.resolved_name(blueprint.table),
            column=fk.column,
            primary_key=fk.primary_key,
        )
        for fk in blueprint.foreign_keys
    ]


def generate_table_ddl(schema: "BaseSchema", blueprint: TableBlueprint) -> List[str]:
    """All statements for a blueprint: table, then indexes, then foreign keys."""
    statements = [generate_create_table_ddl(schema, blueprint)]
    statements.extend(generate_indexes_ddl(schema, blueprint))
    statements.extend(generate_foreign_keys_ddl(schema, blueprint))
    return statements


def generate_table_sql(schema: "BaseSchema", blueprint: TableBlueprint) -> str:
    """Complete DDL script for a blueprint, statements separated by blank lines."""
    return ";\n\n".join(generate_table_ddl(schema, blueprint)) + ";"


__all__ = [
    "generate_create_table_ddl",
    "generate_indexes_ddl",
    "generate_foreign_keys_ddl",
    "generate_table_ddl",
    "generate_table_sql",
]
