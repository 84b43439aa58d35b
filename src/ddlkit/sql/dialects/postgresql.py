"""
PostgreSQL-specific schema builder.

Provides PostgreSQL syntax for column changes, renames and constraint
removal, and introspection through ``information_schema`` and the catalogs.
Only sequence-backed (``nextval``) columns are reported as primary keys.
"""

from typing import Any, Dict, List

from ddlkit.schema.base import BaseSchema
from ddlkit.schema.builders import render_type
from ddlkit.schema.core import ColumnDefinition, TypeMapping


class PostgreSQLSchema(BaseSchema):
    """PostgreSQL schema builder."""

    name = "postgresql"

    type_mappings = {
        "primaryKey": TypeMapping(name="SERIAL"),
        "string": TypeMapping(name="VARCHAR", limit=255),
        "text": TypeMapping(name="TEXT"),
        "integer": TypeMapping(name="INTEGER"),
        "bigint": TypeMapping(name="BIGINT"),
        "float": TypeMapping(name="FLOAT"),
        "decimal": TypeMapping(name="DECIMAL", precision=10, scale=0),
        "datetime": TypeMapping(name="TIMESTAMP"),
        "timestamp": TypeMapping(name="TIMESTAMP"),
        "time": TypeMapping(name="TIME"),
        "date": TypeMapping(name="DATE"),
        "binary": TypeMapping(name="BYTEA"),
        "boolean": TypeMapping(name="BOOLEAN"),
    }

    # information_schema.columns.udt_name spellings
    native_aliases = {
        "INT2": "INTEGER",
        "INT4": "INTEGER",
        "INT8": "BIGINT",
        "FLOAT4": "FLOAT",
        "FLOAT8": "FLOAT",
        "NUMERIC": "DECIMAL",
        "BOOL": "BOOLEAN",
        "TIMESTAMPTZ": "TIMESTAMP",
    }

    def change_column(self, table: str, name: str, column_type: str, **options: Any) -> str:
        """ALTER COLUMN ... TYPE, plus default and nullability changes when given."""
        column = ColumnDefinition.from_dict({**options, "name": name, "type": column_type})
        type_sql, column = render_type(column, self.type_mapper)

        parts = [f"ALTER COLUMN {name} TYPE {type_sql}"]
        default = None if column.default == "" else column.default
        if default is not None:
            parts.append(f"ALTER COLUMN {name} SET DEFAULT {self.column_value(default)}")
        elif column.null:
            parts.append(f"ALTER COLUMN {name} DROP DEFAULT")
        if column.null is True:
            parts.append(f"ALTER COLUMN {name} DROP NOT NULL")
        elif column.null is False:
            parts.append(f"ALTER COLUMN {name} SET NOT NULL")
        return f"ALTER TABLE {table} " + ", ".join(parts)

    def rename_column(self, table: str, old_name: str, new_name: str) -> str:
        return f"ALTER TABLE {table} RENAME COLUMN {old_name} TO {new_name}"

    def rename_table(self, old_name: str, new_name: str) -> str:
        return f"ALTER TABLE {old_name} RENAME TO {new_name}"

    def rename_index(self, table: str, old_name: str, new_name: str) -> str:
        return f"ALTER INDEX {old_name} RENAME TO {new_name}"

    def remove_index(self, table: str, name: str) -> str:
        return f"DROP INDEX {name}"

    def remove_foreign_key(self, from_table: str, constraint: str) -> str:
        return f"ALTER TABLE {from_table} DROP CONSTRAINT {constraint}"

    def show_create_table(self, table: str) -> str:
        """PostgreSQL has no SHOW CREATE TABLE; rebuild it from introspection."""
        statements = [self.create_table(table, self.schema(table))]
        statements.extend(
            self.add_index(table, index["column"], index["name"], unique=index["unique"])
            for index in self.indexes(table)
        )
        return ";\n".join(statements)

    def schema(self, table: str) -> Dict[str, Dict[str, Any]]:
        sql = """
            SELECT
                column_name,
                udt_name,
                character_maximum_length,
                numeric_precision,
                numeric_scale,
                is_nullable,
                column_default
            FROM information_schema.columns
            WHERE table_schema = current_schema()
            AND table_name = :table
            ORDER BY ordinal_position
        """
        result: Dict[str, Dict[str, Any]] = {}
        for row in self._fetch_all(sql, {"table": table}):
            default = row.get("column_default")
            if isinstance(default, str) and default.startswith("nextval("):
                result[row["column_name"]] = self._primary_key_info()
                continue

            args: List[int] = []
            if row.get("character_maximum_length"):
                args = [row["character_maximum_length"]]
            elif row["udt_name"] == "numeric" and row.get("numeric_precision"):
                args = [row["numeric_precision"], row.get("numeric_scale") or 0]

            result[row["column_name"]] = self._column_info(
                row["udt_name"],
                args,
                null=row.get("is_nullable") == "YES",
                default=default,
                key=False,
            )
        return result

    def indexes(self, table: str) -> List[Dict[str, Any]]:
        sql = """
            SELECT
                ic.relname AS index_name,
                ix.indisunique AS is_unique,
                a.attname AS column_name
            FROM pg_index ix
            JOIN pg_class t ON t.oid = ix.indrelid
            JOIN pg_class ic ON ic.oid = ix.indexrelid
            JOIN pg_namespace n ON n.oid = t.relnamespace
            JOIN LATERAL unnest(ix.indkey) WITH ORDINALITY AS k(attnum, ord) ON true
            JOIN pg_attribute a ON a.attrelid = t.oid AND a.attnum = k.attnum
            WHERE n.nspname = current_schema()
            AND t.relname = :table
            AND NOT ix.indisprimary
            ORDER BY ic.relname, k.ord
        """
        grouped: Dict[str, Dict[str, Any]] = {}
        for row in self._fetch_all(sql, {"table": table}):
            index = grouped.setdefault(
                row["index_name"],
                {"name": row["index_name"], "columns": [], "unique": bool(row["is_unique"])},
            )
            index["columns"].append(row["column_name"])
        return [
            self._index_info(index["name"], index["columns"], index["unique"])
            for index in grouped.values()
        ]

    def foreign_keys(self, table: str) -> List[Dict[str, Any]]:
        sql = """
            SELECT
                tc.constraint_name,
                kcu.column_name,
                ccu.table_name AS referenced_table_name,
                ccu.column_name AS referenced_column_name
            FROM information_schema.table_constraints AS tc
            JOIN information_schema.key_column_usage AS kcu
                ON tc.constraint_name = kcu.constraint_name
                AND tc.table_schema = kcu.table_schema
            JOIN information_schema.constraint_column_usage AS ccu
                ON ccu.constraint_name = tc.constraint_name
                AND ccu.table_schema = tc.table_schema
            WHERE tc.constraint_type = 'FOREIGN KEY'
            AND tc.table_schema = current_schema()
            AND tc.table_name = :table
            ORDER BY tc.constraint_name
        """
        return self._fetch_all(sql, {"table": table})
