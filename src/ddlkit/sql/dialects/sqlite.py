"""
SQLite-specific schema builder.

SQLite cannot alter column definitions, rename indexes or add/drop foreign
keys on an existing table; those operations raise
``UnsupportedOperationError``. Introspection goes through ``PRAGMA``
statements, which report no foreign key names, so names are synthesised as
``fk_<table>_<column>``.
"""

from typing import Any, Dict, List

from ddlkit.schema.base import BaseSchema
from ddlkit.schema.core import ForeignKeyDefinition, TypeMapping
from ddlkit.schema.type_mapper import parse_native_type


class SQLiteSchema(BaseSchema):
    """SQLite schema builder."""

    name = "sqlite"

    type_mappings = {
        # the trailing PRIMARY KEY (id) makes it the rowid alias
        "primaryKey": TypeMapping(name="INTEGER"),
        "string": TypeMapping(name="VARCHAR", limit=255),
        "text": TypeMapping(name="TEXT"),
        "integer": TypeMapping(name="INTEGER"),
        "bigint": TypeMapping(name="BIGINT"),
        "float": TypeMapping(name="FLOAT"),
        "decimal": TypeMapping(name="DECIMAL", precision=10, scale=0),
        "datetime": TypeMapping(name="DATETIME"),
        "timestamp": TypeMapping(name="TIMESTAMP"),
        "time": TypeMapping(name="TIME"),
        "date": TypeMapping(name="DATE"),
        "binary": TypeMapping(name="BLOB"),
        "boolean": TypeMapping(name="BOOLEAN"),
    }

    def change_column(self, table: str, name: str, column_type: str, **options: Any) -> str:
        raise self.unsupported("change_column", "SQLite cannot alter a column; rebuild the table")

    def rename_column(self, table: str, old_name: str, new_name: str) -> str:
        return f"ALTER TABLE {table} RENAME COLUMN {old_name} TO {new_name}"

    def rename_table(self, old_name: str, new_name: str) -> str:
        return f"ALTER TABLE {old_name} RENAME TO {new_name}"

    def rename_index(self, table: str, old_name: str, new_name: str) -> str:
        raise self.unsupported("rename_index", "drop and recreate the index instead")

    def remove_index(self, table: str, name: str) -> str:
        return f"DROP INDEX {name}"

    def add_foreign_key(
        self, from_table: str, to_table: str, *, name: str, column: str, primary_key: str = "id"
    ) -> str:
        raise self.unsupported("add_foreign_key", "foreign keys must be declared in CREATE TABLE")

    def remove_foreign_key(self, from_table: str, constraint: str) -> str:
        raise self.unsupported("remove_foreign_key", "foreign keys cannot be dropped from a table")

    def show_create_table(self, table: str) -> str:
        row = self._fetch_row(
            "SELECT sql FROM sqlite_master WHERE type = 'table' AND name = :table",
            {"table": table},
        )
        return (row or {}).get("sql") or ""

    def schema(self, table: str) -> Dict[str, Dict[str, Any]]:
        rows = self._fetch_all(f"PRAGMA table_info({self.quote(table)})")
        key_count = sum(1 for row in rows if row.get("pk"))
        result: Dict[str, Dict[str, Any]] = {}
        for row in rows:
            native_name, args = parse_native_type(row.get("type") or "")
            is_key = bool(row.get("pk"))
            # only a lone INTEGER PRIMARY KEY is the auto-incrementing rowid
            if is_key and key_count == 1 and native_name == "INTEGER":
                result[row["name"]] = self._primary_key_info()
                continue
            result[row["name"]] = self._column_info(
                native_name,
                args,
                null=not row.get("notnull"),
                default=row.get("dflt_value"),
                key=is_key,
            )
        return result

    def indexes(self, table: str) -> List[Dict[str, Any]]:
        result = []
        for index in self._fetch_all(f"PRAGMA index_list({self.quote(table)})"):
            name = index["name"]
            if index.get("origin") == "pk" or name.startswith("sqlite_autoindex"):
                continue
            columns = [
                row["name"]
                for row in sorted(
                    self._fetch_all(f"PRAGMA index_info({self.quote(name)})"),
                    key=lambda row: row["seqno"],
                )
            ]
            result.append(self._index_info(name, columns, bool(index.get("unique"))))
        return result

    def foreign_keys(self, table: str) -> List[Dict[str, Any]]:
        rows = self._fetch_all(f"PRAGMA foreign_key_list({self.quote(table)})")
        return [
            {
                "constraint_name": ForeignKeyDefinition(
                    column=row["from"], to_table=row["table"]
                ).resolved_name(table),
                "column_name": row["from"],
                "referenced_table_name": row["table"],
                "referenced_column_name": row["to"],
            }
            for row in rows
        ]
