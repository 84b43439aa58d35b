"""
MySQL-specific schema builder.

Introspection relies on ``SHOW`` statements and ``information_schema``;
rename statements need MySQL 5.7+ (indexes) and 8.0+ (columns).
"""

from typing import Any, Dict, List

from ddlkit.schema.base import BaseSchema
from ddlkit.schema.core import TypeMapping
from ddlkit.schema.type_mapper import parse_native_type


class MySQLSchema(BaseSchema):
    """MySQL schema builder."""

    name = "mysql"

    type_mappings = {
        "primaryKey": TypeMapping(name="INT NOT NULL AUTO_INCREMENT"),
        "string": TypeMapping(name="VARCHAR", limit=255),
        "text": TypeMapping(name="TEXT"),
        "integer": TypeMapping(name="INT", limit=11),
        "bigint": TypeMapping(name="BIGINT", limit=20),
        "float": TypeMapping(name="FLOAT", precision=10, scale=0),
        "decimal": TypeMapping(name="DECIMAL", precision=10, scale=0),
        "datetime": TypeMapping(name="DATETIME"),
        "timestamp": TypeMapping(name="TIMESTAMP"),
        "time": TypeMapping(name="TIME"),
        "date": TypeMapping(name="DATE"),
        "binary": TypeMapping(name="BLOB"),
        "boolean": TypeMapping(name="TINYINT", limit=1),
    }

    native_aliases = {"INTEGER": "INT"}

    def change_column(self, table: str, name: str, column_type: str, **options: Any) -> str:
        definition = self.build_column({**options, "name": name, "type": column_type})
        return f"ALTER TABLE {table} MODIFY COLUMN {definition}"

    def rename_column(self, table: str, old_name: str, new_name: str) -> str:
        return f"ALTER TABLE {table} RENAME COLUMN {old_name} TO {new_name}"

    def rename_table(self, old_name: str, new_name: str) -> str:
        return f"RENAME TABLE {old_name} TO {new_name}"

    def rename_index(self, table: str, old_name: str, new_name: str) -> str:
        return f"ALTER TABLE {table} RENAME INDEX {old_name} TO {new_name}"

    def remove_index(self, table: str, name: str) -> str:
        return f"DROP INDEX {name} ON {table}"

    def show_create_table(self, table: str) -> str:
        row = self._fetch_row(f"SHOW CREATE TABLE {self.quote(table)}")
        return row.get("Create Table", "")

    def schema(self, table: str) -> Dict[str, Dict[str, Any]]:
        rows = self._fetch_all(f"SHOW FULL COLUMNS FROM {self.quote(table)}")
        result: Dict[str, Dict[str, Any]] = {}
        for row in rows:
            is_key = row.get("Key") == "PRI"
            if is_key and "auto_increment" in (row.get("Extra") or "").lower():
                result[row["Field"]] = self._primary_key_info()
                continue
            native_name, args = parse_native_type(row["Type"])
            result[row["Field"]] = self._column_info(
                native_name,
                args,
                null=row.get("Null") == "YES",
                default=row.get("Default"),
                key=is_key,
            )
        return result

    def indexes(self, table: str) -> List[Dict[str, Any]]:
        rows = self._fetch_all(f"SHOW INDEX FROM {self.quote(table)}")
        grouped: Dict[str, Dict[str, Any]] = {}
        for row in rows:
            name = row["Key_name"]
            if name == "PRIMARY":
                continue
            index = grouped.setdefault(
                name, {"name": name, "columns": [], "unique": not int(row["Non_unique"])}
            )
            index["columns"].append(row["Column_name"])
        return [
            self._index_info(index["name"], index["columns"], index["unique"])
            for index in grouped.values()
        ]

    def foreign_keys(self, table: str) -> List[Dict[str, Any]]:
        sql = """
            SELECT
                constraint_name AS constraint_name,
                column_name AS column_name,
                referenced_table_name AS referenced_table_name,
                referenced_column_name AS referenced_column_name
            FROM information_schema.key_column_usage
            WHERE table_schema = DATABASE()
            AND table_name = :table
            AND referenced_table_name IS NOT NULL
            ORDER BY constraint_name, ordinal_position
        """
        return self._fetch_all(sql, {"table": table})
