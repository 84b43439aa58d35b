"""
Column and CREATE TABLE statement assembly.

These functions are shared by every dialect; a dialect only contributes its
TypeMapper, its literal formatter and its column-name hook.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from ddlkit.sql.core.literals import UnsafeLiteralFormatter
from ddlkit.utils.logging import get_logger

from .core import PRIMARY_KEY_TYPE, ColumnDefinition, TableDefinition, expand_column
from .exceptions import UnsupportedOperationError
from .type_mapper import TypeMapper

logger = get_logger(__name__)

# create_table only renders precision/scale for these logical types
_PRECISION_TYPES = ("decimal", "float")


def _identity(name: str) -> str:
    return name


def render_type(column: ColumnDefinition, type_mapper: TypeMapper) -> Tuple[str, ColumnDefinition]:
    """Render ``TYPE``, ``TYPE(limit)`` or ``TYPE(precision,scale)`` for a column.

    Returns:
        (type fragment, column after the mapping's defaults were merged in)
    """
    native, column = type_mapper.apply(column)
    if column.limit:
        return f"{native}({column.limit})", column
    if column.precision:
        scale = "" if column.scale is None else column.scale
        return f"{native}({column.precision},{scale})", column
    return native, column


def default_clause(column: ColumnDefinition, literals: UnsafeLiteralFormatter) -> str:
    """Default/null clause for a column, with a leading space when non-empty.

    Exactly one of ``DEFAULT v NOT NULL``, ``DEFAULT v``, ``DEFAULT NULL`` or
    ``NOT NULL`` is chosen, in that order. An empty-string default counts as
    no default.
    """
    default = column.default
    if isinstance(default, str) and default == "":
        default = None

    if default is not None and column.null is False:
        return f" DEFAULT {literals.value(default)} NOT NULL"
    if default is not None:
        return f" DEFAULT {literals.value(default)}"
    if column.null:
        return " DEFAULT NULL"
    if column.null is False:
        return " NOT NULL"
    return ""


def build_column(
    column: Union[ColumnDefinition, Mapping[str, Any]],
    type_mapper: TypeMapper,
    literals: UnsafeLiteralFormatter,
    column_name: Callable[[str], str] = _identity,
) -> str:
    """
    Build the SQL fragment for one column definition.

    Args:
        column: ColumnDefinition or dict with ``name`` and ``type`` plus any of
            ``limit``, ``precision``, ``scale``, ``default``, ``null``
        type_mapper: Dialect type mapper
        literals: Formatter for default values
        column_name: Hook rendering the column name

    Returns:
        Fragment such as ``age INTEGER DEFAULT 0 NOT NULL`` (no trailing punctuation)

    Raises:
        MissingFieldError: If the name or type is missing
    """
    if not isinstance(column, ColumnDefinition):
        column = ColumnDefinition.from_dict(column)

    type_sql, column = render_type(column, type_mapper)
    return f"{column_name(column.name)} {type_sql}{default_clause(column, literals)}"


def create_table(
    table: str,
    columns: TableDefinition,
    type_mapper: TypeMapper,
    literals: UnsafeLiteralFormatter,
    options: Optional[str] = None,
    dialect: str = "",
) -> str:
    """
    Build a CREATE TABLE statement.

    Fields typed ``primaryKey`` or flagged with ``key`` are gathered, in
    declaration order, into one trailing ``PRIMARY KEY (...)`` clause.
    Defaults are always single-quoted here, unlike ``build_column``.

    Args:
        table: Table name
        columns: Ordered mapping of field name to definition, dict or bare type
        type_mapper: Dialect type mapper
        literals: Formatter whose ``quote`` renders default values
        options: Raw text appended after the closing parenthesis
            (``ENGINE=InnoDB``...), never validated
        dialect: Dialect name used in error messages

    Returns:
        CREATE TABLE statement
    """
    definitions = [expand_column(field, spec) for field, spec in columns.items()]
    primary_keys: List[str] = [column.name for column in definitions if column.key]

    lines: List[str] = []
    for column in definitions:
        if column.type == PRIMARY_KEY_TYPE:
            mapping = type_mapper.resolve(PRIMARY_KEY_TYPE)
            if mapping is None:
                raise UnsupportedOperationError(dialect or "dialect", "primaryKey columns")
            if column.name not in primary_keys:
                primary_keys.append(column.name)
            lines.append(f" {column.name} {mapping.name}")
            continue

        native, column = type_mapper.apply(column)
        output = f"{column.name} {native.upper()}"

        if column.limit:
            output += f"({column.limit})"
        elif column.type in _PRECISION_TYPES:
            if column.scale is not None:
                output += f"({column.precision},{column.scale})"
            elif column.precision is not None:
                output += f"({column.precision})"

        if column.default is not None:
            output += f" DEFAULT {literals.quote(column.default)}"

        if column.null is not None:
            output += " NULL" if column.null else " NOT NULL"

        lines.append(f" {output}")

    if primary_keys:
        lines.append(f" PRIMARY KEY ({','.join(primary_keys)})")

    suffix = f" {options}" if options else ""
    logger.debug(
        "schema.create_table.built",
        dialect=dialect,
        table=table,
        column_count=len(definitions),
        primary_keys=primary_keys,
    )
    return f"CREATE TABLE {table} (\n" + ",\n".join(lines) + f"\n){suffix}"
