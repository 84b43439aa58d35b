"""
Unit tests for schema definition types.
"""

import pytest

from ddlkit.schema.core import (
    ColumnDefinition,
    ForeignKeyDefinition,
    IndexDefinition,
    TableBlueprint,
    TypeMapping,
    expand_column,
    join_columns,
)
from ddlkit.schema.exceptions import MissingFieldError, SchemaError


class TestColumnDefinition:
    """Tests for ColumnDefinition construction."""

    def test_missing_name_raises(self):
        """A column without a name is rejected before any SQL is built."""
        with pytest.raises(MissingFieldError) as exc_info:
            ColumnDefinition(name="", type="integer")
        assert exc_info.value.field == "name"
        assert str(exc_info.value) == "Column name not specified"

    def test_missing_type_raises(self):
        """A column without a type is rejected."""
        with pytest.raises(MissingFieldError) as exc_info:
            ColumnDefinition.from_dict({"name": "age"})
        assert exc_info.value.field == "type"

    def test_missing_field_is_value_error(self):
        """MissingFieldError can be caught as SchemaError or ValueError."""
        with pytest.raises(ValueError):
            ColumnDefinition.from_dict({"type": "string"})
        with pytest.raises(SchemaError):
            ColumnDefinition.from_dict({"type": "string"})

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys such as comments are dropped."""
        column = ColumnDefinition.from_dict(
            {"name": "age", "type": "integer", "comment": "years", "null": False}
        )
        assert column == ColumnDefinition(name="age", type="integer", null=False)

    def test_definition_is_frozen(self):
        """Definitions cannot be mutated after construction."""
        column = ColumnDefinition(name="age", type="integer")
        with pytest.raises(AttributeError):
            column.limit = 3  # type: ignore[misc]


class TestExpandColumn:
    """Tests for expanding table entries into definitions."""

    def test_string_shorthand(self):
        """A bare string is shorthand for the column type."""
        assert expand_column("title", "string") == ColumnDefinition(name="title", type="string")

    def test_dict_entry(self):
        column = expand_column("title", {"type": "string", "limit": 80})
        assert column.name == "title"
        assert column.limit == 80

    def test_field_name_wins_over_inner_name(self):
        """The table key decides the column name."""
        assert expand_column("title", {"name": "other", "type": "string"}).name == "title"
        definition = ColumnDefinition(name="other", type="string")
        assert expand_column("title", definition).name == "title"

    def test_definition_with_matching_name_returned_as_is(self):
        definition = ColumnDefinition(name="title", type="string")
        assert expand_column("title", definition) is definition


class TestTypeMapping:
    """Tests for TypeMapping attribute support."""

    def test_supports(self):
        mapping = TypeMapping(name="DECIMAL", precision=10, scale=0)
        assert mapping.supports("precision")
        assert mapping.supports("scale")
        assert not mapping.supports("limit")


class TestIndexAndForeignKeyDefinitions:
    """Tests for default index and constraint names."""

    def test_index_default_name_single_column(self):
        assert IndexDefinition("email").resolved_name("users") == "idx_users_email"

    def test_index_default_name_multi_column(self):
        index = IndexDefinition(["last_name", "first_name"])
        assert index.resolved_name("users") == "idx_users_last_name_first_name"

    def test_index_explicit_name(self):
        assert IndexDefinition("email", name="uq_email").resolved_name("users") == "uq_email"

    def test_foreign_key_defaults(self):
        foreign_key = ForeignKeyDefinition(column="user_id", to_table="users")
        assert foreign_key.primary_key == "id"
        assert foreign_key.resolved_name("posts") == "fk_posts_user_id"

    def test_blueprint_defaults(self):
        blueprint = TableBlueprint("users")
        assert blueprint.columns == {}
        assert blueprint.indexes == []
        assert blueprint.foreign_keys == []
        assert blueprint.options is None


class TestJoinColumns:
    """Tests for column list rendering."""

    def test_single(self):
        assert join_columns("email") == "email"

    def test_many(self):
        assert join_columns(["a", "b"]) == "a, b"
