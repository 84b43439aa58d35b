"""Logical-to-native column type resolution for one dialect."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .core import PRIMARY_KEY_TYPE, SIZE_ATTRIBUTES, ColumnDefinition, TypeMapping

_NATIVE_TYPE = re.compile(
    r"^\s*(?P<name>[A-Za-z][A-Za-z0-9_]*(?:\s+[A-Za-z][A-Za-z0-9_]*)*)\s*(?:\((?P<args>[^)]*)\))?"
)

# Numeric modifiers that do not change the logical type
_MODIFIERS = ("UNSIGNED", "SIGNED", "ZEROFILL")


def parse_native_type(native: str) -> Tuple[str, List[int]]:
    """Split a native type such as ``decimal(10,2) unsigned`` into name and args.

    Example:
        >>> parse_native_type("decimal(10,2) unsigned")
        ('DECIMAL', [10, 2])
        >>> parse_native_type("character varying")
        ('CHARACTER VARYING', [])
    """
    match = _NATIVE_TYPE.match(native or "")
    if not match:
        return (native or "").strip().upper(), []
    args: List[int] = []
    for arg in (match.group("args") or "").split(","):
        arg = arg.strip()
        if arg.isdigit():
            args.append(int(arg))
    words = [word for word in match.group("name").upper().split() if word not in _MODIFIERS]
    return " ".join(words), args


class TypeMapper:
    """
    Per-dialect registry of logical column types.

    Unknown logical types pass through untouched so dialect-specific raw
    types (``JSONB``, ``MEDIUMTEXT``...) can still be used.

    Args:
        mappings: logical type -> TypeMapping
        aliases: native spellings reported by the engine -> mapping name,
            used when reading column types back (e.g. ``INT4`` -> ``INTEGER``)
    """

    def __init__(
        self,
        mappings: Mapping[str, TypeMapping],
        aliases: Optional[Mapping[str, str]] = None,
    ):
        self._mappings: Dict[str, TypeMapping] = dict(mappings)
        self._aliases = {key.upper(): value.upper() for key, value in (aliases or {}).items()}

    def __contains__(self, logical_type: object) -> bool:
        return logical_type in self._mappings

    def resolve(self, logical_type: str) -> Optional[TypeMapping]:
        return self._mappings.get(logical_type)

    def strip_unsupported(self, column: ColumnDefinition, mapping: TypeMapping) -> ColumnDefinition:
        """Drop limit/precision/scale values the native type does not accept."""
        dropped = {
            attribute: None
            for attribute in SIZE_ATTRIBUTES
            if not mapping.supports(attribute) and getattr(column, attribute) is not None
        }
        return replace(column, **dropped) if dropped else column

    def apply(self, column: ColumnDefinition) -> Tuple[str, ColumnDefinition]:
        """Resolve a column's type and merge in the mapping's size defaults.

        Precedence: a value supplied by the caller wins, the mapping fills the
        gaps, and attributes the native type does not accept are dropped.

        Returns:
            (native type name, merged column). The name is upper-cased for
            mapped types and verbatim for pass-through types.
        """
        mapping = self.resolve(column.type)
        if mapping is None:
            return column.type, column

        column = self.strip_unsupported(column, mapping)
        defaults: Dict[str, Any] = {}
        if mapping.limit and not column.limit:
            defaults["limit"] = mapping.limit
        if mapping.precision is not None and column.precision is None:
            defaults["precision"] = mapping.precision
        if mapping.scale is not None and column.scale is None:
            defaults["scale"] = mapping.scale
        if defaults:
            column = replace(column, **defaults)
        return mapping.name.upper(), column

    def logical_type(self, native_name: str, args: Sequence[int] = ()) -> Dict[str, Any]:
        """Translate a native type reported by the engine back to attributes.

        Returns:
            dict with ``type``, ``limit``, ``precision`` and ``scale``. Types
            with no logical counterpart come back lower-cased as pass-through.
        """
        name = native_name.upper()
        name = self._aliases.get(name, name)
        candidates = [
            (logical, mapping)
            for logical, mapping in self._mappings.items()
            if logical != PRIMARY_KEY_TYPE and mapping.name.upper() == name
        ]

        attributes: Dict[str, Any] = {"type": name.lower(), "limit": None, "precision": None, "scale": None}
        if not candidates:
            if len(args) == 1:
                attributes["limit"] = args[0]
            elif len(args) >= 2:
                attributes["precision"], attributes["scale"] = args[0], args[1]
            return attributes

        logical, mapping = candidates[0]
        if args:
            # prefer the type whose default limit was reported, e.g. tinyint(1)
            for candidate, candidate_mapping in candidates:
                if candidate_mapping.limit == args[0]:
                    logical, mapping = candidate, candidate_mapping
                    break
        attributes["type"] = logical
        if mapping.supports("limit") and args:
            attributes["limit"] = args[0]
        elif mapping.supports("precision") and args:
            attributes["precision"] = args[0]
            if mapping.supports("scale") and len(args) > 1:
                attributes["scale"] = args[1]
        return attributes
