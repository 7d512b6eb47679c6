"""Mapping between option type tokens and JSON schema types."""
from __future__ import annotations

from enum import Enum
from typing import Dict

from configgen.errors import UnsupportedType


class OptionType(str, Enum):
    OPTIONAL_STRING = "?[]const u8"
    BOOL = "bool"
    USIZE = "usize"

    @property
    def schema_type(self) -> str:
        return _SCHEMA_TYPES[self]


_SCHEMA_TYPES: Dict[OptionType, str] = {
    OptionType.OPTIONAL_STRING: "string",
    OptionType.BOOL: "boolean",
    OptionType.USIZE: "integer",
}

if set(_SCHEMA_TYPES) != set(OptionType):  # pragma: no cover - guards new enum members
    raise RuntimeError("Chaque OptionType doit avoir un type de schéma")


def parse_option_type(token: str) -> OptionType:
    """Return the enum member for ``token`` or raise :class:`UnsupportedType`."""
    try:
        return OptionType(token)
    except ValueError:
        raise UnsupportedType(token) from None


def to_schema_type(token: str) -> str:
    return parse_option_type(token).schema_type
