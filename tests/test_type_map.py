from __future__ import annotations

import pytest

from configgen.errors import UnsupportedType
from configgen.type_map import OptionType, parse_option_type, to_schema_type


@pytest.mark.parametrize(
    "token, expected",
    [
        ("?[]const u8", "string"),
        ("bool", "boolean"),
        ("usize", "integer"),
    ],
)
def test_known_types_map_to_schema_types(token, expected):
    assert to_schema_type(token) == expected


@pytest.mark.parametrize("token", ["f64", "u32", "[]const u8", " bool", ""])
def test_unknown_type_raises(token):
    with pytest.raises(UnsupportedType) as excinfo:
        to_schema_type(token)

    assert excinfo.value.token == token
    assert repr(token) in str(excinfo.value)


def test_every_option_type_has_schema_type():
    for member in OptionType:
        assert member.schema_type in {"string", "boolean", "integer"}


def test_parse_option_type_returns_enum_member():
    assert parse_option_type("usize") is OptionType.USIZE
