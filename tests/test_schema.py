from __future__ import annotations

import json

import pytest

from configgen.errors import UnsupportedType
from configgen.options import ConfigOption
from configgen.schema import SchemaEntry, SchemaMetadata, build_properties, generate_schema_file, render_schema

OPTIONS = (
    ConfigOption("a", "desc a", "bool", "false"),
    ConfigOption("b", "desc b", "usize", "0"),
)


def test_build_properties_keeps_order_and_maps_types():
    properties = build_properties(OPTIONS)

    assert list(properties) == ["a", "b"]
    assert properties["a"] == SchemaEntry(description="desc a", type="boolean", default="false")
    assert properties["b"].type == "integer"


def test_build_properties_trims_fields():
    properties = build_properties([ConfigOption(" path ", " Lib path\n", " ?[]const u8", " null ")])

    assert properties == {"path": SchemaEntry(description="Lib path", type="string", default="null")}


def test_unsupported_type_aborts_whole_schema():
    options = OPTIONS + (ConfigOption("ratio", "A float", "f64", "0.5"),)

    with pytest.raises(UnsupportedType) as excinfo:
        build_properties(options)

    assert excinfo.value.token == "f64"


def test_render_schema_layout():
    text = render_schema(OPTIONS)

    assert text == (
        "{\n"
        '    "$schema": "http://json-schema.org/schema",\n'
        '    "title": "ZLS Config",\n'
        '    "description": "Configuration file for the zig language server (ZLS)",\n'
        '    "type": "object",\n'
        '    "properties": {\n'
        '        "a": {\n'
        '            "description": "desc a",\n'
        '            "type": "boolean",\n'
        '            "default": "false"\n'
        "        },\n"
        '        "b": {\n'
        '            "description": "desc b",\n'
        '            "type": "integer",\n'
        '            "default": "0"\n'
        "        }\n"
        "    }\n"
        "}\n"
    )


def test_render_schema_is_valid_json_with_ordered_properties():
    document = json.loads(render_schema(OPTIONS))

    assert list(document) == ["$schema", "title", "description", "type", "properties"]
    assert list(document["properties"]) == ["a", "b"]


def test_render_schema_without_options():
    document = json.loads(render_schema([]))

    assert document["properties"] == {}


def test_render_schema_custom_metadata():
    metadata = SchemaMetadata(title="My Config", description='Quoted "value"')

    document = json.loads(render_schema(OPTIONS, metadata))

    assert document["title"] == "My Config"
    assert document["description"] == 'Quoted "value"'


def test_generate_schema_file_leaves_target_untouched_on_unsupported_type(tmp_path):
    target = tmp_path / "schema.json"
    target.write_text("previous", encoding="utf-8")

    with pytest.raises(UnsupportedType):
        generate_schema_file([ConfigOption("ratio", "A float", "f64", "0.5")], target)

    assert target.read_text(encoding="utf-8") == "previous"


def test_generate_schema_file_overwrites(tmp_path):
    target = tmp_path / "schema.json"
    target.write_text("x" * 5000, encoding="utf-8")

    generate_schema_file(OPTIONS, target)

    assert target.read_text(encoding="utf-8") == render_schema(OPTIONS)
