"""JSON writer for mappings whose key order must survive serialization."""
from __future__ import annotations

import io
import json
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, TextIO


@dataclass(frozen=True)
class Whitespace:
    indent_level: int = 0
    indent: str = "    "
    separator: bool = True

    def nested(self) -> Whitespace:
        return replace(self, indent_level=self.indent_level + 1)

    def output_indent(self, out: TextIO) -> None:
        out.write("\n")
        out.write(self.indent * self.indent_level)


def write_object_map(value: Mapping[str, Any], out: TextIO, whitespace: Optional[Whitespace] = None) -> None:
    """Write ``value`` as a JSON object, entries in insertion order.

    With ``whitespace`` set, each entry goes on its own line indented one
    level deeper than ``whitespace.indent_level`` and nested mappings recurse
    with that deeper level. Without it the output is compact.
    """
    out.write("{")
    child = whitespace.nested() if whitespace is not None else None
    field_output = False
    for key, item in value.items():
        if field_output:
            out.write(",")
        field_output = True
        if child is not None:
            child.output_indent(out)

        out.write(_encode(key))
        out.write(":")
        if child is not None and child.separator:
            out.write(" ")
        if isinstance(item, Mapping):
            write_object_map(item, out, child)
        else:
            out.write(_encode(item))
    if field_output and whitespace is not None:
        whitespace.output_indent(out)
    out.write("}")


def dumps_object_map(value: Mapping[str, Any], whitespace: Optional[Whitespace] = None) -> str:
    buffer = io.StringIO()
    write_object_map(value, buffer, whitespace)
    return buffer.getvalue()


def _encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
