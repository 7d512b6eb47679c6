"""JSON schema emitter for editor integrations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Sequence

from configgen.options import ConfigOption
from configgen.ordered_json import Whitespace, dumps_object_map
from configgen.type_map import to_schema_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaMetadata:
    schema_uri: str = "http://json-schema.org/schema"
    title: str = "ZLS Config"
    description: str = "Configuration file for the zig language server (ZLS)"


@dataclass(frozen=True)
class SchemaEntry:
    description: str
    type: str
    default: str

    def to_mapping(self) -> Dict[str, str]:
        return {"description": self.description, "type": self.type, "default": self.default}


def build_properties(options: Sequence[ConfigOption]) -> Dict[str, SchemaEntry]:
    """Map option names to schema entries, keeping the input order.

    Raises :class:`~configgen.errors.UnsupportedType` on the first option
    whose type has no schema equivalent.
    """
    properties: Dict[str, SchemaEntry] = {}
    for option in options:
        row = option.trimmed()
        properties[row.name] = SchemaEntry(
            description=row.description,
            type=to_schema_type(row.type),
            default=row.default,
        )
    return properties


def render_schema(options: Sequence[ConfigOption], metadata: SchemaMetadata = SchemaMetadata()) -> str:
    properties = {name: entry.to_mapping() for name, entry in build_properties(options).items()}
    document = {
        "$schema": metadata.schema_uri,
        "title": metadata.title,
        "description": metadata.description,
        "type": "object",
        "properties": properties,
    }
    return dumps_object_map(document, Whitespace()) + "\n"


def generate_schema_file(
    options: Sequence[ConfigOption],
    path: Path | str,
    metadata: SchemaMetadata = SchemaMetadata(),
) -> None:
    target = Path(path)
    text = render_schema(options, metadata)
    with target.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    logger.info("Schéma généré", extra={"path": str(target), "count": len(options)})
