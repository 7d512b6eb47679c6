"""Default configuration source emitter."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from configgen.options import ConfigOption

HEADER = (
    "//! DO NOT EDIT\n"
    "//! Configuration options for zls.\n"
    "//! If you want to add a config option edit\n"
    "//! src/config_gen/config.json and run `config-gen`\n"
    "//! GENERATED BY config-gen\n"
)
TRAILER = "\n// DO NOT EDIT\n"
logger = logging.getLogger(__name__)


def render_config_file(options: Sequence[ConfigOption]) -> str:
    parts = [HEADER]
    for option in options:
        row = option.trimmed()
        # The type is copied as-is; only the schema restricts it.
        parts.append(f"\n/// {row.description}\n{row.name}: {row.type} = {row.default},\n")
    parts.append(TRAILER)
    return "".join(parts)


def generate_config_file(options: Sequence[ConfigOption], path: Path | str) -> None:
    """Overwrite ``path`` with the rendered defaults.

    The file is truncated before writing, so a failing write leaves it
    incomplete rather than holding the previous content.
    """
    target = Path(path)
    with target.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(render_config_file(options))
    logger.info("Config générée", extra={"path": str(target), "count": len(options)})
