"""Shared helpers to keep the README option table in sync."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import AnyStr, Sequence

from configgen.errors import SectionNotFound
from configgen.options import ConfigOption

START_MARKER = "<!-- DO NOT EDIT | THIS SECTION IS AUTO-GENERATED | DO NOT EDIT -->"
END_MARKER = "<!-- DO NOT EDIT -->"
logger = logging.getLogger(__name__)


def render_option_table(options: Sequence[ConfigOption]) -> str:
    lines = [
        "",
        "| Option | Type | Default value | What it Does |",
        "| --- | --- | --- | --- |",
    ]
    for option in options:
        row = option.trimmed()
        lines.append(f"| {row.name} | {row.type} | {row.default} | {row.description} |")
    return "\n".join(lines) + "\n"


def replace_section(
    text: AnyStr,
    payload: AnyStr,
    start_marker: AnyStr,
    end_marker: AnyStr,
) -> AnyStr:
    """Swap whatever sits between the two markers for ``payload``.

    Works on ``str`` and ``bytes`` alike. The end marker is searched only
    after the first start marker. Everything outside the markers is returned
    untouched.
    """
    start_index = text.find(start_marker)
    if start_index < 0:
        raise SectionNotFound(_marker_text(start_marker))
    start = start_index + len(start_marker)
    end = text.find(end_marker, start)
    if end < 0:
        raise SectionNotFound(_marker_text(end_marker))
    return text[:start] + payload + text[end:]


def render_readme(options: Sequence[ConfigOption], document: bytes) -> bytes:
    """Return ``document`` with its generated section rebuilt.

    The splice happens on raw bytes so the surrounding content does not need
    to be valid UTF-8.
    """
    return replace_section(
        document,
        render_option_table(options).encode("utf-8"),
        START_MARKER.encode("utf-8"),
        END_MARKER.encode("utf-8"),
    )


def update_readme_file(options: Sequence[ConfigOption], path: Path | str) -> None:
    """Rewrite the generated section of ``path`` in place.

    The document is only written once the new content is fully built, so a
    missing marker leaves the file as it was.
    """
    target = Path(path)
    with target.open("r+b") as handle:
        current = handle.read()
        try:
            updated = render_readme(options, current)
        except SectionNotFound as exc:
            raise SectionNotFound(exc.marker, target) from None
        handle.seek(0)
        handle.write(updated)
        handle.truncate()
    logger.info("Tableau README mis à jour", extra={"path": str(target), "count": len(options)})


def _marker_text(marker: str | bytes) -> str:
    if isinstance(marker, bytes):
        return marker.decode("utf-8", errors="replace")
    return marker
