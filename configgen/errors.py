"""Error types raised by the generation pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigGenError(RuntimeError):
    """Base class for every failure the generator reports to its caller."""


class ParseError(ConfigGenError):
    """Raised when the option document does not have the expected shape."""


class UnsupportedType(ConfigGenError):
    """Raised when an option type has no JSON schema counterpart."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Type non supporté: {token!r}")
        self.token = token


class SectionNotFound(ConfigGenError):
    """Raised when the generated section markers cannot be located."""

    def __init__(self, marker: str, path: Optional[Path] = None) -> None:
        location = f" dans {path}" if path is not None else ""
        super().__init__(f"Impossible de trouver la borne {marker!r}{location}")
        self.marker = marker
        self.path = path
