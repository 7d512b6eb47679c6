"""Typed loader for the canonical list of configuration option descriptors."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from configgen.errors import ParseError

DEFAULT_OPTIONS_FILENAME = "config.json"
YAML_SUFFIXES = (".yaml", ".yml")
TRIM_CHARS = " \t\n\r"
REQUIRED_FIELDS = ("name", "description", "type", "default")
OPTIONAL_FIELDS = ("setup_question",)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigOption:
    name: str
    description: str
    type: str
    default: str
    # Reserved for the interactive setup; no emitter reads it.
    setup_question: Optional[str] = None

    def trimmed(self) -> ConfigOption:
        """Return a copy with the emitted fields stripped of surrounding whitespace."""
        return replace(
            self,
            name=self.name.strip(TRIM_CHARS),
            description=self.description.strip(TRIM_CHARS),
            type=self.type.strip(TRIM_CHARS),
            default=self.default.strip(TRIM_CHARS),
        )


OptionList = Tuple[ConfigOption, ...]


def load_options(path: Optional[Path | str] = None) -> OptionList:
    """Read the descriptor document at ``path`` and return its options in order."""
    options_path = Path(path or DEFAULT_OPTIONS_FILENAME)
    if not options_path.exists():
        raise ParseError(f"Le fichier d'options est introuvable: {options_path}")
    try:
        text = options_path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{options_path} n'est pas encodé en UTF-8: {exc}") from exc
    try:
        if options_path.suffix.lower() in YAML_SUFFIXES:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ParseError(f"Impossible de lire {options_path}: {exc}") from exc

    options = parse_options(raw)
    logger.debug("Options chargées", extra={"path": str(options_path), "count": len(options)})
    return options


def parse_options(data: Any) -> OptionList:
    """Validate an already decoded document and build the option tuple."""
    if not isinstance(data, dict):
        raise ParseError("Le document d'options doit contenir un objet en racine")
    _reject_unknown(data, ("options",), where="racine")
    if "options" not in data:
        raise ParseError("Clé obligatoire manquante: options")
    records = data["options"]
    if not isinstance(records, list):
        raise ParseError("La clé options doit contenir une liste")

    options: List[ConfigOption] = []
    seen: Dict[str, int] = {}
    for index, record in enumerate(records):
        option = _parse_record(index, record)
        name = option.name.strip(TRIM_CHARS)
        if not name:
            raise ParseError(f"options[{index}].name ne doit pas être vide")
        if name in seen:
            raise ParseError(f"options[{index}].name duplique options[{seen[name]}]: {name}")
        seen[name] = index
        options.append(option)
    return tuple(options)


def _parse_record(index: int, record: Any) -> ConfigOption:
    where = f"options[{index}]"
    if not isinstance(record, dict):
        raise ParseError(f"{where} doit être un objet")
    _reject_unknown(record, _field_names(), where=where)

    values: Dict[str, Optional[str]] = {}
    for key in REQUIRED_FIELDS:
        values[key] = _require_str(record, key, where=where)
    for key in OPTIONAL_FIELDS:
        values[key] = _optional_str(record, key, where=where)
    return ConfigOption(**values)  # type: ignore[arg-type]


def _require_str(record: Mapping[str, Any], key: str, *, where: str) -> str:
    if key not in record:
        raise ParseError(f"Clé obligatoire manquante: {where}.{key}")
    value = record[key]
    if not isinstance(value, str):
        raise ParseError(f"{where}.{key} doit être une chaîne (reçu {type(value).__name__})")
    _require_encodable(value, f"{where}.{key}")
    return value


def _optional_str(record: Mapping[str, Any], key: str, *, where: str) -> Optional[str]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ParseError(f"{where}.{key} doit être une chaîne ou null (reçu {type(value).__name__})")
    _require_encodable(value, f"{where}.{key}")
    return value


def _reject_unknown(section: Mapping[Any, Any], allowed: Tuple[str, ...], *, where: str) -> None:
    unknown = [str(key) for key in section if key not in allowed]
    if unknown:
        raise ParseError(f"Clés inconnues dans {where}: {', '.join(sorted(unknown))}")


def _field_names() -> Tuple[str, ...]:
    return tuple(field.name for field in fields(ConfigOption))


def _require_encodable(value: str, where: str) -> None:
    # Lone surrogates (e.g. a half "\ud83d" escape) cannot be written as UTF-8.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ParseError(f"{where} contient un caractère invalide: {exc.reason}") from exc
