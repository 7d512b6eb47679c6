"""CLI entrypoint regenerating the config source, JSON schema and README table."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

from configgen.config_docs import render_readme, update_readme_file
from configgen.config_file import generate_config_file, render_config_file
from configgen.errors import ConfigGenError
from configgen.observability import configure_logging
from configgen.options import DEFAULT_OPTIONS_FILENAME, OptionList, load_options
from configgen.schema import generate_schema_file, render_schema

OPTIONS_ENV_VAR = "CONFIG_GEN_OPTIONS"
logger = logging.getLogger("configgen.app")


@dataclass(frozen=True)
class Stage:
    name: str
    path: Path
    generate: Callable[[OptionList, Path], None]
    render: Callable[[OptionList, Path], bytes]


def resolve_options_path(cli_value: str | None, env: Mapping[str, str]) -> Path:
    """Return the options path honoring CLI > env > default precedence."""
    if cli_value and cli_value.strip():
        return Path(cli_value).expanduser().resolve()
    if env_value := env.get(OPTIONS_ENV_VAR):
        return Path(env_value).expanduser().resolve()
    return Path(DEFAULT_OPTIONS_FILENAME).resolve()


def build_stages(config_path: Path, schema_path: Path, readme_path: Path) -> List[Stage]:
    return [
        Stage(
            "config",
            config_path,
            generate_config_file,
            lambda options, _path: render_config_file(options).encode("utf-8"),
        ),
        Stage(
            "schema",
            schema_path,
            generate_schema_file,
            lambda options, _path: render_schema(options).encode("utf-8"),
        ),
        Stage(
            "readme",
            readme_path,
            update_readme_file,
            lambda options, path: render_readme(options, path.read_bytes()),
        ),
    ]


def run_generate(options: OptionList, stages: Sequence[Stage]) -> int:
    for stage in stages:
        try:
            stage.generate(options, stage.path)
        except (ConfigGenError, OSError) as exc:
            _report_failure(stage.name, stage.path, exc)
            return 1

    logger.warning(
        "Si une nouvelle option doit être proposée par l'assistant de configuration, "
        "mettez aussi à jour l'assistant (src/setup.zig)"
    )
    logger.info(
        "Modifier les options peut aussi nécessiter de mettre à jour le package.json de "
        "l'extension zls-vscode (https://github.com/zigtools/zls-vscode/blob/master/package.json)"
    )
    return 0


def run_check(options: OptionList, stages: Sequence[Stage]) -> int:
    """Compare each artifact on disk with what would be generated, writing nothing."""
    stale = []
    for stage in stages:
        try:
            expected = stage.render(options, stage.path)
            current = stage.path.read_bytes() if stage.path.exists() else None
        except (ConfigGenError, OSError) as exc:
            _report_failure(stage.name, stage.path, exc)
            return 1
        if current != expected:
            logger.error("Artefact obsolète", extra={"stage": stage.name, "path": str(stage.path)})
            stale.append(stage.name)
    if stale:
        print(f"❌ Artefacts obsolètes : {', '.join(stale)} (relancez config-gen)")
        return 1
    print("✅ Artefacts à jour")
    return 0


def _report_failure(stage: str, path: Path, exc: BaseException) -> None:
    logger.error("Étape %s échouée pour %s: %s", stage, path, exc)
    print(f"❌ Étape {stage} échouée")
    print(f"  • Fichier : {path}")
    print(f"  • Raison  : {exc}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Génère Config.zig, schema.json et le tableau du README depuis la liste d'options",
    )
    parser.add_argument(
        "--options",
        default=None,
        help=f"Chemin du fichier d'options (défaut: --options ou {OPTIONS_ENV_VAR} ou {DEFAULT_OPTIONS_FILENAME})",
    )
    parser.add_argument("--log-level", default="INFO", help="Niveau de logs (défaut: INFO)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Vérifie que les artefacts sont à jour sans rien écrire",
    )
    parser.add_argument("config_path", help="Chemin du Config.zig généré")
    parser.add_argument("schema_path", help="Chemin du schema.json généré")
    parser.add_argument("readme_path", help="Chemin du README.md à mettre à jour")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, env: Optional[Mapping[str, str]] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    configure_logging(args.log_level)
    options_path = resolve_options_path(args.options, os.environ if env is None else env)

    try:
        options = load_options(options_path)
    except (ConfigGenError, OSError) as exc:
        _report_failure("load", options_path, exc)
        return 1
    logger.info("Options chargées", extra={"path": str(options_path), "count": len(options)})

    stages = build_stages(Path(args.config_path), Path(args.schema_path), Path(args.readme_path))
    if args.check:
        return run_check(options, stages)
    return run_generate(options, stages)


if __name__ == "__main__":
    sys.exit(main())
