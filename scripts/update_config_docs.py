"""Synchronize the README option table with config.example.json."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from configgen.config_docs import update_readme_file  # noqa: E402
from configgen.options import load_options  # noqa: E402

EXAMPLE_OPTIONS = ROOT / "config.example.json"
DOC_TARGETS = [
    ROOT / "README.md",
]


def main() -> None:
    options = load_options(EXAMPLE_OPTIONS)
    for path in DOC_TARGETS:
        update_readme_file(options, path)


if __name__ == "__main__":
    main()
