"""Run the pytest suite from the project root, installing ``.[dev]`` when something is missing."""
from __future__ import annotations

import importlib.util
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
REQUIRED = ("pytest", "numpy", "rich", "indigo")


def _missing() -> list[str]:
    return [name for name in REQUIRED if importlib.util.find_spec(name) is None]


def main() -> None:
    missing = _missing()
    if missing:
        print(f"Missing {', '.join(missing)}; installing .[dev] ...")
        subprocess.check_call([sys.executable, "-m", "pip", "install", "-e", ".[dev]"], cwd=str(ROOT))
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", *sys.argv[1:]], cwd=str(ROOT)))


if __name__ == "__main__":
    main()
