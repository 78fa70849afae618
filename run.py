"""
Start an Indigo game in the terminal, bootstrapping a local ``.venv`` first.

Arguments are forwarded to ``indigo play``, e.g. ``python run.py --seed 7 --no-shuffle``.
"""
from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
VENV_DIR = ROOT / ".venv"
MARKER = "--inside-venv"


def _active_venv() -> bool:
    return sys.prefix != sys.base_prefix or "VIRTUAL_ENV" in os.environ


def _venv_python() -> Path:
    bindir = "Scripts" if os.name == "nt" else "bin"
    exe = "python.exe" if os.name == "nt" else "python"
    return VENV_DIR / bindir / exe


def _indigo_importable() -> bool:
    try:
        import indigo.cli  # noqa: F401
    except ImportError:
        return False
    return True


def _play_args() -> list[str]:
    return [a for a in sys.argv[1:] if a != MARKER]


def _relaunch_in_venv() -> None:
    if not VENV_DIR.exists():
        print(f"Creating {VENV_DIR} ...")
        subprocess.check_call([sys.executable, "-m", "venv", str(VENV_DIR)], cwd=str(ROOT))
    subprocess.check_call(
        [str(_venv_python()), str(ROOT / "run.py"), MARKER, *_play_args()],
        cwd=str(ROOT),
    )


def _play() -> None:
    if not _indigo_importable():
        print("Installing indigo-card-game (editable) ...")
        subprocess.check_call([sys.executable, "-m", "pip", "install", "-e", "."], cwd=str(ROOT))
    subprocess.check_call([sys.executable, "-m", "indigo.cli", "play", *_play_args()], cwd=str(ROOT))


def main() -> None:
    if MARKER in sys.argv or _active_venv():
        _play()
    else:
        _relaunch_in_venv()


if __name__ == "__main__":
    main()
