"""CLI-level smoke tests."""
import io
import json
from pathlib import Path

import pytest
from rich.console import Console

from indigo import console as console_module
from indigo.cli import _cmd_simulate, build_parser, main
from indigo.console import ConsoleShell


class _Args:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def test_cli_simulate_writes_summary(tmp_path: Path):
    args = _Args(
        games=3,
        seed=0,
        opponent="random",
        no_alternate=False,
        output=str(tmp_path / "sim" / "summary.json"),
    )

    _cmd_simulate(args)

    out = tmp_path / "sim" / "summary.json"
    assert out.exists()
    assert json.loads(out.read_text(encoding="utf-8"))["summary"]["games"] == 3


def test_main_simulate(tmp_path: Path, capsys):
    out = tmp_path / "main.json"
    main(["--log-level", "WARNING", "simulate", "--games", "2", "--output", str(out)])
    assert out.exists()
    assert "Ties:" in capsys.readouterr().out


def test_parser_requires_command():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args([])
    args = parser.parse_args(["play", "--seed", "3", "--no-shuffle"])
    assert args.seed == 3
    assert args.no_shuffle is True


def _patch_shell(monkeypatch, lines):
    """Make the console module build shells that read ``lines`` and print into a buffer."""
    buf = io.StringIO()
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    def make_shell():
        return ConsoleShell(console=Console(file=buf, width=200), read=read)

    monkeypatch.setattr(console_module, "ConsoleShell", make_shell)
    return buf


def test_main_play_session(monkeypatch):
    buf = _patch_shell(monkeypatch, ["yes", "6", "exit"])
    main(["play", "--seed", "1", "--no-shuffle"])
    out = buf.getvalue()
    assert "Initial cards on the table: A♠ 2♠ 3♠ 4♠" in out
    assert "Player plays 10♠" in out
    assert "Player wins cards" in out
    assert out.rstrip().endswith("Game Over")


def test_main_deck_session(monkeypatch):
    buf = _patch_shell(monkeypatch, ["get", "3", "shuffle", "exit"])
    main(["deck"])
    out = buf.getvalue()
    assert "A♠ 2♠ 3♠" in out
    assert "Card deck is shuffled." in out
    assert out.rstrip().endswith("Bye")
