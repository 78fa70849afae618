"""
Command-line interface for Indigo.

Usage examples (after ``pip install -e .``):

    indigo play
    indigo play --seed 7 --no-shuffle
    indigo simulate --games 500 --opponent random --output runs/random.json
    indigo deck
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from .console import run_deck_tool, run_interactive
from .game import GameConfig
from .logging_utils import setup_logging
from .simulate import OPPONENTS, SimulationConfig, run_simulation, save_summary, summarize

logger = logging.getLogger(__name__)


def _add_play_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "play",
        help="Play a game against the computer in the terminal.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the shuffle and the computer's choices.",
    )
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Deal from the deck in canonical order.",
    )
    parser.set_defaults(func=_cmd_play)


def _cmd_play(args: argparse.Namespace) -> None:
    config = GameConfig(seed=args.seed, shuffle=not args.no_shuffle)
    result = run_interactive(config)
    if result is not None:
        logger.info("Interactive game ended: %s", result.outcome.value)


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play many computer-vs-computer games and report statistics.",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=100,
        help="Number of games to play.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for reproducibility.",
    )
    parser.add_argument(
        "--opponent",
        choices=OPPONENTS,
        default="computer",
        help="Policy for the second seat.",
    )
    parser.add_argument(
        "--no-alternate",
        action="store_true",
        help="Always let the first seat move first.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional JSON file for the summary.",
    )
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    cfg = SimulationConfig(
        games=args.games,
        seed=args.seed,
        opponent=args.opponent,
        alternate_first=not args.no_alternate,
    )
    results = run_simulation(cfg)
    summary = summarize(results)

    table = Table(title=f"Indigo: {summary['games']} games (seed {cfg.seed})")
    table.add_column("Seat", style="cyan")
    table.add_column("Score mean", justify="right")
    table.add_column("Score std", justify="right")
    table.add_column("Cards mean", justify="right")
    table.add_column("Win rate", justify="right")
    table.add_column("Bonus rate", justify="right")
    for i, name in enumerate(summary["names"]):
        table.add_row(
            name,
            f"{summary['score_mean'][i]:.2f}",
            f"{summary['score_std'][i]:.2f}",
            f"{summary['cards_mean'][i]:.2f}",
            f"{summary['win_rate'][i]:.1%}",
            f"{summary['bonus_rate'][i]:.1%}",
        )
    console = Console()
    console.print(table)
    console.print(f"Ties: {summary['tie_rate']:.1%}", highlight=False)

    if args.output:
        out_path = Path(args.output)
        save_summary(summary, out_path, cfg)
        console.print(f"Saved summary to {out_path.resolve()}", highlight=False)


def _add_deck_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "deck",
        help="Interactive deck tool: reset, shuffle and draw cards.",
    )
    parser.set_defaults(func=_cmd_deck)


def _cmd_deck(args: argparse.Namespace) -> None:
    run_deck_tool()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="indigo", description="Indigo card game.")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to $INDIGO_LOG_LEVEL or WARNING.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_play_parser(subparsers)
    _add_simulate_parser(subparsers)
    _add_deck_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
