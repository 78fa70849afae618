"""
Batch playouts between computer seats.

``run_simulation`` plays many seeded games and ``summarize`` aggregates them
with numpy. Seat 0 is always the heuristic ``ComputerAgent``; seat 1 is either
another ``ComputerAgent`` or the ``RandomAgent`` baseline. The first mover
alternates between games unless disabled.
"""
from __future__ import annotations

import json
import logging
import random
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from .agents import ComputerAgent, Policy, RandomAgent
from .game import GameConfig, GameOutcome, GameResult, play_one_game

logger = logging.getLogger(__name__)

OPPONENTS = ("computer", "random")


@dataclass
class SimulationConfig:
    """Configuration for a batch of computer-vs-computer games."""

    games: int = 100
    seed: int = 0
    opponent: str = "computer"  # "computer" | "random"
    alternate_first: bool = True


def _make_opponent(kind: str, rng: random.Random) -> Policy:
    if kind == "computer":
        return ComputerAgent(rng=rng)
    if kind == "random":
        return RandomAgent(rng=rng)
    raise ValueError(f"Unknown opponent {kind!r}; expected one of {', '.join(OPPONENTS)}")


def run_simulation(cfg: SimulationConfig) -> List[GameResult]:
    """Play ``cfg.games`` games; each game gets its own seed derived from ``cfg.seed``."""
    if cfg.games < 1:
        raise ValueError("games must be at least 1")
    master = random.Random(cfg.seed)
    names = ("Computer", "Random" if cfg.opponent == "random" else "Computer 2")
    results: List[GameResult] = []
    for i in range(cfg.games):
        game_seed = master.randrange(2**32)
        rng = random.Random(game_seed)
        first = i % 2 if cfg.alternate_first else 0
        policies = [ComputerAgent(rng=rng), _make_opponent(cfg.opponent, rng)]
        result = play_one_game(
            policies,
            config=GameConfig(seed=game_seed, first_player=first),
            names=names,
            rng=rng,
        )
        logger.debug("Game %d (seed %d): scores=%s cards=%s", i, game_seed, result.scores, result.cards_won)
        results.append(result)
    return results


def summarize(results: List[GameResult]) -> Dict[str, Any]:
    """Aggregate statistics over completed games (per seat)."""
    completed = [r for r in results if r.outcome is GameOutcome.COMPLETED]
    if not completed:
        raise ValueError("No completed games to summarize")
    scores = np.array([r.scores for r in completed], dtype=np.int64)
    cards = np.array([r.cards_won for r in completed], dtype=np.int64)
    bonus = np.array([r.bonus_to for r in completed], dtype=np.int64)
    diff = scores[:, 0] - scores[:, 1]

    return {
        "names": list(completed[0].names),
        "games": len(completed),
        "score_mean": scores.mean(axis=0).tolist(),
        "score_std": scores.std(axis=0).tolist(),
        "cards_mean": cards.mean(axis=0).tolist(),
        "win_rate": [float(np.mean(diff > 0)), float(np.mean(diff < 0))],
        "tie_rate": float(np.mean(diff == 0)),
        "bonus_rate": [float(np.mean(bonus == 0)), float(np.mean(bonus == 1))],
        "turns_mean": float(np.mean([r.turns for r in completed])),
    }


def save_summary(summary: Dict[str, Any], path: Path, cfg: SimulationConfig | None = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data: Dict[str, Any] = {"summary": summary}
    if cfg is not None:
        data["config"] = asdict(cfg)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


__all__ = ["OPPONENTS", "SimulationConfig", "run_simulation", "save_summary", "summarize"]
