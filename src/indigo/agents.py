"""
Card-selection policies.

The ``Policy`` protocol is the contract used by the game loop:
``choose_card(hand, top_card) -> card``. The returned card must be one of the
cards in ``hand``; the caller removes it from the player's hand afterwards.

- ``ComputerAgent``: tiered heuristic (capture if possible, keep the hand
  flexible by shedding cards from redundant suits, then redundant ranks).
- ``RandomAgent``: uniform baseline, useful for simulations.
- ``HumanAgent``: defers to an input callback (the console shell).
"""
from __future__ import annotations

import logging
import random
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Protocol, Sequence

from .deck import Card, cards_to_str
from .play import matching_cards

logger = logging.getLogger(__name__)


class GameAborted(Exception):
    """The human player asked to quit."""


class Policy(Protocol):
    """Decision policy for one seat."""

    def choose_card(self, hand: Sequence[Card], top_card: Card | None) -> Card:
        """Pick a card from ``hand`` given the current top card (None if the table is empty)."""


def _cards_in_redundant_groups(cards: Sequence[Card], key: Callable[[Card], Hashable]) -> List[Card]:
    """Cards whose ``key`` (suit or rank) occurs more than once in ``cards``."""
    groups: dict[Hashable, list[Card]] = defaultdict(list)
    for c in cards:
        groups[key(c)].append(c)
    return [c for group in groups.values() if len(group) > 1 for c in group]


@dataclass
class ComputerAgent:
    """
    Heuristic opponent.

    Usage:
        agent = ComputerAgent(seed=42)
        card = agent.choose_card(hand, top_card)

    Pass ``rng`` to share one random source with the rest of the game.
    """

    seed: int | None = None
    rng: random.Random | None = None

    def __post_init__(self) -> None:
        self._rng = self.rng if self.rng is not None else random.Random(self.seed)

    def choose_card(self, hand: Sequence[Card], top_card: Card | None) -> Card:
        if not hand:
            raise ValueError("ComputerAgent cannot play from an empty hand")
        if len(hand) == 1:
            return hand[0]

        candidates = matching_cards(hand, top_card)
        if top_card is None or not candidates:
            logger.debug("No capture available, choosing from hand %s", cards_to_str(hand))
            return self.pick_from(hand)
        if len(candidates) == 1:
            logger.debug("Single capturing card %s", candidates[0])
            return candidates[0]
        logger.debug("Choosing among capturing cards %s", cards_to_str(candidates))
        return self.pick_from(candidates)

    def pick_from(self, cards: Sequence[Card]) -> Card:
        """
        Tie-break over ``cards``: prefer cards from a suit that appears more
        than once, then cards from a repeated rank, else any card.
        """
        same_suit = _cards_in_redundant_groups(cards, lambda c: c.suit)
        if same_suit:
            return self._rng.choice(same_suit)
        same_rank = _cards_in_redundant_groups(cards, lambda c: c.rank)
        if same_rank:
            return self._rng.choice(same_rank)
        return self._rng.choice(list(cards))


@dataclass
class RandomAgent:
    """Baseline policy that plays a uniformly random card from hand."""

    seed: int | None = None
    rng: random.Random | None = None

    def __post_init__(self) -> None:
        self._rng = self.rng if self.rng is not None else random.Random(self.seed)

    def choose_card(self, hand: Sequence[Card], top_card: Card | None) -> Card:
        if not hand:
            raise ValueError("No cards available for RandomAgent")
        return self._rng.choice(list(hand))


# Returns a 1-based index into the hand, or None to quit the game.
AskIndex = Callable[[Sequence[Card]], Optional[int]]


@dataclass
class HumanAgent:
    """Policy backed by an interactive input channel."""

    ask_index: AskIndex

    def choose_card(self, hand: Sequence[Card], top_card: Card | None) -> Card:
        index = self.ask_index(hand)
        if index is None:
            raise GameAborted("Player quit the game")
        if not 1 <= index <= len(hand):
            raise ValueError(f"Card index {index} out of range 1-{len(hand)}")
        return hand[index - 1]


__all__ = ["AskIndex", "ComputerAgent", "GameAborted", "HumanAgent", "Policy", "RandomAgent"]
