"""
Per-player bookkeeping shared by human and computer seats: hand, captured
cards and running score.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .agents import Policy
from .deck import Card, Deck, cards_to_str, points_in_cards

HAND_SIZE = 6


@dataclass
class Player:
    """One seat at the table. ``policy`` decides which card to play."""

    name: str
    policy: Policy
    hand: list[Card] = field(default_factory=list)
    won: list[Card] = field(default_factory=list)
    score: int = 0

    @property
    def cards_won(self) -> int:
        return len(self.won)

    def hand_is_empty(self) -> bool:
        return not self.hand

    def refill_if_empty(self, deck: Deck) -> list[Card]:
        """
        Draw HAND_SIZE cards if the hand is empty. Returns the drawn cards
        (empty list when no refill was needed).
        """
        if self.hand:
            return []
        drawn = deck.draw(HAND_SIZE)
        self.hand.extend(drawn)
        return drawn

    def choose(self, top: Card | None) -> Card:
        """Ask the policy for a card; the hand is left untouched."""
        card = self.policy.choose_card(list(self.hand), top)
        if card not in self.hand:
            raise ValueError(f"{self.name} chose {card}, which is not in hand {cards_to_str(self.hand)}")
        return card

    def take_cards(self, cards: Sequence[Card]) -> None:
        """Add captured cards and their point value."""
        self.won.extend(cards)
        self.score += points_in_cards(cards)

    def __str__(self) -> str:
        return cards_to_str(self.hand)
