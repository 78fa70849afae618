"""
Indigo deck: 52 cards (4 suits × 13 ranks).
Point cards are A, 10, J, Q, K (1 point each, 20 in the deck).
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence

logger = logging.getLogger(__name__)


class Suit(IntEnum):
    """Spades, Hearts, Diamonds, Clubs. Order used for the canonical deck."""
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def symbol(self) -> str:
        return "♠♥♦♣"[self]


RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
POINT_RANKS = frozenset({"A", "10", "J", "Q", "K"})

DECK_SIZE = 52


class InvalidRequest(ValueError):
    """Draw count outside [1, DECK_SIZE]."""

    def __init__(self, message: str = "Invalid number of cards.") -> None:
        super().__init__(message)


class InsufficientSupply(ValueError):
    """Draw count larger than what is left in the deck."""

    def __init__(
        self, message: str = "The remaining cards are insufficient to meet the request."
    ) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Card:
    """A single card, identified by (rank, suit)."""

    rank: str  # "A", "2".."10", "J", "Q", "K"
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Unknown rank: {self.rank!r}")

    @property
    def point_value(self) -> int:
        return 1 if self.rank in POINT_RANKS else 0

    def matches(self, other: Card) -> bool:
        """True if both cards share rank or suit."""
        return self.rank == other.rank or self.suit == other.suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.symbol}"

    def __repr__(self) -> str:
        return str(self)


def parse_card(token: str) -> Card:
    """Parse a ``<rank><suit-symbol>`` token such as ``"10♥"``."""
    token = token.strip()
    if len(token) < 2:
        raise ValueError(f"Not a card token: {token!r}")
    rank, symbol = token[:-1], token[-1]
    for suit in Suit:
        if suit.symbol == symbol:
            return Card(rank, suit)
    raise ValueError(f"Unknown suit symbol in {token!r}")


def parse_cards(text: str) -> list[Card]:
    """Parse space-joined card tokens, e.g. ``"2♠ 2♥ 3♦"``."""
    return [parse_card(t) for t in text.split()]


def cards_to_str(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)


def points_in_cards(cards: Iterable[Card]) -> int:
    """Total point value of a set of cards (20 for the full deck)."""
    return sum(c.point_value for c in cards)


def make_deck_52() -> list[Card]:
    """Build the full 52-card deck in canonical order (suit by suit, A..K)."""
    deck: list[Card] = []
    for s in Suit:
        for rank in RANKS:
            deck.append(Card(rank, s))
    return deck


class Deck:
    """
    Ordered pool of undealt cards.

    ``draw`` takes from the front of the current order; ``shuffle`` reorders
    whatever is still in the deck. The ``rng`` is injectable so games can be
    replayed from a seed.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        cards: Sequence[Card] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card] = list(cards) if cards is not None else make_deck_52()

    def reset(self) -> None:
        """Restore the full deck in canonical order."""
        self._cards = make_deck_52()

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def draw(self, n: int) -> list[Card]:
        """Remove and return the first ``n`` cards."""
        if not 1 <= n <= DECK_SIZE:
            raise InvalidRequest()
        if n > len(self._cards):
            raise InsufficientSupply()
        drawn = self._cards[:n]
        del self._cards[:n]
        logger.debug("Drew %d card(s): %s (%d left)", n, cards_to_str(drawn), len(self._cards))
        return drawn

    def put_back(self, cards: Sequence[Card]) -> None:
        """Return previously drawn cards to the front, in their drawn order."""
        self._cards[:0] = list(cards)

    def cards(self) -> list[Card]:
        return list(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    @property
    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return cards_to_str(self._cards)


__all__ = [
    "Card",
    "Deck",
    "DECK_SIZE",
    "InsufficientSupply",
    "InvalidRequest",
    "POINT_RANKS",
    "RANKS",
    "Suit",
    "cards_to_str",
    "make_deck_52",
    "parse_card",
    "parse_cards",
    "points_in_cards",
]
