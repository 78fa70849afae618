"""
End-of-game settlement and score invariants.
Card points total 20; the final bonus of 3 brings the game total to 23.
"""
from __future__ import annotations

from typing import Sequence

from .deck import DECK_SIZE, Deck, Card
from .players import Player

FINAL_BONUS = 3
TOTAL_POINTS = 23


class InvariantViolation(RuntimeError):
    """Card or score totals do not add up; the engine itself is at fault."""


def bonus_receiver(first: Player, second: Player) -> Player:
    """Player with strictly more cards won; ties go to ``first`` (who moved first)."""
    if second.cards_won > first.cards_won:
        return second
    return first


def cards_in_play(deck: Deck, players: Sequence[Player], pile: Sequence[Card]) -> int:
    return len(deck) + len(pile) + sum(len(p.hand) + p.cards_won for p in players)


def check_conservation(deck: Deck, players: Sequence[Player], pile: Sequence[Card]) -> None:
    total = cards_in_play(deck, players, pile)
    if total != DECK_SIZE:
        raise InvariantViolation(f"{total} cards accounted for, expected {DECK_SIZE}")


def check_final_invariants(players: Sequence[Player]) -> None:
    score = sum(p.score for p in players)
    cards = sum(p.cards_won for p in players)
    if score != TOTAL_POINTS:
        raise InvariantViolation(f"Total score {score}, expected {TOTAL_POINTS}")
    if cards != DECK_SIZE:
        raise InvariantViolation(f"Total cards won {cards}, expected {DECK_SIZE}")


def score_lines(players: Sequence[Player]) -> str:
    """Two-line running summary, e.g. ``Score: Player 3 - Computer 5``."""
    score = " - ".join(f"{p.name} {p.score}" for p in players)
    cards = " - ".join(f"{p.name} {p.cards_won}" for p in players)
    return f"Score: {score}\nCards: {cards}"
