"""
Trick resolution: a played card captures the table pile when it shares
rank or suit with the top card. An empty pile is never captured.
"""
from __future__ import annotations

from typing import Sequence

from .deck import Card


def top_card(pile: Sequence[Card]) -> Card | None:
    """Last card on the pile, or None if the table is empty."""
    return pile[-1] if pile else None


def captures(played: Card, pile: Sequence[Card]) -> bool:
    """True if ``played`` wins the pile."""
    top = top_card(pile)
    if top is None:
        return False
    return played.matches(top)


def matching_cards(hand: Sequence[Card], top: Card | None) -> list[Card]:
    """Cards in ``hand`` that would capture a pile topped by ``top``."""
    if top is None:
        return []
    return [c for c in hand if c.matches(top)]
