"""Indigo card game engine (human vs computer, one full deck playout)."""

__version__ = "0.1.0"

from .deck import (
    Card,
    Deck,
    DECK_SIZE,
    InsufficientSupply,
    InvalidRequest,
    Suit,
    make_deck_52,
    parse_card,
    parse_cards,
    points_in_cards,
)
from .play import captures, matching_cards, top_card
from .agents import ComputerAgent, GameAborted, HumanAgent, Policy, RandomAgent
from .players import HAND_SIZE, Player
from .scoring import FINAL_BONUS, TOTAL_POINTS, InvariantViolation, bonus_receiver
from .game import (
    GameConfig,
    GameEvent,
    GameOutcome,
    GameResult,
    GameState,
    TurnOutcome,
    new_game,
    play_one_game,
    play_turn,
    run_game,
)
