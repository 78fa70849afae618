"""
Game orchestration: deal → alternate turns → settle.

Two seats play until the deck and both hands are exhausted. The loop is
driven by ``play_turn``, which returns a ``TurnOutcome`` so callers can step
through a game one turn at a time; ``run_game`` loops until a terminal outcome.
Everything the shell needs to render is emitted as ``GameEvent`` values.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence, Tuple

from .agents import GameAborted, Policy
from .deck import Card, Deck, cards_to_str
from .play import captures, top_card
from .players import HAND_SIZE, Player
from .scoring import (
    FINAL_BONUS,
    bonus_receiver,
    check_conservation,
    check_final_invariants,
    score_lines,
)

logger = logging.getLogger(__name__)

INITIAL_TABLE_CARDS = 4
DEFAULT_NAMES = ("Player", "Computer")


@dataclass
class GameConfig:
    """Settings for a single game."""

    seed: int | None = None
    shuffle: bool = True
    first_player: int = 0  # index into the seats; 0 = first seat (the human in a console game)
    check_invariants: bool = True


class TurnOutcome(Enum):
    PLAYED = "played"  # card added to the pile
    CAPTURED = "captured"  # pile won
    FINISHED = "finished"  # last card played, game settled
    ABORTED = "aborted"  # human quit, nothing committed for this turn


class GameOutcome(Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class GameEvent:
    """Something the shell should render. ``player`` is set for per-seat events."""

    kind: str  # initial_table | table | hand | play | capture | score | game_over
    text: str
    player: str | None = None


EventSink = Callable[[GameEvent], None]


def _ignore(event: GameEvent) -> None:
    pass


@dataclass
class GameResult:
    outcome: GameOutcome
    names: Tuple[str, ...]
    scores: Tuple[int, ...]
    cards_won: Tuple[int, ...]
    first_player: int
    turns: int
    bonus_to: int | None = None  # seat index that received the final bonus

    @property
    def winner(self) -> int | None:
        """Seat with the higher score, None on a tie or an aborted game."""
        if self.outcome is not GameOutcome.COMPLETED or self.scores[0] == self.scores[1]:
            return None
        return 0 if self.scores[0] > self.scores[1] else 1


class GameState:
    """Mutable state for one game: deck, table pile, both seats, turn pointer."""

    def __init__(
        self,
        deck: Deck,
        players: Sequence[Player],
        first_player: int = 0,
        emit: EventSink | None = None,
        check_invariants: bool = True,
    ) -> None:
        if len(players) != 2:
            raise ValueError("Indigo is played by exactly two players")
        if first_player not in (0, 1):
            raise ValueError(f"Invalid first player index {first_player}")
        self.deck = deck
        self.players: List[Player] = list(players)
        self.pile: List[Card] = []
        self.first_player = first_player
        self.active = first_player
        # Leftover cards go to the first mover if nobody ever captures.
        self.last_winner = first_player
        self.turns = 0
        self.bonus_to: int | None = None
        self.finished = False
        self.check_invariants = check_invariants
        self._emit = emit or _ignore

    def emit(self, kind: str, text: str, player: str | None = None) -> None:
        self._emit(GameEvent(kind=kind, text=text, player=player))

    def current_player(self) -> Player:
        return self.players[self.active]

    def top_card(self) -> Card | None:
        return top_card(self.pile)

    def all_cards_played(self) -> bool:
        return self.deck.is_empty() and all(p.hand_is_empty() for p in self.players)

    def table_text(self) -> str:
        if not self.pile:
            return "No cards on the table"
        return f"{len(self.pile)} cards on the table, and the top card is {self.pile[-1]}"

    def result(self, outcome: GameOutcome) -> GameResult:
        return GameResult(
            outcome=outcome,
            names=tuple(p.name for p in self.players),
            scores=tuple(p.score for p in self.players),
            cards_won=tuple(p.cards_won for p in self.players),
            first_player=self.first_player,
            turns=self.turns,
            bonus_to=self.bonus_to,
        )


def deal_initial(state: GameState, shuffle: bool = True) -> None:
    """Shuffle, put 4 cards on the table, then 6 cards to each seat in seat order."""
    if shuffle:
        state.deck.shuffle()
    state.pile.extend(state.deck.draw(INITIAL_TABLE_CARDS))
    state.emit("initial_table", f"Initial cards on the table: {cards_to_str(state.pile)}")
    state.emit("table", state.table_text())
    for player in state.players:
        player.hand.extend(state.deck.draw(HAND_SIZE))
    if state.check_invariants:
        check_conservation(state.deck, state.players, state.pile)


def settle(state: GameState) -> None:
    """Give leftover table cards to the last winner, award the bonus, check totals."""
    if state.finished:
        raise RuntimeError("Game already settled")
    last_winner = state.players[state.last_winner]
    leftover = list(state.pile)
    last_winner.take_cards(leftover)
    state.pile.clear()
    logger.info("%s takes %d leftover card(s)", last_winner.name, len(leftover))

    first = state.first_player
    receiver = bonus_receiver(state.players[first], state.players[1 - first])
    receiver.score += FINAL_BONUS
    state.bonus_to = first if receiver is state.players[first] else 1 - first
    logger.info("%s receives the final %d points", receiver.name, FINAL_BONUS)

    if state.check_invariants:
        check_final_invariants(state.players)
    state.finished = True
    state.emit("score", score_lines(state.players))


def play_turn(state: GameState) -> TurnOutcome:
    """Play one turn for the active seat and advance to the other seat."""
    if state.finished:
        raise RuntimeError("Game is over")
    player = state.current_player()
    refilled = player.refill_if_empty(state.deck)
    top = state.top_card()
    state.emit("hand", str(player), player=player.name)

    try:
        card = player.choose(top)
    except GameAborted:
        # Undo the refill so the aborted turn leaves no trace.
        if refilled:
            del player.hand[:]
            state.deck.put_back(refilled)
        logger.info("%s quit on turn %d", player.name, state.turns + 1)
        return TurnOutcome.ABORTED

    player.hand.remove(card)
    state.turns += 1
    state.emit("play", f"{player.name} plays {card}", player=player.name)
    logger.debug("Turn %d: %s plays %s on %s", state.turns, player.name, card, top)

    if captures(card, state.pile):
        player.take_cards([*state.pile, card])
        state.pile.clear()
        state.last_winner = state.active
        outcome = TurnOutcome.CAPTURED
        logger.info("%s captures with %s", player.name, card)
        state.emit("capture", f"{player.name} wins cards", player=player.name)
        state.emit("score", score_lines(state.players))
    else:
        state.pile.append(card)
        outcome = TurnOutcome.PLAYED
    state.emit("table", state.table_text())

    if state.all_cards_played():
        settle(state)
        return TurnOutcome.FINISHED

    state.active = 1 - state.active
    if state.check_invariants:
        check_conservation(state.deck, state.players, state.pile)
    return outcome


def run_game(state: GameState) -> GameResult:
    """Play turns until the game finishes or is aborted. Always emits ``game_over``."""
    while True:
        outcome = play_turn(state)
        if outcome is TurnOutcome.FINISHED:
            result = state.result(GameOutcome.COMPLETED)
            break
        if outcome is TurnOutcome.ABORTED:
            result = state.result(GameOutcome.ABORTED)
            break
    logger.info("Game %s after %d turns: scores=%s", result.outcome.value, result.turns, result.scores)
    state.emit("game_over", "Game Over")
    return result


def new_game(
    policies: Sequence[Policy],
    config: GameConfig | None = None,
    names: Sequence[str] = DEFAULT_NAMES,
    emit: EventSink | None = None,
    rng: random.Random | None = None,
    deck: Deck | None = None,
) -> GameState:
    """Seat two policies, deal, and return the state ready for the first turn."""
    config = config or GameConfig()
    if rng is None:
        rng = random.Random(config.seed)
    if deck is None:
        deck = Deck(rng=rng)
    players = [Player(name=name, policy=policy) for name, policy in zip(names, policies)]
    state = GameState(
        deck,
        players,
        first_player=config.first_player,
        emit=emit,
        check_invariants=config.check_invariants,
    )
    deal_initial(state, shuffle=config.shuffle)
    return state


def play_one_game(
    policies: Sequence[Policy],
    config: GameConfig | None = None,
    names: Sequence[str] = DEFAULT_NAMES,
    emit: EventSink | None = None,
    rng: random.Random | None = None,
) -> GameResult:
    """Deal and play a full game between two policies."""
    state = new_game(policies, config=config, names=names, emit=emit, rng=rng)
    return run_game(state)


__all__ = [
    "DEFAULT_NAMES",
    "GameConfig",
    "GameEvent",
    "GameOutcome",
    "GameResult",
    "GameState",
    "INITIAL_TABLE_CARDS",
    "TurnOutcome",
    "deal_initial",
    "new_game",
    "play_one_game",
    "play_turn",
    "run_game",
    "settle",
]
