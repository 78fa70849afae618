"""
Interactive console shell for Indigo, built on ``rich``.

The shell owns all terminal I/O: it asks who moves first, reads the human's
card choices, and renders the ``GameEvent`` stream produced by the engine.
Input is read through an injectable ``read`` callable so tests can script it.
"""
from __future__ import annotations

import logging
import random
import re
from typing import Callable, Sequence

from rich.console import Console

from .agents import ComputerAgent, GameAborted, HumanAgent
from .deck import Card, Deck, InsufficientSupply, InvalidRequest, cards_to_str
from .game import GameConfig, GameEvent, GameResult, new_game, run_game

logger = logging.getLogger(__name__)

QUIT_WORD = "exit"
HUMAN_NAME = "Player"
COMPUTER_NAME = "Computer"

_NUMBER = re.compile(r"\d+", re.ASCII)

_EVENT_STYLES = {
    "initial_table": "bold",
    "table": "cyan",
    "hand": "dim",
    "play": "",
    "capture": "bold green",
    "score": "yellow",
    "game_over": "bold red",
}


class ConsoleShell:
    """Terminal front-end. ``read`` returns one line of user input (without newline)."""

    def __init__(self, console: Console | None = None, read: Callable[[], str] | None = None) -> None:
        self.console = console or Console(highlight=False)
        self._read = read or self.console.input

    def say(self, text: str, style: str = "") -> None:
        self.console.print(text, style=style or None, markup=False, highlight=False)

    def ask(self, prompt: str) -> str:
        self.say(prompt)
        return self._read().strip()

    def ask_human_first(self) -> bool:
        """Ask until the answer is ``yes`` or ``no``. End of input aborts the game."""
        while True:
            try:
                answer = self.ask("Play first?")
            except EOFError:
                raise GameAborted("Input closed") from None
            if answer == "yes":
                return True
            if answer == "no":
                return False

    def ask_card_index(self, hand: Sequence[Card]) -> int | None:
        """
        Show the hand and read a 1-based card number. Returns None when the
        player types ``exit`` (or input ends); anything invalid re-prompts.
        """
        numbered = " ".join(f"{i}){card}" for i, card in enumerate(hand, start=1))
        self.say(f"Cards in hand: {numbered}")
        while True:
            try:
                answer = self.ask(f"Choose a card to play (1-{len(hand)}):")
            except EOFError:
                return None
            if answer == QUIT_WORD:
                return None
            if _NUMBER.fullmatch(answer) and 1 <= int(answer) <= len(hand):
                return int(answer)

    def render(self, event: GameEvent) -> None:
        # The human sees their hand through the card prompt.
        if event.kind == "hand" and event.player == HUMAN_NAME:
            return
        self.say(event.text, _EVENT_STYLES.get(event.kind, ""))


def run_interactive(
    config: GameConfig | None = None,
    shell: ConsoleShell | None = None,
) -> GameResult | None:
    """
    Play one human-vs-computer game in the terminal.

    Returns the game result, or None if the player quit before the deal.
    """
    shell = shell or ConsoleShell()
    config = config or GameConfig()
    shell.say("Indigo Card Game", "bold")
    try:
        human_first = shell.ask_human_first()
    except GameAborted:
        shell.render(GameEvent(kind="game_over", text="Game Over"))
        return None

    rng = random.Random(config.seed)
    game_config = GameConfig(
        seed=config.seed,
        shuffle=config.shuffle,
        first_player=0 if human_first else 1,
        check_invariants=config.check_invariants,
    )
    state = new_game(
        [HumanAgent(ask_index=shell.ask_card_index), ComputerAgent(rng=rng)],
        config=game_config,
        names=(HUMAN_NAME, COMPUTER_NAME),
        emit=shell.render,
        rng=rng,
    )
    return run_game(state)


_DECK_ACTIONS = ("reset", "shuffle", "get", "exit")


def run_deck_tool(shell: ConsoleShell | None = None, deck: Deck | None = None) -> None:
    """Small interactive loop to reset, shuffle and draw from a deck."""
    shell = shell or ConsoleShell()
    if deck is None:
        deck = Deck()
    while True:
        try:
            action = shell.ask(f"Choose an action ({', '.join(_DECK_ACTIONS)}):")
        except EOFError:
            action = "exit"
        if action == "exit":
            shell.say("Bye")
            return
        if action == "reset":
            deck.reset()
            shell.say("Card deck is reset.")
        elif action == "shuffle":
            deck.shuffle()
            shell.say("Card deck is shuffled.")
        elif action == "get":
            try:
                count = shell.ask("Number of cards:")
            except EOFError:
                count = ""
            if not _NUMBER.fullmatch(count):
                shell.say(str(InvalidRequest()))
                continue
            try:
                shell.say(cards_to_str(deck.draw(int(count))))
            except (InvalidRequest, InsufficientSupply) as exc:
                logger.debug("Draw of %s refused: %s", count, exc)
                shell.say(str(exc))
        else:
            shell.say("Wrong action.")


__all__ = ["COMPUTER_NAME", "ConsoleShell", "HUMAN_NAME", "run_deck_tool", "run_interactive"]
