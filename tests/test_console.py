"""Tests for the terminal shell with scripted input."""
import io

from rich.console import Console

from indigo.console import ConsoleShell, run_deck_tool, run_interactive
from indigo.deck import Deck, parse_cards
from indigo.game import GameConfig, GameEvent, GameOutcome


def _shell(lines, repeat_last=False):
    """Shell reading from ``lines``; raises EOFError when exhausted (or repeats the last line)."""
    buf = io.StringIO()
    console = Console(file=buf, width=200, highlight=False)
    it = iter(lines)
    last = [None]

    def read():
        try:
            last[0] = next(it)
        except StopIteration:
            if not repeat_last:
                raise EOFError
        return last[0]

    return ConsoleShell(console=console, read=read), buf


def test_ask_human_first_repeats_until_yes_or_no():
    shell, buf = _shell(["maybe", "", "no"])
    assert shell.ask_human_first() is False
    assert buf.getvalue().count("Play first?") == 3


def test_ask_card_index_ignores_invalid_input():
    shell, buf = _shell(["0", "7", "x", "3"])
    hand = parse_cards("5♠ 6♠ 7♠ 8♠ 9♠ 10♠")
    assert shell.ask_card_index(hand) == 3
    out = buf.getvalue()
    assert "Cards in hand: 1)5♠ 2)6♠ 3)7♠ 4)8♠ 5)9♠ 6)10♠" in out
    assert out.count("Choose a card to play (1-6):") == 4


def test_ask_card_index_exit_and_eof_quit():
    shell, _ = _shell(["exit"])
    assert shell.ask_card_index(parse_cards("5♠")) is None
    shell, _ = _shell([])
    assert shell.ask_card_index(parse_cards("5♠")) is None


def test_render_hides_human_hand_only():
    shell, buf = _shell([])
    shell.render(GameEvent(kind="hand", text="5♠ 6♠", player="Player"))
    shell.render(GameEvent(kind="hand", text="J♠ Q♠", player="Computer"))
    shell.render(GameEvent(kind="play", text="Computer plays Q♠", player="Computer"))
    out = buf.getvalue()
    assert "5♠ 6♠" not in out
    assert "J♠ Q♠" in out
    assert "Computer plays Q♠" in out


def test_interactive_quit_renders_game_over():
    shell, buf = _shell(["yes", "exit"])
    result = run_interactive(GameConfig(shuffle=False), shell=shell)
    assert result is not None
    assert result.outcome is GameOutcome.ABORTED
    out = buf.getvalue()
    assert "Indigo Card Game" in out
    assert "Initial cards on the table: A♠ 2♠ 3♠ 4♠" in out
    assert out.rstrip().endswith("Game Over")


def test_interactive_quit_before_deal():
    shell, buf = _shell([])
    assert run_interactive(GameConfig(seed=1), shell=shell) is None
    assert "Game Over" in buf.getvalue()


def test_interactive_full_game():
    shell, buf = _shell(["no", "1"], repeat_last=True)
    result = run_interactive(GameConfig(seed=3), shell=shell)
    assert result.outcome is GameOutcome.COMPLETED
    assert result.first_player == 1
    assert sum(result.scores) == 23
    assert sum(result.cards_won) == 52
    out = buf.getvalue()
    assert "Computer plays" in out
    assert "Player plays" in out
    assert "Score: Player" in out


def test_deck_tool_session():
    shell, buf = _shell(["get", "4", "get", "abc", "get", "60", "get", "50", "shuffle", "reset", "foo", "exit"])
    deck = Deck()
    run_deck_tool(shell, deck)
    out = buf.getvalue()
    assert "A♠ 2♠ 3♠ 4♠" in out
    assert out.count("Invalid number of cards.") == 2
    assert "The remaining cards are insufficient to meet the request." in out
    assert "Card deck is shuffled." in out
    assert "Card deck is reset." in out
    assert "Wrong action." in out
    assert out.rstrip().endswith("Bye")
    assert len(deck) == 52


def test_ask_card_index_rejects_non_ascii_digits():
    shell, buf = _shell(["²", "٣", "2"])
    assert shell.ask_card_index(parse_cards("5♠ 6♠ 7♠")) == 2
    assert buf.getvalue().count("Choose a card to play (1-3):") == 3


def test_deck_tool_rejects_non_ascii_digits():
    shell, buf = _shell(["get", "²", "exit"])
    deck = Deck()
    run_deck_tool(shell, deck)
    out = buf.getvalue()
    assert "Invalid number of cards." in out
    assert out.rstrip().endswith("Bye")
    assert len(deck) == 52


def test_modules_log_under_package_names():
    from indigo import cli, console

    assert console.logger.name == "indigo.console"
    assert cli.logger.name == "indigo.cli"
