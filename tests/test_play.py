"""Tests for trick resolution."""
from indigo.deck import parse_card, parse_cards
from indigo.play import captures, matching_cards, top_card


def test_empty_pile_never_captures():
    assert top_card([]) is None
    assert not captures(parse_card("5♥"), [])


def test_capture_by_rank_or_suit():
    pile = parse_cards("K♣ 2♦ 5♥")
    assert captures(parse_card("5♠"), pile)
    assert captures(parse_card("9♥"), pile)
    assert not captures(parse_card("2♠"), pile)  # only the top card counts
    assert not captures(parse_card("K♦"), pile)


def test_matching_cards():
    hand = parse_cards("5♠ 7♣ 5♦")
    assert matching_cards(hand, parse_card("5♥")) == parse_cards("5♠ 5♦")
    assert matching_cards(hand, parse_card("Q♣")) == parse_cards("7♣")
    assert matching_cards(hand, None) == []
