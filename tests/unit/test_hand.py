"""Tests for hand implementation."""
import pytest

from generic_deck.core.hand import Hand


def test_hand_initialization():
    """Test empty hand creation."""
    hand = Hand()
    assert hand.size == 0
    assert hand.get_cards() == []
    assert str(hand) == "Empty hand"


def test_adding_cards():
    """Test cards are added on the right."""
    hand = Hand()
    hand.add_card("A")
    hand.add_cards(["B", "C"])

    assert hand.get_cards() == ["A", "B", "C"]
    assert str(hand) == "Hand: A B C"


def test_insert_card():
    """Test inserting at a position counted from the left."""
    hand = Hand(["A", "B"])
    hand.insert_card(1, "X")
    assert hand.get_cards() == ["A", "X", "B"]


def test_remove_card_takes_leftmost_match():
    """Test removing a duplicated card takes the leftmost one."""
    hand = Hand(["A", "B", "A"])
    assert hand.remove_card("A") == "A"
    assert hand.get_cards() == ["B", "A"]


def test_remove_card_not_in_hand():
    """Test removing a card that isn't in the hand."""
    hand = Hand(["A"])
    with pytest.raises(ValueError, match="not in hand"):
        hand.remove_card("B")


def test_pop_at_and_pop_left():
    """Test removing cards by position."""
    hand = Hand(["A", "B", "C"])
    assert hand.pop_at(1) == "B"
    assert hand.pop_left() == "A"
    assert hand.get_cards() == ["C"]

    with pytest.raises(IndexError):
        hand.pop_at(5)


def test_clear_and_contains():
    """Test membership and clearing."""
    hand = Hand(["A", "B"])
    assert "A" in hand
    hand.clear()
    assert "A" not in hand
    assert len(hand) == 0
