"""Hand implementation."""

import logging
from typing import Iterable, Optional

from .containers import CardContainer, T

logger = logging.getLogger(__name__)


class Hand(CardContainer[T]):
    """
    The cards a player currently holds, ordered left to right.

    Attributes:
        cards: Cards in the hand, leftmost first
    """

    def __init__(self, cards: Optional[Iterable[T]] = None):
        """Initialize a hand, empty unless cards are given."""
        self.cards: list[T] = list(cards) if cards is not None else []

    def pop_at(self, index: int) -> T:
        """
        Remove and return the card at a position.

        Raises:
            IndexError: If index is out of range
        """
        return self.cards.pop(index)

    def pop_left(self) -> T:
        """Remove and return the leftmost card."""
        return self.pop_at(0)

    # CardContainer implementation
    def add_card(self, card: T) -> None:
        """Add a card at the right of the hand."""
        self.cards.append(card)

    def add_cards(self, cards: Iterable[T]) -> None:
        """Add multiple cards at the right of the hand."""
        self.cards.extend(cards)

    def insert_card(self, index: int, card: T) -> None:
        """Insert a card at a position counted from the left."""
        self.cards.insert(index, card)

    def remove_card(self, card: T) -> T:
        """Remove the leftmost card equal to the given one."""
        try:
            index = self.cards.index(card)
        except ValueError:
            raise ValueError(f"Card {card} not in hand")
        return self.cards.pop(index)

    def get_cards(self) -> list[T]:
        """Get all cards in the hand, leftmost first."""
        return self.cards.copy()

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def size(self) -> int:
        """Number of cards in the hand."""
        return len(self.cards)

    def __str__(self) -> str:
        """String representation showing cards in hand."""
        if not self.cards:
            return "Empty hand"
        return f"Hand: {' '.join(str(c) for c in self.cards)}"
