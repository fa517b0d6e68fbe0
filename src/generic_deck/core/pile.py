"""LIFO pile implementation (library and graveyard)."""
import logging
import random
from typing import Iterable, Optional

from .containers import CardContainer, T
from .exceptions import InsufficientCardsError

logger = logging.getLogger(__name__)


class Pile(CardContainer[T]):
    """
    A face-down stack of cards.

    The top of the pile is the end of the underlying list, so push and pop
    are the common case. Positional insertion and removal work on the same
    list.

    Attributes:
        cards: Cards in the pile, bottom first
    """

    def __init__(self, cards: Optional[Iterable[T]] = None):
        """
        Initialize a pile.

        Args:
            cards: Initial cards, bottom first (the last one ends on top)
        """
        self.cards: list[T] = list(cards) if cards is not None else []

    def push(self, card: T) -> None:
        """Put a card on top of the pile."""
        self.cards.append(card)

    def pop(self) -> T:
        """
        Take the top card off the pile.

        Raises:
            InsufficientCardsError: If the pile is empty
        """
        if not self.cards:
            raise InsufficientCardsError(1, 0)
        return self.cards.pop()

    def peek(self) -> Optional[T]:
        """
        Top card of the pile, or None if empty.

        A None card on top looks the same as an empty pile; check size to
        tell them apart.
        """
        return self.cards[-1] if self.cards else None

    def put_under(self, cards: Iterable[T]) -> None:
        """Place cards beneath the pile, keeping their order (first one lowest)."""
        self.cards[:0] = list(cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the pile in place."""
        shuffle(self, rng)

    # CardContainer implementation
    def add_card(self, card: T) -> None:
        """Add a card on top of the pile."""
        self.push(card)

    def add_cards(self, cards: Iterable[T]) -> None:
        """Add multiple cards; the last one ends on top."""
        self.cards.extend(cards)

    def insert_card(self, index: int, card: T) -> None:
        """Insert a card at a position counted from the bottom."""
        self.cards.insert(index, card)

    def remove_card(self, card: T) -> T:
        """
        Remove the topmost card equal to the given one.

        Args:
            card: Card to remove

        Returns:
            The removed card

        Raises:
            ValueError: If card not in pile
        """
        for i in range(len(self.cards) - 1, -1, -1):
            if self.cards[i] == card:
                return self.cards.pop(i)
        raise ValueError(f"Card {card} not in pile")

    def get_cards(self) -> list[T]:
        """Get all cards in the pile, bottom first."""
        return self.cards.copy()

    def clear(self) -> None:
        """Remove all cards from the pile."""
        self.cards.clear()

    @property
    def size(self) -> int:
        """Number of cards in the pile."""
        return len(self.cards)

    def __str__(self) -> str:
        if not self.cards:
            return "Empty pile"
        return f"Pile ({self.size}): top {self.cards[-1]}"


def shuffle(pile: Optional[Pile[T]], rng: Optional[random.Random] = None) -> None:
    """
    Shuffle a pile in place with the Fisher-Yates algorithm.

    Every permutation of the pile's cards is equally likely.

    Args:
        pile: Pile to shuffle
        rng: Random source (a fresh one if not given)

    Raises:
        ValueError: If pile is None
    """
    if pile is None:
        raise ValueError("Cannot shuffle a missing pile")
    rng = rng or random.Random()

    # Popping every card reverses the order
    cards = []
    while pile.size > 0:
        cards.append(pile.pop())

    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]

    for card in reversed(cards):
        pile.push(card)
    logger.debug(f"Shuffled pile of {pile.size} cards")
