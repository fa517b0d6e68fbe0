"""Interfaces for card containers."""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

T = TypeVar('T')


class CardContainer(ABC, Generic[T]):
    """Interface for any ordered collection of cards (pile, hand, etc.)."""

    @abstractmethod
    def add_card(self, card: T) -> None:
        """Add a single card at the end of the container."""
        pass

    @abstractmethod
    def add_cards(self, cards: Iterable[T]) -> None:
        """Add multiple cards, in order, at the end of the container."""
        pass

    @abstractmethod
    def insert_card(self, index: int, card: T) -> None:
        """
        Insert a card at a position counted from the start of the container.

        Args:
            index: Position in [0, size]; 0 is the bottom (or left)
            card: Card to insert
        """
        pass

    @abstractmethod
    def remove_card(self, card: T) -> T:
        """
        Remove and return a specific card.

        Raises:
            ValueError: If card not in container
        """
        pass

    @abstractmethod
    def get_cards(self) -> list[T]:
        """Get a copy of all cards in the container, bottom (or left) first."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all cards from the container."""
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of cards in the container."""
        pass

    def __len__(self) -> int:
        return self.size

    def __contains__(self, card: object) -> bool:
        return card in self.get_cards()
