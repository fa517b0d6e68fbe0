"""Deck implementation."""
import logging
import random
from typing import Generic, Iterable, Optional, Union

from .containers import CardContainer, T
from .exceptions import InsufficientCardsError
from .hand import Hand
from .pile import Pile, shuffle as shuffle_pile
from .zone import Zone

logger = logging.getLogger(__name__)


class Deck(Generic[T]):
    """
    A deck of cards split into a library, a hand, and a graveyard.

    The type of the cards is generic; they only need to support equality.

    Attributes:
        hand_size: Number of cards draw_hand fills the hand up to
        shuffle_on_reset: Whether recycling the graveyard shuffles the library
        rng: Random source used for shuffles and random discards
    """

    shuffle = staticmethod(shuffle_pile)

    def __init__(
        self,
        cards: Iterable[T] = (),
        hand_size: int = 5,
        shuffled: bool = False,
        shuffle_on_reset: bool = True,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize a new deck.

        The library is filled from the deck list, first card at the bottom.

        Args:
            cards: Cards making up the deck list
            hand_size: Target hand size for draw_hand
            shuffled: Whether to shuffle the library after filling it
            shuffle_on_reset: Whether recycling the graveyard shuffles the library
            rng: Random source (takes precedence over seed)
            seed: Seed for a new random source

        Raises:
            ValueError: If hand_size is negative
        """
        if hand_size < 0:
            raise ValueError(f"Hand size must be non-negative, got {hand_size}")

        self._deck_list: list[T] = list(cards)
        self._library: Pile[T] = Pile()
        self._hand: Hand[T] = Hand()
        self._graveyard: Pile[T] = Pile()

        self.hand_size = hand_size
        self.shuffle_on_reset = shuffle_on_reset
        self.rng = rng if rng is not None else random.Random(seed)

        self.rebuild(shuffled=shuffled)

    def _container(self, zone: Union[Zone, str]) -> CardContainer[T]:
        """Map a zone to the container holding its cards."""
        zone = Zone.coerce(zone)
        if zone == Zone.LIBRARY:
            return self._library
        if zone == Zone.HAND:
            return self._hand
        return self._graveyard

    def add(
        self,
        card: T,
        add_to_deck_list: bool = True,
        zone: Union[Zone, str] = Zone.LIBRARY,
        index: int = 0,
    ) -> None:
        """
        Add a card to the deck at the given index of the given zone.

        Args:
            card: The card to add
            add_to_deck_list: True to also add the card to the deck list, so it
                is kept the next time the deck is rebuilt
            zone: Zone to add the card to
            index: Position in the zone.
                Non-negative indices count from the bottom of the library or
                graveyard (left of the hand): 0 is the bottom.
                Negative indices count from the top (right of the hand): -1 is
                the top.
                Positions beyond the zone are clamped, so 99 is the top and
                -99 the bottom of a small zone. -size lands just above the
                bottom card; -(size + 1) or lower is the bottom.

        Raises:
            InvalidZoneError: If zone is not a known zone
        """
        container = self._container(zone)
        size = container.size

        if index >= 0:
            position = min(index, size)
        else:
            # -1 inserts after the current top card
            position = max(size + index + 1, 0)

        container.insert_card(position, card)
        if add_to_deck_list:
            self._deck_list.append(card)
        logger.debug(f"Added {card} to {Zone.coerce(zone)} at position {position}")

    def discard(self, card: Optional[T] = None) -> bool:
        """
        Discard a card from the hand to the graveyard.

        Args:
            card: The card to discard; None to discard a random card

        Returns:
            True if a card was discarded, False if the card is not in the hand
            (or the hand is empty)
        """
        if card is None:
            if not self._hand.size:
                return False
            card = self._hand.pop_at(self.rng.randrange(self._hand.size))
        else:
            try:
                card = self._hand.remove_card(card)
            except ValueError:
                logger.debug(f"Cannot discard {card}: not in hand")
                return False

        self._graveyard.push(card)
        logger.debug(f"Discarded {card}")
        return True

    def discard_hand(self) -> None:
        """Discard cards from the left until the hand is empty."""
        while self._hand.size:
            self._graveyard.push(self._hand.pop_left())

    def draw(self, n: int = 1) -> list[T]:
        """
        Draw n cards from the top of the library into the hand.

        An empty library is refilled from the graveyard before drawing on.

        Args:
            n: Number of cards to draw

        Returns:
            The drawn cards, in draw order

        Raises:
            ValueError: If n is negative
            InsufficientCardsError: If library and graveyard together hold
                fewer than n cards (nothing is drawn)
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {n}")

        available = self._library.size + self._graveyard.size
        if n > available:
            raise InsufficientCardsError(n, available)

        drawn = []
        for _ in range(n):
            if not self._library.size:
                self._reset(include_hand=False)
            card = self._library.pop()
            self._hand.add_card(card)
            drawn.append(card)

        logger.debug(f"Drew {[str(c) for c in drawn]}")
        return drawn

    def draw_hand(self) -> list[T]:
        """Draw cards until the hand holds hand_size cards."""
        missing = self.hand_size - self._hand.size
        if missing <= 0:
            return []
        return self.draw(missing)

    def remove(
        self,
        card: T,
        remove_from_deck_list: bool = True,
        zone: Optional[Union[Zone, str]] = None,
    ) -> bool:
        """
        Remove (the first instance of) a card from the deck.

        Args:
            card: The card to remove
            remove_from_deck_list: True to also remove the card from the deck
                list, so it stays missing the next time the deck is rebuilt
            zone: Zone to remove the card from. If None, try the hand, then
                the graveyard, then the library, stopping at the first match.

        Returns:
            True if the card was removed from a zone

        Raises:
            InvalidZoneError: If zone is not a known zone
        """
        zones = [Zone.HAND, Zone.GRAVEYARD, Zone.LIBRARY] if zone is None else [Zone.coerce(zone)]

        if remove_from_deck_list and card in self._deck_list:
            self._deck_list.remove(card)

        for z in zones:
            try:
                self._container(z).remove_card(card)
            except ValueError:
                continue
            logger.debug(f"Removed {card} from {z}")
            return True
        return False

    def shuffle_library(self) -> None:
        """Shuffle the library."""
        shuffle_pile(self._library, self.rng)

    def shuffle_graveyard(self) -> None:
        """Shuffle the graveyard."""
        shuffle_pile(self._graveyard, self.rng)

    def peek(self) -> Optional[T]:
        """
        Top card of the library, or None if it is empty.

        A None card on top is indistinguishable from an empty library here;
        use the library view to tell them apart.
        """
        return self._library.peek()

    def rebuild(self, shuffled: bool = True) -> None:
        """
        Empty every zone and refill the library from the deck list.

        Args:
            shuffled: Whether to shuffle the refilled library
        """
        self._hand.clear()
        self._graveyard.clear()
        self._library.clear()
        self._library.add_cards(self._deck_list)
        if shuffled:
            self.shuffle_library()
        logger.info(f"Rebuilt library with {self._library.size} cards")

    def _reset(self, include_hand: bool = True) -> None:
        """
        Move the graveyard (and optionally the hand) into the library.

        The graveyard's cards go beneath whatever is left in the library, and
        the library is shuffled if shuffle_on_reset is set.

        Args:
            include_hand: True to discard the hand first
        """
        if include_hand:
            self.discard_hand()

        recycled = self._graveyard.get_cards()
        self._graveyard.clear()
        self._library.put_under(recycled)
        if self.shuffle_on_reset:
            self.shuffle_library()
        logger.info(f"Recycled {len(recycled)} cards from the graveyard into the library")

    @property
    def deck_list(self) -> tuple[T, ...]:
        """The canonical cards of the deck."""
        return tuple(self._deck_list)

    @property
    def library(self) -> tuple[T, ...]:
        """Cards in the library, bottom first."""
        return tuple(self._library.cards)

    @property
    def hand(self) -> tuple[T, ...]:
        """Cards in the hand, leftmost first."""
        return tuple(self._hand.cards)

    @property
    def graveyard(self) -> tuple[T, ...]:
        """Cards in the graveyard, bottom first."""
        return tuple(self._graveyard.cards)

    @property
    def size(self) -> int:
        """Number of cards across all zones."""
        return self._library.size + self._hand.size + self._graveyard.size

    def __str__(self) -> str:
        return (
            f"Deck: library={self._library.size} hand={self._hand.size} "
            f"graveyard={self._graveyard.size}"
        )
