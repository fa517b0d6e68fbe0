"""Generic card deck package."""

from generic_deck.core.deck import Deck
from generic_deck.core.exceptions import DeckError, InsufficientCardsError, InvalidZoneError
from generic_deck.core.hand import Hand
from generic_deck.core.pile import Pile, shuffle
from generic_deck.core.zone import Zone

__version__ = "0.1.0"
__all__ = [
    "Deck",
    "DeckError",
    "Hand",
    "InsufficientCardsError",
    "InvalidZoneError",
    "Pile",
    "Zone",
    "shuffle",
]
