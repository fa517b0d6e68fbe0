"""Errors raised by deck containers."""


class DeckError(Exception):
    """Base class for deck errors."""


class InvalidZoneError(DeckError, ValueError):
    """A zone argument is not one of the known zones."""


class InsufficientCardsError(DeckError):
    """Not enough cards remain to satisfy a draw."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot draw {requested} card(s): only {available} available"
        )
