"""Deck zones."""
from enum import Enum
from typing import Union

from .exceptions import InvalidZoneError


class Zone(Enum):
    """The three zones a card can occupy."""
    LIBRARY = 'library'
    HAND = 'hand'
    GRAVEYARD = 'graveyard'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, zone_str: str) -> 'Zone':
        """
        Create a Zone from its name.

        Args:
            zone_str: Zone name, case-insensitive (e.g. 'library', 'HAND')

        Returns:
            Zone instance

        Raises:
            InvalidZoneError: If the name is not a known zone
        """
        try:
            return next(z for z in cls if z.value == zone_str.strip().lower())
        except StopIteration:
            raise InvalidZoneError(f"Invalid zone: {zone_str}")

    @classmethod
    def coerce(cls, zone: Union['Zone', str]) -> 'Zone':
        """Accept a Zone or its string name."""
        if isinstance(zone, Zone):
            return zone
        if isinstance(zone, str):
            return cls.from_string(zone)
        raise InvalidZoneError(f"Invalid zone: {zone!r}")
