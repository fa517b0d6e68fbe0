"""Deck configuration loading and parsing."""
from dataclasses import dataclass, field
from typing import List, Optional, Any, Dict
import json
import random
from pathlib import Path

import jsonschema

from generic_deck.core.deck import Deck

import logging
logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "deck_schema.json"


def load_schema() -> Dict[str, Any]:
    """Load the JSON schema for deck definitions."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


@dataclass
class DeckConfig:
    """Definition of a deck of named cards."""
    name: str
    cards: List[str]
    hand_size: int = 5
    shuffle: bool = True
    shuffle_on_reset: bool = True
    seed: Optional[int] = None
    description: str = ""
    source: Optional[Path] = field(default=None, compare=False)

    @classmethod
    def from_file(cls, filepath: Path) -> 'DeckConfig':
        """
        Load a DeckConfig from a JSON file.

        Args:
            filepath: Path to JSON deck definition

        Returns:
            DeckConfig instance
        """
        with open(filepath, 'r') as f:
            config = cls.from_json(f.read())
        config.source = Path(filepath)
        return config

    @classmethod
    def from_json(cls, json_str: str) -> 'DeckConfig':
        """
        Create a DeckConfig from a JSON string.

        Args:
            json_str: JSON string defining the deck

        Returns:
            DeckConfig instance

        Raises:
            ValueError: If JSON is invalid or does not match the schema
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        try:
            jsonschema.validate(instance=data, schema=load_schema())
        except jsonschema.exceptions.ValidationError as e:
            path = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ValueError(f"Invalid deck definition at {path}: {e.message}")

        cards = []
        for entry in data['cards']:
            if isinstance(entry, str):
                cards.append(entry)
            else:
                cards.extend([entry['card']] * entry.get('count', 1))

        if not cards:
            logger.warning(f"Deck '{data['name']}' has no cards")

        hand_size = data.get('handSize', 5)
        if hand_size > len(cards):
            logger.warning(
                f"Deck '{data['name']}' hand size {hand_size} exceeds its {len(cards)} cards"
            )

        return cls(
            name=data['name'],
            cards=cards,
            hand_size=hand_size,
            shuffle=data.get('shuffle', True),
            shuffle_on_reset=data.get('shuffleOnReset', True),
            seed=data.get('seed'),
            description=data.get('description', ""),
        )

    def build_deck(self, rng: Optional[random.Random] = None) -> Deck[str]:
        """
        Create a Deck from this definition.

        Args:
            rng: Random source; defaults to one seeded with the configured seed

        Returns:
            A new deck with its library filled
        """
        logger.debug(f"Building deck '{self.name}' with {len(self.cards)} cards")
        return Deck(
            self.cards,
            hand_size=self.hand_size,
            shuffled=self.shuffle,
            shuffle_on_reset=self.shuffle_on_reset,
            rng=rng,
            seed=self.seed,
        )
