"""Integration tests for the bundled deck definitions."""
from pathlib import Path
import json

import jsonschema
import pytest

from generic_deck.config.loader import DeckConfig, load_schema

DECK_DIR = Path(__file__).parents[2] / "data" / "decks"


@pytest.fixture
def schema():
    """Load the JSON schema for deck definitions."""
    return load_schema()


def test_all_deck_configs(schema):
    """Test that every deck definition in data/decks is valid and playable."""
    config_files = list(DECK_DIR.glob("*.json"))
    assert len(config_files) > 0, "No deck definition files found"

    for config_file in config_files:
        with open(config_file) as f:
            data = json.load(f)

        try:
            jsonschema.validate(instance=data, schema=schema)
        except jsonschema.exceptions.ValidationError as e:
            pytest.fail(f"Schema validation failed for {config_file.name}: {e}")

        try:
            config = DeckConfig.from_file(config_file)
        except ValueError as e:
            pytest.fail(f"DeckConfig validation failed for {config_file.name}: {e}")

        play_turns(config, turns=len(config.cards) + 1)


def play_turns(config: DeckConfig, turns: int):
    """Draw and discard full hands, checking no card is lost."""
    deck = config.build_deck()
    total = deck.size
    assert total == len(config.cards)

    for _ in range(turns):
        deck.draw_hand()
        assert len(deck.hand) == config.hand_size
        assert deck.size == total
        deck.discard_hand()
        assert deck.hand == ()
    assert sorted(deck.library + deck.graveyard) == sorted(config.cards)
