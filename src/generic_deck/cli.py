"""Command-line interface for checking and trying out deck definitions."""

import logging
import sys

import click

from generic_deck.config.loader import DeckConfig
from generic_deck.core.exceptions import InsufficientCardsError


def _cards(cards) -> str:
    return " ".join(str(c) for c in cards) or "-"


@click.group()
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
def cli(log_level):
    """Generic card deck tools."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


@cli.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def validate(paths):
    """Validate deck definition files."""
    failed = 0
    for path in paths:
        try:
            config = DeckConfig.from_file(path)
        except ValueError as e:
            failed += 1
            click.echo(f"FAIL {path}: {e}")
            continue
        click.echo(f"OK   {path}: {config.name} ({len(config.cards)} cards, hand {config.hand_size})")

    if failed:
        raise click.ClickException(f"{failed} of {len(paths)} deck definition(s) invalid")


@cli.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--turns', default=3, show_default=True, type=click.IntRange(min=1),
              help='Number of hands to draw')
@click.option('--seed', type=int, default=None, help='Override the configured seed')
def simulate(path, turns, seed):
    """Draw and discard a hand each turn, printing the zones."""
    try:
        config = DeckConfig.from_file(path)
    except ValueError as e:
        raise click.ClickException(str(e))
    if seed is not None:
        config.seed = seed

    deck = config.build_deck()
    click.echo(f"{config.name}: {len(config.cards)} cards, hand size {deck.hand_size}")

    for turn in range(1, turns + 1):
        try:
            deck.draw_hand()
        except InsufficientCardsError as e:
            raise click.ClickException(f"Turn {turn}: {e}")
        click.echo(f"Turn {turn}: hand {_cards(deck.hand)}")
        deck.discard_hand()
        click.echo(f"  library {len(deck.library)}, graveyard {len(deck.graveyard)}")


def main():
    cli()


if __name__ == '__main__':
    main()
