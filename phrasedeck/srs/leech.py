"""Leech detection for cards that keep failing."""

from phrasedeck.constants import LEECH_THRESHOLD
from phrasedeck.models import Card


def is_leech(card: Card) -> bool:
    """A leech has lapsed often enough that it needs manual attention."""
    return card.lapses >= LEECH_THRESHOLD
