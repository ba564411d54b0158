"""Mastery policy.

Ordinary vocabulary is mastered by climbing the whole interval ladder.
Foundational categories (pronouns, question words) are mastered by a
sustained streak of correct answers instead, whatever their level.
"""

from phrasedeck.constants import FOUNDATIONAL_STREAK_TARGET, MAX_MASTERY_LEVEL
from phrasedeck.models import Card


def clamp_level(level: int) -> int:
    """Clamp a stored mastery level into 0..MAX_MASTERY_LEVEL."""
    return max(0, min(MAX_MASTERY_LEVEL, level))


def is_mastered(card: Card, is_foundational: bool) -> bool:
    """Whether `card` counts as mastered.

    Args:
        card: The card to check.
        is_foundational: Whether the card's category is foundational.

    Returns:
        True if the card is mastered under its category's rule.
    """
    if is_foundational:
        return card.know_streak >= FOUNDATIONAL_STREAK_TARGET
    return clamp_level(card.mastery_level) >= MAX_MASTERY_LEVEL
