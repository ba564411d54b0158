"""Card consistency checks.

Cards can come from a looser external store. The engine clamps bad values
on read; these checks let a caller find and report them without raising.
"""

from dataclasses import dataclass

from phrasedeck.constants import MAX_MASTERY_LEVEL
from phrasedeck.models import Card


@dataclass(frozen=True)
class CardIssue:
    """A single problem found on a card."""

    card_id: str
    field: str
    message: str


def validate_card(card: Card) -> list[CardIssue]:
    """Return every consistency problem on `card` (empty if it is valid)."""
    issues = []

    if not 0 <= card.mastery_level <= MAX_MASTERY_LEVEL:
        issues.append(
            CardIssue(
                card.id,
                "mastery_level",
                f"mastery level {card.mastery_level} outside 0..{MAX_MASTERY_LEVEL}",
            )
        )

    for name in ("know_count", "know_streak", "lapses"):
        value = getattr(card, name)
        if value < 0:
            issues.append(CardIssue(card.id, name, f"{name} is negative ({value})"))

    if card.know_streak > card.know_count:
        issues.append(
            CardIssue(
                card.id,
                "know_streak",
                f"streak {card.know_streak} exceeds know count {card.know_count}",
            )
        )

    if card.last_reviewed_at is not None and card.next_review_at is None:
        issues.append(CardIssue(card.id, "next_review_at", "reviewed card has no next review time"))

    return issues
