"""Derived scheduling state of a card.

Cards store their state as loose fields (level, two timestamps, counters).
This gives it a name for reporting and tests.
"""

from datetime import datetime
from enum import Enum

from phrasedeck.models import Card
from phrasedeck.srs.selector import is_due


class CardState(Enum):
    NEW = "new"  # Never reviewed
    DUE = "due"  # Reviewed, next review time has passed
    SCHEDULED = "scheduled"  # Reviewed, waiting for its next review
    MASTERED = "mastered"


def classify_state(card: Card, now: datetime) -> CardState:
    """Classify a card at time `now`.

    Mastery takes precedence over timing, so a mastered card that is due
    again still reports MASTERED.
    """
    if card.is_new:
        return CardState.NEW
    if card.is_mastered:
        return CardState.MASTERED
    if is_due(card, now):
        return CardState.DUE
    return CardState.SCHEDULED
