"""Due-queue selection: which card to show next.

Priority order:
1. Never show the currently displayed card twice in a row, unless it is
   the only card in the deck and it is due or new.
2. Due cards, weakest (lowest mastery level) first.
3. New cards, picked at random so they are not always drilled in the
   same order.
4. Nothing left: return None and let the caller fetch more content.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol, TypeVar

from phrasedeck.models import Card
from phrasedeck.srs.mastery import clamp_level

T = TypeVar("T")


class ChoiceSource(Protocol):
    """Anything with `choice`, e.g. a `random.Random` instance."""

    def choice(self, seq: Sequence[T]) -> T: ...


def is_due(card: Card, now: datetime) -> bool:
    """A reviewed card whose next review time has passed."""
    if card.last_reviewed_at is None:
        return False
    return card.next_review_at is None or card.next_review_at <= now


def select_next(
    pool: Sequence[Card],
    exclude_id: str | None,
    now: datetime,
    rng: ChoiceSource,
) -> Card | None:
    """Pick the next card to review.

    Args:
        pool: Candidate cards.
        exclude_id: Id of the card currently displayed, if any.
        now: Current time.
        rng: Random source used to pick among new cards.

    Returns:
        The card to show next, or None if nothing is due or new.
    """
    if not pool:
        return None

    if len(pool) == 1 and pool[0].id == exclude_id:
        only = pool[0]
        return only if only.is_new or is_due(only, now) else None

    candidates = [card for card in pool if card.id != exclude_id]

    due = [card for card in candidates if is_due(card, now)]
    if due:
        # min() keeps the first of equal levels, so ties follow pool order
        return min(due, key=lambda card: clamp_level(card.mastery_level))

    new = [card for card in candidates if card.is_new]
    if new:
        return rng.choice(new)

    return None
