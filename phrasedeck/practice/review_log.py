"""Review log: an audit record of every review transition."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta

from phrasedeck.constants import REVIEW_LOG_LIMIT
from phrasedeck.models import Card, ReviewOutcome
from phrasedeck.srs.leech import is_leech


@dataclass(frozen=True)
class ReviewLogEntry:
    """One review, with the card's values before and after."""

    id: str
    timestamp: datetime
    card_id: str
    category_id: str
    outcome: ReviewOutcome
    was_correct: bool
    was_new: bool

    previous_mastery_level: int
    new_mastery_level: int
    previous_know_streak: int
    new_know_streak: int
    previous_lapses: int
    new_lapses: int
    previous_know_count: int
    new_know_count: int
    previous_next_review_at: datetime | None
    next_review_at: datetime | None
    previous_is_mastered: bool
    new_is_mastered: bool

    interval: timedelta
    is_leech_after: bool


def build_review_log_entry(
    before: Card,
    after: Card,
    outcome: ReviewOutcome,
    now: datetime,
    entry_id: str | None = None,
) -> ReviewLogEntry:
    """Record the transition from `before` to `after`."""
    interval = timedelta(0)
    if after.next_review_at is not None:
        interval = max(after.next_review_at - now, timedelta(0))

    return ReviewLogEntry(
        id=entry_id or uuid.uuid4().hex,
        timestamp=now,
        card_id=before.id,
        category_id=before.category_id,
        outcome=outcome,
        was_correct=outcome is ReviewOutcome.REMEMBERED,
        was_new=before.is_new,
        previous_mastery_level=before.mastery_level,
        new_mastery_level=after.mastery_level,
        previous_know_streak=before.know_streak,
        new_know_streak=after.know_streak,
        previous_lapses=before.lapses,
        new_lapses=after.lapses,
        previous_know_count=before.know_count,
        new_know_count=after.know_count,
        previous_next_review_at=before.next_review_at,
        next_review_at=after.next_review_at,
        previous_is_mastered=before.is_mastered,
        new_is_mastered=after.is_mastered,
        interval=interval,
        is_leech_after=is_leech(after),
    )


def trim_review_log(
    entries: list[ReviewLogEntry],
    limit: int = REVIEW_LOG_LIMIT,
) -> list[ReviewLogEntry]:
    """Keep only the newest `limit` entries."""
    if limit <= 0:
        return []
    return entries[-limit:]
