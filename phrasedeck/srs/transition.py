"""Review outcome transitions.

Given a card and how it was recalled, compute the card's next scheduling
state. Success climbs one level on the interval ladder. Failure drops the
card back and schedules a short retry:

    REMEMBERED  level + 1, streak + 1, count + 1, lapses reset (non-foundational)
    FORGOT      level - 2, streak reset, lapse if the card was past level 0
    UNKNOWN     level - 1, streak reset, lapse if the card was past level 0

A wrong answer costs more than a blank one: an incorrect recollection is a
misconception that takes more repetition to fix.
"""

from dataclasses import replace
from datetime import datetime

from phrasedeck.constants import MAX_MASTERY_LEVEL
from phrasedeck.models import Card, ReviewOutcome
from phrasedeck.srs.intervals import interval_for_level
from phrasedeck.srs.mastery import clamp_level, is_mastered

# Levels lost per failing outcome
FAILURE_PENALTIES = {
    ReviewOutcome.FORGOT: 2,
    ReviewOutcome.UNKNOWN: 1,
}


def apply_outcome(
    card: Card,
    outcome: ReviewOutcome,
    is_foundational: bool,
    now: datetime,
) -> Card:
    """Apply a review outcome to a card.

    The input card is left untouched; a new Card is returned.

    Args:
        card: Card as currently stored. Out-of-range levels and negative
            counters are clamped rather than rejected.
        outcome: How the card was recalled.
        is_foundational: Whether the card's category is foundational.
        now: Time of the review.

    Returns:
        The card after the review, with `is_mastered` recomputed.
    """
    level = clamp_level(card.mastery_level)
    know_count = max(0, card.know_count)
    know_streak = max(0, card.know_streak)
    lapses = max(0, card.lapses)

    if outcome is ReviewOutcome.REMEMBERED:
        new_level = min(MAX_MASTERY_LEVEL, level + 1)
        know_count += 1
        know_streak += 1
        if not is_foundational:
            lapses = 0
        interval = interval_for_level(new_level)
    else:
        new_level = max(0, level - FAILURE_PENALTIES[outcome])
        know_streak = 0
        # A brand-new card failing is not a lapse
        if level > 0:
            lapses += 1
        interval = interval_for_level(0)

    reviewed = replace(
        card,
        mastery_level=new_level,
        last_reviewed_at=now,
        next_review_at=now + interval,
        know_count=know_count,
        know_streak=know_streak,
        lapses=lapses,
    )
    return replace(reviewed, is_mastered=is_mastered(reviewed, is_foundational))
