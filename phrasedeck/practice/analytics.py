"""Practice analytics: a summary of deck progress and review accuracy.

Calendar days are taken from each timestamp in its own timezone, so pass
timestamps in the learner's zone.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from phrasedeck.constants import MAX_MASTERY_LEVEL, SUMMARY_LEECH_LIMIT
from phrasedeck.models import Card, Category
from phrasedeck.practice.review_log import ReviewLogEntry
from phrasedeck.srs.leech import is_leech


@dataclass
class DeckTotals:
    total_cards: int = 0
    mastered: int = 0
    learning: int = 0
    new_cards: int = 0
    mastery_progress_percent: int = 0
    due_today: int = 0
    overdue: int = 0
    due_next_7_days: int = 0


@dataclass
class AccuracyStats:
    overall: float | None = None
    last_7_days: float | None = None
    last_30_days: float | None = None
    total_reviews: int = 0
    streak_days: int = 0


@dataclass
class CategoryStats:
    id: str
    name: str
    total: int = 0
    mastered: int = 0
    in_progress: int = 0
    accuracy: float | None = None
    avg_mastery_level: float = 0.0
    is_foundational: bool = False


@dataclass
class DayActivity:
    date: date
    total: int = 0
    correct: int = 0
    incorrect: int = 0
    new_cards: int = 0


@dataclass
class LeechInfo:
    card_id: str
    learning: str
    native: str
    lapses: int
    category_id: str


@dataclass
class PracticeSummary:
    """Everything a progress dashboard needs."""

    totals: DeckTotals
    accuracy: AccuracyStats
    categories: list[CategoryStats] = field(default_factory=list)
    levels: dict[int, int] = field(default_factory=dict)  # level -> card count
    recent_activity: list[DayActivity] = field(default_factory=list)
    new_cards_by_day: dict[date, int] = field(default_factory=dict)
    leeches: list[LeechInfo] = field(default_factory=list)


def calc_accuracy(entries: Sequence[ReviewLogEntry]) -> float | None:
    """Percentage of correct reviews, or None if there are none."""
    if not entries:
        return None
    correct = sum(1 for entry in entries if entry.was_correct)
    return correct / len(entries) * 100


def calc_streak_days(active_days: Iterable[date], today: date) -> int:
    """Count consecutive active days ending today."""
    active = set(active_days)
    streak = 0
    cursor = today
    while cursor in active:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def _deck_totals(cards: Sequence[Card], now: datetime) -> DeckTotals:
    start_of_today = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    start_of_tomorrow = start_of_today + timedelta(days=1)
    end_of_week = start_of_tomorrow + timedelta(days=6)

    total = len(cards)
    mastered = sum(1 for card in cards if card.is_mastered)
    new = sum(1 for card in cards if card.is_new)

    scheduled = [
        card.next_review_at
        for card in cards
        if not card.is_new and card.next_review_at is not None
    ]

    return DeckTotals(
        total_cards=total,
        mastered=mastered,
        learning=total - mastered - new,
        new_cards=new,
        mastery_progress_percent=round(mastered / total * 100) if total else 0,
        due_today=sum(1 for at in scheduled if at < start_of_tomorrow),
        overdue=sum(1 for at in scheduled if at < start_of_today),
        due_next_7_days=sum(1 for at in scheduled if start_of_tomorrow <= at < end_of_week),
    )


def _category_stats(
    cards: Sequence[Card],
    categories: Sequence[Category],
    review_log: Sequence[ReviewLogEntry],
) -> list[CategoryStats]:
    by_id = {category.id: category for category in categories}
    stats: dict[str, CategoryStats] = {}
    level_sums: dict[str, int] = {}
    entries: dict[str, list[ReviewLogEntry]] = {}

    def get_stats(category_id: str) -> CategoryStats:
        if category_id not in stats:
            category = by_id.get(category_id)
            stats[category_id] = CategoryStats(
                id=category_id,
                name=category.name if category and category.name else category_id,
                is_foundational=category.is_foundational if category else False,
            )
            level_sums[category_id] = 0
            entries[category_id] = []
        return stats[category_id]

    for card in cards:
        item = get_stats(card.category_id)
        item.total += 1
        level_sums[card.category_id] += card.mastery_level
        if card.is_mastered:
            item.mastered += 1
        elif not card.is_new:
            item.in_progress += 1

    for entry in review_log:
        get_stats(entry.category_id)
        entries[entry.category_id].append(entry)

    for category_id, item in stats.items():
        item.avg_mastery_level = level_sums[category_id] / item.total if item.total else 0.0
        item.accuracy = calc_accuracy(entries[category_id])

    return sorted(stats.values(), key=lambda item: item.total, reverse=True)


def build_practice_summary(
    cards: Sequence[Card],
    categories: Sequence[Category],
    review_log: Sequence[ReviewLogEntry],
    now: datetime,
) -> PracticeSummary:
    """Summarize deck progress and review history as of `now`.

    Args:
        cards: All cards in the deck.
        categories: Known categories (names and foundational flags).
        review_log: Review history, oldest first.
        now: Current time; its date is "today".

    Returns:
        PracticeSummary with totals, accuracy, per-category stats, a level
        histogram, daily activity and the worst leeches.
    """
    activity: dict[date, DayActivity] = {}
    for entry in review_log:
        day = entry.timestamp.date()
        if day not in activity:
            activity[day] = DayActivity(date=day)
        stats = activity[day]
        stats.total += 1
        if entry.was_correct:
            stats.correct += 1
        else:
            stats.incorrect += 1
        if entry.was_new:
            stats.new_cards += 1

    today = now.date()
    last_7 = [e for e in review_log if e.timestamp.date() >= today - timedelta(days=6)]
    last_30 = [e for e in review_log if e.timestamp.date() >= today - timedelta(days=29)]

    accuracy = AccuracyStats(
        overall=calc_accuracy(review_log),
        last_7_days=calc_accuracy(last_7),
        last_30_days=calc_accuracy(last_30),
        total_reviews=len(review_log),
        streak_days=calc_streak_days(activity, today),
    )

    top_level = max([MAX_MASTERY_LEVEL, *(card.mastery_level for card in cards)])
    levels = {level: 0 for level in range(top_level + 1)}
    for card in cards:
        if card.mastery_level in levels:
            levels[card.mastery_level] += 1

    days = sorted(activity)
    leeches = sorted((card for card in cards if is_leech(card)), key=lambda card: card.lapses, reverse=True)

    return PracticeSummary(
        totals=_deck_totals(cards, now),
        accuracy=accuracy,
        categories=_category_stats(cards, categories, review_log),
        levels=levels,
        recent_activity=[activity[day] for day in days],
        new_cards_by_day={day: activity[day].new_cards for day in days if activity[day].new_cards},
        leeches=[
            LeechInfo(
                card_id=card.id,
                learning=card.learning,
                native=card.native,
                lapses=card.lapses,
                category_id=card.category_id,
            )
            for card in leeches[:SUMMARY_LEECH_LIMIT]
        ],
    )
