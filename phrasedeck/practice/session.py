"""Practice session: the review loop around the scheduling engine.

Each review reads the card from the store, applies the outcome, writes the
new card back, records it in the review log and selects the next card.
The store owns persistence and per-card write ordering; the session does
no locking of its own.
"""

import logging
import random
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from phrasedeck.constants import REVIEW_LOG_LIMIT
from phrasedeck.models import Card, Category, ReviewOutcome
from phrasedeck.practice.analytics import PracticeSummary, build_practice_summary
from phrasedeck.practice.review_log import ReviewLogEntry, build_review_log_entry, trim_review_log
from phrasedeck.srs.leech import is_leech
from phrasedeck.srs.selector import select_next
from phrasedeck.srs.transition import apply_outcome

logger = logging.getLogger(__name__)


class CardStore(Protocol):
    """Persistence for cards and categories."""

    def get_card(self, card_id: str) -> Card | None: ...

    def list_cards(self) -> list[Card]: ...

    def save_card(self, card: Card) -> None: ...

    def get_category(self, category_id: str) -> Category | None: ...

    def list_categories(self) -> list[Category]: ...


class InMemoryCardStore:
    """CardStore backed by dicts, for tests and simulations."""

    def __init__(
        self,
        cards: list[Card] | None = None,
        categories: list[Category] | None = None,
    ):
        self._cards = {card.id: card for card in cards or []}
        self._categories = {category.id: category for category in categories or []}

    def get_card(self, card_id: str) -> Card | None:
        return self._cards.get(card_id)

    def list_cards(self) -> list[Card]:
        return list(self._cards.values())

    def save_card(self, card: Card) -> None:
        self._cards[card.id] = card

    def get_category(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    def list_categories(self) -> list[Category]:
        return list(self._categories.values())

    def save_category(self, category: Category) -> None:
        self._categories[category.id] = category


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PracticeSession:
    """Runs reviews against a card store and picks what comes next."""

    def __init__(
        self,
        store: CardStore,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        review_log_limit: int = REVIEW_LOG_LIMIT,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.clock = clock or _utcnow
        self.review_log_limit = review_log_limit
        self.review_log: list[ReviewLogEntry] = []
        self.current_card_id: str | None = None

    def is_foundational(self, card: Card) -> bool:
        """Look up the card's category; unknown categories are ordinary."""
        category = self.store.get_category(card.category_id)
        return category.is_foundational if category else False

    def next_card(self) -> Card | None:
        """Select the next card and make it the current one."""
        card = select_next(
            self.store.list_cards(),
            self.current_card_id,
            self.clock(),
            self.rng,
        )
        self.current_card_id = card.id if card else None
        return card

    def review(self, card_id: str, outcome: ReviewOutcome) -> Card | None:
        """Record a review of `card_id` and return the next card to show.

        Returns None if the card does not exist or nothing is left to review.
        """
        card = self.store.get_card(card_id)
        if card is None:
            logger.warning(f"Review for unknown card {card_id} ignored")
            return None

        now = self.clock()
        updated = apply_outcome(card, outcome, self.is_foundational(card), now)
        self.store.save_card(updated)

        entry = build_review_log_entry(card, updated, outcome, now)
        self.review_log = trim_review_log([*self.review_log, entry], self.review_log_limit)

        logger.info(
            f"Card {card_id} reviewed ({outcome.value}): "
            f"level {card.mastery_level} -> {updated.mastery_level}, "
            f"next review {updated.next_review_at.isoformat()}"
        )
        if is_leech(updated) and not is_leech(card):
            logger.warning(f"Card {card_id} became a leech after {updated.lapses} lapses")

        self.current_card_id = card_id
        return self.next_card()

    def summary(self) -> PracticeSummary:
        """Build the practice summary for the current deck."""
        return build_practice_summary(
            self.store.list_cards(),
            self.store.list_categories(),
            self.review_log,
            self.clock(),
        )
