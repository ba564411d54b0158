"""Data models for phrasedeck."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ReviewOutcome(Enum):
    """How well a card was recalled.

    Values match what the card store records for each review action.
    """

    REMEMBERED = "know"
    FORGOT = "forgot"  # Recalled incorrectly
    UNKNOWN = "dont_know"  # No attempt


@dataclass(frozen=True)
class Category:
    """A category of cards.

    Foundational categories (pronouns, question words) are small closed sets
    that get drilled to automaticity instead of climbing the interval ladder.
    """

    id: str = ""
    name: str = ""
    is_foundational: bool = False


@dataclass(frozen=True)
class Card:
    """A reviewable flashcard and its scheduling state.

    Cards are values: the engine never changes one in place, every review
    produces a new Card.
    """

    id: str = ""
    category_id: str = "general"
    mastery_level: int = 0  # 0 = new, higher is better
    last_reviewed_at: datetime | None = None  # None = never reviewed
    next_review_at: datetime | None = None  # Only meaningful once reviewed
    know_count: int = 0  # Total successful recalls
    know_streak: int = 0  # Consecutive successful recalls
    lapses: int = 0  # Failures after the card was first attempted
    is_mastered: bool = False  # Derived, recomputed on every review

    # Display text, only used for reporting
    learning: str = ""
    native: str = ""

    @classmethod
    def new(
        cls,
        id: str,
        category_id: str = "general",
        learning: str = "",
        native: str = "",
    ) -> "Card":
        """Create a card that has never been reviewed."""
        return cls(id=id, category_id=category_id, learning=learning, native=native)

    @property
    def is_new(self) -> bool:
        return self.last_reviewed_at is None
