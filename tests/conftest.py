"""Shared pytest fixtures for the phrasedeck test suite."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from phrasedeck.models import Card, Category
from phrasedeck.practice.session import InMemoryCardStore


T0 = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed review time."""
    return T0


@pytest.fixture
def rng():
    """Seeded random source for reproducible selection."""
    return random.Random(42)


@pytest.fixture
def new_card():
    """A card that has never been reviewed."""
    return Card.new(id="card-new", category_id="general", learning="Guten Morgen", native="Good morning")


@pytest.fixture
def make_card():
    """Factory for cards in arbitrary scheduling states.

    `due_in` sets next_review_at relative to T0; passing it marks the card
    as reviewed an hour before T0.
    """

    def _make(
        id: str = "card",
        level: int = 0,
        due_in: timedelta | None = None,
        **kwargs,
    ) -> Card:
        if due_in is not None:
            kwargs.setdefault("last_reviewed_at", T0 - timedelta(hours=1))
            kwargs.setdefault("next_review_at", T0 + due_in)
        return Card(id=id, mastery_level=level, **kwargs)

    return _make


@pytest.fixture
def sample_categories():
    """One ordinary and one foundational category."""
    return [
        Category(id="general", name="General"),
        Category(id="pronouns", name="Pronouns", is_foundational=True),
    ]


@pytest.fixture
def store(sample_categories):
    """In-memory store with a small deck."""
    cards = [
        Card.new(id="c1", category_id="general", learning="Danke", native="Thanks"),
        Card.new(id="c2", category_id="general", learning="Bitte", native="Please"),
        Card.new(id="c3", category_id="pronouns", learning="ich", native="I"),
    ]
    return InMemoryCardStore(cards, sample_categories)
