"""Tests for card state classification and validation."""

from datetime import timedelta

from phrasedeck.constants import MAX_MASTERY_LEVEL
from phrasedeck.models import Card, ReviewOutcome
from phrasedeck.srs.state import CardState, classify_state
from phrasedeck.srs.transition import apply_outcome
from phrasedeck.srs.validation import validate_card


class TestClassifyState:
    """Tests for classify_state()."""

    def test_new(self, new_card, now):
        assert classify_state(new_card, now) == CardState.NEW

    def test_due(self, make_card, now):
        card = make_card(level=2, due_in=timedelta(minutes=-1))
        assert classify_state(card, now) == CardState.DUE

    def test_scheduled(self, make_card, now):
        card = make_card(level=2, due_in=timedelta(hours=3))
        assert classify_state(card, now) == CardState.SCHEDULED

    def test_mastered_wins_over_due(self, make_card, now):
        card = make_card(level=MAX_MASTERY_LEVEL, due_in=timedelta(days=-1), is_mastered=True)
        assert classify_state(card, now) == CardState.MASTERED

    def test_review_moves_new_to_scheduled_then_due(self, new_card, now):
        reviewed = apply_outcome(new_card, ReviewOutcome.REMEMBERED, False, now)
        assert classify_state(reviewed, now) == CardState.SCHEDULED
        assert classify_state(reviewed, now + timedelta(hours=1)) == CardState.DUE


class TestValidateCard:
    """Tests for validate_card()."""

    def test_new_card_is_valid(self, new_card):
        assert validate_card(new_card) == []

    def test_reviewed_card_is_valid(self, new_card, now):
        reviewed = apply_outcome(new_card, ReviewOutcome.REMEMBERED, False, now)
        assert validate_card(reviewed) == []

    def test_level_out_of_range(self):
        issues = validate_card(Card(id="x", mastery_level=MAX_MASTERY_LEVEL + 1))
        assert [issue.field for issue in issues] == ["mastery_level"]
        assert issues[0].card_id == "x"

    def test_negative_lapses(self):
        issues = validate_card(Card(lapses=-1))
        assert [issue.field for issue in issues] == ["lapses"]

    def test_streak_exceeds_count(self):
        issues = validate_card(Card(know_count=1, know_streak=3))
        assert [issue.field for issue in issues] == ["know_streak"]

    def test_reviewed_without_next_review(self, now):
        issues = validate_card(Card(last_reviewed_at=now))
        assert [issue.field for issue in issues] == ["next_review_at"]

    def test_reports_every_problem(self, now):
        card = Card(mastery_level=-1, know_streak=-2, lapses=-1, last_reviewed_at=now)
        fields = {issue.field for issue in validate_card(card)}
        assert fields == {"mastery_level", "know_streak", "lapses", "next_review_at"}
