#!/usr/bin/env python3
"""Simulate a practice session against a small sample deck.

Runs the full review loop without any UI:
1. Seed an in-memory deck (ordinary and foundational categories)
2. Review cards with simulated answers on a simulated clock
3. Show each transition and the final practice summary

Run: uv run python scripts/simulate_practice.py --reviews 40 --seed 7
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
import logging
import random
from zoneinfo import ZoneInfo

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
import simple_parsing as sp

from phrasedeck.categories import assign_initial_category
from phrasedeck.config import Config
from phrasedeck.models import Card, Category, ReviewOutcome
from phrasedeck.practice.session import InMemoryCardStore, PracticeSession
from phrasedeck.srs.state import classify_state


@dataclass
class Args:
    """Simulate spaced-repetition practice on a sample deck."""

    reviews: int = 30  # Number of reviews to simulate
    seed: int = 0  # RNG seed; 0 falls back to RANDOM_SEED
    recall_rate: float = 0.7  # Chance of answering "know"
    forgot_rate: float = 0.2  # Chance of answering "forgot"; the rest are "don't know"
    minutes_between: int = 30  # Simulated time between reviews


console = Console()

SAMPLE_PHRASES = [
    ("Guten Morgen", "Good morning"),
    ("Wie geht's?", "How are you?"),
    ("Danke schön", "Thank you very much"),
    ("Ich verstehe nicht", "I don't understand"),
    ("Wo ist der Bahnhof?", "Where is the station?"),
    ("wer", "who"),
    ("warum", "why"),
    ("ich", "I"),
    ("Sie", "you (formal)"),
    ("ihnen", "them"),
]

SAMPLE_CATEGORIES = [
    Category(id="general", name="General"),
    Category(id="w-fragen", name="W-Fragen", is_foundational=True),
    Category(id="pronouns", name="Pronouns", is_foundational=True),
]


class SimulatedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


def build_store() -> InMemoryCardStore:
    cards = [
        Card.new(
            id=f"card-{index}",
            category_id=assign_initial_category(learning),
            learning=learning,
            native=native,
        )
        for index, (learning, native) in enumerate(SAMPLE_PHRASES)
    ]
    return InMemoryCardStore(cards, SAMPLE_CATEGORIES)


def pick_outcome(rng: random.Random, args: Args) -> ReviewOutcome:
    roll = rng.random()
    if roll < args.recall_rate:
        return ReviewOutcome.REMEMBERED
    if roll < args.recall_rate + args.forgot_rate:
        return ReviewOutcome.FORGOT
    return ReviewOutcome.UNKNOWN


def show_summary(session: PracticeSession) -> None:
    summary = session.summary()
    totals = summary.totals

    console.rule("[bold]Summary")
    console.print(
        f"Cards: {totals.total_cards}  mastered: {totals.mastered}  "
        f"learning: {totals.learning}  new: {totals.new_cards}  "
        f"({totals.mastery_progress_percent}% mastered)"
    )
    if summary.accuracy.overall is not None:
        console.print(
            f"Accuracy: {summary.accuracy.overall:.0f}% over "
            f"{summary.accuracy.total_reviews} reviews"
        )

    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Cards")
    table.add_column("Mastered", style="green")
    table.add_column("Avg level")
    table.add_column("Foundational")
    for item in summary.categories:
        table.add_row(
            item.name,
            str(item.total),
            str(item.mastered),
            f"{item.avg_mastery_level:.1f}",
            "yes" if item.is_foundational else "",
        )
    console.print(table)

    if summary.leeches:
        console.print("[red]Leeches:[/red]")
        for leech in summary.leeches:
            console.print(f"  {leech.learning} ({leech.lapses} lapses)")


def main() -> None:
    args = sp.parse(Args)
    config = Config.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    seed = args.seed or config.random_seed
    rng = random.Random(seed)
    clock = SimulatedClock(datetime.now(ZoneInfo(config.timezone)))
    session = PracticeSession(
        build_store(),
        rng=rng,
        clock=clock,
        review_log_limit=config.review_log_limit,
    )

    console.print(Panel(
        f"[bold blue]Practice simulation[/bold blue]\n"
        f"{args.reviews} reviews, seed {seed}",
        title="phrasedeck",
    ))

    table = Table(title="Reviews")
    table.add_column("#")
    table.add_column("Phrase", style="cyan")
    table.add_column("Outcome")
    table.add_column("Level")
    table.add_column("Streak")
    table.add_column("State", style="yellow")

    card = session.next_card()
    for number in range(1, args.reviews + 1):
        if card is None:
            # Nothing due; jump ahead to the earliest scheduled review
            upcoming = [c.next_review_at for c in session.store.list_cards() if c.next_review_at]
            if not upcoming:
                break
            clock.now = max(clock.now, min(upcoming))
            card = session.next_card()
            if card is None:
                break

        outcome = pick_outcome(rng, args)
        next_card = session.review(card.id, outcome)
        reviewed = session.store.get_card(card.id)
        table.add_row(
            str(number),
            reviewed.learning,
            outcome.value,
            f"{card.mastery_level} → {reviewed.mastery_level}",
            str(reviewed.know_streak),
            classify_state(reviewed, clock.now).value,
        )

        clock.advance(timedelta(minutes=args.minutes_between))
        card = next_card

    console.print(table)
    show_summary(session)


if __name__ == "__main__":
    main()
