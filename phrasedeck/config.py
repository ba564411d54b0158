"""Configuration management for phrasedeck."""

# Settings for the practice loop around the engine: learner timezone,
# review log size, RNG seeding and log verbosity.

from dataclasses import dataclass
import os
import random

from dotenv import load_dotenv

from phrasedeck.constants import REVIEW_LOG_LIMIT


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Learner timezone, used to decide calendar days in summaries
    timezone: str = "Europe/Dublin"

    # Review log entries kept in memory
    review_log_limit: int = REVIEW_LOG_LIMIT

    # Seed for new-card selection; None means unseeded
    random_seed: int | None = None

    log_level: str = "INFO"

    @staticmethod
    def _safe_int(value: str | None, default: int | None = 0) -> int | None:
        """Safely parse an integer, returning default if invalid."""
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            timezone=os.environ.get("TIMEZONE", "Europe/Dublin"),
            review_log_limit=cls._safe_int(
                os.environ.get("REVIEW_LOG_LIMIT", str(REVIEW_LOG_LIMIT)), REVIEW_LOG_LIMIT
            ),
            random_seed=cls._safe_int(os.environ.get("RANDOM_SEED"), None),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def make_rng(self) -> random.Random:
        """Create the random source for new-card selection."""
        return random.Random(self.random_seed)
