"""Shared constants for the phrasedeck review engine."""

from datetime import timedelta

# Time until next review after a successful recall, indexed by (level - 1).
# 1 hour, 8 hours, 1 day, 3 days, 1 week, 2 weeks
SRS_INTERVALS = (
    timedelta(hours=1),
    timedelta(hours=8),
    timedelta(days=1),
    timedelta(days=3),
    timedelta(weeks=1),
    timedelta(weeks=2),
)

MAX_MASTERY_LEVEL = len(SRS_INTERVALS)

# Failed reviews always come back quickly, whatever the level
FAILURE_RETRY_INTERVAL = timedelta(minutes=5)

# Foundational categories are mastered by streak, not by level
FOUNDATIONAL_STREAK_TARGET = 10

LEECH_THRESHOLD = 5

# Review log entries kept per session
REVIEW_LOG_LIMIT = 500

# Leeches listed in the practice summary
SUMMARY_LEECH_LIMIT = 20
