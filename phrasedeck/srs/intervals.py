"""Review interval table.

Each mastery level maps to a fixed delay before the card comes back.
Changing SRS_INTERVALS changes the pacing of the whole deck but not the
shape of the algorithm.
"""

from datetime import timedelta

from phrasedeck.constants import FAILURE_RETRY_INTERVAL, MAX_MASTERY_LEVEL, SRS_INTERVALS


def interval_for_level(level: int) -> timedelta:
    """Return the delay until the next review for a card at `level`.

    Args:
        level: Mastery level reached after the review (1..MAX_MASTERY_LEVEL).
            Levels above the table use its last entry. Level 0 or below
            means the card was not recalled and gets the short retry.

    Returns:
        Time until the card is due again.
    """
    if level <= 0:
        return FAILURE_RETRY_INTERVAL
    return SRS_INTERVALS[min(level, MAX_MASTERY_LEVEL) - 1]
