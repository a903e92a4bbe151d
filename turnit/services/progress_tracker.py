"""
Progress Tracker

Applies solve and fail events to a user's statistics: counters, the
attempt distribution, streak continuity and achievement unlocks.

Both entry points take a stats snapshot and return a new one; the snapshot
passed in is left untouched.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..models.user import UserStats

MS_PER_DAY = 86_400_000

# Unlock predicates, checked in catalog order against the updated stats
ACHIEVEMENT_RULES: List[Tuple[str, Callable[[UserStats, int], bool]]] = [
    ('first_crack', lambda stats, attempts: stats.total_solved >= 1),
    ('locksmith', lambda stats, attempts: stats.total_solved >= 25),
    ('lock_master', lambda stats, attempts: stats.total_solved >= 50),
    ('hot_streak', lambda stats, attempts: stats.current_streak >= 5),
    ('unbreakable', lambda stats, attempts: stats.current_streak >= 10),
    ('speed_demon', lambda stats, attempts: attempts == 1),
]


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def epoch_day(moment: datetime) -> int:
    """Whole days since the Unix epoch, counted in UTC."""
    millis = int(_as_utc(moment).timestamp() * 1000)
    return millis // MS_PER_DAY


def _parse_date(value: str) -> Optional[datetime]:
    """Parse a stored solve date; an unreadable value counts as no previous solve."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (AttributeError, TypeError, ValueError):
        return None


def apply_solve(stats: UserStats, attempts_used: int, now: datetime) -> Tuple[UserStats, List[str]]:
    """
    Record a successful solve.

    Args:
        stats: Current stats snapshot
        attempts_used: Attempts the solve took (1-based)
        now: Time of the solve

    Returns:
        (updated stats, achievement ids unlocked by this solve)
    """
    updated = stats.copy()

    updated.total_solved += 1
    updated.total_played += 1

    # index 0 = solved in 1 attempt
    bucket = attempts_used - 1
    if 0 <= bucket < MAX_ATTEMPTS and bucket < len(updated.attempt_distribution):
        updated.attempt_distribution[bucket] += 1

    last_solve = _parse_date(updated.last_solve_date)
    today = epoch_day(now)
    if last_solve is not None and epoch_day(last_solve) == today:
        pass  # Already solved today, streak stays the same
    elif last_solve is not None and today - epoch_day(last_solve) == 1:
        updated.current_streak += 1
    else:
        updated.current_streak = 1
    updated.best_streak = max(updated.best_streak, updated.current_streak)
    updated.last_solve_date = _as_utc(now).isoformat()

    unlocked = []
    for achievement_id, predicate in ACHIEVEMENT_RULES:
        if achievement_id in updated.achievements:
            continue
        if predicate(updated, attempts_used):
            unlocked.append(achievement_id)
            updated.achievements.append(achievement_id)

    return updated, unlocked


def apply_fail(stats: UserStats, now: Optional[datetime] = None) -> UserStats:
    """
    Record a puzzle lost by running out of attempts.

    A failure always breaks the streak, whatever day it happens on, so `now`
    does not affect the result.
    """
    updated = stats.copy()
    updated.total_played += 1
    updated.current_streak = 0
    return updated
