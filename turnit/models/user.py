"""
User Data Models

Contains user statistics, the achievement catalog and leaderboard entries.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

from ..config.game_settings import MAX_ATTEMPTS


@dataclass
class UserStats:
    """Long-lived statistics for one user."""
    total_solved: int = 0
    total_played: int = 0
    current_streak: int = 0
    best_streak: int = 0
    last_solve_date: str = ""  # ISO-8601 timestamp of the last solve
    attempt_distribution: List[int] = field(default_factory=lambda: [0] * MAX_ATTEMPTS)
    achievements: List[str] = field(default_factory=list)

    def copy(self) -> "UserStats":
        return UserStats.from_dict(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserStats":
        return cls(
            total_solved=data.get("total_solved", 0),
            total_played=data.get("total_played", 0),
            current_streak=data.get("current_streak", 0),
            best_streak=data.get("best_streak", 0),
            last_solve_date=data.get("last_solve_date", ""),
            attempt_distribution=list(data.get("attempt_distribution", [0] * MAX_ATTEMPTS)),
            achievements=list(data.get("achievements", [])),
        )


@dataclass(frozen=True)
class Achievement:
    """A one-time badge."""
    id: str
    name: str
    description: str
    icon: str


ACHIEVEMENTS: List[Achievement] = [
    Achievement('first_crack', 'First Crack', 'Solve your first puzzle', 'unlock'),
    Achievement('locksmith', 'Locksmith', 'Solve 25 puzzles', 'key'),
    Achievement('lock_master', 'Lock Master', 'Solve 50 puzzles', 'crown'),
    Achievement('hot_streak', 'Hot Streak', '5-day solve streak', 'flame'),
    Achievement('unbreakable', 'Unbreakable', '10-day solve streak', 'shield'),
    Achievement('speed_demon', 'Speed Demon', 'Solve on the first attempt', 'zap'),
]


@dataclass
class LeaderboardEntry:
    """One ranked row of a leaderboard."""
    username: str
    score: float
    rank: int
