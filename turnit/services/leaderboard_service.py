"""
Leaderboard Service

Sorted-set style leaderboards: one per puzzle ranked by fewest attempts,
and a global one ranked by total solves.
"""

import threading
from typing import Dict, List, Protocol, Tuple


class Leaderboard(Protocol):
    def record_post_result(self, puzzle_id: str, user_id: str, attempts: int) -> None: ...

    def increment_global_solve(self, user_id: str) -> None: ...

    def top_for_post(self, puzzle_id: str, limit: int) -> List[Tuple[str, float]]: ...

    def top_global(self, limit: int) -> List[Tuple[str, float]]: ...

    def post_solver_count(self, puzzle_id: str) -> int: ...


class InMemoryLeaderboard:
    """
    In-memory leaderboards.

    Members are user ids and scores are floats, as in a sorted set.
    Ties are broken by member id: ascending for post boards, descending for
    the global board.
    """

    def __init__(self):
        self._posts: Dict[str, Dict[str, float]] = {}
        self._global: Dict[str, float] = {}
        self._lock = threading.Lock()

    def record_post_result(self, puzzle_id: str, user_id: str, attempts: int) -> None:
        """Record a solve on the post leaderboard. Score = attempts used (lower is better)."""
        with self._lock:
            self._posts.setdefault(puzzle_id, {})[user_id] = float(attempts)

    def increment_global_solve(self, user_id: str) -> None:
        """Increment a user's global solve count."""
        with self._lock:
            self._global[user_id] = self._global.get(user_id, 0.0) + 1

    def top_for_post(self, puzzle_id: str, limit: int = 10) -> List[Tuple[str, float]]:
        """Top solvers for a post, fewest attempts first."""
        with self._lock:
            board = list(self._posts.get(puzzle_id, {}).items())
        board.sort(key=lambda item: (item[1], item[0]))
        return board[:max(0, limit)]

    def top_global(self, limit: int = 10) -> List[Tuple[str, float]]:
        """Top solvers globally, most solves first."""
        with self._lock:
            board = list(self._global.items())
        board.sort(key=lambda item: (item[1], item[0]), reverse=True)
        return board[:max(0, limit)]

    def post_solver_count(self, puzzle_id: str) -> int:
        with self._lock:
            return len(self._posts.get(puzzle_id, {}))
