"""
Stores

Key-value collaborators used by the game service. The protocols describe
what the service needs; the in-memory classes keep values as JSON blobs
keyed the same way a key-value server would.
"""

import json
import threading
from typing import Dict, Optional, Protocol

from ..models.game import GameSession, PostData, PuzzleConfig
from ..models.user import UserStats


class PuzzleStore(Protocol):
    def load(self, puzzle_id: str) -> Optional[PuzzleConfig]: ...

    def save(self, puzzle_id: str, puzzle: PuzzleConfig) -> None: ...


class PostStore(Protocol):
    def load(self, puzzle_id: str) -> Optional[PostData]: ...

    def save(self, puzzle_id: str, post: PostData) -> None: ...


class SessionStore(Protocol):
    def load(self, user_id: str, puzzle_id: str) -> Optional[GameSession]: ...

    def save(self, user_id: str, puzzle_id: str, session: GameSession) -> None: ...


class StatsStore(Protocol):
    def load(self, user_id: str) -> UserStats: ...

    def save(self, user_id: str, stats: UserStats) -> None: ...


class UserDirectory(Protocol):
    def remember(self, user_id: str, username: str) -> None: ...

    def username_for(self, user_id: str) -> Optional[str]: ...


class _BlobStore:
    """Thread-safe dict of JSON strings."""

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def _get(self, key: str) -> Optional[dict]:
        with self._lock:
            raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def _set(self, key: str, value: dict) -> None:
        raw = json.dumps(value)
        with self._lock:
            self._data[key] = raw

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class InMemoryPuzzleStore(_BlobStore):
    """Puzzle configurations keyed `puzzle:<id>:config`."""

    @staticmethod
    def _key(puzzle_id: str) -> str:
        return f"puzzle:{puzzle_id}:config"

    def load(self, puzzle_id: str) -> Optional[PuzzleConfig]:
        data = self._get(self._key(puzzle_id))
        return PuzzleConfig.from_dict(data) if data is not None else None

    def save(self, puzzle_id: str, puzzle: PuzzleConfig) -> None:
        self._set(self._key(puzzle_id), puzzle.to_dict())


class InMemoryPostStore(_BlobStore):
    """Post metadata keyed `puzzle:<id>:post`."""

    @staticmethod
    def _key(puzzle_id: str) -> str:
        return f"puzzle:{puzzle_id}:post"

    def load(self, puzzle_id: str) -> Optional[PostData]:
        data = self._get(self._key(puzzle_id))
        return PostData.from_dict(data) if data is not None else None

    def save(self, puzzle_id: str, post: PostData) -> None:
        self._set(self._key(puzzle_id), post.to_dict())


class InMemorySessionStore(_BlobStore):
    """Game sessions keyed `session:<user>:<puzzle>`."""

    @staticmethod
    def _key(user_id: str, puzzle_id: str) -> str:
        return f"session:{user_id}:{puzzle_id}"

    def load(self, user_id: str, puzzle_id: str) -> Optional[GameSession]:
        data = self._get(self._key(user_id, puzzle_id))
        return GameSession.from_dict(data) if data is not None else None

    def save(self, user_id: str, puzzle_id: str, session: GameSession) -> None:
        self._set(self._key(user_id, puzzle_id), session.to_dict())


class InMemoryStatsStore(_BlobStore):
    """User stats keyed `user:<id>:stats`; unknown users get default stats."""

    @staticmethod
    def _key(user_id: str) -> str:
        return f"user:{user_id}:stats"

    def load(self, user_id: str) -> UserStats:
        data = self._get(self._key(user_id))
        if not isinstance(data, dict):
            return UserStats()
        return UserStats.from_dict(data)

    def save(self, user_id: str, stats: UserStats) -> None:
        self._set(self._key(user_id), stats.to_dict())


class InMemoryUserDirectory:
    """Usernames seen on verified tokens, for leaderboard display."""

    def __init__(self):
        self._names: Dict[str, str] = {}
        self._lock = threading.Lock()

    def remember(self, user_id: str, username: str) -> None:
        if not username:
            return
        with self._lock:
            self._names[user_id] = username

    def username_for(self, user_id: str) -> Optional[str]:
        with self._lock:
            return self._names.get(user_id)
