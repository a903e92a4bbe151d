"""
Game Data Models

Contains all puzzle- and session-related data structures and enums.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional


class Difficulty(Enum):
    """Difficulty tier of a puzzle."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class LetterFeedback(Enum):
    """Per-letter evaluation of a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GameStatus(Enum):
    """Status of a user's session on one puzzle."""
    PLAYING = "playing"
    SOLVED = "solved"
    FAILED = "failed"


@dataclass
class RingConfig:
    """A single ring on the combination lock."""
    letters: List[str]
    correct_index: int
    is_fixed: bool


@dataclass
class PuzzleConfig:
    """Full puzzle configuration kept server-side. Never sent to clients."""
    answer: str
    word_length: int
    rings: List[RingConfig]
    difficulty: str
    fixed_indices: List[int]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleConfig":
        return cls(
            answer=data["answer"],
            word_length=data["word_length"],
            rings=[
                RingConfig(
                    letters=list(ring["letters"]),
                    correct_index=ring["correct_index"],
                    is_fixed=ring["is_fixed"],
                )
                for ring in data["rings"]
            ],
            difficulty=data["difficulty"],
            fixed_indices=list(data["fixed_indices"]),
        )


@dataclass
class PostData:
    """Public metadata attached to the post hosting a puzzle."""
    word_length: int
    creator_name: str
    created_at: str
    is_daily: bool
    creator_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PostData":
        return cls(**data)


@dataclass
class ClientRingView:
    """Ring data safe for the client (correct letter only revealed for fixed rings)."""
    letters: List[str]
    is_fixed: bool
    fixed_letter: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"letters": list(self.letters), "is_fixed": self.is_fixed}
        if self.is_fixed:
            data["fixed_letter"] = self.fixed_letter
        return data


@dataclass
class ClientPuzzleView:
    """What the client receives when loading a puzzle."""
    word_length: int
    rings: List[ClientRingView]
    fixed_indices: List[int]
    difficulty: str
    creator_name: str
    is_daily: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_length": self.word_length,
            "rings": [ring.to_dict() for ring in self.rings],
            "fixed_indices": list(self.fixed_indices),
            "difficulty": self.difficulty,
            "creator_name": self.creator_name,
            "is_daily": self.is_daily,
        }


@dataclass
class GuessResult:
    """Outcome of evaluating one guess."""
    feedback: List[str]
    is_correct: bool
    attempts_used: int
    attempts_remaining: int
    game_status: str
    answer: Optional[str] = None  # Only set when the puzzle is solved

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.answer is None:
            del data["answer"]
        return data


@dataclass
class GameSession:
    """One user's play-through of one puzzle."""
    puzzle_id: str
    user_id: str
    attempts_used: int = 0
    status: str = GameStatus.PLAYING.value
    guesses: List[str] = field(default_factory=list)
    feedbacks: List[List[str]] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.PLAYING.value

    def record_guess(self, guess: str, result: GuessResult) -> None:
        """Append a guess and take over the counters from its result."""
        self.attempts_used = result.attempts_used
        self.status = result.game_status
        self.guesses.append(guess)
        self.feedbacks.append(list(result.feedback))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSession":
        return cls(
            puzzle_id=data["puzzle_id"],
            user_id=data["user_id"],
            attempts_used=data["attempts_used"],
            status=data["status"],
            guesses=list(data["guesses"]),
            feedbacks=[list(f) for f in data["feedbacks"]],
        )
