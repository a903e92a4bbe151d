"""
Game Service

Orchestrates puzzles, sessions, stats and leaderboards around the pure
puzzle logic.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import (
    DAILY_WORD_LENGTH, MAX_WORD_LENGTH, MIN_WORD_LENGTH, WELCOME_WORD_LENGTH
)
from ..models.game import (
    ClientPuzzleView, Difficulty, GameSession, GameStatus, GuessResult, PostData, PuzzleConfig
)
from ..models.user import LeaderboardEntry, UserStats
from ..utils.errors import IllegalStateError, NotFoundError, ValidationError
from ..utils.game_logger import game_logger
from .dictionary import WordDictionary
from .difficulty_policy import tier_for_streak
from .guess_evaluator import evaluate_guess
from .leaderboard_service import InMemoryLeaderboard, Leaderboard
from .progress_tracker import apply_fail, apply_solve
from .puzzle_view import to_client_view
from .ring_generator import RingGenerator
from .stores import (
    InMemoryPostStore, InMemoryPuzzleStore, InMemorySessionStore, InMemoryStatsStore,
    InMemoryUserDirectory, PostStore, PuzzleStore, SessionStore, StatsStore, UserDirectory
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameService:
    """
    Core game service.

    This class handles:
    - Puzzle creation (custom, daily and welcome puzzles)
    - Guess validation, evaluation and session bookkeeping
    - Stats updates, achievements and leaderboards after a game ends
    - Client views that never expose the answer
    """

    def __init__(self,
                 dictionary: Optional[WordDictionary] = None,
                 ring_generator: Optional[RingGenerator] = None,
                 puzzles: Optional[PuzzleStore] = None,
                 posts: Optional[PostStore] = None,
                 sessions: Optional[SessionStore] = None,
                 stats: Optional[StatsStore] = None,
                 leaderboard: Optional[Leaderboard] = None,
                 users: Optional[UserDirectory] = None,
                 clock: Callable[[], datetime] = _utcnow,
                 bot_name: str = Config.BOT_NAME):
        self.dictionary = dictionary if dictionary is not None else WordDictionary()
        self.ring_generator = ring_generator if ring_generator is not None else RingGenerator()
        self.puzzles = puzzles if puzzles is not None else InMemoryPuzzleStore()
        self.posts = posts if posts is not None else InMemoryPostStore()
        self.sessions = sessions if sessions is not None else InMemorySessionStore()
        self.stats = stats if stats is not None else InMemoryStatsStore()
        self.leaderboard = leaderboard if leaderboard is not None else InMemoryLeaderboard()
        self.users = users if users is not None else InMemoryUserDirectory()
        self.clock = clock
        self.bot_name = bot_name

    def _load_puzzle(self, puzzle_id: str) -> PuzzleConfig:
        puzzle = self.puzzles.load(puzzle_id)
        if puzzle is None:
            raise NotFoundError("Puzzle not found")
        return puzzle

    def _publish(self, answer: str, difficulty: Difficulty, creator_name: str,
                 is_daily: bool, creator_id: Optional[str] = None) -> str:
        """Generate, store and announce a puzzle. Returns its id."""
        puzzle_id = uuid.uuid4().hex
        puzzle = self.ring_generator.generate(answer, difficulty)
        post = PostData(
            word_length=puzzle.word_length,
            creator_name=creator_name,
            created_at=self.clock().isoformat(),
            is_daily=is_daily,
            creator_id=creator_id,
        )
        self.puzzles.save(puzzle_id, puzzle)
        self.posts.save(puzzle_id, post)

        game_logger.log_game_event(
            puzzle_id, 'puzzle_created', creator_id or 'system',
            word_length=puzzle.word_length, difficulty=puzzle.difficulty,
            creator_name=creator_name, is_daily=is_daily
        )
        return puzzle_id

    def validate_word(self, word: str) -> bool:
        """Check whether a word can be used as an answer."""
        if not word or not isinstance(word, str):
            return False
        return self.dictionary.contains(word)

    def create_custom_puzzle(self, word: str, creator_id: str, creator_name: str) -> str:
        """
        Create a user-made puzzle at medium difficulty.

        Raises:
            ValidationError: If the word is missing, the wrong length,
                non-alphabetic or not in the dictionary
        """
        if not word or not isinstance(word, str):
            raise ValidationError("word is required")

        lower = word.strip().lower()
        if not MIN_WORD_LENGTH <= len(lower) <= MAX_WORD_LENGTH:
            raise ValidationError(f"Word must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters")
        if not lower.isalpha():
            raise ValidationError("Word must contain only letters")
        if not self.dictionary.contains(lower):
            raise ValidationError(f'"{word}" is not in the dictionary')

        return self._publish(lower, Difficulty.MEDIUM, creator_name or 'Anonymous',
                             is_daily=False, creator_id=creator_id)

    def create_daily_puzzle(self) -> str:
        """Create the daily 5-letter puzzle."""
        word = self.dictionary.random_word_of_length(DAILY_WORD_LENGTH)
        return self._publish(word, Difficulty.MEDIUM, self.bot_name, is_daily=True)

    def create_welcome_puzzle(self) -> str:
        """Create the easy 4-letter puzzle posted when the app is installed."""
        word = self.dictionary.random_word_of_length(WELCOME_WORD_LENGTH)
        return self._publish(word, Difficulty.EASY, self.bot_name, is_daily=False)

    def get_puzzle(self, puzzle_id: str, user_id: Optional[str] = None) -> Dict:
        """
        Load client-safe puzzle data plus the caller's progress.

        Returns:
            {'puzzle': ClientPuzzleView, 'session': GameSession or None, 'is_creator': bool}
        """
        puzzle = self._load_puzzle(puzzle_id)
        post = self.posts.load(puzzle_id)

        creator_name = post.creator_name if post else 'Unknown'
        is_daily = post.is_daily if post else False
        view: ClientPuzzleView = to_client_view(puzzle, creator_name, is_daily)

        session = self.sessions.load(user_id, puzzle_id) if user_id else None
        is_creator = bool(user_id) and post is not None and post.creator_id == user_id

        return {'puzzle': view, 'session': session, 'is_creator': is_creator}

    def submit_guess(self, puzzle_id: str, user_id: str, guess: str) -> Tuple[GuessResult, List[str]]:
        """
        Evaluate a guess and persist everything that follows from it.

        Returns:
            (GuessResult, achievement ids unlocked by this guess)

        Raises:
            ValidationError: Missing guess, wrong length or non-letters
            NotFoundError: Unknown puzzle
            IllegalStateError: Session already over, or the creator guessing
        """
        if not guess or not isinstance(guess, str):
            raise ValidationError("guess is required")
        guess = guess.strip().lower()

        puzzle = self._load_puzzle(puzzle_id)

        if len(guess) != puzzle.word_length:
            raise ValidationError(f"Guess must be {puzzle.word_length} letters")
        if not guess.isalpha():
            raise ValidationError("Guess must contain only letters")

        session = self.sessions.load(user_id, puzzle_id)
        if session is not None:
            if session.is_over:
                raise IllegalStateError(
                    "Already solved" if session.status == GameStatus.SOLVED.value else "No attempts remaining"
                )
        else:
            post = self.posts.load(puzzle_id)
            if post is not None and post.creator_id == user_id:
                raise IllegalStateError("Cannot play your own puzzle")
            session = GameSession(puzzle_id=puzzle_id, user_id=user_id)

        result = evaluate_guess(guess, puzzle.answer, session.attempts_used)
        session.record_guess(guess, result)
        self.sessions.save(user_id, puzzle_id, session)

        unlocked: List[str] = []
        if result.game_status == GameStatus.SOLVED.value:
            self.leaderboard.record_post_result(puzzle_id, user_id, result.attempts_used)
            self.leaderboard.increment_global_solve(user_id)
            unlocked = self._record_solve(user_id, result.attempts_used)
            game_logger.log_game_event(
                puzzle_id, 'puzzle_solved', user_id,
                attempts_used=result.attempts_used, achievements_unlocked=unlocked
            )
        elif result.game_status == GameStatus.FAILED.value:
            self.stats.save(user_id, apply_fail(self.stats.load(user_id), self.clock()))
            game_logger.log_game_event(
                puzzle_id, 'puzzle_failed', user_id, attempts_used=result.attempts_used
            )

        return result, unlocked

    def _record_solve(self, user_id: str, attempts_used: int) -> List[str]:
        # TODO: guard this read-modify-write with a per-user lock or a version check
        updated, unlocked = apply_solve(self.stats.load(user_id), attempts_used, self.clock())
        self.stats.save(user_id, updated)
        for achievement_id in unlocked:
            game_logger.log_game_event(None, 'achievement_unlocked', user_id, achievement=achievement_id)
        return unlocked

    def get_stats(self, user_id: str) -> Tuple[UserStats, Difficulty]:
        """Get a user's stats and the difficulty tier their streak earns."""
        stats = self.stats.load(user_id)
        return stats, tier_for_streak(stats.current_streak)

    def _rank(self, rows: List[Tuple[str, float]]) -> List[LeaderboardEntry]:
        return [
            LeaderboardEntry(
                username=self.users.username_for(member) or 'Anonymous',
                score=score,
                rank=index + 1,
            )
            for index, (member, score) in enumerate(rows)
        ]

    def get_post_leaderboard(self, puzzle_id: str,
                             limit: int = Config.LEADERBOARD_LIMIT) -> Tuple[List[LeaderboardEntry], int]:
        """Top solvers for a puzzle (fewest attempts first) and the total solver count."""
        entries = self._rank(self.leaderboard.top_for_post(puzzle_id, limit))
        return entries, self.leaderboard.post_solver_count(puzzle_id)

    def get_global_leaderboard(self, limit: int = Config.LEADERBOARD_LIMIT) -> List[LeaderboardEntry]:
        """Top solvers across all puzzles, most solves first."""
        return self._rank(self.leaderboard.top_global(limit))


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    _game_service.dictionary.ensure_loaded()
    return _game_service
