"""Tests for the game service orchestration."""

from datetime import timedelta

import pytest

from turnit.models.game import Difficulty, PuzzleConfig
from turnit.models.user import UserStats
from turnit.utils.errors import IllegalStateError, NotFoundError, ValidationError


@pytest.fixture
def puzzle_id(game_service):
    return game_service.create_custom_puzzle("crane", "t2_creator", "creator")


class TestCreatePuzzle:
    def test_custom_puzzle_is_medium(self, game_service, puzzle_id):
        puzzle = game_service.puzzles.load(puzzle_id)
        post = game_service.posts.load(puzzle_id)

        assert isinstance(puzzle, PuzzleConfig)
        assert puzzle.answer == "crane"
        assert puzzle.difficulty == "medium"
        assert len(puzzle.fixed_indices) == 1
        assert post.creator_id == "t2_creator"
        assert post.creator_name == "creator"
        assert post.is_daily is False

    def test_word_is_normalized(self, game_service):
        puzzle_id = game_service.create_custom_puzzle("  CRANE ", "t2_creator", "creator")
        assert game_service.puzzles.load(puzzle_id).answer == "crane"

    @pytest.mark.parametrize("word,message", [
        ("", "word is required"),
        (None, "word is required"),
        ("ab", "Word must be 3-6 letters"),
        ("puzzles", "Word must be 3-6 letters"),
        ("cr4ne", "Word must contain only letters"),
        ("zzzzz", '"zzzzz" is not in the dictionary'),
    ])
    def test_rejects_invalid_words(self, game_service, word, message):
        with pytest.raises(ValidationError) as exc_info:
            game_service.create_custom_puzzle(word, "t2_creator", "creator")
        assert exc_info.value.message == message
        assert len(game_service.puzzles) == 0

    def test_daily_puzzle(self, game_service):
        puzzle_id = game_service.create_daily_puzzle()
        puzzle = game_service.puzzles.load(puzzle_id)
        post = game_service.posts.load(puzzle_id)

        assert puzzle.word_length == 5
        assert puzzle.difficulty == "medium"
        assert post.is_daily is True
        assert post.creator_name == "TurnIt Bot"
        assert post.creator_id is None

    def test_welcome_puzzle(self, game_service):
        puzzle_id = game_service.create_welcome_puzzle()
        puzzle = game_service.puzzles.load(puzzle_id)

        assert puzzle.answer == "lock"
        assert puzzle.difficulty == Difficulty.EASY.value
        assert len(puzzle.fixed_indices) == 2

    def test_validate_word(self, game_service):
        assert game_service.validate_word("Crane")
        assert not game_service.validate_word("qwxyz")
        assert not game_service.validate_word("")


class TestGetPuzzle:
    def test_returns_client_view(self, game_service, puzzle_id):
        data = game_service.get_puzzle(puzzle_id, "t2_bob")
        view = data["puzzle"].to_dict()

        assert view["creator_name"] == "creator"
        assert "answer" not in view
        assert data["session"] is None
        assert data["is_creator"] is False

    def test_flags_creator(self, game_service, puzzle_id):
        assert game_service.get_puzzle(puzzle_id, "t2_creator")["is_creator"] is True
        assert game_service.get_puzzle(puzzle_id, None)["is_creator"] is False

    def test_includes_existing_session(self, game_service, puzzle_id):
        game_service.submit_guess(puzzle_id, "t2_bob", "slate")
        session = game_service.get_puzzle(puzzle_id, "t2_bob")["session"]
        assert session.guesses == ["slate"]

    def test_unknown_puzzle(self, game_service):
        with pytest.raises(NotFoundError):
            game_service.get_puzzle("missing")


class TestSubmitGuess:
    def test_wrong_guess_creates_session(self, game_service, puzzle_id):
        result, unlocked = game_service.submit_guess(puzzle_id, "t2_bob", "Slate")
        session = game_service.sessions.load("t2_bob", puzzle_id)

        assert result.game_status == "playing"
        assert unlocked == []
        assert session.attempts_used == 1
        assert session.guesses == ["slate"]
        assert session.feedbacks == [["absent", "absent", "correct", "absent", "correct"]]

    def test_solve_updates_stats_and_leaderboards(self, game_service, puzzle_id):
        game_service.users.remember("t2_bob", "bob")
        game_service.submit_guess(puzzle_id, "t2_bob", "slate")
        result, unlocked = game_service.submit_guess(puzzle_id, "t2_bob", "crane")

        assert result.game_status == "solved"
        assert result.answer == "crane"
        assert unlocked == ["first_crack"]

        stats, tier = game_service.get_stats("t2_bob")
        assert stats.total_solved == 1
        assert stats.attempt_distribution == [0, 1, 0, 0, 0, 0]
        assert tier is Difficulty.EASY

        entries, total = game_service.get_post_leaderboard(puzzle_id)
        assert total == 1
        assert entries[0].username == "bob"
        assert entries[0].score == 2
        assert entries[0].rank == 1
        assert game_service.get_global_leaderboard()[0].score == 1

    def test_exhausting_attempts_records_failure(self, game_service, puzzle_id):
        for _ in range(5):
            game_service.submit_guess(puzzle_id, "t2_bob", "slate")
        result, _ = game_service.submit_guess(puzzle_id, "t2_bob", "slate")

        assert result.game_status == "failed"
        assert result.attempts_remaining == 0
        assert result.answer is None

        stats, _ = game_service.get_stats("t2_bob")
        assert stats.total_played == 1
        assert stats.total_solved == 0
        assert game_service.get_post_leaderboard(puzzle_id) == ([], 0)

    def test_no_guesses_after_solve(self, game_service, puzzle_id):
        game_service.submit_guess(puzzle_id, "t2_bob", "crane")
        with pytest.raises(IllegalStateError, match="Already solved"):
            game_service.submit_guess(puzzle_id, "t2_bob", "slate")
        assert game_service.sessions.load("t2_bob", puzzle_id).attempts_used == 1

    def test_no_guesses_after_failure(self, game_service, puzzle_id):
        for _ in range(6):
            game_service.submit_guess(puzzle_id, "t2_bob", "slate")
        with pytest.raises(IllegalStateError, match="No attempts remaining"):
            game_service.submit_guess(puzzle_id, "t2_bob", "crane")

    def test_creator_cannot_play(self, game_service, puzzle_id):
        with pytest.raises(IllegalStateError, match="Cannot play your own puzzle"):
            game_service.submit_guess(puzzle_id, "t2_creator", "crane")
        assert game_service.sessions.load("t2_creator", puzzle_id) is None

    @pytest.mark.parametrize("guess", ["", None, "cat", "cranes", "cr4ne"])
    def test_invalid_guess_changes_nothing(self, game_service, puzzle_id, guess):
        with pytest.raises(ValidationError):
            game_service.submit_guess(puzzle_id, "t2_bob", guess)
        assert game_service.sessions.load("t2_bob", puzzle_id) is None

    def test_unknown_puzzle(self, game_service):
        with pytest.raises(NotFoundError):
            game_service.submit_guess("missing", "t2_bob", "crane")

    def test_streak_across_days(self, game_service, clock):
        first = game_service.create_custom_puzzle("crane", "t2_creator", "creator")
        second = game_service.create_custom_puzzle("slate", "t2_creator", "creator")

        game_service.submit_guess(first, "t2_bob", "crane")
        clock.now = clock.now + timedelta(days=1)
        _, unlocked = game_service.submit_guess(second, "t2_bob", "slate")

        stats, _ = game_service.get_stats("t2_bob")
        assert stats.current_streak == 2
        assert stats.total_solved == 2
        assert unlocked == []

    def test_solve_recovers_from_unreadable_stored_date(self, game_service, puzzle_id):
        game_service.stats.save("t2_bob", UserStats(total_solved=2, current_streak=3, last_solve_date="garbage"))

        game_service.submit_guess(puzzle_id, "t2_bob", "crane")

        stats, _ = game_service.get_stats("t2_bob")
        assert stats.total_solved == 3
        assert stats.current_streak == 1
        assert game_service.get_post_leaderboard(puzzle_id)[1] == 1


class TestLeaderboards:
    def test_post_board_ranks_fewest_attempts_first(self, game_service, puzzle_id):
        game_service.users.remember("t2_bob", "bob")
        game_service.users.remember("t2_carol", "carol")

        game_service.submit_guess(puzzle_id, "t2_bob", "slate")
        game_service.submit_guess(puzzle_id, "t2_bob", "crane")
        game_service.submit_guess(puzzle_id, "t2_carol", "crane")
        game_service.submit_guess(puzzle_id, "t2_dave", "crane")

        entries, total = game_service.get_post_leaderboard(puzzle_id)
        assert total == 3
        assert [(e.username, e.score, e.rank) for e in entries] == [
            ("carol", 1, 1),
            ("Anonymous", 1, 2),
            ("bob", 2, 3),
        ]

    def test_limit(self, game_service, puzzle_id):
        for user in ("t2_a", "t2_b", "t2_c"):
            game_service.submit_guess(puzzle_id, user, "crane")
        entries, total = game_service.get_post_leaderboard(puzzle_id, limit=2)
        assert len(entries) == 2
        assert total == 3
