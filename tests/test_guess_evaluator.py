"""Tests for guess scoring."""

import random
from collections import Counter

import pytest

from turnit.services.guess_evaluator import evaluate_guess, letter_feedback

C, P, A = "correct", "present", "absent"


class TestFeedback:
    @pytest.mark.parametrize("guess,answer,expected", [
        ("slate", "crane", [A, A, C, A, C]),
        ("cease", "crane", [C, A, C, A, C]),
        ("abcde", "eabcd", [P, P, P, P, P]),
        ("speed", "abide", [A, A, P, A, P]),
        ("lolly", "hello", [A, P, C, C, A]),
        ("crane", "crane", [C, C, C, C, C]),
        ("xyz", "cat", [A, A, A]),
    ])
    def test_known_patterns(self, guess, answer, expected):
        assert evaluate_guess(guess, answer, 0).feedback == expected

    def test_exact_matches_take_priority_over_earlier_present(self):
        # the first "e" must not consume the "e" that the last position matches exactly
        assert evaluate_guess("eerie", "there", 0).feedback == [P, A, P, A, C]

    def test_case_insensitive(self):
        result = evaluate_guess("CRANE", "crane", 0)
        assert result.feedback == [C] * 5
        assert result.is_correct

    def test_multiplicity_rule_holds_for_random_words(self):
        rng = random.Random(42)
        alphabet = "aabcde"
        for _ in range(500):
            length = rng.randint(3, 6)
            guess = "".join(rng.choice(alphabet) for _ in range(length))
            answer = "".join(rng.choice(alphabet) for _ in range(length))
            feedback = [f.value for f in letter_feedback(guess, answer)]

            for i, status in enumerate(feedback):
                assert (status == C) == (guess[i] == answer[i])

            credited = Counter(
                guess[i] for i, status in enumerate(feedback) if status in (C, P)
            )
            answer_counts = Counter(answer)
            for letter, count in credited.items():
                assert count <= answer_counts[letter]


class TestBookkeeping:
    def test_first_miss_keeps_playing(self):
        result = evaluate_guess("slate", "crane", 0)
        assert result.attempts_used == 1
        assert result.attempts_remaining == 5
        assert result.game_status == "playing"
        assert not result.is_correct
        assert result.answer is None

    def test_sixth_miss_fails_without_revealing_answer(self):
        result = evaluate_guess("slate", "crane", 5)
        assert result.attempts_used == 6
        assert result.attempts_remaining == 0
        assert result.game_status == "failed"
        assert result.answer is None
        assert "answer" not in result.to_dict()

    def test_solve_on_last_attempt(self):
        result = evaluate_guess("crane", "crane", 5)
        assert result.game_status == "solved"
        assert result.attempts_remaining == 0
        assert result.answer == "crane"
        assert result.to_dict()["answer"] == "crane"

    def test_anagram_is_not_correct(self):
        result = evaluate_guess("abcde", "eabcd", 2)
        assert not result.is_correct
        assert result.game_status == "playing"
