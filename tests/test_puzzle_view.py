"""Tests for the client-safe puzzle projection."""

import json

from turnit.models.game import Difficulty, PuzzleConfig, RingConfig
from turnit.services.puzzle_view import to_client_view
from turnit.services.ring_generator import RingGenerator


def make_puzzle(correct_indices):
    return PuzzleConfig(
        answer="lock",
        word_length=4,
        rings=[
            RingConfig(letters=["l"], correct_index=0, is_fixed=True),
            RingConfig(letters=["a", "o", "t", "m", "s", "e", "r", "b"], correct_index=correct_indices[0], is_fixed=False),
            RingConfig(letters=["c", "i", "u", "d", "g", "h", "n", "p"], correct_index=correct_indices[1], is_fixed=False),
            RingConfig(letters=["f", "k", "a", "w", "y", "o", "v", "x"], correct_index=correct_indices[2], is_fixed=False),
        ],
        difficulty="medium",
        fixed_indices=[0],
    )


class TestToClientView:
    def test_fixed_ring_reveals_its_letter(self):
        view = to_client_view(make_puzzle([1, 0, 1]), "alice", False).to_dict()
        assert view["rings"][0] == {"letters": ["l"], "is_fixed": True, "fixed_letter": "l"}

    def test_unfixed_rings_hide_correct_letter(self):
        view = to_client_view(make_puzzle([1, 0, 1]), "alice", False).to_dict()
        for ring in view["rings"][1:]:
            assert set(ring) == {"letters", "is_fixed"}
            assert ring["is_fixed"] is False
        assert "answer" not in view
        assert "lock" not in json.dumps(view)

    def test_metadata(self):
        view = to_client_view(make_puzzle([1, 0, 1]), "TurnIt Bot", True).to_dict()
        assert view["word_length"] == 4
        assert view["fixed_indices"] == [0]
        assert view["difficulty"] == "medium"
        assert view["creator_name"] == "TurnIt Bot"
        assert view["is_daily"] is True

    def test_view_does_not_depend_on_correct_index(self):
        first = to_client_view(make_puzzle([1, 0, 1]), "alice", False)
        second = to_client_view(make_puzzle([5, 3, 0]), "alice", False)
        assert first == second
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_generated_puzzle_projection(self, rng):
        puzzle = RingGenerator(rng).generate("crane", Difficulty.EASY)
        view = to_client_view(puzzle, "alice", False)
        assert [ring.is_fixed for ring in view.rings] == [ring.is_fixed for ring in puzzle.rings]
        assert [ring.letters for ring in view.rings] == [ring.letters for ring in puzzle.rings]
