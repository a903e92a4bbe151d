"""
Puzzle View

Strips secrets from a puzzle configuration before it reaches a client.
"""

from ..models.game import ClientPuzzleView, ClientRingView, PuzzleConfig


def to_client_view(puzzle: PuzzleConfig, creator_name: str, is_daily: bool) -> ClientPuzzleView:
    """
    Project a puzzle into client-safe data.

    Unfixed rings expose only their shuffled letters, never which one is
    correct. Fixed rings reveal their single letter.
    """
    rings = []
    for ring in puzzle.rings:
        if ring.is_fixed:
            rings.append(ClientRingView(
                letters=list(ring.letters),
                is_fixed=True,
                fixed_letter=ring.letters[0],
            ))
        else:
            rings.append(ClientRingView(letters=list(ring.letters), is_fixed=False))

    return ClientPuzzleView(
        word_length=puzzle.word_length,
        rings=rings,
        fixed_indices=list(puzzle.fixed_indices),
        difficulty=puzzle.difficulty,
        creator_name=creator_name,
        is_daily=is_daily,
    )
