"""
Difficulty Policy

Maps a solve streak to a difficulty tier and a tier to ring parameters.
"""

from typing import NamedTuple, Union

from ..config.game_settings import (
    EASY_MAX_STREAK, MEDIUM_MAX_STREAK, LETTERS_PER_RING, FIXED_LETTERS_COUNT
)
from ..models.game import Difficulty


class RingParams(NamedTuple):
    ring_size: int
    fixed_count: int


def tier_for_streak(streak: int) -> Difficulty:
    """Return the difficulty tier a player on `streak` should face."""
    if streak <= EASY_MAX_STREAK:
        return Difficulty.EASY
    if streak <= MEDIUM_MAX_STREAK:
        return Difficulty.MEDIUM
    return Difficulty.HARD


def params_for_tier(tier: Union[Difficulty, str]) -> RingParams:
    """Return ring size and fixed ring count for a tier (enum or its value)."""
    key = Difficulty(tier).value
    return RingParams(ring_size=LETTERS_PER_RING[key], fixed_count=FIXED_LETTERS_COUNT[key])
