"""
Services Package

Contains the puzzle logic and the service classes built around it.
"""

from .auth_service import AuthService, get_auth_service, initialize_auth_service
from .game_service import GameService, get_game_service, initialize_game_service
from .ring_generator import RingGenerator
from .guess_evaluator import evaluate_guess
from .progress_tracker import apply_solve, apply_fail
from .puzzle_view import to_client_view
from .difficulty_policy import tier_for_streak, params_for_tier

__all__ = [
    'AuthService', 'get_auth_service', 'initialize_auth_service',
    'GameService', 'get_game_service', 'initialize_game_service',
    'RingGenerator', 'evaluate_guess', 'apply_solve', 'apply_fail',
    'to_client_view', 'tier_for_streak', 'params_for_tier'
]
