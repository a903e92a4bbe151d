"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Difficulty, LetterFeedback, GameStatus, RingConfig, PuzzleConfig, PostData,
    ClientRingView, ClientPuzzleView, GuessResult, GameSession
)
from .user import UserStats, Achievement, ACHIEVEMENTS, LeaderboardEntry

__all__ = [
    'Difficulty', 'LetterFeedback', 'GameStatus', 'RingConfig', 'PuzzleConfig', 'PostData',
    'ClientRingView', 'ClientPuzzleView', 'GuessResult', 'GameSession',
    'UserStats', 'Achievement', 'ACHIEVEMENTS', 'LeaderboardEntry'
]
