"""
Utilities Package

Contains decorators, error types, response helpers and the game logger.
"""

from .decorators import require_auth, optional_auth
from .errors import (
    GameError, ValidationError, AuthenticationError, NotFoundError, IllegalStateError, InternalError
)
from .game_logger import game_logger
from .helpers import error_response, json_body, service_unavailable

__all__ = [
    'require_auth', 'optional_auth',
    'GameError', 'ValidationError', 'AuthenticationError', 'NotFoundError',
    'IllegalStateError', 'InternalError',
    'game_logger',
    'error_response', 'json_body', 'service_unavailable'
]
