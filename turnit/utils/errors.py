"""
Error Types

Exceptions raised by the game service. Each carries the HTTP status the
controllers answer with.
"""


class GameError(Exception):
    """Base class for rejected game operations."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GameError):
    """Malformed input: bad length, unknown word, missing field."""
    status_code = 400


class AuthenticationError(GameError):
    """Missing or invalid credentials."""
    status_code = 401


class NotFoundError(GameError):
    """Puzzle or word not found."""
    status_code = 404


class IllegalStateError(GameError):
    """Operation not allowed in the session's current state."""
    status_code = 409


class InternalError(GameError):
    """Unexpected collaborator failure."""
    status_code = 500
