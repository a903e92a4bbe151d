"""
Helper Functions

Request and response helpers shared by the controllers.
"""

from flask import request, jsonify

from .errors import GameError, InternalError, ValidationError
from .game_logger import game_logger


def json_body() -> dict:
    """Return the request's JSON object; a missing body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


def service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def error_response(error: Exception, action: str, puzzle_id=None):
    """Turn an exception into the error envelope and log it."""
    if not isinstance(error, GameError):
        game_logger.log_error(request, error, action, puzzle_id)
        error = InternalError('Internal server error')

    error_body = {
        'success': False,
        'error': error.message
    }
    game_logger.log_server_response(request, action, False, error_body, puzzle_id)
    return jsonify(error_body), error.status_code
