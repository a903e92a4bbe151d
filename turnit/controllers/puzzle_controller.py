"""
Puzzle Controller

Handles puzzle loading, guessing and puzzle creation endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_auth, optional_auth
from ..utils.helpers import error_response, json_body, service_unavailable
from ..utils.game_logger import game_logger

puzzle_bp = Blueprint('puzzle', __name__)


@puzzle_bp.route('/puzzle/<puzzle_id>', methods=['GET'])
@optional_auth
def get_puzzle(puzzle_id):
    """Load client-safe puzzle data and the caller's session, if any."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_puzzle', puzzle_id)

        user_id = request.user['id'] if request.user else None
        data = game_service.get_puzzle(puzzle_id, user_id)
        session = data['session']

        response_data = {
            'success': True,
            'puzzle': data['puzzle'].to_dict(),
            'session': session.to_dict() if session else None,
            'is_creator': data['is_creator']
        }

        game_logger.log_server_response(request, 'get_puzzle', True, response_data, puzzle_id)
        return jsonify(response_data)

    except Exception as e:
        return error_response(e, 'get_puzzle', puzzle_id)


@puzzle_bp.route('/puzzle/<puzzle_id>/guess', methods=['POST'])
@require_auth
def submit_guess(puzzle_id):
    """Submit a guess for evaluation."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        data = json_body()
        guess = data.get('guess')

        game_logger.log_user_action(
            request, 'submit_guess', puzzle_id,
            guess_length=len(guess) if isinstance(guess, str) else None
        )

        result, unlocked = game_service.submit_guess(puzzle_id, request.user['id'], guess)

        response_data = {
            'success': True,
            'result': result.to_dict(),
            'achievements_unlocked': unlocked
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, puzzle_id,
            attempts_used=result.attempts_used, game_status=result.game_status
        )
        return jsonify(response_data)

    except Exception as e:
        return error_response(e, 'submit_guess', puzzle_id)


@puzzle_bp.route('/create', methods=['POST'])
@require_auth
def create_puzzle():
    """Create a user-made puzzle from a dictionary word."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        data = json_body()
        word = data.get('word')

        game_logger.log_user_action(request, 'create_puzzle')

        puzzle_id = game_service.create_custom_puzzle(
            word, request.user['id'], request.user['username']
        )

        response_data = {
            'success': True,
            'puzzle_id': puzzle_id
        }

        game_logger.log_server_response(request, 'create_puzzle', True, response_data, puzzle_id)
        return jsonify(response_data)

    except Exception as e:
        return error_response(e, 'create_puzzle')


@puzzle_bp.route('/validate-word', methods=['POST'])
def validate_word():
    """Check if a word is valid before creating a puzzle."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        data = json_body()
        word = data.get('word')

        return jsonify({
            'success': True,
            'valid': game_service.validate_word(word)
        })

    except Exception as e:
        return error_response(e, 'validate_word')


@puzzle_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'game_service_available': game_service is not None,
        'log_stats': game_logger.get_log_stats()
    }
    return jsonify(response_data)
