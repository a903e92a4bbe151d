"""
Internal Controller

Endpoints called by the hosting platform: app install, the moderator menu
action and the daily scheduler.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_response, service_unavailable

internal_bp = Blueprint('internal', __name__)


@internal_bp.route('/on-app-install', methods=['POST'])
@internal_bp.route('/menu/post-create', methods=['POST'])
def create_welcome_puzzle():
    """Create the welcome puzzle."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        puzzle_id = game_service.create_welcome_puzzle()
        return jsonify({
            'success': True,
            'puzzle_id': puzzle_id
        })

    except Exception as e:
        return error_response(e, 'create_welcome_puzzle')


@internal_bp.route('/scheduler/daily-puzzle', methods=['POST'])
def create_daily_puzzle():
    """
    Create the daily puzzle.

    Always answers ok so the scheduler does not retry; failures are logged.
    """
    game_service = get_game_service()
    if not game_service:
        game_logger.logger.error("Daily puzzle creation failed: game service unavailable")
        return jsonify({'status': 'ok'})

    try:
        puzzle_id = game_service.create_daily_puzzle()
        game_logger.log_game_event(puzzle_id, 'daily_puzzle_created', 'system')
    except Exception as e:
        game_logger.log_error(request, e, 'create_daily_puzzle')

    return jsonify({'status': 'ok'})
