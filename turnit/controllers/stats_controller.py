"""
Stats Controller

Handles user stats and leaderboard endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, request, jsonify
from ..models.user import ACHIEVEMENTS
from ..services.game_service import get_game_service
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger
from ..utils.helpers import error_response, service_unavailable

stats_bp = Blueprint('stats', __name__)


@stats_bp.route('/stats', methods=['GET'])
@require_auth
def get_stats():
    """Get the current user's stats and difficulty tier."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        stats, difficulty = game_service.get_stats(request.user['id'])
        return jsonify({
            'success': True,
            'stats': stats.to_dict(),
            'difficulty': difficulty.value
        })

    except Exception as e:
        return error_response(e, 'get_stats')


@stats_bp.route('/achievements', methods=['GET'])
def list_achievements():
    """Achievement catalog."""
    return jsonify({
        'success': True,
        'achievements': [asdict(a) for a in ACHIEVEMENTS]
    })


@stats_bp.route('/leaderboard/post/<puzzle_id>', methods=['GET'])
def post_leaderboard(puzzle_id):
    """Get the leaderboard for one puzzle."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        game_logger.log_user_action(request, 'post_leaderboard', puzzle_id)
        entries, total_solvers = game_service.get_post_leaderboard(puzzle_id)
        return jsonify({
            'success': True,
            'entries': [asdict(entry) for entry in entries],
            'total_solvers': total_solvers
        })

    except Exception as e:
        return error_response(e, 'post_leaderboard', puzzle_id)


@stats_bp.route('/leaderboard/global', methods=['GET'])
def global_leaderboard():
    """Get the global leaderboard."""
    game_service = get_game_service()
    if not game_service:
        return service_unavailable()

    try:
        game_logger.log_user_action(request, 'global_leaderboard')
        entries = game_service.get_global_leaderboard()
        return jsonify({
            'success': True,
            'entries': [asdict(entry) for entry in entries]
        })

    except Exception as e:
        return error_response(e, 'global_leaderboard')
