"""
Health Controller

Handles the monitoring HTTP endpoints.
"""

from flask import Blueprint, current_app, jsonify

from ..utils.game_logger import game_logger

health_bp = Blueprint('health', __name__)


@health_bp.route('/', methods=['GET'])
def health_check():
    """Health check endpoint."""
    room_service = current_app.extensions['wordle_duel'].rooms
    stats = room_service.stats()

    return jsonify({
        'message': 'WORDLE Duel Server',
        'status': 'running',
        'activeRooms': stats['activeRooms'],
        'activePlayers': stats['activePlayers'],
        'logStats': game_logger.get_log_stats()
    })


@health_bp.route('/rooms', methods=['GET'])
def list_rooms():
    """Summary of active rooms, for debugging."""
    room_service = current_app.extensions['wordle_duel'].rooms
    return jsonify({'rooms': room_service.list_rooms()})
