"""
WebSocket Event Handlers

Binds the game services to Socket.IO: connection ids become player ids,
Socket.IO rooms carry room broadcasts, and acknowledgements carry the
request/response events.
"""

from flask import request
from flask_socketio import join_room, leave_room

from ..models.game import ActionResult, DepartureReason
from ..services.game_service import GameService
from ..utils.decorators import player_event
from ..utils.game_logger import game_logger


def deliver(socketio, result: ActionResult) -> None:
    """Emit every outbound message of a service result, in order."""
    for message in result.messages:
        socketio.emit(message.event, message.payload, to=message.to)


def register_websocket_handlers(socketio, game_service: GameService):
    """Register all WebSocket event handlers."""

    def _current_room_id(sid):
        player, _ = game_service.rooms.lookup(sid)
        return player.room_id if player else None

    def _move_to_room(previous_room_id, room_id):
        if previous_room_id and previous_room_id != room_id:
            leave_room(previous_room_id)
        join_room(room_id)

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Handle WebSocket connection."""
        game_logger.log_player_action(request.sid, 'connect')

    @socketio.on('disconnect')
    @player_event('disconnect')
    def handle_disconnect(*args):
        """A dropped connection is handled exactly like leaving the room."""
        result = game_service.leave_room(request.sid, DepartureReason.DISCONNECT)
        deliver(socketio, result)

    @socketio.on('createRoom')
    @player_event('createRoom')
    def handle_create_room(*args):
        """Create a room hosted by the caller."""
        sid = request.sid
        previous_room_id = _current_room_id(sid)

        result = game_service.create_room(sid)
        _move_to_room(previous_room_id, result.response['roomId'])
        deliver(socketio, result)
        return result.response

    @socketio.on('joinRoom')
    @player_event('joinRoom')
    def handle_join_room(room_id=None):
        """Join an existing room by id."""
        sid = request.sid
        previous_room_id = _current_room_id(sid)

        result = game_service.join_room(sid, room_id)
        if result.response.get('success'):
            # Join the broadcast group first so the caller also sees playerJoined
            _move_to_room(previous_room_id, result.response['roomId'])
        deliver(socketio, result)
        return result.response

    @socketio.on('startGame')
    @player_event('startGame')
    def handle_start_game(*args):
        """Host starts the game."""
        deliver(socketio, game_service.start_game(request.sid))

    @socketio.on('submitGuess')
    @player_event('submitGuess')
    def handle_submit_guess(guess=None):
        """Submit a guess; results arrive as state broadcasts or an error event."""
        deliver(socketio, game_service.submit_guess(request.sid, guess))

    @socketio.on('restartGame')
    @player_event('restartGame')
    def handle_restart_game(*args):
        """Start a new game with a new word in the same room."""
        deliver(socketio, game_service.restart_game(request.sid))

    @socketio.on('getRoomStatus')
    @player_event('getRoomStatus')
    def handle_get_room_status(*args):
        """Return the caller's view of its room."""
        return game_service.get_room_status(request.sid).response

    @socketio.on('leaveRoom')
    @player_event('leaveRoom')
    def handle_leave_room(*args):
        """Explicitly leave the current room."""
        result = game_service.leave_room(request.sid, DepartureReason.QUIT)
        if result.response and result.response.get('roomId'):
            leave_room(result.response['roomId'])
        deliver(socketio, result)
