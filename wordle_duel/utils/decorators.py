"""
Socket.IO Handler Decorators

Contains the decorator wrapped around every inbound WebSocket event.
"""

from functools import wraps
from flask import request
from flask_socketio import emit

from .game_logger import game_logger

INTERNAL_ERROR_MESSAGE = 'Internal server error'


def player_event(action):
    """
    Decorator for WebSocket event handlers.
    
    Logs the inbound event against the caller's connection id and keeps an
    unexpected exception from escaping the handler: it is logged, the caller
    gets a generic ``error`` event and any acknowledgement reports failure.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            sid = request.sid
            game_logger.log_player_action(sid, action, args=list(args))
            try:
                return f(*args, **kwargs)
            except Exception as e:
                game_logger.log_error(sid, e, action)
                emit('error', {'message': INTERNAL_ERROR_MESSAGE})
                return {'success': False, 'error': INTERNAL_ERROR_MESSAGE}
        
        return decorated_function
    
    return decorator
