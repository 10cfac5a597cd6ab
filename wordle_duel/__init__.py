"""
Wordle Duel Server Application Package

Real-time two-player Wordle: players pair up in numbered rooms and race to
guess the same secret word over Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Every app gets its own word, room and game services, so separate apps
    (for example one per test) never share rooms.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Tuple of the Flask application and its SocketIO instance
    """
    from .services.word_service import WordService
    from .services.room_service import RoomService
    from .services.game_service import GameService

    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    origins = app.config['FRONTEND_URL']
    CORS(app, origins=origins)
    socketio = SocketIO(app, cors_allowed_origins=origins, logger=False, engineio_logger=False)
    
    # Initialize services
    word_service = WordService(
        api_url=app.config['DICTIONARY_API_URL'],
        timeout=app.config['DICTIONARY_API_TIMEOUT'],
        api_enabled=app.config['DICTIONARY_API_ENABLED']
    )
    room_service = RoomService(
        word_service,
        room_id_min=app.config['ROOM_ID_MIN'],
        room_id_max=app.config['ROOM_ID_MAX'],
        max_attempts=app.config['ROOM_ID_MAX_ATTEMPTS']
    )
    game_service = GameService(room_service, word_service)
    app.extensions['wordle_duel'] = game_service
    
    # Register blueprints
    from .controllers.health_controller import health_bp
    app.register_blueprint(health_bp)
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, game_service)
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
