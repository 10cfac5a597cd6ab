"""
Wordle Duel Server - Main Entry Point

This is the main entry point for the game server.
It builds the Flask-SocketIO application and starts serving.
"""

from wordle_duel import create_app
from wordle_duel.config import Config, validate_word_list_integrity
from wordle_duel.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        validate_word_list_integrity()
        
        app, socketio = create_app(Config)
        
        game_logger.logger.info("Wordle Duel Server starting")
        print(f"WORDLE Duel Server is running on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("WebSocket server is ready for connections")
        
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Duel Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
