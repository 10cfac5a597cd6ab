"""
Services Package

Contains all business logic and service classes.
"""

from .word_service import WordService
from .room_service import RoomService
from .game_service import GameService, evaluate_guess
from .projection import create_game_state_for_player

__all__ = [
    'WordService', 'RoomService', 'GameService',
    'evaluate_guess', 'create_game_state_for_player'
]
