"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .game_logger import game_logger
from .helpers import normalize_room_id
from .decorators import player_event

__all__ = ['player_event', 'normalize_room_id', 'game_logger']
