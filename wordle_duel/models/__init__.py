"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    ActionResult, DepartureReason, GameError, GamePhase, LetterStatus,
    Outbound, Player, QuitReason, Room
)

__all__ = [
    'ActionResult', 'DepartureReason', 'GameError', 'GamePhase', 'LetterStatus',
    'Outbound', 'Player', 'QuitReason', 'Room'
]
