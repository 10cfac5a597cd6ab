"""
Game Data Models

Contains all room, player and game-related data structures and enums.
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LetterStatus(Enum):
    """Per-letter evaluation of a guess against the secret word."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GamePhase(Enum):
    """Lifecycle phase of the game hosted by a room."""
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class QuitReason(Enum):
    """Marker attached to an outcome caused by a departing player."""
    OPPONENT_QUIT = "opponent_quit"


class DepartureReason(Enum):
    """Why a player left a room. Only used for logging."""
    QUIT = "quit"
    DISCONNECT = "disconnect"


class GameError(Enum):
    """User input errors. The value is the message shown to the player."""
    ROOM_NOT_FOUND = "Room not found"
    ROOM_FULL = "Room is full"
    GAME_ALREADY_STARTED = "Game already started"
    NOT_ENOUGH_PLAYERS = "Need at least 2 players to start"
    INVALID_GUESS_FORMAT = "Invalid guess. Must be 5 letters."
    GUESS_LIMIT_EXCEEDED = "You have already used all 6 guesses."
    WORD_NOT_RECOGNIZED = "Not in dictionary"
    PLAYER_NOT_FOUND = "Player not found"


@dataclass
class Player:
    """A connected participant seated in a room."""
    id: str
    room_id: Optional[str]
    is_host: bool = False


@dataclass
class Room:
    """
    Server-side room state.
    
    Guess and evaluation histories are keyed by player id and always have
    equal length. The secret word never leaves the server before the game
    is finished.
    """
    id: str
    word: str
    players: List[str] = field(default_factory=list)
    started: bool = False
    finished: bool = False
    winner: Optional[str] = None
    quit_reason: Optional[QuitReason] = None
    guesses: Dict[str, List[str]] = field(default_factory=dict)
    evaluations: Dict[str, List[List[str]]] = field(default_factory=dict)
    lock: Any = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def phase(self) -> GamePhase:
        if self.finished:
            return GamePhase.FINISHED
        if self.started:
            return GamePhase.IN_PROGRESS
        return GamePhase.WAITING

    def opponent_of(self, player_id: str) -> Optional[str]:
        for pid in self.players:
            if pid != player_id:
                return pid
        return None

    def reset_histories(self) -> None:
        self.guesses = {pid: [] for pid in self.players}
        self.evaluations = {pid: [] for pid in self.players}


@dataclass
class Outbound:
    """
    A message the transport must deliver.
    
    ``to`` is either a connection id (targeted) or a room id (room broadcast).
    """
    event: str
    payload: Dict[str, Any]
    to: str


@dataclass
class ActionResult:
    """Outcome of one inbound event: the ack response plus messages to emit."""
    response: Optional[Dict[str, Any]] = None
    messages: List[Outbound] = field(default_factory=list)

    @classmethod
    def failure(cls, error: GameError) -> 'ActionResult':
        return cls(response={'success': False, 'error': error.value})

    @classmethod
    def error_event(cls, player_id: str, error: GameError) -> 'ActionResult':
        return cls(messages=[Outbound('error', {'message': error.value}, player_id)])
