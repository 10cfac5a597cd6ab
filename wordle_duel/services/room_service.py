"""
Room Service

Owns every Room and Player record: creation, joining, departure and room
deletion once the last occupant is gone.
"""

import random
import threading
from typing import Callable, Dict, List, Optional, Tuple

from ..models.game import (
    ActionResult, DepartureReason, GameError, Outbound, Player, Room
)
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_room_id
from .word_service import WordService

MAX_PLAYERS = 2

ForfeitHandler = Callable[[Room, str], List[Outbound]]


class RoomService:
    """
    Registry of live rooms and seated players.
    
    The registry lock guards both maps. Room state is guarded by each room's
    own lock, always taken after the registry lock.
    """

    def __init__(self,
                 word_service: WordService,
                 room_id_min: int = 100000,
                 room_id_max: int = 999999,
                 max_attempts: int = 100):
        self.word_service = word_service
        self.room_id_min = room_id_min
        self.room_id_max = room_id_max
        self.max_attempts = max_attempts
        self.rooms: Dict[str, Room] = {}
        self.players: Dict[str, Player] = {}
        self._lock = threading.RLock()

    def _generate_room_id(self) -> str:
        for _ in range(self.max_attempts):
            room_id = str(random.randint(self.room_id_min, self.room_id_max))
            if room_id not in self.rooms:
                return room_id
        raise RuntimeError(f"Could not allocate a free room id after {self.max_attempts} attempts")

    def create_room(self, player_id: str,
                    forfeit: Optional[ForfeitHandler] = None) -> ActionResult:
        """
        Creates a room with the caller as its only player and host.
        
        A caller already seated elsewhere leaves that room first.
        """
        with self._lock:
            messages = self.remove_player(player_id, DepartureReason.QUIT, forfeit).messages

            room_id = self._generate_room_id()
            room = Room(id=room_id, word=self.word_service.random_word(), players=[player_id])
            self.rooms[room_id] = room
            self.players[player_id] = Player(id=player_id, room_id=room_id, is_host=True)

        game_logger.log_game_event(room_id, 'room_created', player_id, word=room.word)
        return ActionResult(response={'success': True, 'roomId': room_id}, messages=messages)

    def join_room(self, player_id: str, raw_room_id,
                  forfeit: Optional[ForfeitHandler] = None) -> ActionResult:
        """
        Seats the caller in an existing room.
        
        Fails with ROOM_NOT_FOUND, ROOM_FULL or GAME_ALREADY_STARTED. On success
        the room is told who joined and how many players it now holds.
        """
        room_id = normalize_room_id(raw_room_id)
        if room_id is None:
            return ActionResult.failure(GameError.ROOM_NOT_FOUND)

        with self._lock:
            room = self.rooms.get(room_id)
            if room is None:
                return ActionResult.failure(GameError.ROOM_NOT_FOUND)

            with room.lock:
                if player_id in room.players:
                    return ActionResult(response={'success': True, 'roomId': room_id})
                if len(room.players) >= MAX_PLAYERS:
                    return ActionResult.failure(GameError.ROOM_FULL)
                if room.started:
                    return ActionResult.failure(GameError.GAME_ALREADY_STARTED)

            messages = self.remove_player(player_id, DepartureReason.QUIT, forfeit).messages

            with room.lock:
                room.players.append(player_id)
                self.players[player_id] = Player(id=player_id, room_id=room_id, is_host=False)
                player_count = len(room.players)

        messages.append(Outbound('playerJoined', {
            'playerId': player_id,
            'playerCount': player_count
        }, room_id))
        game_logger.log_game_event(room_id, 'player_joined', player_id, player_count=player_count)
        return ActionResult(response={'success': True, 'roomId': room_id}, messages=messages)

    def remove_player(self, player_id: str,
                      reason: DepartureReason = DepartureReason.DISCONNECT,
                      forfeit: Optional[ForfeitHandler] = None) -> ActionResult:
        """
        Removes a player from its room. Calling it again is a no-op.
        
        An emptied room is deleted. Otherwise the remaining occupant is told
        the player left and, for a started game, ``forfeit`` decides the
        outcome. The response carries the room id the player left, if any.
        """
        with self._lock:
            player = self.players.get(player_id)
            if player is None:
                return ActionResult()

            messages: List[Outbound] = []
            room = self.rooms.get(player.room_id) if player.room_id else None
            if room is not None:
                with room.lock:
                    room.players = [pid for pid in room.players if pid != player_id]

                    if not room.players:
                        del self.rooms[room.id]
                        game_logger.log_game_event(room.id, 'room_deleted', player_id, reason=reason.value)
                    else:
                        messages.append(Outbound('playerLeft', {
                            'playerId': player_id,
                            'playerCount': len(room.players)
                        }, room.id))

                        if room.started and forfeit is not None:
                            messages.extend(forfeit(room, player_id))

            del self.players[player_id]

        game_logger.log_game_event(player.room_id, 'player_left', player_id, reason=reason.value)
        return ActionResult(response={'roomId': player.room_id}, messages=messages)

    def lookup(self, player_id: str) -> Tuple[Optional[Player], Optional[Room]]:
        """
        Returns the player and its room, or ``(None, None)`` when either is gone.
        
        Callers treat a missing player as a stale event and stay silent.
        """
        with self._lock:
            player = self.players.get(player_id)
            if player is None or player.room_id is None:
                return None, None
            room = self.rooms.get(player.room_id)
            if room is None:
                return None, None
            return player, room

    def get_room(self, room_id) -> Optional[Room]:
        normalized = normalize_room_id(room_id)
        if normalized is None:
            return None
        with self._lock:
            return self.rooms.get(normalized)

    def list_rooms(self) -> List[Dict]:
        """Summary of every live room, for monitoring."""
        with self._lock:
            rooms = list(self.rooms.values())
        summaries = []
        for room in rooms:
            with room.lock:
                summaries.append({
                    'id': room.id,
                    'playerCount': len(room.players),
                    'gameStarted': room.started,
                    'gameOver': room.finished
                })
        return summaries

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {'activeRooms': len(self.rooms), 'activePlayers': len(self.players)}
