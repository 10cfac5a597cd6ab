"""
Game Service

Contains the core game logic for two-player Wordle duels: starting and
restarting games, guess validation and evaluation, and deciding wins, ties
and forfeits.
"""

from typing import List, Optional

from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..models.game import (
    ActionResult, DepartureReason, GameError, GamePhase, LetterStatus,
    Outbound, QuitReason, Room
)
from ..utils.game_logger import game_logger
from .projection import create_game_state_for_player
from .room_service import RoomService
from .word_service import WordService

MIN_PLAYERS = 2


def evaluate_guess(guess: str, target: str) -> List[str]:
    """
    Implements the Wordle letter evaluation algorithm.
    
    Exact matches are taken first. Remaining guess letters are then matched
    left to right against unconsumed target letters, so a repeated letter is
    never credited more often than it occurs in the target.
    
    Args:
        guess: Uppercase guess
        target: Uppercase secret word of the same length
        
    Returns:
        One LetterStatus value per position
    """
    result: List[Optional[str]] = [None] * len(guess)
    target_chars: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            result[i] = LetterStatus.CORRECT.value
            target_chars[i] = None

    # Second pass: misplaced letters and misses
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in target_chars:
            result[i] = LetterStatus.PRESENT.value
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterStatus.ABSENT.value

    return result  # type: ignore[return-value]


def is_winning_evaluation(evaluation: List[str]) -> bool:
    return bool(evaluation) and all(status == LetterStatus.CORRECT.value for status in evaluation)


def is_well_formed_guess(guess) -> bool:
    """A guess must be exactly five uppercase ASCII letters."""
    return (
        isinstance(guess, str)
        and len(guess) == WORD_LENGTH
        and all('A' <= char <= 'Z' for char in guess)
    )


class GameService:
    """
    Game engine for duel rooms.
    
    Each operation resolves the caller through the room service, applies one
    state transition under the room's lock and returns the messages to send.
    Events for players or rooms that no longer exist are ignored silently.
    """

    def __init__(self, room_service: RoomService, word_service: WordService,
                 max_guesses: int = MAX_GUESSES):
        self.rooms = room_service
        self.word_service = word_service
        self.max_guesses = max_guesses

    def _personalized(self, room: Room, event: str) -> List[Outbound]:
        """One projection per occupant, each sent to that occupant only."""
        return [
            Outbound(event, create_game_state_for_player(room, pid), pid)
            for pid in room.players
        ]

    def create_room(self, player_id: str) -> ActionResult:
        return self.rooms.create_room(player_id, forfeit=self.forfeit)

    def join_room(self, player_id: str, room_id) -> ActionResult:
        return self.rooms.join_room(player_id, room_id, forfeit=self.forfeit)

    def leave_room(self, player_id: str,
                   reason: DepartureReason = DepartureReason.QUIT) -> ActionResult:
        """Departure handling for an explicit leave or a dropped connection."""
        return self.rooms.remove_player(player_id, reason, forfeit=self.forfeit)

    def start_game(self, player_id: str) -> ActionResult:
        """
        Host starts the game once the room is full.
        
        Non-hosts are ignored. A host alone in the room gets an error.
        """
        player, room = self.rooms.lookup(player_id)
        if room is None:
            return ActionResult()

        with room.lock:
            if player_id not in room.players or not player.is_host:
                return ActionResult()
            if len(room.players) < MIN_PLAYERS:
                return ActionResult.error_event(player_id, GameError.NOT_ENOUGH_PLAYERS)
            if room.started:
                return ActionResult()

            room.started = True
            room.reset_histories()
            messages = self._personalized(room, 'gameStarted')

        game_logger.log_game_event(room.id, 'game_started', player_id, players=list(room.players))
        return ActionResult(messages=messages)

    def submit_guess(self, player_id: str, raw_guess) -> ActionResult:
        """
        Validates and applies a guess, then resolves the end of the turn.
        
        The dictionary lookup runs without holding the room lock, so the room
        is checked again before anything is recorded.
        """
        _, room = self.rooms.lookup(player_id)
        if room is None:
            return ActionResult()

        with room.lock:
            if player_id not in room.players or room.phase is not GamePhase.IN_PROGRESS:
                return ActionResult()
            if not is_well_formed_guess(raw_guess):
                return ActionResult.error_event(player_id, GameError.INVALID_GUESS_FORMAT)
            if len(room.guesses.get(player_id, [])) >= self.max_guesses:
                return ActionResult.error_event(player_id, GameError.GUESS_LIMIT_EXCEEDED)

        guess = raw_guess
        if not self.word_service.is_valid_word(guess):
            return ActionResult.error_event(player_id, GameError.WORD_NOT_RECOGNIZED)

        with room.lock:
            # The opponent may have won or either player may have left meanwhile
            if player_id not in room.players or room.phase is not GamePhase.IN_PROGRESS:
                return ActionResult()
            guesses = room.guesses.setdefault(player_id, [])
            if len(guesses) >= self.max_guesses:
                return ActionResult.error_event(player_id, GameError.GUESS_LIMIT_EXCEEDED)

            evaluation = evaluate_guess(guess, room.word)
            guesses.append(guess)
            room.evaluations.setdefault(player_id, []).append(evaluation)

            game_logger.log_game_event(
                room.id, 'guess_accepted', player_id,
                guess=guess, evaluation=evaluation, attempt=len(guesses)
            )
            return ActionResult(messages=self._resolve_turn(room, player_id, evaluation))

    def _resolve_turn(self, room: Room, player_id: str, evaluation: List[str]) -> List[Outbound]:
        if is_winning_evaluation(evaluation):
            self._finish(room, player_id)
        elif len(room.guesses[player_id]) >= self.max_guesses:
            opponent = room.opponent_of(player_id)
            opponent_evaluations = room.evaluations.get(opponent, []) if opponent else []
            opponent_won = any(is_winning_evaluation(e) for e in opponent_evaluations)
            # A restarted room may hold a single player
            opponent_exhausted = (
                opponent is None
                or len(room.guesses.get(opponent, [])) >= self.max_guesses
            )

            if opponent_won:
                self._finish(room, opponent)
            elif opponent_exhausted:
                self._finish(room, None)

        if room.finished:
            return self._personalized(room, 'gameOver')
        return self._personalized(room, 'gameStateUpdate')

    def _finish(self, room: Room, winner: Optional[str]) -> None:
        room.finished = True
        room.winner = winner
        if winner is None:
            game_logger.log_game_event(room.id, 'game_tied', None, word=room.word)
        else:
            game_logger.log_game_event(
                room.id, 'game_won', winner,
                word=room.word, rounds_used=len(room.guesses.get(winner, []))
            )

    def restart_game(self, player_id: str) -> ActionResult:
        """Either player starts a fresh game with a new word in the same room."""
        _, room = self.rooms.lookup(player_id)
        if room is None:
            return ActionResult()

        with room.lock:
            if player_id not in room.players or not room.started:
                return ActionResult()

            room.word = self.word_service.random_word()
            room.started = True
            room.finished = False
            room.winner = None
            room.quit_reason = None
            room.reset_histories()
            messages = self._personalized(room, 'gameRestarted')

        game_logger.log_game_event(room.id, 'game_restarted', player_id, word=room.word)
        return ActionResult(messages=messages)

    def forfeit(self, room: Room, departing_player_id: str) -> List[Outbound]:
        """
        Settles a started game after ``departing_player_id`` has left the room.
        
        An unfinished game is won by the remaining player. A finished game
        keeps its winner. Either way the outcome is marked as caused by the
        opponent quitting and only the remaining occupants are told.
        """
        with room.lock:
            if not room.started or not room.players:
                return []

            if not room.finished:
                room.finished = True
                room.winner = room.players[0]
                game_logger.log_game_event(
                    room.id, 'game_forfeited', departing_player_id,
                    winner=room.winner, word=room.word
                )
            room.quit_reason = QuitReason.OPPONENT_QUIT

            return self._personalized(room, 'gameOver')

    def get_room_status(self, player_id: str) -> ActionResult:
        _, room = self.rooms.lookup(player_id)
        if room is None:
            return ActionResult.failure(GameError.PLAYER_NOT_FOUND)

        with room.lock:
            state = create_game_state_for_player(room, player_id)
        return ActionResult(response={'success': True, 'room': {'id': room.id, **state}})
