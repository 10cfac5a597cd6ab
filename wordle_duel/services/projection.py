"""
State Projection

Builds the per-player view of a room. Evaluation colours and guess counts
are shared live, but literal guesses stay private to their author until the
game is finished, and the secret word is only revealed at the end.
"""

from typing import Any, Dict

from ..models.game import Room


def create_game_state_for_player(room: Room, player_id: str) -> Dict[str, Any]:
    """
    Returns the sanitized game state for one recipient.
    
    Args:
        room: Room to project (caller holds its lock)
        player_id: Connection id of the recipient
        
    Returns:
        JSON-serializable dict safe to send to ``player_id``
    """
    state: Dict[str, Any] = {
        'phase': room.phase.value,
        'gameStarted': room.started,
        'gameOver': room.finished,
        'winner': room.winner,
        'word': room.word if room.finished else None,
        'players': list(room.players),
        'playerGuessStates': {},
        'playerGuessesCount': {},
        'myGuesses': list(room.guesses.get(player_id, [])),
        'myGuessStates': [list(e) for e in room.evaluations.get(player_id, [])],
    }

    for pid in room.players:
        state['playerGuessStates'][pid] = [list(e) for e in room.evaluations.get(pid, [])]
        state['playerGuessesCount'][pid] = len(room.guesses.get(pid, []))

    # Everyone's words become public once the game is over
    if room.finished:
        state['playerGuesses'] = {
            pid: list(room.guesses.get(pid, [])) for pid in room.players
        }

    if room.quit_reason is not None:
        state['quitReason'] = room.quit_reason.value

    return state
