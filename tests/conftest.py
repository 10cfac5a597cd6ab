import pytest

from wordle_duel import create_app
from wordle_duel.config import TestingConfig
from wordle_duel.services.game_service import GameService
from wordle_duel.services.room_service import RoomService
from wordle_duel.services.word_service import WordService

HOST = 'host-sid'
GUEST = 'guest-sid'
TARGET = 'CRANE'
# Valid dictionary words that never match TARGET
MISSES = ['SLATE', 'ABOUT', 'ABOVE', 'ACTOR', 'ADMIT', 'ADOPT']
OTHER_MISSES = ['AUDIO', 'BLOCK', 'DRINK', 'FIGHT', 'GUEST', 'HOUSE']


class FakeResponse:
    def __init__(self, ok):
        self.ok = ok


class FakeSession:
    """Stands in for requests.Session, recording every requested URL."""

    def __init__(self, ok=True, error=None):
        self.ok = ok
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.ok)


@pytest.fixture()
def word_service():
    return WordService(api_enabled=False)


@pytest.fixture()
def rooms(word_service):
    return RoomService(word_service)


@pytest.fixture()
def games(rooms, word_service):
    return GameService(rooms, word_service)


@pytest.fixture()
def room_id(games):
    """A full room: HOST created it and GUEST joined, game not started."""
    created = games.create_room(HOST).response['roomId']
    games.join_room(GUEST, created)
    return created


@pytest.fixture()
def started_room(games, room_id):
    """A started duel whose secret word is TARGET."""
    games.start_game(HOST)
    room = games.rooms.rooms[room_id]
    room.word = TARGET
    return room


@pytest.fixture()
def flask_app():
    application, _ = create_app(TestingConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _connect():
        test_client = flask_app.socketio.test_client(flask_app)
        clients.append(test_client)
        return test_client

    yield _connect

    for test_client in clients:
        if test_client.is_connected():
            test_client.disconnect()
