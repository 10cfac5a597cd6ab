"""
Word Service

Picks secret words and decides whether a guess is a real word.
"""

import random
from typing import Iterable, Optional

import requests

from ..config.game_settings import WORD_LIST
from ..utils.game_logger import game_logger

DEFAULT_DICTIONARY_API_URL = 'https://api.dictionaryapi.dev/api/v2/entries/en/{word}'


class WordService:
    """
    Word source and validity oracle.
    
    Validity is checked against the in-memory word set first and falls back
    to the Free Dictionary API. Any failure of the remote lookup counts as
    "not a word" so a slow or unreachable API never blocks a game.
    """

    def __init__(self,
                 words: Iterable[str] = WORD_LIST,
                 api_url: str = DEFAULT_DICTIONARY_API_URL,
                 timeout: float = 5.0,
                 api_enabled: bool = True,
                 session: Optional[requests.Session] = None):
        self.word_list = [word.upper() for word in words]
        self.word_set = frozenset(self.word_list)
        self.api_url = api_url
        self.timeout = timeout
        self.api_enabled = api_enabled
        self.session = session or requests.Session()

    def random_word(self) -> str:
        """Select a random secret word from the candidate list."""
        return random.choice(self.word_list)

    def is_valid_word(self, word: str) -> bool:
        """Return True if ``word`` (uppercase) is a recognised English word."""
        if word.upper() in self.word_set:
            return True

        if not self.api_enabled:
            return False

        return self._lookup_remote(word.lower())

    def _lookup_remote(self, word: str) -> bool:
        url = self.api_url.format(word=word)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            game_logger.log_warning(
                'dictionary_lookup',
                'Dictionary API failed, treating word as invalid',
                word=word, error=str(e)
            )
            return False
        return response.ok
