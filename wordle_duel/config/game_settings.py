"""
Game Configuration Constants Module

Defines the fixed game parameters and the curated word database used both
for picking secret words and as the local dictionary for guess validation.
"""

import json
import os
from typing import FrozenSet, List, Final

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and every guess."""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guesses each player may submit per game.
Type: Final[int] - Immutable to prevent accidental modification
"""


def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.
    
    Returns:
        List[str]: List of uppercase 5-letter words
        
    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the file is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')
    
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e
    
    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")
    
    if not word_list:
        raise ValueError("Word list cannot be empty")
    
    # Convert all words to uppercase and validate
    uppercase_words = [word.upper() for word in word_list]
    
    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
    
    return uppercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()

# Set view of the word database for O(1) membership checks
WORD_SET: Final[FrozenSet[str]] = frozenset(WORD_LIST)


def validate_word_list_integrity(words: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.
    
    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting
    
    Returns:
        bool: True if word list passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")
    
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")
        
        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")
    
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")
    
    return True
