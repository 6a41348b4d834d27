"""
Game Configuration Constants Module

This module defines the game constants: the default round limit, the bundled
word list used by the default word source, and the banner messages shown on
the board.
"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = int(os.getenv('MAX_ROUNDS', 6))
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

SUCCESS_MESSAGE: Final[str] = "Great job! 😎"
FAILURE_MESSAGE: Final[str] = "Better luck next time 😔"
START_MESSAGE: Final[str] = "Type a letter to start"


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of uppercase words, all of the same length

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

    uppercase_words = [word.upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. The list is not empty
    2. Character validation: Only alphabetic characters allowed
    3. Length validation: Every word has the same length
    4. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    expected_length = len(words[0])
    for index, word in enumerate(words):
        if not word.isalpha() or not word.isascii():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if len(word) != expected_length:
            raise ValueError(
                f"Word at index {index} '{word}' is not {expected_length} characters long"
            )

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()
