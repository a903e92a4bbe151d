"""
Game Configuration Constants Module

This module defines all game rule constants for TurnIt. Ring sizes, fixed
ring counts, streak thresholds and word length limits live here so the
puzzle logic reads them from a single place.
"""

import json
import os
from typing import Dict, Final, List

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guesses allowed per puzzle.
Also the number of buckets in a user's attempt distribution.
"""

MIN_WORD_LENGTH: Final[int] = 3
MAX_WORD_LENGTH: Final[int] = 6

# Streak thresholds used to pick a difficulty tier
EASY_MAX_STREAK: Final[int] = 2
MEDIUM_MAX_STREAK: Final[int] = 5

# Letters shown on each unfixed ring, by difficulty
LETTERS_PER_RING: Final[Dict[str, int]] = {
    'easy': 6,
    'medium': 8,
    'hard': 10,
}

# Rings revealed up front, by difficulty
FIXED_LETTERS_COUNT: Final[Dict[str, int]] = {
    'easy': 2,
    'medium': 1,
    'hard': 0,
}

# Share of each ring that should be vowels
VOWEL_RATIO: Final[float] = 0.35

VOWELS: Final[List[str]] = ['a', 'e', 'i', 'o', 'u']
CONSONANTS: Final[List[str]] = [
    'b', 'c', 'd', 'f', 'g', 'h', 'j', 'k', 'l', 'm',
    'n', 'p', 'q', 'r', 's', 't', 'v', 'w', 'x', 'y', 'z',
]
ALPHABET: Final[str] = 'abcdefghijklmnopqrstuvwxyz'

# Bot-created puzzles
DAILY_WORD_LENGTH: Final[int] = 5
WELCOME_WORD_LENGTH: Final[int] = 4


def _load_word_list() -> List[str]:
    """
    Load word list from words.json.

    Returns:
        List[str]: List of lowercase words between MIN_WORD_LENGTH and MAX_WORD_LENGTH

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [word.strip().lower() for word in word_list]

    for word in lowercase_words:
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            raise ValueError(
                f"Word '{word}' must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} characters long"
            )
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return lowercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(words: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of a word database.

    Checks length bounds, alphabetic characters, lowercase formatting
    and uniqueness.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' has an unsupported length")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str] = WORD_LIST) -> dict:
    """
    Summarizes a word list for monitoring.

    Returns:
        dict: total_words, words_by_length and avg_vowel_count
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set(VOWELS)
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    words_by_length: Dict[int, int] = {}
    for word in words:
        words_by_length[len(word)] = words_by_length.get(len(word), 0) + 1

    return {
        "total_words": len(words),
        "words_by_length": dict(sorted(words_by_length.items())),
        "avg_vowel_count": round(total_vowels / len(words), 2),
    }
