"""
Word Dictionary

Membership checks and random word selection over the configured word list,
grouped by word length.
"""

import random
import threading
from typing import Dict, Iterable, List, Optional, Set

from ..config.game_settings import WORD_LIST
from ..utils.errors import NotFoundError


class WordDictionary:
    """
    Word list indexed by length.

    Loading happens once, on the first call to ensure_loaded() or on the
    first lookup, whichever comes first.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None):
        self._source = words
        self.rng = rng or random.Random()
        self._by_length: Dict[int, List[str]] = {}
        self._members: Set[str] = set()
        self._loaded = False
        self._lock = threading.Lock()

    def ensure_loaded(self) -> None:
        """Build the length index if it has not been built yet."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            source = WORD_LIST if self._source is None else self._source
            for word in source:
                normalized = word.strip().lower()
                if not normalized or normalized in self._members:
                    continue
                self._members.add(normalized)
                self._by_length.setdefault(len(normalized), []).append(normalized)
            self._loaded = True

    def contains(self, word: str) -> bool:
        """Check if a word exists in the dictionary."""
        self.ensure_loaded()
        return word.strip().lower() in self._members

    def random_word_of_length(self, length: int) -> str:
        """
        Pick a random word of the specified length.

        Raises:
            NotFoundError: If no word of that length exists
        """
        self.ensure_loaded()
        candidates = self._by_length.get(length)
        if not candidates:
            raise NotFoundError(f"No words of length {length} in dictionary")
        return self.rng.choice(candidates)

    def word_count(self, length: int) -> int:
        """Get total word count for a given length."""
        self.ensure_loaded()
        return len(self._by_length.get(length, []))

    def __len__(self) -> int:
        self.ensure_loaded()
        return len(self._members)
