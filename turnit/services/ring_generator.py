"""
Ring Generator

Builds the combination-lock rings for an answer word. Each unfixed ring mixes
the correct letter with vowel and consonant decoys; fixed rings reveal their
letter outright.
"""

import math
import random
from typing import List, Optional, Union

from ..config.game_settings import ALPHABET, CONSONANTS, VOWELS, VOWEL_RATIO
from ..models.game import Difficulty, PuzzleConfig, RingConfig
from .difficulty_policy import params_for_tier


class RingGenerator:
    """
    Generates puzzle configurations.

    Randomness comes from `rng` so tests can pass a seeded random.Random.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(self, answer: str, difficulty: Union[Difficulty, str]) -> PuzzleConfig:
        """
        Generate a full puzzle config for an answer word and difficulty.

        Args:
            answer: Lowercase answer word, 3-6 letters
            difficulty: Difficulty tier (enum or its value)

        Returns:
            PuzzleConfig with one ring per letter of the answer
        """
        tier = Difficulty(difficulty)
        ring_size, fixed_count = params_for_tier(tier)
        word_length = len(answer)

        fixed_indices = sorted(self.rng.sample(range(word_length), min(fixed_count, word_length)))

        rings: List[RingConfig] = []
        for index, correct_letter in enumerate(answer):
            if index in fixed_indices:
                rings.append(RingConfig(letters=[correct_letter], correct_index=0, is_fixed=True))
                continue

            letters = self.ring_letters(correct_letter, ring_size)
            rings.append(RingConfig(
                letters=letters,
                correct_index=letters.index(correct_letter),
                is_fixed=False,
            ))

        return PuzzleConfig(
            answer=answer,
            word_length=word_length,
            rings=rings,
            difficulty=tier.value,
            fixed_indices=fixed_indices,
        )

    def ring_letters(self, correct_letter: str, total_letters: int) -> List[str]:
        """
        Pick `total_letters` unique letters including `correct_letter`,
        roughly VOWEL_RATIO of them vowels, in shuffled order.
        """
        is_vowel = correct_letter in VOWELS
        target_vowels = max(1, math.floor(total_letters * VOWEL_RATIO))

        if is_vowel:
            vowels_to_add = target_vowels - 1
            consonants_to_add = total_letters - target_vowels
        else:
            vowels_to_add = target_vowels
            consonants_to_add = total_letters - target_vowels - 1
        vowels_to_add = max(0, vowels_to_add)
        consonants_to_add = max(0, consonants_to_add)

        available_vowels = [v for v in VOWELS if v != correct_letter]
        available_consonants = [c for c in CONSONANTS if c != correct_letter]
        self.rng.shuffle(available_vowels)
        self.rng.shuffle(available_consonants)

        letters = [correct_letter]
        for pool, count in ((available_vowels, vowels_to_add), (available_consonants, consonants_to_add)):
            for letter in pool[:count]:
                if len(letters) >= total_letters:
                    break
                letters.append(letter)

        # Back-fill from whatever is left of the alphabet
        leftovers = [letter for letter in ALPHABET if letter not in letters]
        self.rng.shuffle(leftovers)
        while len(letters) < total_letters and leftovers:
            letters.append(leftovers.pop())

        self.rng.shuffle(letters)
        return letters
