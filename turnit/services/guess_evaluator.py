"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm and the attempt
bookkeeping that follows each guess.
"""

from typing import List, Optional

from ..config.game_settings import MAX_ATTEMPTS
from ..models.game import GameStatus, GuessResult, LetterFeedback


def letter_feedback(guess: str, answer: str) -> List[LetterFeedback]:
    """
    Score each letter of `guess` against `answer`.

    Exact matches are marked first and consume their answer position, so a
    letter repeated in the guess is credited at most as many times as it
    appears in the answer.
    """
    guess_chars = list(guess.lower())
    answer_chars = list(answer.lower())
    result: List[Optional[LetterFeedback]] = [None] * len(answer_chars)
    consumed = [False] * len(answer_chars)

    # First pass: exact position matches
    for i, letter in enumerate(guess_chars):
        if letter == answer_chars[i]:
            result[i] = LetterFeedback.CORRECT
            consumed[i] = True

    # Second pass: leftmost unconsumed occurrence elsewhere in the answer
    for i, letter in enumerate(guess_chars):
        if result[i] is not None:
            continue
        result[i] = LetterFeedback.ABSENT
        for j, answer_letter in enumerate(answer_chars):
            if not consumed[j] and answer_letter == letter:
                result[i] = LetterFeedback.PRESENT
                consumed[j] = True
                break

    return result


def evaluate_guess(guess: str, answer: str, attempts_used: int) -> GuessResult:
    """
    Evaluate a guess against the answer.

    Args:
        guess: Guessed word, same length as the answer
        answer: The puzzle answer
        attempts_used: Attempts already spent before this guess

    Returns:
        GuessResult; `answer` is only filled in when the guess solves the puzzle
    """
    feedback = letter_feedback(guess, answer)

    new_attempts_used = attempts_used + 1
    is_correct = guess.lower() == answer.lower()
    attempts_remaining = MAX_ATTEMPTS - new_attempts_used

    if is_correct:
        status = GameStatus.SOLVED
    elif attempts_remaining <= 0:
        status = GameStatus.FAILED
    else:
        status = GameStatus.PLAYING

    return GuessResult(
        feedback=[f.value for f in feedback],
        is_correct=is_correct,
        attempts_used=new_attempts_used,
        attempts_remaining=attempts_remaining,
        game_status=status.value,
        answer=answer.lower() if status == GameStatus.SOLVED else None,
    )
