"""
Letter Classifier

Compares one guessed letter against the target word.
"""

from typing import Sequence
from ..models.game import LetterStatus


def classify(guess_letters: Sequence[str], target_word: Sequence[str], position: int) -> LetterStatus:
    """
    Classify the guessed letter at `position`.

    A letter is EXACT when it matches the target letter at the same position,
    PARTIAL when it occurs elsewhere in the target word, and ABSENT otherwise.
    Letters are not consumed, so a repeated guessed letter can be PARTIAL more
    than once.

    Args:
        guess_letters: Letters of one guess
        target_word: Letters of the answer
        position: Index to classify; must be in bounds for both sequences

    Returns:
        LetterStatus for that position

    Raises:
        IndexError: If position is out of range
    """
    letter = guess_letters[position]
    if letter == target_word[position]:
        return LetterStatus.EXACT
    if letter in target_word:
        return LetterStatus.PARTIAL
    return LetterStatus.ABSENT
