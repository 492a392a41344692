"""
Guess evaluation with duplicate-letter aware marking
"""

from collections import Counter
from enum import Enum

from .errors import LengthMismatchError
from .word_bank import normalize_word


class Verdict(Enum):
    """Per-position classification of a guessed letter"""

    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        """Priority used when folding verdicts into key colors (unknown is 0)"""
        return VERDICT_RANKS[self]


VERDICT_RANKS = {
    Verdict.ABSENT: 1,
    Verdict.PRESENT: 2,
    Verdict.CORRECT: 3,
}


def evaluate_guess(guess: str, target: str) -> list[Verdict]:
    """
    Compare a guess against the target, position by position

    Exact matches are resolved first and consume their target letter, so a
    repeated guess letter is only marked present while unmatched copies of
    it remain in the target.

    Raises:
        LengthMismatchError: guess and target lengths differ
    """
    guess = normalize_word(guess)
    target = normalize_word(target)

    if len(guess) != len(target):
        raise LengthMismatchError(len(target), len(guess))

    verdicts = [Verdict.ABSENT] * len(target)
    remaining = Counter()

    # First pass: exact matches
    for i, (target_letter, guessed_letter) in enumerate(zip(target, guess)):
        if guessed_letter == target_letter:
            verdicts[i] = Verdict.CORRECT
        else:
            remaining[target_letter] += 1

    # Second pass: letters present elsewhere
    for i, guessed_letter in enumerate(guess):
        if verdicts[i] is Verdict.CORRECT:
            continue
        if remaining[guessed_letter] > 0:
            verdicts[i] = Verdict.PRESENT
            remaining[guessed_letter] -= 1

    return verdicts


def is_winning(verdicts: list[Verdict]) -> bool:
    """True when every position is correct"""
    return bool(verdicts) and all(v is Verdict.CORRECT for v in verdicts)
