"""
Keyboard color state accumulated over one game
"""

from collections.abc import Iterable, Mapping

from .errors import LengthMismatchError
from .evaluator import Verdict
from .word_bank import normalize_word

KeyboardState = dict[str, Verdict]

# On-screen rows per language; accented keys are kept on their own rows
KEYBOARD_LAYOUTS = {
    "en": ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"],
    "es": ["QWERTYUIOP", "ASDFGHJKLÑ", "ÁÉÍÓÚÜ"],
    "fr": ["AZERTYUIOP", "QSDFGHJKLM", "WXCVBNÉÈÊË", "ÇÀÂÎÏÔÙÛÜ"],
}


def _rank(state: Verdict | None) -> int:
    return state.rank if state is not None else 0


def update_keyboard_state(
    state: Mapping[str, Verdict], guess: str, verdicts: list[Verdict]
) -> KeyboardState:
    """
    Fold one evaluated guess into the keyboard state

    A letter only moves to a verdict that outranks what it already has
    (correct > present > absent > unknown), so keys never lose color within
    a game. The input mapping is left untouched.
    """
    guess = normalize_word(guess)
    if len(guess) != len(verdicts):
        raise LengthMismatchError(len(verdicts), len(guess))

    new_state = dict(state)
    for letter, verdict in zip(guess, verdicts):
        if verdict.rank > _rank(new_state.get(letter)):
            new_state[letter] = verdict
    return new_state


def fold_keyboard_state(
    rows: Iterable[tuple[str, list[Verdict]]]
) -> KeyboardState:
    """Build the keyboard state for a whole game from (guess, verdicts) rows"""
    state: KeyboardState = {}
    for guess, verdicts in rows:
        state = update_keyboard_state(state, guess, verdicts)
    return state


def keyboard_rows(
    language: str, state: Mapping[str, Verdict]
) -> list[list[tuple[str, Verdict | None]]]:
    """Lay out the language's keys with their current state"""
    layout = KEYBOARD_LAYOUTS.get(language, KEYBOARD_LAYOUTS["en"])
    return [
        [(key.lower(), state.get(key.lower())) for key in row]
        for row in layout
    ]
