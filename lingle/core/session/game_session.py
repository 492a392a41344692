"""
Game session state for a single daily puzzle
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum

from ...errors import GameError, GameOverError, InvalidGuessError
from ...evaluator import Verdict, evaluate_guess, is_winning
from ...keyboard import KeyboardState, update_keyboard_state
from ...stats import LOSS_ATTEMPTS, ResultRecord
from ...word_bank import WordBank, normalize_word

logger = logging.getLogger(__name__)

SHARE_SYMBOLS = {
    Verdict.CORRECT: "🟩",
    Verdict.PRESENT: "🟨",
    Verdict.ABSENT: "⬛",
}


class GameStatus(Enum):
    """Lifecycle of a game"""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameSession:
    """Immutable snapshot of one game; every move returns a new session"""

    language: str
    day: date
    target: str
    max_guesses: int = 6
    guesses: tuple[str, ...] = ()
    rows: tuple[tuple[Verdict, ...], ...] = ()
    keyboard: KeyboardState = field(default_factory=dict)
    status: GameStatus = GameStatus.IN_PROGRESS

    @property
    def word_length(self) -> int:
        return len(self.target)

    @property
    def row(self) -> int:
        """Index of the next row to fill"""
        return len(self.guesses)

    @property
    def is_finished(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def remaining_guesses(self) -> int:
        return self.max_guesses - len(self.guesses)


def start_game(
    language: str, day: date, target: str, max_guesses: int = 6
) -> GameSession:
    """Start an empty game for the given target"""
    return GameSession(
        language=language,
        day=day,
        target=normalize_word(target),
        max_guesses=max_guesses,
    )


def submit_guess(
    session: GameSession, guess: str, word_bank: WordBank | None = None
) -> GameSession:
    """
    Evaluate a guess and return the next session

    Args:
        session: Current game
        guess: Player's guess, any case
        word_bank: When given, the guess must be a known word

    Returns:
        New GameSession with the row, keyboard and status updated

    Raises:
        GameOverError: game already finished
        InvalidGuessError: wrong length or not in the word list
    """
    if session.is_finished:
        raise GameOverError(f"Game is already {session.status.value}")

    guess = normalize_word(guess)
    if len(guess) != session.word_length:
        raise InvalidGuessError(f"Need {session.word_length} letters")

    if word_bank is not None and not word_bank.is_valid_word(session.language, guess):
        raise InvalidGuessError("Not in word list")

    verdicts = evaluate_guess(guess, session.target)
    keyboard = update_keyboard_state(session.keyboard, guess, verdicts)
    guesses = session.guesses + (guess,)

    if is_winning(verdicts):
        status = GameStatus.WON
    elif len(guesses) >= session.max_guesses:
        status = GameStatus.LOST
    else:
        status = GameStatus.IN_PROGRESS

    if status is not GameStatus.IN_PROGRESS:
        logger.info(
            f"Game finished: language={session.language}, day={session.day}, "
            f"status={status.value}, guesses={len(guesses)}"
        )

    return replace(
        session,
        guesses=guesses,
        rows=session.rows + (tuple(verdicts),),
        keyboard=keyboard,
        status=status,
    )


def to_result(session: GameSession, user_id: int) -> ResultRecord:
    """Result row for a finished game"""
    if not session.is_finished:
        raise GameError("Cannot record a result for a game in progress")

    won = session.status is GameStatus.WON
    return ResultRecord(
        user_id=user_id,
        date=session.day,
        language=session.language,
        attempts=len(session.guesses) if won else LOSS_ATTEMPTS,
        won=won,
    )


def share_text(session: GameSession, day_number: int | None = None) -> str:
    """Emoji grid of the game's verdict rows"""
    if session.status is GameStatus.WON:
        score = str(len(session.guesses))
    elif session.status is GameStatus.LOST:
        score = "X"
    else:
        score = "-"

    label = day_number if day_number is not None else session.day.isoformat()
    header = f"Lingle {session.language.upper()} {label} {score}/{session.max_guesses}"
    grid = ["".join(SHARE_SYMBOLS[v] for v in row) for row in session.rows]

    return "\n".join([header, ""] + grid)
