"""
Game service: daily word, guess handling, results and stats
"""

import logging
from datetime import date, datetime

from .config import Settings, get_settings
from .core.database.database_manager import DatabaseManager
from .core.session.game_session import (
    GameSession,
    start_game,
    submit_guess,
    to_result,
)
from .daily_word import DailyWordSelector
from .errors import UnsupportedLanguageError
from .stats import ResultRecord, StreakStats, compute_stats, validate_result
from .utils import parse_date_safely
from .word_bank import WordBank

logger = logging.getLogger(__name__)


class GameService:
    """Coordinates the word bank, daily selection, sessions and the result store"""

    def __init__(
        self,
        word_bank: WordBank,
        db_manager: DatabaseManager | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.word_bank = word_bank
        self.db_manager = db_manager
        self.selector = DailyWordSelector(
            word_bank,
            epoch=self.settings.epoch_date,
            timezone=self.settings.timezone,
        )

    @property
    def languages(self) -> list[str]:
        """Configured languages that have a word list"""
        return [
            language
            for language in self.settings.supported_languages_list
            if self.word_bank.supports(language)
        ]

    def _check_language(self, language: str) -> None:
        if language not in self.languages:
            raise UnsupportedLanguageError(language)

    def today(self) -> date:
        return self.selector.today()

    def daily_word(self, language: str, day: date | None = None) -> str:
        """Target word for a language and day (today by default)"""
        self._check_language(language)
        return self.selector.word_for(language, day)

    def validate_guess(self, language: str, guess: str) -> bool:
        """Check a guess against the language's word list"""
        self._check_language(language)
        return self.word_bank.is_valid_word(language, guess)

    def new_game(self, language: str, day: date | None = None) -> GameSession:
        """Start today's (or the given day's) game"""
        if day is None:
            day = self.today()
        target = self.daily_word(language, day)
        logger.info(f"Starting game: language={language}, day={day}")
        return start_game(language, day, target, max_guesses=self.settings.max_guesses)

    def play(self, session: GameSession, guess: str) -> GameSession:
        """Submit a guess, checking it against the word list when enabled"""
        word_bank = self.word_bank if self.settings.validate_guesses else None
        return submit_guess(session, guess, word_bank)

    def record_result(
        self,
        user_id: int,
        day: date | str,
        language: str,
        attempts: int,
        won: bool,
    ) -> bool:
        """
        Store a finished game's result, overwriting an earlier submission

        Raises:
            ValueError: missing store, bad date, or attempts inconsistent with won
            TypeError: day is neither a date nor a string
            UnsupportedLanguageError: language not configured
        """
        if self.db_manager is None:
            raise ValueError("No result store configured")

        self._check_language(language)

        if isinstance(day, str):
            parsed = parse_date_safely(day)
            if parsed is None:
                raise ValueError(f"Invalid date: {day!r}")
            day = parsed
        elif isinstance(day, datetime):
            # Only the calendar day is part of the result key
            day = day.date()
        elif not isinstance(day, date):
            raise TypeError(f"Expected a date or ISO date string, got {type(day).__name__}")

        validate_result(attempts, won)

        record = ResultRecord(
            user_id=user_id, date=day, language=language, attempts=attempts, won=won
        )
        return self.db_manager.save_result(record)

    def record_session(self, session: GameSession, user_id: int) -> bool:
        """Store the result of a finished session"""
        record = to_result(session, user_id)
        return self.record_result(
            record.user_id, record.date, record.language, record.attempts, record.won
        )

    def get_stats(self, user_id: int) -> dict[str, StreakStats]:
        """Per-language totals, wins and longest streak for a user"""
        if self.db_manager is None:
            raise ValueError("No result store configured")

        records = self.db_manager.get_results_for_user(user_id)
        return compute_stats(records, self.languages)
