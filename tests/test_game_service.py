"""
Integration tests for the game service
"""

import os
import tempfile
from datetime import date, datetime
from unittest.mock import patch

import pytest

from lingle.config import Settings
from lingle.core.session.game_session import GameStatus
from lingle.daily_word import select_daily_word
from lingle.database import DatabaseManager
from lingle.errors import InvalidGuessError, UnsupportedLanguageError
from lingle.game_service import GameService
from lingle.stats import LOSS_ATTEMPTS, StreakStats
from lingle.word_bank import WordBank


@pytest.fixture
def settings():
    """Settings independent of the environment"""
    return Settings(
        supported_languages="en,es",
        timezone="UTC",
        max_guesses=6,
        validate_guesses=True,
    )


@pytest.fixture
def word_bank():
    """Word lists for the configured languages"""
    return WordBank(
        {
            "en": ["about", "crane", "apple", "there", "three"],
            "es": ["árbol", "perro", "gatos"],
        }
    )


@pytest.fixture
def db_manager():
    """Temporary result store"""
    temp_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    temp_file.close()

    db_manager = DatabaseManager(temp_file.name)
    db_manager.init_database()

    yield db_manager

    for suffix in ("", "-wal", "-shm"):
        if os.path.exists(temp_file.name + suffix):
            os.unlink(temp_file.name + suffix)


@pytest.fixture
def service(word_bank, db_manager, settings):
    return GameService(word_bank, db_manager, settings)


class TestDailyWord:
    """Test daily word lookup through the service"""

    def test_matches_selector(self, service, word_bank):
        """Test the service uses the configured epoch"""
        day = date(2024, 5, 17)
        assert service.daily_word("en", day) == select_daily_word(word_bank, "en", day)

    def test_epoch(self, service):
        """Test the first day picks the first word"""
        assert service.daily_word("en", date(2023, 1, 1)) == "about"
        assert service.daily_word("es", date(2023, 1, 2)) == "perro"

    def test_unsupported_language(self, service):
        """Test languages outside the configuration are rejected"""
        with pytest.raises(UnsupportedLanguageError):
            service.daily_word("fr", date(2024, 1, 1))

    def test_configured_language_without_words(self, word_bank, db_manager):
        """Test a configured language needs a word list"""
        service = GameService(word_bank, db_manager, Settings(supported_languages="en,de"))

        assert service.languages == ["en"]
        with pytest.raises(UnsupportedLanguageError):
            service.daily_word("de", date(2024, 1, 1))

    def test_custom_epoch(self, word_bank):
        """Test the epoch comes from settings"""
        service = GameService(
            word_bank, settings=Settings(supported_languages="en", epoch_date=date(2024, 1, 1))
        )
        assert service.daily_word("en", date(2024, 1, 2)) == "crane"


class TestValidateGuess:
    """Test guess validation"""

    def test_known_and_unknown_words(self, service):
        """Test membership in the language's list"""
        assert service.validate_guess("en", "crane") is True
        assert service.validate_guess("en", "CRANE") is True
        assert service.validate_guess("en", "zzzzz") is False
        assert service.validate_guess("es", "árbol") is True

    def test_unsupported_language(self, service):
        """Test validation for unknown languages"""
        with pytest.raises(UnsupportedLanguageError):
            service.validate_guess("fr", "arbre")


class TestPlay:
    """Test playing through the service"""

    def test_new_game_uses_today(self, service):
        """Test today's target is used when no day is given"""
        with patch.object(service.selector, "today", return_value=date(2023, 1, 4)):
            session = service.new_game("en")

        assert session.day == date(2023, 1, 4)
        assert session.target == "there"

    def test_full_game(self, service):
        """Test playing to a win"""
        session = service.new_game("en", date(2023, 1, 4))
        session = service.play(session, "three")
        session = service.play(session, "there")

        assert session.status is GameStatus.WON
        assert len(session.guesses) == 2

    def test_rejects_unknown_word(self, service):
        """Test validation is applied when enabled"""
        session = service.new_game("en", date(2023, 1, 4))

        with pytest.raises(InvalidGuessError):
            service.play(session, "zzzzz")

    def test_validation_disabled(self, word_bank, settings):
        """Test any word is accepted when validation is off"""
        settings.validate_guesses = False
        service = GameService(word_bank, settings=settings)
        session = service.new_game("en", date(2023, 1, 4))

        session = service.play(session, "zzzzz")
        assert session.row == 1


class TestResultsAndStats:
    """Test recording results and reading stats"""

    def test_record_session_and_stats(self, service):
        """Test a finished session lands in the stats"""
        session = service.new_game("en", date(2023, 1, 4))
        session = service.play(session, "there")

        assert service.record_session(session, user_id=1) is True

        stats = service.get_stats(1)
        assert stats["en"] == StreakStats(total=1, wins=1, max_streak=1)
        assert stats["es"] == StreakStats()

    def test_record_lost_session(self, service):
        """Test a lost game is stored with the sentinel"""
        session = service.new_game("en", date(2023, 1, 4))
        for _ in range(6):
            session = service.play(session, "about")

        service.record_session(session, user_id=1)

        records = service.db_manager.get_results_for_user(1)
        assert records[0].attempts == LOSS_ATTEMPTS
        assert records[0].won is False

    def test_streak_example(self, service):
        """Test stats over T, T, F, T"""
        service.record_result(1, "2024-01-01", "en", 3, True)
        service.record_result(1, "2024-01-02", "en", 4, True)
        service.record_result(1, "2024-01-03", "en", LOSS_ATTEMPTS, False)
        service.record_result(1, "2024-01-04", "en", 2, True)

        stats = service.get_stats(1)

        assert stats["en"] == StreakStats(total=4, wins=3, max_streak=2)
        assert list(stats) == ["en", "es"]

    def test_resubmission_overwrites(self, service):
        """Test the latest submission for a day wins"""
        service.record_result(1, date(2024, 1, 1), "en", 3, True)
        service.record_result(1, date(2024, 1, 1), "en", LOSS_ATTEMPTS, False)

        assert service.get_stats(1)["en"] == StreakStats(total=1, wins=0, max_streak=0)

    def test_datetime_day_upserts_same_row(self, service):
        """Test a datetime is stored under its calendar day"""
        service.record_result(1, date(2024, 1, 2), "en", 3, True)
        service.record_result(1, datetime(2024, 1, 2, 10, 0, 0), "en", 4, True)

        assert service.get_stats(1)["en"] == StreakStats(total=1, wins=1, max_streak=1)
        assert service.db_manager.get_result(1, date(2024, 1, 2), "en")["attempts"] == 4

    def test_datetime_with_microseconds(self, service):
        """Test fractional seconds do not break reading the history"""
        service.record_result(1, date(2024, 1, 1), "en", 3, True)
        service.record_result(1, datetime(2024, 1, 2, 10, 0, 0, 5), "en", 2, True)

        records = service.db_manager.get_results_for_user(1)

        assert [r.date for r in records] == [date(2024, 1, 1), date(2024, 1, 2)]
        assert service.get_stats(1)["en"] == StreakStats(total=2, wins=2, max_streak=2)

    def test_non_date_day_rejected(self, service):
        """Test days must be dates or date strings"""
        with pytest.raises(TypeError):
            service.record_result(1, 20240101, "en", 3, True)

    def test_empty_stats(self, service):
        """Test a user without results"""
        stats = service.get_stats(123)
        assert stats == {"en": StreakStats(), "es": StreakStats()}

    def test_invalid_date(self, service):
        """Test unparseable dates are rejected"""
        with pytest.raises(ValueError):
            service.record_result(1, "yesterday", "en", 3, True)

    def test_invalid_attempts(self, service):
        """Test attempts must agree with won"""
        with pytest.raises(ValueError):
            service.record_result(1, date(2024, 1, 1), "en", 7, True)
        with pytest.raises(ValueError):
            service.record_result(1, date(2024, 1, 1), "en", 3, False)

    def test_unsupported_language(self, service):
        """Test results for unknown languages are rejected"""
        with pytest.raises(UnsupportedLanguageError):
            service.record_result(1, date(2024, 1, 1), "fr", 3, True)

    def test_requires_store(self, word_bank, settings):
        """Test result operations need a database"""
        service = GameService(word_bank, settings=settings)

        with pytest.raises(ValueError):
            service.record_result(1, date(2024, 1, 1), "en", 3, True)
        with pytest.raises(ValueError):
            service.get_stats(1)
