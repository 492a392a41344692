"""
Deterministic daily word rotation
"""

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from .word_bank import WordBank

logger = logging.getLogger(__name__)

EPOCH = date(2023, 1, 1)


def days_since_epoch(day: date, epoch: date = EPOCH) -> int:
    """Whole calendar days from the epoch to `day` (negative before the epoch)"""
    return (day - epoch).days


def select_daily_word(
    word_bank: WordBank, language: str, day: date, epoch: date = EPOCH
) -> str:
    """
    Pick the target word for a language on a calendar day

    Args:
        word_bank: Loaded word lists
        language: Language code
        day: Calendar date in the reference time zone
        epoch: First day of the rotation

    Returns:
        words[days_since_epoch mod len(words)]

    Raises:
        UnsupportedLanguageError: language has no word list
    """
    words = word_bank.words(language)
    index = days_since_epoch(day, epoch) % len(words)
    return words[index]


def today_in_zone(timezone: str = "UTC", now: datetime | None = None) -> date:
    """Current calendar date in the given IANA time zone"""
    tz = ZoneInfo(timezone)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        # Naive datetimes are taken to be in the reference zone already
        return now.date()
    return now.astimezone(tz).date()


class DailyWordSelector:
    """Maps (language, date) to the day's target word"""

    def __init__(
        self,
        word_bank: WordBank,
        epoch: date = EPOCH,
        timezone: str = "UTC",
    ):
        self.word_bank = word_bank
        self.epoch = epoch
        self.timezone = timezone
        # Raises ZoneInfoNotFoundError for unknown zone names
        ZoneInfo(timezone)

    def today(self, now: datetime | None = None) -> date:
        """Today's date in the selector's reference zone"""
        return today_in_zone(self.timezone, now)

    def word_for(self, language: str, day: date | None = None) -> str:
        """Get the target word for a language, defaulting to today"""
        if day is None:
            day = self.today()
        word = select_daily_word(self.word_bank, language, day, self.epoch)
        logger.debug(f"Daily word selected: language={language}, day={day}")
        return word

    def day_number(self, day: date | None = None) -> int:
        """Game number shown to players (days since the epoch)"""
        if day is None:
            day = self.today()
        return days_since_epoch(day, self.epoch)

