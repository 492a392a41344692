"""
Utility functions for the Lingle word game
"""

import logging
from datetime import date, datetime
from typing import Any

from .evaluator import Verdict
from .stats import StreakStats

logger = logging.getLogger(__name__)

LANGUAGE_FLAGS = {"en": "🇬🇧", "es": "🇪🇸", "fr": "🇫🇷"}

VERDICT_MARKS = {
    Verdict.CORRECT: "G",
    Verdict.PRESENT: "Y",
    Verdict.ABSENT: ".",
}


def calculate_win_rate(wins: int, total: int) -> float:
    """Calculate win rate as percentage"""
    if total == 0:
        return 0.0
    return (wins / total) * 100.0


def format_language_stats(language: str, stats: StreakStats | dict[str, Any]) -> str:
    """Format one language's statistics line"""
    if isinstance(stats, StreakStats):
        stats = stats.to_dict()

    total = stats.get("total", 0)
    wins = stats.get("wins", 0)
    max_streak = stats.get("max_streak", 0)
    flag = LANGUAGE_FLAGS.get(language, "🌐")

    return (
        f"{flag} {language.upper()}: Total: {total} | Wins: {wins} "
        f"({calculate_win_rate(wins, total):.1f}%) | Longest streak: {max_streak}"
    )


def format_all_stats(stats: dict[str, StreakStats]) -> str:
    """Format statistics for every language"""
    if not stats:
        return "📊 No stats yet"

    result = "📊 Your stats:\n\n"
    result += "\n".join(
        format_language_stats(language, language_stats)
        for language, language_stats in stats.items()
    )
    return result


def format_row(guess: str, verdicts: list[Verdict]) -> str:
    """Plain-text row: the guess in capitals above its marks"""
    letters = " ".join(guess.upper())
    marks = " ".join(VERDICT_MARKS[v] for v in verdicts)
    return f"{letters}\n{marks}"


def parse_date_safely(date_str: str) -> date | None:
    """Safely parse date string"""
    if not date_str:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    formats = ["%Y-%m-%dT%H:%M:%S", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    logger.warning(f"Failed to parse date: {date_str}")
    return None
