"""
Win and streak statistics from a user's daily results
"""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from datetime import date

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 6
LOSS_ATTEMPTS = 7  # Stored in place of an attempt count for a lost game


@dataclass(frozen=True)
class ResultRecord:
    """One finished game: unique per (user_id, date, language)"""

    user_id: int
    date: date
    language: str
    attempts: int
    won: bool


@dataclass(frozen=True)
class StreakStats:
    """Per-language totals derived from the result history"""

    total: int = 0
    wins: int = 0
    max_streak: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def validate_result(attempts: int, won: bool) -> None:
    """Check the attempts/won pair a result row may carry"""
    if won and not 1 <= attempts <= MAX_ATTEMPTS:
        raise ValueError(
            f"Winning attempts must be between 1 and {MAX_ATTEMPTS}, got {attempts}"
        )
    if not won and attempts != LOSS_ATTEMPTS:
        raise ValueError(
            f"Lost games must record {LOSS_ATTEMPTS} attempts, got {attempts}"
        )


def compute_language_stats(records: Iterable[ResultRecord]) -> StreakStats:
    """
    Totals and longest win streak for records of a single language

    The streak counts consecutive wins in date order; a loss resets it, a
    missing day does not.
    """
    ordered = sorted(records, key=lambda record: record.date)

    wins = 0
    streak = 0
    max_streak = 0
    for record in ordered:
        if record.won:
            wins += 1
            streak += 1
            max_streak = max(max_streak, streak)
        else:
            streak = 0

    return StreakStats(total=len(ordered), wins=wins, max_streak=max_streak)


def compute_stats(
    records: Iterable[ResultRecord], languages: Iterable[str]
) -> dict[str, StreakStats]:
    """
    Per-language stats for one user's results

    Args:
        records: Snapshot of the user's results, in any order
        languages: Configured language codes; output follows this order

    Returns:
        Mapping of language code to StreakStats. Languages without results
        report zeros; records in other languages are ignored.
    """
    by_language: dict[str, list[ResultRecord]] = {}
    for record in records:
        by_language.setdefault(record.language, []).append(record)

    stats = {
        language: compute_language_stats(by_language.get(language, []))
        for language in languages
    }

    ignored = set(by_language) - set(stats)
    if ignored:
        logger.debug(f"Ignoring results for unconfigured languages: {sorted(ignored)}")

    return stats
