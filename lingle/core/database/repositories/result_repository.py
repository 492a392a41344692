"""
Result repository for daily game outcomes
"""

import logging
from datetime import date, datetime

from ....stats import ResultRecord
from ..connection import DatabaseConnection
from ..models import ResultRow

logger = logging.getLogger(__name__)


class ResultRepository:
    """Repository for per-day game results"""

    def __init__(self, db_connection: DatabaseConnection):
        self.db_connection = db_connection

    def save_result(self, record: ResultRecord) -> bool:
        """Insert a result, overwriting attempts/won for the same user, day and language"""
        day = record.date.date() if isinstance(record.date, datetime) else record.date
        try:
            with self.db_connection.get_connection() as conn:
                now = datetime.now()
                conn.execute(
                    """
                    INSERT INTO results (user_id, date, language, attempts, won, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(user_id, date, language)
                    DO UPDATE SET attempts = excluded.attempts,
                                  won = excluded.won,
                                  updated_at = excluded.updated_at
                    """,
                    (
                        record.user_id,
                        day,
                        record.language,
                        record.attempts,
                        1 if record.won else 0,
                        now,
                        now,
                    ),
                )
                conn.commit()
                logger.info(
                    f"Saved result for user {record.user_id}: {record.language} "
                    f"{day} attempts={record.attempts} won={record.won}"
                )
                return True
        except Exception as e:
            logger.error(f"Error saving result: {e}")
            return False

    def get_result(
        self, user_id: int, day: date, language: str
    ) -> ResultRow | None:
        """Get the stored row for one user, day and language"""
        if isinstance(day, datetime):
            day = day.date()
        try:
            with self.db_connection.get_connection() as conn:
                cursor = conn.execute(
                    """
                    SELECT * FROM results
                    WHERE user_id = ? AND date = ? AND language = ?
                    """,
                    (user_id, day, language),
                )
                row = cursor.fetchone()
                if not row:
                    return None
                result = dict(row)
                result["won"] = bool(result["won"])
                return result
        except Exception as e:
            logger.error(f"Error getting result: {e}")
            return None

    def get_results_for_user(
        self, user_id: int, language: str | None = None
    ) -> list[ResultRecord]:
        """Snapshot of a user's results, optionally for one language"""
        try:
            with self.db_connection.get_connection() as conn:
                if language:
                    cursor = conn.execute(
                        """
                        SELECT user_id, date, language, attempts, won FROM results
                        WHERE user_id = ? AND language = ?
                        ORDER BY date
                        """,
                        (user_id, language),
                    )
                else:
                    cursor = conn.execute(
                        """
                        SELECT user_id, date, language, attempts, won FROM results
                        WHERE user_id = ?
                        ORDER BY date
                        """,
                        (user_id,),
                    )

                return [
                    ResultRecord(
                        user_id=row["user_id"],
                        date=row["date"],
                        language=row["language"],
                        attempts=row["attempts"],
                        won=bool(row["won"]),
                    )
                    for row in cursor.fetchall()
                ]
        except Exception as e:
            logger.error(f"Error getting results for user {user_id}: {e}")
            return []

    def delete_results_for_user(self, user_id: int) -> int:
        """Delete all of a user's results, returning the number removed"""
        try:
            with self.db_connection.get_connection() as conn:
                cursor = conn.execute(
                    "DELETE FROM results WHERE user_id = ?", (user_id,)
                )
                conn.commit()
                return cursor.rowcount
        except Exception as e:
            logger.error(f"Error deleting results for user {user_id}: {e}")
            return 0
