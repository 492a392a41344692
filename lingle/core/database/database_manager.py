"""
Unified database manager that coordinates all repositories
"""

import logging
from datetime import date

from ...stats import ResultRecord
from .connection import DatabaseConnection
from .models import ResultRow
from .repositories.result_repository import ResultRepository

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Unified database manager that coordinates all repositories"""

    def __init__(self, db_path: str | None = None):
        self.db_connection = DatabaseConnection(db_path)
        self.result_repo = ResultRepository(self.db_connection)

    def init_database(self) -> None:
        """Initialize database tables and indexes"""
        self.db_connection.init_database()

    # Result methods
    def save_result(self, record: ResultRecord) -> bool:
        """Insert or overwrite a day's result"""
        return self.result_repo.save_result(record)

    def get_result(self, user_id: int, day: date, language: str) -> ResultRow | None:
        """Get a single stored result"""
        return self.result_repo.get_result(user_id, day, language)

    def get_results_for_user(
        self, user_id: int, language: str | None = None
    ) -> list[ResultRecord]:
        """Get all results for a user"""
        return self.result_repo.get_results_for_user(user_id, language)

    def delete_results_for_user(self, user_id: int) -> int:
        """Remove a user's results"""
        return self.result_repo.delete_results_for_user(user_id)

    def get_connection(self):
        """Get database connection for direct SQL access in tests"""
        return self.db_connection.get_connection()


# Global instance
_db_manager = None


def get_db_manager(db_path: str | None = None) -> DatabaseManager:
    """Get global database manager instance"""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path)
    return _db_manager
