"""
Database models for the Lingle result store
"""

from datetime import date, datetime
from typing import TypedDict


class ResultRow(TypedDict):
    """Stored result row"""
    id: int
    user_id: int
    date: date
    language: str
    attempts: int
    won: bool
    created_at: datetime
    updated_at: datetime

