"""
Configuration management for the Lingle word game
"""

from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .stats import MAX_ATTEMPTS

DEFAULT_WORDS_DIR = Path(__file__).parent / "words"


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Game Configuration
    supported_languages: str = Field(default="en,es,fr", env="SUPPORTED_LANGUAGES")
    words_dir: Path = Field(default=DEFAULT_WORDS_DIR, env="WORDS_DIR")
    epoch_date: date = Field(default=date(2023, 1, 1), env="EPOCH_DATE")
    timezone: str = Field(default="UTC", env="TIMEZONE")
    # Stored results only hold wins within MAX_ATTEMPTS guesses
    max_guesses: int = Field(default=6, ge=1, le=MAX_ATTEMPTS, env="MAX_GUESSES")
    validate_guesses: bool = Field(default=True, env="VALIDATE_GUESSES")

    # Database Configuration
    database_url: str = Field(default="sqlite:///data/lingle.db", env="DATABASE_URL")

    # Application Configuration
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    debug: bool = Field(default=False, env="DEBUG")

    @property
    def supported_languages_list(self) -> list[str]:
        """Convert supported_languages string to list of language codes"""
        if not self.supported_languages.strip():
            return []
        return [
            code.strip().lower()
            for code in self.supported_languages.split(",")
            if code.strip()
        ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def get_database_path() -> str:
    """Get the database file path from URL"""
    settings = get_settings()
    if settings.database_url.startswith("sqlite:///"):
        return settings.database_url.replace("sqlite:///", "")
    return "data/lingle.db"
