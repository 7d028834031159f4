"""Configuration management using environment variables."""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()

STORE_BACKENDS = {"memory", "json", "sqlite"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Record store
    store_backend: str = Field(default="sqlite", description="Record store backend (memory, json, sqlite)")
    db_path: str = Field(default="tennis.sqlite", description="Path to SQLite database")
    players_file: str = Field(default="players.json", description="Path to the JSON roster document")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or console)")
    log_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator("store_backend")
    @classmethod
    def validate_store_backend(cls, v: str) -> str:
        """Validate the store backend is a known one."""
        if v.lower() not in STORE_BACKENDS:
            raise ValueError(f"store_backend must be one of {STORE_BACKENDS}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is a valid option."""
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = "TENNIS_"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()


def ensure_directories() -> None:
    """
    Ensure all required directories exist.

    This creates the log directory and the parent directories of the
    configured database and roster files.
    """
    settings = get_settings()

    Path(settings.log_dir).mkdir(parents=True, exist_ok=True)

    for path_key in ["db_path", "players_file"]:
        Path(getattr(settings, path_key)).parent.mkdir(parents=True, exist_ok=True)
