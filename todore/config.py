"""
Configuration management using pydantic-settings.

LEARNING NOTES:
- pydantic-settings automatically loads values from environment variables
- It supports .env files out of the box (via python-dotenv)
- Command-line flags override these values for a single run

This module handles:
- Where the well-known tasks file lives
- Whether it is loaded at start and saved on quit
- How the session reacts to errors
- Logging levels and the optional log file

Environment variables are loaded in this priority order:
1. System environment variables (highest priority)
2. .env file in current directory
3. Default values defined in the Settings class
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Example:
        # In .env or shell:
        TODORE_TASKS_FILE=~/todo.json
        TODORE_SAVE_ON_QUIT=true
    """

    # === Storage ===
    tasks_file: Path = Field(
        default=Path("tasks.json"),
        description="JSON file used to seed the list at start (and save on quit)"
    )

    load_on_start: bool = Field(
        default=True,
        description="Import the tasks file when a session starts, if it exists"
    )

    save_on_quit: bool = Field(
        default=False,
        description="Write the list back to the tasks file when the session ends"
    )

    # === Session ===
    fail_fast: bool = Field(
        default=False,
        description="End the session on the first error instead of reporting it and continuing"
    )

    # === Logging ===
    log_level: str = Field(
        default="WARNING",
        description="Console log level (DEBUG, INFO, WARNING, ERROR)"
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives DEBUG-level logs"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # e.g., TODORE_TASKS_FILE, TODORE_FAIL_FAST
        env_prefix="TODORE_",
        extra="ignore",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (lazy-loaded singleton).

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If an environment value has the wrong type
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Reset the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
