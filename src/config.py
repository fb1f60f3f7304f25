"""
Configuration management for the plant data bot.
Loads settings from environment variables with validation.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    base_dir: Path = Path(__file__).parent.parent

    # Telegram
    telegram_bot_token: str = Field(..., description="Telegram Bot API token")

    # Logging
    log_file: str = Field(
        default="var/bot_log.txt",
        description="Log file path, empty to log to console only",
    )

    # Uploads
    download_dir: Optional[Path] = Field(
        default=None,
        description="Directory for temporary upload files (system temp dir if unset)",
    )

    # Debug
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def log_path(self) -> Optional[Path]:
        """Absolute log file path, None when file logging is disabled."""
        if not self.log_file:
            return None
        path = Path(self.log_file)
        return path if path.is_absolute() else self.base_dir / path


# Global settings instance
settings = Settings()
