"""Configuration management for tgcmd."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TGCMD_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")

    # Telegram Configuration
    telegram_token: Optional[str] = Field(None, description="Bot token for the Telegram adapter")
    reply_help_on_error: bool = Field(
        default=True, description="Append the command help text to argument error replies"
    )


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance loaded from the environment and `.env`
    """
    return Settings()
