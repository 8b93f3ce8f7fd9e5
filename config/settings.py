"""Application settings using Pydantic Settings."""

from datetime import date, datetime

import pytz
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./vb.db"
    db_echo: bool = False

    # Timezone used to decide what "today" is for age-based rules
    timezone: str = "UTC"

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    def today(self) -> date:
        """Current calendar date in the configured timezone."""
        return datetime.now(pytz.timezone(self.timezone)).date()


settings = Settings()
