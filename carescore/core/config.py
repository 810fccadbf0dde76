"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from CARESCORE_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CARESCORE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Logging
    log_level: str = "INFO"

    # Number of most recent wellness entries plotted on trend charts
    chart_window_entries: int = Field(14, ge=1)

    # Days past the due date before an assessment counts as overdue
    overdue_grace_days: int = Field(3, ge=0)

    @property
    def is_dev(self) -> bool:
        """Docs, CORS and plain-text logs are enabled in dev."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Internal error details are hidden in prod."""
        return self.env == "prod"

    @property
    def is_test(self) -> bool:
        """True under the test suite."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()


settings = get_settings()
