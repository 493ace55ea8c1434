from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Pantry REST API
    api_base_url: str = "http://localhost:8080/SmartFood-1.0-SNAPSHOT"
    api_timeout: float = 10.0

    # Window used by the dashboard "Expiring" counter
    expiring_days: int = 7

    # Logging
    log_level: str = "INFO"

    # UI
    app_title: str = "Food Management Dashboard"

    @property
    def api_root(self) -> str:
        """Base URL without a trailing slash."""
        return self.api_base_url.rstrip("/")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
