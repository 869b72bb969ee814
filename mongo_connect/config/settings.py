"""Environment-based settings. Read-only; no business logic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and the local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="mongo-connect", description="Name used in log lines")
    log_level: str = Field(default="INFO", description="Log level name")

    # MongoDB (see config/storage/mongo for resolution order)
    mongodb_uri: str | None = Field(
        default=None,
        description="Fallback MongoDB connection URI (MONGODB_URI)",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Loaded once per process."""
    return Settings()
