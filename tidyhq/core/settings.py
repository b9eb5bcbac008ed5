"""Application settings for TidyHQ CRM, read from the environment (and `.env`)."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SESSION_SECRET = "tidyhq-dev-session-secret-change-me"


class Settings(BaseSettings):
    app_name: str = "TidyHQ CRM"
    api_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Required: there is no sensible default database for a CRM
    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 10

    session_secret: Optional[str] = None
    session_cookie_name: str = "tidyhq.sid"
    session_max_age_seconds: int = 24 * 60 * 60

    password_hash_rounds: int = Field(default=12, ge=10, le=16)
    auth_rate_limit_attempts: int = 5
    auth_rate_limit_window_seconds: int = 15 * 60

    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    seed_dev_data: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @model_validator(mode="after")
    def _require_secret_in_production(self):
        if self.is_production and not self.session_secret:
            raise ValueError("SESSION_SECRET environment variable is required in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def secret_key(self) -> str:
        return self.session_secret or DEV_SESSION_SECRET


@lru_cache()
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
