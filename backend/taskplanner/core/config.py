"""
Application configuration using Pydantic Settings.

All values come from environment variables (or a local .env file). The TODO_*
names are kept compatible with the deployment scripts of the scheduler.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    TODO_PORT: int = 7540
    DEBUG: bool = False

    # Directory with the web client, served at "/"
    TODO_WEB_DIR: str = "./web"

    # ===========================================
    # Database
    # ===========================================
    TODO_DBFILE: str = "scheduler.db"

    # Overrides TODO_DBFILE when set (e.g. "sqlite+aiosqlite:///:memory:")
    DATABASE_URL: str = ""

    # ===========================================
    # Auth (single shared password + JWT cookie)
    # ===========================================
    # Empty password disables authentication entirely.
    TODO_PASSWORD: str = ""
    TODO_JWT_SECRET: str = ""
    TODO_JWT_EXPIRE_MINUTES: int = 60 * 8

    # ===========================================
    # Scheduling
    # ===========================================
    # Maximum number of tasks returned by GET /api/tasks
    TODO_TASKS_LIMIT: int = 50

    # Accept "d n1,n2,..." rules in addition to "y" and "d n"
    TODO_MULTI_DAY_RULES: bool = False

    # ===========================================
    # Logging
    # ===========================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL of the task database."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite+aiosqlite:///{self.TODO_DBFILE}"

    @property
    def auth_enabled(self) -> bool:
        """Check if the API is password protected."""
        return bool(self.TODO_PASSWORD)

    @property
    def jwt_secret(self) -> str:
        """Key used to sign session tokens."""
        return self.TODO_JWT_SECRET or self.TODO_PASSWORD


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
