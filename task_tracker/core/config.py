"""
Application Configuration - Environment-driven settings
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from task_tracker import __version__

ENVIRONMENTS = ("development", "testing", "staging", "production")

class Settings(BaseSettings):
    """
    Runtime settings loaded from environment variables (and .env if present).
    Field names match the environment variable names exactly.
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Task Tracker"
    APP_VERSION: str = __version__
    ENVIRONMENT: str = "development"  # development, testing, staging or production
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./tasks.db"
    DB_POOL_SIZE: int = 5  # Persistent connections kept open
    DB_MAX_OVERFLOW: int = 10  # Extra connections allowed under load
    DB_POOL_TIMEOUT: int = 30  # Seconds to wait for a free connection

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    HOST: str = "0.0.0.0"
    PORT: int = 8080

@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance - environment is read once per process"""
    return Settings()

settings = get_settings()

def is_production(config: Settings = None) -> bool:
    config = config or settings
    return config.ENVIRONMENT == "production"

def validate_config(config: Settings = None) -> None:
    """
    Sanity-check settings before the application starts serving.

    Raises:
        ValueError: describing the first invalid setting found
    """
    config = config or settings

    if config.ENVIRONMENT not in ENVIRONMENTS:
        raise ValueError(
            f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got '{config.ENVIRONMENT}'"
        )
    if config.DB_POOL_SIZE < 1:
        raise ValueError("DB_POOL_SIZE must be at least 1")
    if config.DB_MAX_OVERFLOW < 0:
        raise ValueError("DB_MAX_OVERFLOW cannot be negative")
    if config.DB_POOL_TIMEOUT < 0:
        raise ValueError("DB_POOL_TIMEOUT cannot be negative")
    if not config.DATABASE_URL:
        raise ValueError("DATABASE_URL is required")
    if is_production(config) and config.DEBUG:
        raise ValueError("DEBUG must be disabled in production")
