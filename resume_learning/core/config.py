"""Application configuration from environment."""
from pydantic_settings import BaseSettings

DEFAULT_STORE_TIMEOUT = 5.0
DEFAULT_QUIZ_LENGTH = 5


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Resume Learning API"
    debug: bool = False

    # Record store
    database_url: str = "sqlite+aiosqlite:///./resume_learning.db"
    store_timeout_seconds: float = DEFAULT_STORE_TIMEOUT  # upper bound for any single store operation

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allow_origins: list[str] = ["*"]

    # Catalog / progress
    seed_on_startup: bool = True
    default_quiz_length: int = DEFAULT_QUIZ_LENGTH  # answer slots when the chapter is unknown to the catalog

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
