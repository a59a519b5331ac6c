"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Lift Planner Pro - Training"
    debug: bool = False
    log_level: str = "INFO"

    # Database (async driver: aiosqlite locally, asyncpg in production)
    database_url: str = "sqlite+aiosqlite:///./liftplanner.db"
    db_echo: bool = False
    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: int = 30  # seconds to wait for a pooled connection

    # Startup behaviour
    create_tables_on_startup: bool = True
    seed_on_startup: bool = True

    # Scenario creation is open when unset
    admin_token: str | None = None

    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
