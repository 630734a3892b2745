"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://products:products_dev_password@db:5432/products"
    database_create_tables: bool = True

    # Storage backend for the product repository
    repository_backend: Literal["database", "memory"] = "database"

    # CORS
    cors_origins: list[str] = ["http://localhost:4200"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
