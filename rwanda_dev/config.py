"""
Rwanda Development Configuration
================================
Environment-aware settings using pydantic-settings.
Loads from environment variables or .env files.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment: tags Prefect events ('dev', 'prod')
    environment: str = "dev"

    # Database (any SQLAlchemy URL with window function support)
    database_url: str = "sqlite:///rwanda_development.db"
    echo_sql: bool = False

    # Load settings
    batch_size: int = 500

    # Expected coverage window for every indicator table
    start_year: int = 2000
    end_year: int = 2023

    # Where scripts/export_reports.py writes result sets
    report_dir: str = "reports"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
