"""
Application configuration using Pydantic Settings.
Loads configuration from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from spooler.constants import COMPLETION_MARKER


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Spooler
    spooler_drain_on_process: bool = False
    spooler_completion_marker: str = COMPLETION_MARKER

    # Observability
    otel_service_name: str = "print-spooler"
    otel_exporter_otlp_endpoint: str | None = None
    otel_console_export: bool = False
    log_level: str = "INFO"
    log_format: str = "console"  # json or console


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
