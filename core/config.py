"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Field Injector", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Injector
    injector_config_path: str = Field(
        default="config/injector.properties", alias="INJECTOR_CONFIG_PATH"
    )
    injector_config_encoding: str = Field(
        default="utf-8", alias="INJECTOR_CONFIG_ENCODING"
    )
    injector_strict_types: bool = Field(
        default=True, alias="INJECTOR_STRICT_TYPES"
    )  # Reject values that are not instances of the declared field type

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="", alias="LOG_FILE")  # Empty = console only

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level and fall back to INFO for unknown names."""
        level = (value or "").strip().upper()
        if level not in LOG_LEVELS:
            return "INFO"
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
