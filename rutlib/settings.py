"""
Configuration management using Pydantic Settings.

Loads configuration from RUTLIB_* environment variables and .env files
with validation and type conversion.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library and CLI settings loaded from environment variables and .env files.

    Settings are loaded in this order of precedence:
    1. Environment variables (prefixed with RUTLIB_)
    2. .env file in current directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RUTLIB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(
        default="text",
        description="Log output format (json, text)"
    )

    service_name: str = Field(
        default="rutlib",
        description="Service name attached to every log entry"
    )

    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
    )

    # CLI Configuration
    output_format: str = Field(
        default="dash",
        description="Default RUT display format for the CLI (dots, dash, none)"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for `rutlib random` when --seed is not given"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format is supported."""
        valid_formats = {"json", "text"}
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {', '.join(sorted(valid_formats))}")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment name."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of: {', '.join(sorted(valid_envs))}")
        return v.lower()

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        """Validate output format names a RUT display format."""
        valid_formats = {"dots", "dash", "none"}
        if v.lower() not in valid_formats:
            raise ValueError(f"output_format must be one of: {', '.join(sorted(valid_formats))}")
        return v.lower()

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()


# Convenience function to get settings
def settings() -> Settings:
    """Get library settings."""
    return get_settings()
