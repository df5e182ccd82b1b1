"""
Configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files
with validation and type conversion. Only the CLI and logging read these
settings; the RUT helpers themselves take no configuration.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Settings are loaded in this order of precedence:
    1. Environment variables (prefixed with RUT_)
    2. .env file in current directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(
        default="text",
        description="Log output format (json, text)"
    )

    # Service-specific Configuration
    service_name: str = Field(
        default="rut-tools",
        description="Service name for logging"
    )

    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)"
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

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded only once per process; call
    ``get_settings.cache_clear()`` to reload them.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()


# Convenience function to get settings
def settings() -> Settings:
    """Get application settings."""
    return get_settings()
