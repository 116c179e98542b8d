"""
Core configuration module for BitGA.

This module manages the application settings using Pydantic Settings,
providing type-safe configuration with environment variable support.
Algorithm parameters live in ``src.bitga.core.config``.
"""

from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = "BitGA Optimizer"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Logfire settings
    logfire_token: str = ""
    logfire_service_name: str = "bitga-optimizer"
    logfire_environment: str = "development"

    # Output settings
    results_path: Optional[str] = Field(
        default=None,
        description="Write the JSON summary of the optimization to this file"
    )

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def get_logfire_settings(self) -> Dict[str, Any]:
        """Get Logfire configuration."""
        return {
            "token": self.logfire_token or None,
            "service_name": self.logfire_service_name,
            "service_version": self.app_version,
            "environment": self.logfire_environment,
            "send_to_logfire": "if-token-present",
        }


# Create global settings instance
settings = Settings()

