"""Centralized configuration management for the load balancer manager.

This module provides a configuration system that supports:
- Environment variable overrides
- Default values with validation
- Type safety using Pydantic
- Hierarchical configuration structure
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class NamingConfig(BaseModel):
    """Load balancer naming configuration."""

    max_name_length: int = Field(
        default=96,
        ge=1,
        le=255,
        description="Maximum length of a complete load balancer name",
    )


class CloudConfig(BaseModel):
    """Cloud provider configuration."""

    region: str = Field(default="us-east-1", description="Region managed by this process")

    available_zones: list[str] = Field(
        default_factory=lambda: ["us-east-1a", "us-east-1b", "us-east-1c"],
        description="Availability zones offered when none are discovered",
    )

    stacks: list[str] = Field(default_factory=list, description="Known environment stacks")

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Validate region is not empty."""
        if not v or not v.strip():
            raise ValueError("Region cannot be empty")
        return v.strip()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Global log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log messages",
    )
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: Path | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(
        default=10_485_760,  # 10MB
        ge=1_048_576,  # 1MB
        le=104_857_600,  # 100MB
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        default=5, ge=1, le=100, description="Number of backup log files to keep"
    )
    json_format: bool = Field(
        default=False,
        description="Use JSON format for structured logging",
    )


class MonitoringConfig(BaseModel):
    """Metrics configuration."""

    metrics_enabled: bool = Field(
        default=True, description="Record prometheus metrics for load balancer operations"
    )


class LBManagerSettings(BaseSettings):
    """Main load balancer manager configuration.

    All configuration values can be overridden using environment variables
    with the prefix LB_MANAGER_ (e.g., LB_MANAGER_NAMING__MAX_NAME_LENGTH).
    """

    model_config = SettingsConfigDict(
        env_prefix="LB_MANAGER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    naming: NamingConfig = Field(default_factory=NamingConfig)
    cloud: CloudConfig = Field(default_factory=CloudConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)


@lru_cache(maxsize=1)
def get_settings() -> LBManagerSettings:
    """Get the singleton settings instance.

    Returns:
        LBManagerSettings: The settings read from the environment and .env file
    """
    return LBManagerSettings()


def reload_settings() -> LBManagerSettings:
    """Reload settings from the environment.

    This clears the cache and creates a new settings instance.

    Returns:
        LBManagerSettings: The new settings instance
    """
    get_settings.cache_clear()
    return get_settings()
