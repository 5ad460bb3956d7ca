"""Configuration package for the load balancer manager."""

from .config import (
    CloudConfig,
    LBManagerSettings,
    LoggingConfig,
    LogLevel,
    MonitoringConfig,
    NamingConfig,
    get_settings,
    reload_settings,
)

__all__ = [
    "CloudConfig",
    "LBManagerSettings",
    "LogLevel",
    "LoggingConfig",
    "MonitoringConfig",
    "NamingConfig",
    "get_settings",
    "reload_settings",
]
