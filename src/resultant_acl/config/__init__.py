"""Configuration for resultant-acl."""

from .settings import PermissionSettings, get_permission_settings, DEFAULT_CAPABILITIES
from .logging_config import (
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
    setup_logging,
)

__all__ = [
    "PermissionSettings",
    "get_permission_settings",
    "DEFAULT_CAPABILITIES",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
]
