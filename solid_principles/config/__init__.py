"""Configuration package."""

from .manager import ConfigurationManager
from .schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "LogDestination",
    "LoggingConfig",
    "LogLevel",
    "OutputConfig",
    "OutputFormat",
]
