"""Application configuration schema."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"


class OutputFormat(str, Enum):
    """Output format enumeration for listings and reports."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(
        LogDestination.STDERR, description="Where log records are written"
    )
    file_path: str = Field(
        "logs/solid_principles.log", description="Log file path"
    )
    max_size_mb: int = Field(10, gt=0, description="Rotate after this many MB")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")


class AppConfig(BaseModel):
    """Application configuration."""

    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
