"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: str = Field("stdout", description="Console (stderr) and/or file: stdout, file or both")
    format: str = Field("console", description="Renderer: console or json")
    file_path: str = Field("logs/solid_showcase.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in VALID_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LEVELS}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        valid = ["stdout", "file", "both"]
        if v not in valid:
            raise ValueError(f"Log destination must be one of {valid}")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid = ["console", "json"]
        if v not in valid:
            raise ValueError(f"Log format must be one of {valid}")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v
