"""Configuration settings for mlpwords."""

from pathlib import Path

from pydantic import BaseModel, Field


class AlphabetConfig(BaseModel):
    """Configuration for the ordered alphabet built for each contour.

    The default describes Freeman chain codes: letters '0' (east),
    '1' (north), '2' (west) and '3' (south).
    """

    first: str = Field(
        default="0",
        min_length=1,
        max_length=1,
        description="First letter of the alphabet",
    )
    size: int = Field(
        default=4,
        ge=1,
        le=256,
        description="Number of consecutive letters in the alphabet",
    )
    ordering: str | None = Field(
        default=None,
        description=(
            "Initial ordering, lowest rank first "
            "(None = identity rotated so each contour starts on its rank-1 letter)"
        ),
    )


class ExtractionConfig(BaseModel):
    """Configuration for MLP edge extraction."""

    max_convexity_depth: int = Field(
        default=4,
        ge=0,
        le=64,
        description="Maximum consecutive convexity changes at a single position",
    )
    start: int = Field(
        default=0,
        ge=0,
        description="Starting position of the decomposition in each contour word",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch decomposition."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MlpWordsSettings(BaseModel):
    """Main application settings."""

    alphabet: AlphabetConfig = Field(default_factory=AlphabetConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> MlpWordsSettings:
    """Get default application settings."""
    return MlpWordsSettings()
