"""Configuration management for mlpwords.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- AlphabetConfig: Letters and initial ordering of the alphabet
- ExtractionConfig: MLP edge extraction settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- MlpWordsSettings: Main application settings
"""

from mlpwords.config.settings import (
    AlphabetConfig,
    ExtractionConfig,
    LoggingConfig,
    MlpWordsSettings,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "AlphabetConfig",
    "ExtractionConfig",
    "LoggingConfig",
    "MlpWordsSettings",
    "ProcessingConfig",
    "get_default_settings",
]
