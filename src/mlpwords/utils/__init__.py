"""Utility functions for mlpwords.

This module provides utility functions including:

- Logging setup and configuration
- Decomposition statistics tracking
"""

from mlpwords.utils.logging import (
    DecompositionLogger,
    DecompositionStats,
    configure_logging,
)

__all__ = [
    "DecompositionLogger",
    "DecompositionStats",
    "configure_logging",
]
