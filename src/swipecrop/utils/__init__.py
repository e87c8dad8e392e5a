"""Utility functions for swipecrop.

This module provides utility functions including:

- Logging setup and configuration
- Crop outcome statistics
"""

from swipecrop.utils.logging import (
    CropLogger,
    CropStats,
    configure_logging,
)

__all__ = [
    "CropLogger",
    "CropStats",
    "configure_logging",
]
