"""Configuration management for swipecrop.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CropConfig: Gesture-to-crop resolution settings
- OutputConfig: Encoding and artifact storage settings
- ProcessingConfig: Batch processing settings
- OcrConfig: Text recognizer settings
- LoggingConfig: Logging settings
- SwipeCropSettings: Main application settings
"""

from swipecrop.config.settings import (
    CropConfig,
    LoggingConfig,
    OcrConfig,
    OutputConfig,
    ProcessingConfig,
    SwipeCropSettings,
    get_default_settings,
)

__all__ = [
    "CropConfig",
    "LoggingConfig",
    "OcrConfig",
    "OutputConfig",
    "ProcessingConfig",
    "SwipeCropSettings",
    "get_default_settings",
]
