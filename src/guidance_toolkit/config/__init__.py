"""Configuration management for guidance_toolkit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SamplingConfig: Representative coordinate sampling settings
- NameConfig: Street-name suffix vocabulary
- MirrorConfig: Turn mirroring tolerance
- LaneConfig: Lane placeholder markers
- LoggingConfig: Logging settings
- GuidanceSettings: Main application settings
"""

from guidance_toolkit.config.settings import (
    DEFAULT_NAME_SUFFIXES,
    GuidanceSettings,
    LaneConfig,
    LoggingConfig,
    MirrorConfig,
    NameConfig,
    SamplingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_NAME_SUFFIXES",
    "GuidanceSettings",
    "LaneConfig",
    "LoggingConfig",
    "MirrorConfig",
    "NameConfig",
    "SamplingConfig",
    "get_default_settings",
]
