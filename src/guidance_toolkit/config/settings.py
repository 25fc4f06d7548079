"""Configuration settings for Guidance Toolkit."""

import sys
from pathlib import Path

from pydantic import BaseModel, Field

LOG_LEVEL_PATTERN = r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"

DEFAULT_NAME_SUFFIXES: tuple[str, ...] = (
    "N",
    "NE",
    "E",
    "SE",
    "S",
    "SW",
    "W",
    "NW",
    "North",
    "South",
    "West",
    "East",
)


class SamplingConfig(BaseModel):
    """Configuration for representative coordinate sampling.

    Distances are great-circle distances in metres.
    """

    desired_segment_length: float = Field(
        default=10.0,
        gt=0.0,
        description="Arc-length from the base node at which the coordinate is sampled",
    )
    earth_radius: float = Field(
        default=6372797.560856,
        gt=0.0,
        description="Sphere radius used by the haversine distance",
    )


class NameConfig(BaseModel):
    """Configuration for street-name change detection."""

    suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NAME_SUFFIXES),
        description="Tokens recognized as non-substantive street-name prefixes/suffixes",
    )


class MirrorConfig(BaseModel):
    """Configuration for turn mirroring."""

    angle_epsilon: float = Field(
        default=sys.float_info.epsilon,
        ge=0.0,
        le=1.0,
        description="Turns deviating from 0 degrees by at most this much are not mirrored",
    )


class LaneConfig(BaseModel):
    """Configuration for lane string trimming."""

    placeholder_markers: str = Field(
        default="|&",
        min_length=1,
        description="Characters that mark a lane without turn markings",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=LOG_LEVEL_PATTERN,
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        pattern=LOG_LEVEL_PATTERN,
        description="File log level (more verbose)",
    )


class GuidanceSettings(BaseModel):
    """Main application settings."""

    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    names: NameConfig = Field(default_factory=NameConfig)
    mirror: MirrorConfig = Field(default_factory=MirrorConfig)
    lanes: LaneConfig = Field(default_factory=LaneConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GuidanceSettings:
    """Get default application settings."""
    return GuidanceSettings()
