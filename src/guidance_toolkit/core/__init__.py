"""Core heuristics for guidance_toolkit.

This module contains the heuristics for:

- Geometry (haversine distance, interpolation, angular deviation)
- Representative coordinate sampling along compressed edges
- Street-name change detection
- Road class ranking and fork eligibility
- Turn mirroring for left-hand traffic
- Roundabout classification
- Lane string trimming

All functions are designed to be:
- Stateless (safe for use in worker threads)
- Pure (no side effects beyond debug logging)

Key classes:
- GuidanceToolkit: Settings-bound facade over the functions below
- NameComparison: Named predicates behind the name-change decision
- RoundaboutRole: Roundabout membership of an instruction
"""

from guidance_toolkit.core.geometry import (
    angular_deviation,
    haversine_distance,
    interpolate_linear,
)
from guidance_toolkit.core.lanes import PLACEHOLDER_MARKERS, trim_lane_string
from guidance_toolkit.core.mirror import mirror, mirror_modifier
from guidance_toolkit.core.names import (
    NameComparison,
    NameParts,
    get_prefix_and_suffix,
    is_prefix_or_suffix_change,
    obvious_change_rules,
    requires_name_announced,
    split_name,
)
from guidance_toolkit.core.road_class import (
    can_be_seen_as_fork,
    get_priority,
    is_low_priority_road_class,
)
from guidance_toolkit.core.roundabout import (
    RoundaboutRole,
    enters_roundabout,
    has_roundabout_type,
    leaves_roundabout,
)
from guidance_toolkit.core.sampler import (
    DESIRED_SEGMENT_LENGTH,
    coordinate_along_range,
    representative_coordinate,
)
from guidance_toolkit.core.toolkit import GuidanceToolkit

__all__ = [
    "DESIRED_SEGMENT_LENGTH",
    # Facade
    "GuidanceToolkit",
    # Name classes
    "NameComparison",
    "NameParts",
    "PLACEHOLDER_MARKERS",
    "RoundaboutRole",
    # Geometry functions
    "angular_deviation",
    "can_be_seen_as_fork",
    "coordinate_along_range",
    "enters_roundabout",
    "get_prefix_and_suffix",
    "get_priority",
    "has_roundabout_type",
    "haversine_distance",
    "interpolate_linear",
    "is_low_priority_road_class",
    "is_prefix_or_suffix_change",
    "leaves_roundabout",
    "mirror",
    "mirror_modifier",
    "obvious_change_rules",
    "representative_coordinate",
    "requires_name_announced",
    "split_name",
    "trim_lane_string",
]
