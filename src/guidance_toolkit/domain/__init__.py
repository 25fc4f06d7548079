"""Domain models for guidance_toolkit.

This module contains the value types the heuristics operate on. All models
are designed to be:

- Immutable (frozen dataclasses, closed enums)
- Serializable for inter-process communication (parallel pipelines)
- Independent of how the surrounding pipeline stores its graph

Key classes:
- Coordinate: A (lon, lat) position in degrees
- RoadClass: Functional road class enumeration
- TurnType, DirectionModifier: Closed turn enumerations
- TurnInstruction: A maneuver with its direction
- ConnectedRoad: A candidate road at an intersection
- CompressedEdgeContainer: Per-edge interior shape nodes
- SuffixTable: Recognized street-name suffix tokens
"""

from guidance_toolkit.domain.coordinate import Coordinate, NodePositions
from guidance_toolkit.domain.geometry_store import (
    CompressedEdgeContainer,
    CompressedGeometryStore,
)
from guidance_toolkit.domain.road import RoadClass
from guidance_toolkit.domain.suffix_table import SuffixTable
from guidance_toolkit.domain.turn import (
    ConnectedRoad,
    DirectionModifier,
    TurnInstruction,
    TurnType,
)

__all__: list[str] = [
    # Enums
    "DirectionModifier",
    "RoadClass",
    "TurnType",
    # Core types
    "CompressedEdgeContainer",
    "CompressedGeometryStore",
    "ConnectedRoad",
    "Coordinate",
    "NodePositions",
    "SuffixTable",
    "TurnInstruction",
]
