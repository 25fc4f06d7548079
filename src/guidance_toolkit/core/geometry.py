"""Geometric operations on geographic coordinates and turn angles.

This module provides the small mathematical utilities the heuristics share:
- Haversine (great-circle) distance
- Linear interpolation between two coordinates
- Angular deviation between two bearings

All functions are pure, stateless, and safe to call from worker threads.
"""

import math

from guidance_toolkit.domain import Coordinate

EARTH_RADIUS = 6372797.560856


def haversine_distance(
    first: Coordinate, second: Coordinate, earth_radius: float = EARTH_RADIUS
) -> float:
    """Calculate the great-circle distance between two coordinates.

    Args:
        first: First coordinate
        second: Second coordinate
        earth_radius: Sphere radius in metres

    Returns:
        Distance in metres

    Examples:
        >>> haversine_distance(Coordinate(0.0, 0.0), Coordinate(0.0, 0.0))
        0.0
    """
    lon1, lat1 = math.radians(first.lon), math.radians(first.lat)
    lon2, lat2 = math.radians(second.lon), math.radians(second.lat)

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    aharv = math.sin(dlat / 2.0) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    charv = 2.0 * math.atan2(math.sqrt(aharv), math.sqrt(1.0 - aharv))
    return earth_radius * charv


def interpolate_linear(factor: float, start: Coordinate, end: Coordinate) -> Coordinate:
    """Interpolate between two coordinates in lon/lat space.

    Args:
        factor: Position between start (0.0) and end (1.0)
        start: Coordinate at factor 0
        end: Coordinate at factor 1

    Returns:
        Interpolated coordinate

    Examples:
        >>> interpolate_linear(0.5, Coordinate(0.0, 0.0), Coordinate(2.0, 4.0))
        Coordinate(lon=1.0, lat=2.0)
    """
    return Coordinate(
        lon=(1.0 - factor) * start.lon + factor * end.lon,
        lat=(1.0 - factor) * start.lat + factor * end.lat,
    )


def angular_deviation(angle: float, from_angle: float) -> float:
    """Smallest absolute difference between two angles in degrees.

    Examples:
        >>> angular_deviation(350.0, 10.0)
        20.0
    """
    deviation = abs(angle - from_angle)
    return min(360.0 - deviation, deviation)
