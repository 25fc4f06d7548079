"""Geographic coordinate type.

Coordinates are plain (longitude, latitude) pairs in degrees. They carry no
identity; two coordinates with the same values are interchangeable.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS84 position.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        lon: Longitude in degrees
        lat: Latitude in degrees
    """

    lon: float
    lat: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (lon, lat) tuple.

        Returns:
            Tuple of (lon, lat) in degrees
        """
        return (self.lon, self.lat)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with lon and lat fields
        """
        return {"lon": self.lon, "lat": self.lat}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coordinate":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with lon and lat fields

        Returns:
            Coordinate instance
        """
        return cls(lon=data["lon"], lat=data["lat"])


# Node id -> position, as supplied by the graph. Lists indexed by node id work too.
NodePositions = Mapping[int, Coordinate] | Sequence[Coordinate]
