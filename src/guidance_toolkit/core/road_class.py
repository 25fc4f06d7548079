"""Road class ranking for fork discovery.

The road priorities indicate which roads can be seen as more or less equal.
A fork can happen between road classes that are at most one priority apart.
"""

from guidance_toolkit.core._lookup import exhaustive_table
from guidance_toolkit.domain import RoadClass
from guidance_toolkit.exceptions import UnknownRoadClassError

# lower value means more important; links and unclassified classes share a neutral 10
ROAD_PRIORITY = exhaustive_table(
    "road_priority",
    RoadClass,
    {
        RoadClass.UNKNOWN: 10,
        RoadClass.MOTORWAY: 0,
        RoadClass.MOTORWAY_LINK: 10,
        RoadClass.TRUNK: 2,
        RoadClass.TRUNK_LINK: 10,
        RoadClass.PRIMARY: 4,
        RoadClass.PRIMARY_LINK: 10,
        RoadClass.SECONDARY: 6,
        RoadClass.SECONDARY_LINK: 10,
        RoadClass.TERTIARY: 8,
        RoadClass.TERTIARY_LINK: 10,
        RoadClass.UNCLASSIFIED: 11,
        RoadClass.RESIDENTIAL: 10,
        RoadClass.SERVICE: 12,
        RoadClass.LIVING_STREET: 10,
        RoadClass.LOW_PRIORITY_ROAD: 14,
    },
)


def get_priority(road_class: RoadClass) -> int:
    """Priority of a road class; lower values are major roads.

    Raises:
        UnknownRoadClassError: If ``road_class`` is not a RoadClass member
    """
    try:
        return ROAD_PRIORITY[road_class]
    except (KeyError, TypeError) as e:
        raise UnknownRoadClassError(road_class) from e


def is_low_priority_road_class(road_class: RoadClass) -> bool:
    """Whether the class is only included for connectivity or service access."""
    return road_class in (RoadClass.LOW_PRIORITY_ROAD, RoadClass.SERVICE)


def can_be_seen_as_fork(first: RoadClass, second: RoadClass) -> bool:
    """Whether two roads are similar enough in rank to form a fork.

    Examples:
        >>> can_be_seen_as_fork(RoadClass.UNCLASSIFIED, RoadClass.RESIDENTIAL)
        True
        >>> can_be_seen_as_fork(RoadClass.MOTORWAY, RoadClass.TRUNK)
        False
    """
    # TODO: take the number of lanes into account once lane counts reach this stage
    return abs(get_priority(first) - get_priority(second)) <= 1
