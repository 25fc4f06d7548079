"""Functional road classes.

The order of the members is fixed: the ordinal of a class is its value, and
profile data refers to classes by ordinal.
"""

from enum import Enum


class RoadClass(Enum):
    """Functional road class, from unknown through motorway down to connectivity-only roads."""

    UNKNOWN = 0
    MOTORWAY = 1
    MOTORWAY_LINK = 2
    TRUNK = 3
    TRUNK_LINK = 4
    PRIMARY = 5
    PRIMARY_LINK = 6
    SECONDARY = 7
    SECONDARY_LINK = 8
    TERTIARY = 9
    TERTIARY_LINK = 10
    UNCLASSIFIED = 11
    RESIDENTIAL = 12
    SERVICE = 13
    LIVING_STREET = 14
    # a road simply included for connectivity, should be avoided at all cost
    LOW_PRIORITY_ROAD = 15
