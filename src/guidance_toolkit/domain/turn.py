"""Turn types for guidance instructions.

This module defines the closed enumerations a turn instruction is built from
and the value types that carry a turn through intersection handling:
- TurnType: What kind of maneuver the instruction describes
- DirectionModifier: Compass-relative refinement of the maneuver
- TurnInstruction: A (type, modifier) pair
- ConnectedRoad: A candidate road at an intersection with its turn angle
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TurnType(Enum):
    """Kind of maneuver described by an instruction."""

    INVALID = 0
    NEW_NAME = 1
    CONTINUE = 2
    TURN = 3
    MERGE = 4
    ON_RAMP = 5
    OFF_RAMP = 6
    FORK = 7
    END_OF_ROAD = 8
    NOTIFICATION = 9
    ENTER_ROUNDABOUT = 10
    ENTER_AND_EXIT_ROUNDABOUT = 11
    ENTER_ROTARY = 12
    ENTER_AND_EXIT_ROTARY = 13
    ENTER_ROUNDABOUT_INTERSECTION = 14
    ENTER_AND_EXIT_ROUNDABOUT_INTERSECTION = 15
    USE_LANE = 16
    NO_TURN = 17
    SUPPRESSED = 18
    ENTER_ROUNDABOUT_AT_EXIT = 19
    EXIT_ROUNDABOUT = 20
    ENTER_ROTARY_AT_EXIT = 21
    EXIT_ROTARY = 22
    ENTER_ROUNDABOUT_INTERSECTION_AT_EXIT = 23
    EXIT_ROUNDABOUT_INTERSECTION = 24
    STAY_ON_ROUNDABOUT = 25
    SLIPROAD = 26


class DirectionModifier(Enum):
    """Direction refinement of a turn.

    Members are ordered clockwise starting at the u-turn, so right-hand
    variants come before straight and left-hand variants after it.
    """

    U_TURN = 0
    SHARP_RIGHT = 1
    RIGHT = 2
    SLIGHT_RIGHT = 3
    STRAIGHT = 4
    SLIGHT_LEFT = 5
    LEFT = 6
    SHARP_LEFT = 7


@dataclass(frozen=True, slots=True)
class TurnInstruction:
    """A maneuver and its direction.

    Attributes:
        type: Kind of maneuver
        direction_modifier: Direction of the maneuver
    """

    type: TurnType = TurnType.INVALID
    direction_modifier: DirectionModifier = DirectionModifier.U_TURN

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "type": self.type.name,
            "direction_modifier": self.direction_modifier.name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TurnInstruction":
        """Deserialize from dictionary."""
        return cls(
            type=TurnType[data["type"]],
            direction_modifier=DirectionModifier[data["direction_modifier"]],
        )


@dataclass(frozen=True, slots=True)
class ConnectedRoad:
    """A road leaving an intersection, seen from the incoming road.

    Attributes:
        angle: Turn angle in degrees, in [0, 360); 180 is straight ahead
        instruction: Instruction assigned to taking this road
        entry_allowed: Whether the road may be entered from the intersection
    """

    angle: float
    instruction: TurnInstruction = field(default_factory=TurnInstruction)
    entry_allowed: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the connected road
        """
        return {
            "angle": self.angle,
            "instruction": self.instruction.to_dict(),
            "entry_allowed": self.entry_allowed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConnectedRoad":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a connected road

        Returns:
            ConnectedRoad instance
        """
        return cls(
            angle=data["angle"],
            instruction=TurnInstruction.from_dict(data["instruction"]),
            entry_allowed=data.get("entry_allowed", True),
        )
