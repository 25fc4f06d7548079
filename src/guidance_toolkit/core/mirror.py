"""Turn mirroring between right-hand and left-hand traffic.

To simplify handling of left/right hand turns, intersection handlers are
written for one side only. ``mirror`` turns a left-hand turn into the
equivalent right-hand turn and vice versa; applying it to the inputs before
and the outputs after a handler reuses the handler for the other side.
"""

import dataclasses
import sys

from guidance_toolkit.core._lookup import exhaustive_table
from guidance_toolkit.core.geometry import angular_deviation
from guidance_toolkit.domain import ConnectedRoad, DirectionModifier
from guidance_toolkit.exceptions import UnknownDirectionModifierError

MIRRORED_MODIFIERS = exhaustive_table(
    "mirrored_modifiers",
    DirectionModifier,
    {
        DirectionModifier.U_TURN: DirectionModifier.U_TURN,
        DirectionModifier.SHARP_RIGHT: DirectionModifier.SHARP_LEFT,
        DirectionModifier.RIGHT: DirectionModifier.LEFT,
        DirectionModifier.SLIGHT_RIGHT: DirectionModifier.SLIGHT_LEFT,
        DirectionModifier.STRAIGHT: DirectionModifier.STRAIGHT,
        DirectionModifier.SLIGHT_LEFT: DirectionModifier.SLIGHT_RIGHT,
        DirectionModifier.LEFT: DirectionModifier.RIGHT,
        DirectionModifier.SHARP_LEFT: DirectionModifier.SHARP_RIGHT,
    },
)


def mirror_modifier(modifier: DirectionModifier) -> DirectionModifier:
    """Swap a left-hand modifier with its right-hand counterpart.

    Raises:
        UnknownDirectionModifierError: If ``modifier`` is not a DirectionModifier member
    """
    try:
        return MIRRORED_MODIFIERS[modifier]
    except (KeyError, TypeError) as e:
        raise UnknownDirectionModifierError(modifier) from e


def mirror(road: ConnectedRoad, epsilon: float = sys.float_info.epsilon) -> ConnectedRoad:
    """Reflect a connected road for the opposite traffic-hand convention.

    Roads whose angle deviates from 0 degrees by no more than ``epsilon`` are
    returned unchanged. Mirroring twice restores the modifier exactly but the
    angle only up to float rounding: ``360 - (360 - 0.1)`` is not ``0.1``.

    Args:
        road: Road to mirror
        epsilon: Angular tolerance in degrees

    Returns:
        The mirrored road

    Examples:
        >>> from guidance_toolkit.domain import TurnInstruction, TurnType
        >>> road = ConnectedRoad(90.0, TurnInstruction(TurnType.TURN, DirectionModifier.RIGHT))
        >>> mirrored = mirror(road)
        >>> mirrored.angle, mirrored.instruction.direction_modifier
        (270.0, <DirectionModifier.LEFT: 6>)
    """
    if angular_deviation(road.angle, 0.0) <= epsilon:
        return road

    instruction = dataclasses.replace(
        road.instruction,
        direction_modifier=mirror_modifier(road.instruction.direction_modifier),
    )
    return dataclasses.replace(road, angle=360.0 - road.angle, instruction=instruction)
