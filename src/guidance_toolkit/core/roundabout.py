"""Roundabout classification of turn instructions.

Roundabout-like instructions come in three families (roundabouts, rotaries
and roundabout intersections). Each family has enter-only, exit-only and
enter-and-exit variants; staying on a roundabout is a member of its own.
"""

from dataclasses import dataclass

from guidance_toolkit.domain import TurnInstruction, TurnType

ENTER_ONLY_TYPES: frozenset[TurnType] = frozenset(
    {
        TurnType.ENTER_ROUNDABOUT,
        TurnType.ENTER_ROTARY,
        TurnType.ENTER_ROUNDABOUT_INTERSECTION,
        TurnType.ENTER_ROUNDABOUT_AT_EXIT,
        TurnType.ENTER_ROTARY_AT_EXIT,
        TurnType.ENTER_ROUNDABOUT_INTERSECTION_AT_EXIT,
    }
)

EXIT_ONLY_TYPES: frozenset[TurnType] = frozenset(
    {
        TurnType.EXIT_ROUNDABOUT,
        TurnType.EXIT_ROTARY,
        TurnType.EXIT_ROUNDABOUT_INTERSECTION,
    }
)

ENTER_AND_EXIT_TYPES: frozenset[TurnType] = frozenset(
    {
        TurnType.ENTER_AND_EXIT_ROUNDABOUT,
        TurnType.ENTER_AND_EXIT_ROTARY,
        TurnType.ENTER_AND_EXIT_ROUNDABOUT_INTERSECTION,
    }
)

ROUNDABOUT_TYPES: frozenset[TurnType] = (
    ENTER_ONLY_TYPES | EXIT_ONLY_TYPES | ENTER_AND_EXIT_TYPES | {TurnType.STAY_ON_ROUNDABOUT}
)


@dataclass(frozen=True)
class RoundaboutRole:
    """Roundabout membership of an instruction.

    Attributes:
        is_roundabout: Instruction has a roundabout-related type
        enters: Instruction enters a roundabout
        leaves: Instruction leaves a roundabout
    """

    is_roundabout: bool
    enters: bool
    leaves: bool

    @classmethod
    def of(cls, instruction: TurnInstruction) -> "RoundaboutRole":
        """Classify an instruction."""
        return cls(
            is_roundabout=has_roundabout_type(instruction),
            enters=enters_roundabout(instruction),
            leaves=leaves_roundabout(instruction),
        )


def has_roundabout_type(instruction: TurnInstruction) -> bool:
    """Whether the instruction enters, leaves or stays on a roundabout."""
    return instruction.type in ROUNDABOUT_TYPES


def enters_roundabout(instruction: TurnInstruction) -> bool:
    """Whether the instruction enters a roundabout, rotary or roundabout intersection."""
    return instruction.type in ENTER_ONLY_TYPES or instruction.type in ENTER_AND_EXIT_TYPES


def leaves_roundabout(instruction: TurnInstruction) -> bool:
    """Whether the instruction leaves a roundabout, rotary or roundabout intersection."""
    return instruction.type in EXIT_ONLY_TYPES or instruction.type in ENTER_AND_EXIT_TYPES
