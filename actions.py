from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from grid import Coordinate, ScentGrid, Size, is_within_bounds
from orientation import Orientation, Turn, forward_delta, rotate


class Instruction(Enum):
    TURN_LEFT = 'L'
    TURN_RIGHT = 'R'
    MOVE_FORWARD = 'F'


class StepOutcome(Enum):
    TURNED = "turned"
    MOVED = "moved"
    IGNORED = "ignored"  # off-grid move blocked by a scent
    LOST = "lost"


@dataclass(frozen=True)
class Transform:
    position: Coordinate
    orientation: Orientation


def turn(transform: Transform, direction: Turn) -> Transform:
    return replace(transform, orientation=rotate(transform.orientation, direction))


def move(transform: Transform) -> Transform:
    """One unit forward; the result may lie off the planet"""
    return replace(transform, position=transform.position + forward_delta(transform.orientation))


def apply_instruction(transform: Transform, instruction: Instruction,
                      area: Size, scents: ScentGrid) -> Tuple[Transform, StepOutcome]:
    """Execute a single instruction without touching any robot.

    Bounds are checked on the candidate before it is committed, so the
    returned transform is always the last pose the robot legally held. On
    LOST the caller is expected to leave a scent at that pose's position.
    """
    if instruction == Instruction.TURN_LEFT:
        return turn(transform, Turn.LEFT), StepOutcome.TURNED
    if instruction == Instruction.TURN_RIGHT:
        return turn(transform, Turn.RIGHT), StepOutcome.TURNED

    candidate = move(transform)
    if is_within_bounds(candidate.position, area):
        return candidate, StepOutcome.MOVED

    # Scents mark the launch point, not the point beyond the edge
    if scents.has_scent(transform.position):
        return transform, StepOutcome.IGNORED
    return transform, StepOutcome.LOST
