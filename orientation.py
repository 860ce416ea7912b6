from enum import Enum
from typing import Tuple


class Orientation(Enum):
    NORTH = 'N'
    EAST = 'E'
    SOUTH = 'S'
    WEST = 'W'


class Turn(Enum):
    LEFT = 'left'
    RIGHT = 'right'


# Clockwise order; turning right steps forward through it
COMPASS = [Orientation.NORTH, Orientation.EAST, Orientation.SOUTH, Orientation.WEST]

# North is +y, east is +x
DELTAS = {
    Orientation.NORTH: (0, 1),
    Orientation.SOUTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}


def rotate(orientation: Orientation, turn: Turn) -> Orientation:
    idx = COMPASS.index(orientation)
    if turn == Turn.LEFT:
        return COMPASS[(idx - 1) % 4]
    return COMPASS[(idx + 1) % 4]


def forward_delta(orientation: Orientation) -> Tuple[int, int]:
    return DELTAS[orientation]


def letter_of(orientation: Orientation) -> str:
    return orientation.value


def orientation_from_letter(letter: str) -> Orientation:
    """Map a compass letter (N, E, S, W) to its orientation"""
    try:
        return Orientation(letter)
    except ValueError:
        raise ValueError(f"Unknown orientation letter: {letter!r}") from None
