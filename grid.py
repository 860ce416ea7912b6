"""
Planet surface geometry and the scent layer
"""
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

# Largest value any coordinate or planet dimension may take
MAX_COORDINATE = 50


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def __post_init__(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if not 0 <= value <= MAX_COORDINATE:
                raise ValueError(f"{name} must be between 0 and {MAX_COORDINATE}, got {value}")


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __add__(self, delta: Tuple[int, int]) -> "Coordinate":
        dx, dy = delta
        return Coordinate(self.x + dx, self.y + dy)


def is_within_bounds(position: Coordinate, area: Size) -> bool:
    """Upper bounds are inclusive: a 5x3 planet has points 0..5 by 0..3"""
    return 0 <= position.x <= area.width and 0 <= position.y <= area.height


class ScentGrid:
    """Points from which a robot has already fallen off the planet.

    Backed by a boolean layer over every representable coordinate, so a
    scent can be left anywhere a robot can legally stand. Scents are never
    removed.
    """

    def __init__(self):
        self.grid = np.zeros((MAX_COORDINATE + 1, MAX_COORDINATE + 1), dtype=bool)

    def _in_range(self, pos: Coordinate) -> bool:
        return 0 <= pos.x <= MAX_COORDINATE and 0 <= pos.y <= MAX_COORDINATE

    def has_scent(self, pos: Coordinate) -> bool:
        if not self._in_range(pos):
            return False
        return bool(self.grid[pos.x, pos.y])

    def add_scent(self, pos: Coordinate):
        if not self._in_range(pos):
            raise ValueError(f"Cannot leave a scent at {pos}: outside 0..{MAX_COORDINATE}")
        self.grid[pos.x, pos.y] = True

    def locations(self) -> List[Coordinate]:
        """Scented points ordered by y, then x"""
        xs, ys = np.nonzero(self.grid)
        points = [Coordinate(int(x), int(y)) for x, y in zip(xs, ys)]
        return sorted(points, key=lambda p: (p.y, p.x))

    def __contains__(self, pos: Coordinate) -> bool:
        return self.has_scent(pos)

    def __len__(self) -> int:
        return int(np.count_nonzero(self.grid))
