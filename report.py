"""
Text output for simulated planets: result lines and a grid view
"""
import re
from typing import Dict, List

from grid import Coordinate, is_within_bounds
from orientation import Orientation, letter_of
from simulation import Planet
from robot import Robot

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

ARROWS = {
    Orientation.NORTH: '↑',
    Orientation.SOUTH: '↓',
    Orientation.EAST: '→',
    Orientation.WEST: '←',
}

CELL_WIDTH = 4


def strip_ansi(text):
    """Remove ANSI escape codes from text"""
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)


def format_robot(robot: Robot) -> str:
    pos = robot.transform.position
    line = f"{pos.x} {pos.y} {letter_of(robot.transform.orientation)}"
    if robot.lost:
        line += " LOST"
    return line


def format_results(robots: List[Robot]) -> str:
    return "".join(format_robot(r) + "\n" for r in robots)


def render_grid(planet: Planet, color: bool = True) -> str:
    """Draw the planet with north at the top.

    '.' is an empty point, '*' a scent, an arrow a robot facing that way
    (suffixed with X when lost). Points shared by several robots show the
    robot count instead. Robots and scents lying off the planet (a robot may
    start anywhere in 0..50) are listed below the x axis.
    """
    def paint(text, code):
        return f"{code}{text}{RESET}" if color else text

    area = planet.area
    position_map: Dict[Coordinate, List[Robot]] = {}
    for robot in planet.robots:
        position_map.setdefault(robot.transform.position, []).append(robot)

    lines = []
    for y in range(area.height, -1, -1):
        row = []
        for x in range(area.width + 1):
            pos = Coordinate(x, y)
            robots_at_pos = position_map.get(pos, [])
            if len(robots_at_pos) == 1:
                robot = robots_at_pos[0]
                symbol = ARROWS[robot.transform.orientation]
                cell = paint(symbol + "X", RED) if robot.lost else paint(symbol, GREEN)
            elif robots_at_pos:
                cell = paint(f"R{len(robots_at_pos)}", RED if any(r.lost for r in robots_at_pos) else GREEN)
            elif planet.scents.has_scent(pos):
                cell = paint("*", YELLOW)
            else:
                cell = "."

            padding = CELL_WIDTH - len(strip_ansi(cell))
            row.append(cell + " " * padding)
        lines.append(f"{y:2d}: {''.join(row).rstrip()}")

    lines.append("    " + "".join(f"{x:<{CELL_WIDTH}}" for x in range(area.width + 1)).rstrip())

    for robot in planet.robots:
        if not is_within_bounds(robot.transform.position, area):
            lines.append(f"off planet: {format_robot(robot)}")
    for pos in planet.scents.locations():
        if not is_within_bounds(pos, area):
            lines.append(f"off planet scent: {pos.x} {pos.y}")
    return "\n".join(lines)
