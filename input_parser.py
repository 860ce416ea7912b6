"""
Turns the text planet definition into a Planet ready to simulate

Format: a "<width> <height>" line, then robot records made of a
"<x> <y> <orientation>" line followed by an instruction line (L, R, F).
Bad robot records are reported and skipped; only a bad size line or an
input with no usable robot fails the whole parse.
"""
from typing import List, Optional

from actions import Instruction, Transform
from grid import MAX_COORDINATE, Coordinate, Size
from orientation import orientation_from_letter
from robot import Robot
from simulation import Planet


class PlanetParseError(ValueError):
    pass


def parse_input(text: str) -> Planet:
    lines = text.strip().split("\n", 1)
    if not lines[0].strip():
        raise PlanetParseError("Input is empty")

    size = parse_planet_size(lines[0])
    robots = parse_robots(lines[1] if len(lines) > 1 else "")
    if not robots:
        raise PlanetParseError("No valid robots found in input")

    return Planet(size, robots)


def parse_planet_size(line: str) -> Size:
    fields = line.split()
    if len(fields) != 2:
        raise PlanetParseError(f"Invalid planet definition: {line!r}")
    try:
        width, height = int(fields[0]), int(fields[1])
    except ValueError:
        raise PlanetParseError(f"Invalid planet definition: {line!r}") from None

    if not (0 <= width <= MAX_COORDINATE and 0 <= height <= MAX_COORDINATE):
        raise PlanetParseError(f"Planet size must be within 0..{MAX_COORDINATE}: {line!r}")
    return Size(width, height)


def parse_robots(text: str) -> List[Robot]:
    robots = []
    state = "position"
    transform = None

    for line in text.splitlines():
        if state == "position":
            transform = parse_transform(line)
            if transform is not None:
                state = "instructions"
        else:
            program = parse_instructions(line)
            if program:
                robots.append(Robot(transform, program))
            else:
                print("WARNING: Invalid instructions encountered, skipping robot")
            state = "position"

    if state == "instructions":
        print("WARNING: Robot definition has no instructions, skipping robot")
    return robots


def parse_transform(line: str) -> Optional[Transform]:
    fields = line.split()
    if len(fields) < 3:
        return None

    try:
        x, y = int(fields[0]), int(fields[1])
    except ValueError:
        print(f"WARNING: Failed to parse transform {line!r}")
        return None

    if not (0 <= x <= MAX_COORDINATE and 0 <= y <= MAX_COORDINATE):
        print(f"WARNING: Coordinates out of bounds in {line!r}")
        return None

    try:
        orientation = orientation_from_letter(fields[2])
    except ValueError:
        print(f"WARNING: Invalid orientation {fields[2]!r}, skipping robot")
        return None

    return Transform(Coordinate(x, y), orientation)


def parse_instructions(line: str) -> List[Instruction]:
    instructions = []
    for char in line.strip():
        try:
            instructions.append(Instruction(char))
        except ValueError:
            print(f"WARNING: Invalid instruction {char!r} detected, skipping")
    return instructions
