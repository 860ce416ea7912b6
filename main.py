import sys

from input_parser import PlanetParseError, parse_input
from report import format_results, render_grid
from simulation import Simulation

SAMPLE_INPUT = """5 3
1 1 E
RFRFRFRF

3 2 N
FRRFLLFFRRFLL

0 3 W
LLFFFLFLFL
"""

EXPECTED_OUTPUT = """1 1 E
3 3 N LOST
2 3 S
"""


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    show_grid = "--grid" in args
    paths = [a for a in args if a != "--grid"]

    if paths:
        try:
            with open(paths[0], encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Failed to read planet definition: {e}")
            return 1
    else:
        print("Reading sample input")
        text = SAMPLE_INPUT

    try:
        planet = parse_input(text)
    except PlanetParseError as e:
        print(f"Failed to read planet definition: {e}")
        return 1

    print(f"Planet size: {planet.area.width} x {planet.area.height}")
    print(f"Read {len(planet.robots)} robots")

    Simulation(planet).run()

    output = format_results(planet.robots)
    print(output)
    if show_grid:
        print(render_grid(planet))

    if not paths:
        if output == EXPECTED_OUTPUT:
            print("Output matches expected output")
        else:
            print("Output does NOT match expected output")
    return 0


if __name__ == "__main__":
    sys.exit(main())
