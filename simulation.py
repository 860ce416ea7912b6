"""
Simulation class running every robot on a planet in order
"""
from typing import List, Optional

from grid import ScentGrid, Size
from robot import Robot


class Planet:
    def __init__(self, area: Size, robots: List[Robot], scents: Optional[ScentGrid] = None):
        self.area = area
        self.robots = list(robots)  # execution order is output order
        self.scents = scents if scents is not None else ScentGrid()


class Simulation:
    def __init__(self, planet: Planet, verbose: bool = False):
        self.planet = planet
        self.verbose = verbose
        self.finished = False

    def run(self) -> List[Robot]:
        if self.finished:
            raise RuntimeError("This planet has already been simulated")

        area = self.planet.area
        # Shared by reference: robot i+1 must see every scent left by robots 0..i
        scents = self.planet.scents

        for i, robot in enumerate(self.planet.robots):
            if self.verbose:
                print(f"DEBUG: R{i} starting at {robot.transform.position} "
                      f"facing {robot.transform.orientation.name}")

            fell_from = robot.run_program(area, scents)
            if fell_from is not None:
                scents.add_scent(fell_from)
                if self.verbose:
                    print(f"DEBUG: R{i} lost, scent left at {fell_from}")

            if self.verbose:
                if robot.scent_saves:
                    print(f"DEBUG: R{i} ignored {robot.scent_saves} move(s) thanks to scents")
                print(f"DEBUG: R{i} finished {robot.status.value} at {robot.transform.position} "
                      f"after {robot.instructions_executed} instruction(s)")

        self.finished = True
        if self.verbose:
            self._print_final_results()
        return self.planet.robots

    def _print_final_results(self):
        lost = sum(1 for r in self.planet.robots if r.lost)
        print(f"\nFINAL RESULTS:")
        print(f"Robots: {len(self.planet.robots)}")
        print(f"Lost: {lost}")
        print(f"Scents: {len(self.planet.scents)}")


def simulate(planet: Planet, verbose: bool = False) -> Planet:
    Simulation(planet, verbose=verbose).run()
    return planet
