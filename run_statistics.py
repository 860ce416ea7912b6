#!/usr/bin/env python3
"""
Statistics Collection Script for Robot Simulation
Runs many random planets and measures how often robots get lost and how
much the scent mechanism protects later robots
"""

import sys
import io
import random
import numpy as np
from contextlib import redirect_stdout
from actions import Instruction, Transform
from grid import Coordinate, Size
from orientation import COMPASS
from robot import Robot
from simulation import Planet, Simulation

# Moves are weighted so robots actually reach the edges
INSTRUCTION_WEIGHTS = {
    Instruction.MOVE_FORWARD: 3,
    Instruction.TURN_LEFT: 1,
    Instruction.TURN_RIGHT: 1,
}


def random_planet(rng, max_size=10, robots_per_planet=10, max_program_length=30):
    """Build a planet with randomly placed robots and random programs"""
    area = Size(rng.randint(1, max_size), rng.randint(1, max_size))
    choices = list(INSTRUCTION_WEIGHTS)
    weights = list(INSTRUCTION_WEIGHTS.values())

    robots = []
    for _ in range(robots_per_planet):
        start = Transform(
            Coordinate(rng.randint(0, area.width), rng.randint(0, area.height)),
            rng.choice(COMPASS),
        )
        length = rng.randint(1, max_program_length)
        robots.append(Robot(start, rng.choices(choices, weights=weights, k=length)))
    return Planet(area, robots)


def run_single_simulation(rng, max_size=10, robots_per_planet=10, max_program_length=30, show_output=False):
    """Run a single simulation and return statistics"""
    planet = random_planet(rng, max_size, robots_per_planet, max_program_length)

    # Redirect stdout to suppress output unless requested
    if not show_output:
        f = io.StringIO()
        with redirect_stdout(f):
            Simulation(planet, verbose=True).run()
    else:
        Simulation(planet, verbose=True).run()

    robots = planet.robots
    stats = {
        'width': planet.area.width,
        'height': planet.area.height,
        'robots': len(robots),
        'lost': sum(1 for r in robots if r.lost),
        'scents': len(planet.scents),
        'scent_saves': sum(r.scent_saves for r in robots),
        'instructions_executed': sum(r.instructions_executed for r in robots),
    }
    return stats


def run_statistics(num_runs=20, seed=None, max_size=10, robots_per_planet=10, max_program_length=30):
    """Run multiple simulations and collect statistics"""
    rng = random.Random(seed)
    print(f"Running {num_runs} simulations for statistical analysis...")
    print("=" * 80)

    all_stats = []

    for i in range(num_runs):
        print(f"Running simulation {i+1}/{num_runs}...", end='\r')
        stats = run_single_simulation(rng, max_size, robots_per_planet, max_program_length)
        all_stats.append(stats)

    print("\n" + "=" * 80)
    print("\nCOMPLETED! Analyzing results...\n")

    lost = np.array([s['lost'] for s in all_stats])
    scents = np.array([s['scents'] for s in all_stats])
    saves = np.array([s['scent_saves'] for s in all_stats])
    executed = np.array([s['instructions_executed'] for s in all_stats])
    points = np.array([(s['width'] + 1) * (s['height'] + 1) for s in all_stats])

    loss_rate = lost / robots_per_planet * 100

    print("=" * 80)
    print("SIMULATION STATISTICS REPORT")
    print("=" * 80)
    print(f"Number of simulations: {num_runs}")
    print(f"Configuration: {robots_per_planet} robots per planet, planets up to {max_size}x{max_size}, "
          f"programs up to {max_program_length} instructions")
    print()

    print("--- LOSSES ---")
    print(f"Average Lost Robots: {np.mean(lost):.2f} ± {np.std(lost):.2f}")
    print(f"  Min: {np.min(lost)} | Max: {np.max(lost)} | Median: {np.median(lost):.1f}")
    print(f"Average Loss Rate: {np.mean(loss_rate):.1f}%")
    print()

    print("--- SCENTS ---")
    print(f"Average Scents Left: {np.mean(scents):.2f} ± {np.std(scents):.2f}")
    print(f"Average Moves Saved by Scents: {np.mean(saves):.2f} ± {np.std(saves):.2f}")
    print(f"Planets Where a Scent Saved a Robot: {np.count_nonzero(saves)} ({np.count_nonzero(saves)/num_runs*100:.1f}%)")
    print()

    print("--- WORKLOAD ---")
    print(f"Average Planet Points: {np.mean(points):.1f}")
    print(f"Average Instructions Executed: {np.mean(executed):.1f} ± {np.std(executed):.1f}")
    print("=" * 80)

    return all_stats


def main():
    """Main entry point"""
    # Default to 20 runs, but allow command line argument
    num_runs = 20
    if len(sys.argv) > 1:
        try:
            num_runs = int(sys.argv[1])
        except ValueError:
            print(f"Invalid argument. Using default: {num_runs} runs")

    stats = run_statistics(num_runs)

    # Optionally save detailed results to CSV
    if len(sys.argv) > 2:
        import csv
        filename = sys.argv[2]
        with open(filename, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=stats[0].keys())
            writer.writeheader()
            writer.writerows(stats)
        print(f"Results saved to {filename}")


if __name__ == "__main__":
    main()
