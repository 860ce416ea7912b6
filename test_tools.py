import io
import os
import random
import tempfile
import unittest
from contextlib import redirect_stdout
from main import main
from run_statistics import random_planet, run_single_simulation, run_statistics
from grid import is_within_bounds
from state_diagram import STATES, build_state_diagram


class TestMain(unittest.TestCase):
    def run_main(self, argv):
        f = io.StringIO()
        with redirect_stdout(f):
            code = main(argv)
        return code, f.getvalue()

    def test_sample_run(self):
        code, out = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIn("3 3 N LOST", out)
        self.assertIn("Output matches expected output", out)

    def test_grid_flag(self):
        code, out = self.run_main(["--grid"])
        self.assertEqual(code, 0)
        self.assertIn(" 3:", out)

    def test_input_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "planet.txt")
            with open(path, "w") as f:
                f.write("2 2\n0 0 S\nF\n0 0 S\nFLF\n")
            code, out = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertIn("0 0 S LOST\n1 0 E\n", out)
        self.assertNotIn("expected output", out)

    def test_missing_input_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            code, out = self.run_main([os.path.join(tmp, "missing.txt")])
        self.assertEqual(code, 1)
        self.assertIn("Failed to read planet definition", out)

    def test_undecodable_input_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "planet.txt")
            with open(path, "wb") as f:
                f.write(b"\xff\xfe\xfa\x80 5 3\n")
            code, out = self.run_main([path])
        self.assertEqual(code, 1)
        self.assertIn("Failed to read planet definition", out)

    def test_bad_input_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "planet.txt")
            with open(path, "w") as f:
                f.write("60 60\n0 0 S\nF\n")
            code, out = self.run_main([path])
        self.assertEqual(code, 1)
        self.assertIn("Failed to read planet definition", out)


class TestStateDiagram(unittest.TestCase):
    def test_diagram_source(self):
        source = build_state_diagram().source
        for state in STATES:
            self.assertIn(state, source)
        self.assertIn("fall_off", source)
        self.assertIn("ignore_move", source)


class TestStatistics(unittest.TestCase):
    def test_random_planet(self):
        planet = random_planet(random.Random(3), max_size=4, robots_per_planet=6, max_program_length=5)
        self.assertEqual(len(planet.robots), 6)
        self.assertLessEqual(planet.area.width, 4)
        for robot in planet.robots:
            self.assertTrue(is_within_bounds(robot.transform.position, planet.area))
            self.assertTrue(1 <= len(robot.program) <= 5)

    def test_single_simulation(self):
        stats = run_single_simulation(random.Random(7))
        self.assertEqual(stats['robots'], 10)
        self.assertLessEqual(stats['lost'], stats['robots'])
        # A robot is only lost from an unscented point, so every loss leaves a new scent
        self.assertEqual(stats['scents'], stats['lost'])

    def test_seeded_runs_repeat(self):
        with redirect_stdout(io.StringIO()):
            first = run_statistics(num_runs=3, seed=11)
            second = run_statistics(num_runs=3, seed=11)
        self.assertEqual(len(first), 3)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
