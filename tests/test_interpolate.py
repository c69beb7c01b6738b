"""
Unit tests for the monotone cubic interpolant.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mandelbrot.interpolate import Extrapolation, create_interpolant


class TestCreateInterpolant(unittest.TestCase):
    """Exactness, shape preservation and degenerate inputs."""

    XS = [0.0, 0.16, 0.42, 0.6425, 0.8575, 1.0]
    YS = [0.0, 32 / 255, 237 / 255, 1.0, 0.0, 0.0]

    def test_passes_through_every_knot(self):
        f = create_interpolant(self.XS, self.YS, Extrapolation.NONE)
        for x, y in zip(self.XS, self.YS):
            self.assertAlmostEqual(f(x), y, delta=1e-9)

    def test_unsorted_input_matches_sorted(self):
        sorted_f = create_interpolant(self.XS, self.YS)
        order = [3, 0, 5, 1, 4, 2]
        shuffled_f = create_interpolant([self.XS[i] for i in order], [self.YS[i] for i in order])
        for k in range(101):
            x = k / 100
            self.assertAlmostEqual(sorted_f(x), shuffled_f(x), delta=1e-12)

    def test_rightmost_knot_is_exact(self):
        f = create_interpolant([0.0, 0.3, 1.0], [0.2, 0.9, 0.4])
        self.assertEqual(f(1.0), 0.4)

    def test_monotone_data_gives_monotone_function(self):
        xs = [0.0, 1.0, 2.0, 2.5, 4.0, 7.0]
        ys = [0.0, 0.1, 0.1, 0.5, 0.55, 3.0]
        f = create_interpolant(xs, ys)
        for a, b in zip(xs, xs[1:]):
            samples = [f(a + (b - a) * k / 200) for k in range(201)]
            for left, right in zip(samples, samples[1:]):
                self.assertLessEqual(left, right + 1e-12)
            self.assertGreaterEqual(min(samples), min(f(a), f(b)) - 1e-12)
            self.assertLessEqual(max(samples), max(f(a), f(b)) + 1e-12)

    def test_local_extremum_does_not_overshoot(self):
        f = create_interpolant([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        for k in range(201):
            self.assertLessEqual(f(2.0 * k / 200), 1.0 + 1e-12)

    def test_no_points_is_zero(self):
        f = create_interpolant([], [])
        for x in (-10.0, 0.0, 0.5, 3.0):
            self.assertEqual(f(x), 0.0)

    def test_single_point_is_constant(self):
        f = create_interpolant([0.3], [0.7])
        for x in (-10.0, 0.0, 0.3, 3.0):
            self.assertEqual(f(x), 0.7)

    def test_length_mismatch_raises(self):
        with self.assertRaises(ValueError) as ctx:
            create_interpolant([0.0, 1.0], [1.0])
        self.assertIn("2", str(ctx.exception))
        self.assertIn("1", str(ctx.exception))


class TestExtrapolation(unittest.TestCase):
    """Behavior outside the control range."""

    def test_none_extends_boundary_segments(self):
        f = create_interpolant([0.0, 1.0], [0.0, 2.0], Extrapolation.NONE)
        self.assertAlmostEqual(f(2.0), 4.0)
        self.assertAlmostEqual(f(-1.0), -2.0)

    def test_linear_uses_min_and_max(self):
        f = create_interpolant([0.0, 1.0, 2.0], [1.0, 3.0, 2.0], Extrapolation.LINEAR)
        self.assertAlmostEqual(f(3.0), 1.0 + 1.5 * 3.0)
        self.assertAlmostEqual(f(-1.0), 1.0 - 0.5 * 3.0)
        # Inside the range the cubic is used
        self.assertAlmostEqual(f(1.0), 3.0)

    def test_constant_holds_extremes(self):
        f = create_interpolant([0.0, 1.0, 2.0], [1.0, 3.0, 2.0], Extrapolation.CONSTANT)
        self.assertEqual(f(-5.0), 1.0)
        self.assertEqual(f(5.0), 3.0)


if __name__ == "__main__":
    unittest.main()
