"""
Tests for angle normalization.
"""

import math
import unittest

import numpy as np

from spherenav.geo import Direction, clamp_acw, clamp_cw, clamp_either, diff_angle
from spherenav.unit import Degree, Radian

HALF_TURN = Radian(math.pi)


class TestClamp(unittest.TestCase):
    """Test the three clamp ranges."""

    def assertAngle(self, actual, expected_radians):
        self.assertAlmostEqual(float(actual), expected_radians, places=12)

    def test_clamp_cw(self):
        """Test folding into [0°, 360°)."""
        self.assertAngle(clamp_cw(3.0 * HALF_TURN), math.pi)
        self.assertAngle(clamp_cw(-3.0 * HALF_TURN), math.pi)
        self.assertAngle(clamp_cw(HALF_TURN), math.pi)
        self.assertAngle(clamp_cw(-HALF_TURN), math.pi)
        self.assertAlmostEqual(clamp_cw(Degree(-50)).to(Degree), 310.0)
        self.assertAlmostEqual(clamp_cw(Degree(400)).to(Degree), 40.0)

    def test_clamp_acw(self):
        """Test folding into (-360°, 0°]."""
        self.assertAngle(clamp_acw(3.0 * HALF_TURN), -math.pi)
        self.assertAngle(clamp_acw(-3.0 * HALF_TURN), -math.pi)
        self.assertAngle(clamp_acw(-HALF_TURN), -math.pi)
        self.assertAngle(clamp_acw(HALF_TURN), -math.pi)
        self.assertAlmostEqual(clamp_acw(Degree(361)).to(Degree), -359.0)

    def test_clamp_either(self):
        """Test folding into (-180°, 180°]."""
        self.assertAngle(clamp_either(1.5 * HALF_TURN), -math.pi / 2)
        self.assertAngle(clamp_either(-1.5 * HALF_TURN), math.pi / 2)
        self.assertAngle(clamp_either(-HALF_TURN / 2.0), -math.pi / 2)
        self.assertAngle(clamp_either(HALF_TURN / 2.0), math.pi / 2)
        self.assertAlmostEqual(clamp_either(Degree(200)).to(Degree), -160.0)

    def test_clamp_either_open_at_minus_half_turn(self):
        """Test -180° maps to +180°."""
        self.assertEqual(float(clamp_either(-HALF_TURN)), math.pi)
        self.assertEqual(float(clamp_either(HALF_TURN)), math.pi)

    def test_clamp_keeps_unit(self):
        """Test the clamped angle keeps the caller's unit."""
        self.assertIsInstance(clamp_cw(Degree(-90)), Degree)

    def test_large_input(self):
        """Test huge finite angles are folded without looping turn by turn."""
        for value in (1e20, -1e20, 1e300, -1e300):
            angle = Degree(value)
            cw = float(clamp_cw(angle))
            acw = float(clamp_acw(angle))
            either = float(clamp_either(angle))
            self.assertTrue(0.0 <= cw < 2 * math.pi, cw)
            self.assertTrue(-2 * math.pi < acw <= 0.0, acw)
            self.assertTrue(-math.pi < either <= math.pi, either)

    def test_many_turns(self):
        """Test whole turns are removed exactly enough from a multi-turn angle."""
        self.assertAlmostEqual(clamp_either(Degree(3690)).to(Degree), 90.0, places=9)
        self.assertAlmostEqual(clamp_cw(Degree(-3690)).to(Degree), 270.0, places=9)
        self.assertAlmostEqual(clamp_acw(Degree(3690)).to(Degree), -270.0, places=9)
        self.assertIsInstance(clamp_cw(Degree(1e20)), Degree)

    def test_non_finite(self):
        """Test infinity and NaN come back as NaN."""
        for value in (math.inf, -math.inf, math.nan):
            self.assertTrue(math.isnan(float(clamp_cw(Degree(value)))))
            self.assertTrue(math.isnan(float(clamp_either(Radian(value)))))

    def test_ranges(self):
        """Test every clamp lands in its range for a sweep of inputs."""
        for value in np.linspace(-1000.0, 1000.0, 401):
            angle = Degree(value)
            cw = float(clamp_cw(angle))
            acw = float(clamp_acw(angle))
            either = float(clamp_either(angle))
            self.assertTrue(0.0 <= cw < 2 * math.pi, cw)
            self.assertTrue(-2 * math.pi < acw <= 0.0, acw)
            self.assertTrue(-math.pi < either <= math.pi, either)


class TestDiffAngle(unittest.TestCase):
    """Test angular differences by direction."""

    def test_right(self):
        """Test clockwise difference."""
        self.assertAlmostEqual(
            float(diff_angle(HALF_TURN / 2.0, HALF_TURN, Direction.RIGHT)), math.pi / 2
        )

    def test_left(self):
        """Test anticlockwise difference."""
        self.assertAlmostEqual(
            float(diff_angle(HALF_TURN / 2.0, HALF_TURN, Direction.LEFT)), -1.5 * math.pi
        )

    def test_either(self):
        """Test shortest signed difference."""
        self.assertAlmostEqual(
            float(diff_angle(Radian(0.0), HALF_TURN / 2.0, Direction.EITHER)), math.pi / 2
        )
        self.assertAlmostEqual(
            float(diff_angle(Radian(0.0), -HALF_TURN / 2.0, Direction.EITHER)), -math.pi / 2
        )

    def test_either_across_north(self):
        """Test the short way round through north."""
        self.assertAlmostEqual(
            diff_angle(Degree(350), Degree(10), Direction.EITHER).to(Degree), 20.0
        )
        self.assertAlmostEqual(
            diff_angle(Degree(10), Degree(350), Direction.EITHER).to(Degree), -20.0
        )


if __name__ == '__main__':
    unittest.main()
