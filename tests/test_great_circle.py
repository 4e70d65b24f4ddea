"""
Tests for the intersection of two great circles.
"""

import math
import unittest

from spherenav.geo import Coordinates, bearing_to, distance_to, place_bearing_intersection
from spherenav.unit import Degree, Radian

DENVER = Coordinates.new(39.778889, -104.9825)
TARGET = Coordinates.new(43.778889, -102.9825)


class TestPlaceBearingIntersection(unittest.TestCase):
    """Test great circle crossings."""

    def test_poles(self):
        """Test two meridians meet at the poles, north first when heading north."""
        ahead, behind = place_bearing_intersection(DENVER, Degree(0), TARGET, Degree(0))
        self.assertAlmostEqual(ahead.lat.to(Degree), 90.0, delta=1e-6)
        self.assertAlmostEqual(behind.lat.to(Degree), -90.0, delta=1e-6)

    def test_poles_heading_south(self):
        """Test the south pole comes first when heading south."""
        ahead, behind = place_bearing_intersection(DENVER, Degree(180), TARGET, Degree(180))
        self.assertAlmostEqual(ahead.lat.to(Degree), -90.0, delta=1e-6)
        self.assertAlmostEqual(behind.lat.to(Degree), 90.0, delta=1e-6)

    def test_equator(self):
        """Test mirrored courses either side of the equator cross on it."""
        ahead, behind = place_bearing_intersection(
            Coordinates.new(43.0, -104.9825), Degree(175), Coordinates.new(-43.0, -104.9825), Degree(5)
        )
        self.assertAlmostEqual(ahead.lat.to(Degree), 0.0, delta=1e-9)
        self.assertAlmostEqual(behind.lat.to(Degree), 0.0, delta=1e-9)

    def test_triangle(self):
        """Test converging courses from two southern points."""
        ahead, behind = place_bearing_intersection(
            Coordinates.new(-43.0, 0.0), Degree(-45), Coordinates.new(-43.0, -90.0), Degree(45)
        )
        self.assertAlmostEqual(float(ahead.lat), 0.29828558585826787, delta=1e-9)
        self.assertAlmostEqual(ahead.long.to(Degree), -45.0, delta=1e-9)
        self.assertAlmostEqual(behind.long.to(Degree), 135.0, delta=1e-9)

    def test_results_are_antipodal(self):
        """Test the two results are half a circumference apart."""
        ahead, behind = place_bearing_intersection(
            Coordinates.new(51.5, -0.12), Degree(100), Coordinates.new(48.85, 2.35), Degree(10)
        )
        self.assertAlmostEqual(ahead.lat.to(Degree), -behind.lat.to(Degree))
        self.assertAlmostEqual(
            float(distance_to(ahead, behind)), float(distance_to(Coordinates.new(0, 0), Coordinates.new(0, 180))),
            delta=1.0,
        )

    def test_intersection_on_both_courses(self):
        """Test the crossing ahead lies on both great circles."""
        place1 = Coordinates.new(51.5, -0.12)
        place2 = Coordinates.new(48.85, 2.35)
        ahead, _ = place_bearing_intersection(place1, Degree(100), place2, Degree(10))
        self.assertIsInstance(ahead.lat, Radian)
        self.assertAlmostEqual(bearing_to(place1, ahead).to(Degree), 100.0, delta=1e-6)
        # either direction along the second circle
        self.assertAlmostEqual(bearing_to(place2, ahead).to(Degree) % 180.0, 10.0, delta=1e-6)

    def test_identical_circles_are_degenerate(self):
        """Test identical inputs produce NaN and log the degeneracy."""
        with self.assertLogs("spherenav.geo.great_circle", level="DEBUG") as captured:
            ahead, behind = place_bearing_intersection(DENVER, Degree(30), DENVER, Degree(30))
        self.assertTrue(math.isnan(float(ahead.lat)))
        self.assertTrue(math.isnan(float(behind.lat)))
        self.assertIn("degenerate", captured.output[0])


if __name__ == '__main__':
    unittest.main()
