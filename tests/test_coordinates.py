"""
Tests for the Coordinates value type.
"""

import dataclasses
import math
import unittest

from spherenav.geo import Coordinates
from spherenav.unit import Degree, Radian


class TestCoordinates(unittest.TestCase):
    """Test construction and conversion."""

    def test_new_in_degrees(self):
        """Test new() stores degree angles."""
        point = Coordinates.new(52.518611, 13.408056)
        self.assertIsInstance(point.lat, Degree)
        self.assertAlmostEqual(point.lat.to(Degree), 52.518611)
        self.assertAlmostEqual(point.long.to(Degree), 13.408056)

    def test_from_deg_is_new(self):
        """Test from_deg is an alias of new."""
        self.assertEqual(Coordinates.from_deg(10.0, 20.0), Coordinates.new(10.0, 20.0))

    def test_from_rad(self):
        """Test construction from radians."""
        point = Coordinates.from_rad(math.pi / 4, -math.pi / 2)
        self.assertIsInstance(point.long, Radian)
        lat, long = point.to_deg()
        self.assertAlmostEqual(lat, 45.0)
        self.assertAlmostEqual(long, -90.0)

    def test_default_is_origin(self):
        """Test the default point is (0°, 0°)."""
        self.assertEqual(Coordinates().to_deg(), (0.0, 0.0))

    def test_normalized(self):
        """Test longitude folds into (-180°, 180°] and latitude is untouched."""
        lat, long = Coordinates.new(12.0, 190.0).normalized().to_deg()
        self.assertAlmostEqual(lat, 12.0)
        self.assertAlmostEqual(long, -170.0)
        self.assertAlmostEqual(Coordinates.new(0.0, -190.0).normalized().long.to(Degree), 170.0)

    def test_frozen(self):
        """Test coordinates are immutable and hashable."""
        point = Coordinates.new(1.0, 2.0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            point.lat = Degree(3.0)
        self.assertEqual(len({point, Coordinates.new(1.0, 2.0)}), 1)

    def test_str(self):
        """Test the human-readable form."""
        self.assertEqual(str(Coordinates.new(1.5, -2.25)), "(1.500000°, -2.250000°)")


if __name__ == '__main__':
    unittest.main()
