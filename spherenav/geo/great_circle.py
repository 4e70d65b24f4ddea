"""Intersection of two great circles given by point and bearing."""

from __future__ import annotations

import logging
from math import isfinite

from spherenav.config import INTERMEDIATE_PLACE_DISTANCE
from spherenav.geo.angles import Direction, clamp_cw, diff_angle
from spherenav.geo.bearing_distance import bearing_distance, bearing_to
from spherenav.geo.cartesian import Spherical
from spherenav.geo.coordinates import Coordinates
from spherenav.unit import Angle

logger = logging.getLogger(__name__)


def place_bearing_intersection(
    place1: Coordinates, bearing1: Angle, place2: Coordinates, bearing2: Angle
) -> tuple[Coordinates, Coordinates]:
    """Intersections of the great circles through two points on two bearings.

    Each great circle runs through ``placeN`` with bearing ``bearingN`` *at
    that point*. Two great circles always meet in a pair of antipodal
    points; the first element returned is the one whose bearing from
    ``place1`` is closest to ``bearing1``.

    Identical or antipodal circles have no defined intersection line and
    produce non-finite coordinates.

    Args:
        place1 (Coordinates): Point on the first great circle.
        bearing1 (Angle): Bearing of the first great circle at ``place1``.
        place2 (Coordinates): Point on the second great circle.
        bearing2 (Angle): Bearing of the second great circle at ``place2``.

    Returns:
        tuple[Coordinates, Coordinates]: ``(ahead, behind)`` relative to
        ``bearing1``.

    Example:
        >>> ahead, behind = place_bearing_intersection(
        ...     Coordinates.new(39.778889, -104.9825), Degree(0),
        ...     Coordinates.new(43.778889, -102.9825), Degree(0),
        ... )
        >>> round(ahead.lat.to(Degree), 3), round(behind.lat.to(Degree), 3)
        (90.0, -90.0)
    """
    pa11 = Spherical.from_coordinates(place1)
    pa12 = Spherical.from_coordinates(bearing_distance(place1, bearing1, INTERMEDIATE_PLACE_DISTANCE))
    pa21 = Spherical.from_coordinates(place2)
    pa22 = Spherical.from_coordinates(bearing_distance(place2, bearing2, INTERMEDIATE_PLACE_DISTANCE))

    n1 = pa11.cross(pa12)
    n2 = pa21.cross(pa22)

    line = n1.cross(n2)
    length = line.norm()
    if length == 0.0 or not isfinite(length):
        logger.debug("degenerate great circle pair, |n1 x n2| = %s", length)

    i1 = line / length
    i2 = -i1

    s1 = i1.to_coordinates()
    s2 = i2.to_coordinates()

    # measured round the circle: a bearing of 359.9° is close to 0°
    reference = clamp_cw(bearing1)
    delta1 = abs(diff_angle(reference, bearing_to(place1, s1), Direction.EITHER))
    delta2 = abs(diff_angle(reference, bearing_to(place1, s2), Direction.EITHER))

    if delta1 < delta2:
        return s1, s2
    return s2, s1
