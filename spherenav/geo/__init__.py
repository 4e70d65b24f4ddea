"""Spherical-Earth navigation geometry.

This package provides geographic coordinates and the navigation math built on
them. Every calculation treats the Earth as a perfect sphere of radius
``EARTH_RADIUS`` (the WGS84 equatorial radius); there is no ellipsoid model.

Components:
    Coordinates: Latitude/longitude value type
    Direction: Which way an angular difference is measured
    clamp_cw / clamp_acw / clamp_either / diff_angle: Angle normalization
    Spherical / XYZ / UnitVector: The two Cartesian conventions
    bearing_to / distance_to / bearing_distance / distance_bounds:
        Inverse and forward navigation, bounding boxes
    place_bearing_intersection: Crossing of two great circles
    small_circle_great_circle_intersection: Crossings of a small circle and
        a great circle, with first_ / closest_ selection policies

Key Features:
    • Unit-safe inputs and outputs (``Angle``, ``Length``)
    • Pure functions over immutable values, safe to call from any thread
    • Degenerate geometry surfaces as NaN/inf or ``None``, never an exception

Typical Usage:
    >>> from spherenav.geo import Coordinates, bearing_to, distance_to
    >>> from spherenav.unit import Degree, NauticalMile
    >>>
    >>> denver = Coordinates.new(39.778889, -104.9825)
    >>> target = Coordinates.new(43.778889, -102.9825)
    >>> heading = bearing_to(denver, target)
    >>> leg = distance_to(denver, target).to(NauticalMile)
"""

from .angles import Direction, clamp_acw, clamp_cw, clamp_either, diff_angle
from .bearing_distance import bearing_distance, bearing_to, distance_bounds, distance_to
from .cartesian import (
    XYZ,
    Spherical,
    UnitVector,
    calculate_v,
    from_theta_phi,
    phi,
    phi_unit_vector,
    theta,
    theta_unit_vector,
)
from .constants import EARTH_RADIUS, MAX_LAT, MAX_LONG, MIN_LAT, MIN_LONG
from .coordinates import Coordinates
from .great_circle import place_bearing_intersection
from .small_circle import (
    closest_small_circle_intersection,
    first_small_circle_intersection,
    small_circle_great_circle_intersection,
    solve_with_permutations,
)

__all__ = [
    "Coordinates",
    "Direction",
    "clamp_cw",
    "clamp_acw",
    "clamp_either",
    "diff_angle",
    "Spherical",
    "XYZ",
    "UnitVector",
    "theta",
    "phi",
    "from_theta_phi",
    "theta_unit_vector",
    "phi_unit_vector",
    "calculate_v",
    "bearing_to",
    "distance_to",
    "bearing_distance",
    "distance_bounds",
    "place_bearing_intersection",
    "small_circle_great_circle_intersection",
    "solve_with_permutations",
    "first_small_circle_intersection",
    "closest_small_circle_intersection",
    "EARTH_RADIUS",
    "MIN_LAT",
    "MAX_LAT",
    "MIN_LONG",
    "MAX_LONG",
]
