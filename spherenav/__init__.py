"""Deterministic point-to-point navigation math on a spherical Earth.

spherenav answers the geometric questions behind flight planning, ATC
simulation and marine routing: which way and how far from A to B, where do I
end up after flying a bearing for a distance, which lat/long box covers a
radius, where do two courses cross, and where does a course cut a circle of
fixed radius around a fix.

Framework Architecture:
    Measurement Framework (spherenav.unit):
        • Type-safe Angle, Length and Ratio quantities with SI storage
        • Runtime dimensional checks (lengths cannot be added to angles)
        • Trigonometry on angles returning dimensionless ratios

    Geographic Systems (spherenav.geo):
        • Coordinates value type and angle normalization
        • Unit-sphere (Spherical) and Earth-scaled (XYZ) Cartesian frames
        • Bearing/distance, forward projection and bounding boxes
        • Great-circle and small-circle intersection solvers

    Command Line (spherenav.cli):
        • ``spherenav`` console script rendering results with Rich

Earth Model:
    A sphere of radius 6,378,137 m. The approximation is deliberate; no
    ellipsoidal corrections are applied anywhere.

Error Model:
    Geometric non-existence (a small circle that misses a great circle) is
    reported as ``None``. Degenerate numerics (antipodal inputs, coincident
    great circles) propagate as NaN/inf. Mixing incompatible units raises
    ``TypeError``.

Example:
    >>> from spherenav import Coordinates, bearing_distance, closest_small_circle_intersection
    >>> from spherenav.unit import Degree, NauticalMile
    >>>
    >>> berlin = Coordinates.new(52.518611, 13.408056)
    >>> south = bearing_distance(berlin, Degree(180), NauticalMile(8.09935205184))
    >>> [round(value, 6) for value in south.to_deg()]
    [52.383864, 13.408056]
    >>>
    >>> fix = closest_small_circle_intersection(
    ...     Coordinates.new(90.0, 0.0), NauticalMile(5),
    ...     Coordinates.new(85.0, 10.0), Degree(0),
    ... )
"""

from .geo import (
    EARTH_RADIUS,
    MAX_LAT,
    MAX_LONG,
    MIN_LAT,
    MIN_LONG,
    XYZ,
    Coordinates,
    Direction,
    Spherical,
    bearing_distance,
    bearing_to,
    clamp_acw,
    clamp_cw,
    clamp_either,
    closest_small_circle_intersection,
    diff_angle,
    distance_bounds,
    distance_to,
    first_small_circle_intersection,
    place_bearing_intersection,
    small_circle_great_circle_intersection,
)
from .unit import Angle, Degree, Kilometer, Length, Meter, NauticalMile, Radian, Ratio

__version__ = "0.1.0"

__all__ = [
    # Coordinates
    "Coordinates",
    "Direction",
    "Spherical",
    "XYZ",
    # Angle normalization
    "clamp_cw",
    "clamp_acw",
    "clamp_either",
    "diff_angle",
    # Navigation
    "bearing_to",
    "distance_to",
    "bearing_distance",
    "distance_bounds",
    "place_bearing_intersection",
    "small_circle_great_circle_intersection",
    "first_small_circle_intersection",
    "closest_small_circle_intersection",
    # Constants
    "EARTH_RADIUS",
    "MIN_LAT",
    "MAX_LAT",
    "MIN_LONG",
    "MAX_LONG",
    # Units
    "Angle",
    "Length",
    "Radian",
    "Degree",
    "Ratio",
    "Meter",
    "Kilometer",
    "NauticalMile",
]
