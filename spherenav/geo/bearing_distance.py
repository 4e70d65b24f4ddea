"""Point-to-point navigation on the sphere.

Forward and inverse problems of spherical navigation, plus a lat/long box
that bounds a circle of given radius:

- ``bearing_to``: initial great-circle bearing from one point to another
- ``distance_to``: haversine great-circle distance
- ``bearing_distance``: point reached from a start, bearing and distance
- ``distance_bounds``: south-west / north-east corners enclosing a radius

All formulas assume a sphere of radius ``EARTH_RADIUS``.

Example:
    >>> denver = Coordinates.new(39.778889, -104.9825)
    >>> target = Coordinates.new(43.778889, -102.9825)
    >>> bearing_to(denver, target).to(Degree)
    19.787524850709293
    >>> bearing_distance(denver, Degree(0), NauticalMile(60)).to_deg()
    (40.77..., -104.9825)
"""

from __future__ import annotations

from spherenav.geo.angles import clamp_either
from spherenav.geo.constants import (
    EARTH_RADIUS,
    FULL_RATIO,
    FULL_TURN,
    MAX_LAT,
    MAX_LONG,
    MIN_LAT,
    MIN_LONG,
)
from spherenav.geo.coordinates import Coordinates
from spherenav.unit import Angle, Length, Radian


def _radial(distance: Length) -> Angle:
    """Angle subtended at the Earth's centre by an arc of ``distance``."""
    return Radian.from_si(distance / EARTH_RADIUS)


def bearing_to(origin: Coordinates, destination: Coordinates) -> Angle:
    """Initial great-circle bearing from ``origin`` to ``destination``.

    Args:
        origin (Coordinates): Start point.
        destination (Coordinates): End point.

    Returns:
        Angle: Bearing clockwise from true north in [0°, 360°). Coincident
        points give 0.
    """
    delta_long = destination.long - origin.long
    y = delta_long.sin() * destination.lat.cos()
    x = (
        origin.lat.cos() * destination.lat.sin()
        - origin.lat.sin() * destination.lat.cos() * delta_long.cos()
    )

    bearing = Radian.atan2(y, x)
    return (bearing + FULL_TURN) % FULL_TURN


def distance_to(origin: Coordinates, destination: Coordinates) -> Length:
    """Great-circle distance between two points (haversine formula).

    Returns:
        Length: Distance in [0, π·EARTH_RADIUS]; symmetric in its arguments.
    """
    delta_lat = destination.lat - origin.lat
    delta_long = destination.long - origin.long

    a = (delta_lat / 2.0).sin() * (delta_lat / 2.0).sin() + origin.lat.cos() * destination.lat.cos() * (
        delta_long / 2.0
    ).sin() * (delta_long / 2.0).sin()

    c = 2.0 * Radian.atan2(a.sqrt(), (FULL_RATIO - a).sqrt())

    return EARTH_RADIUS * c


def bearing_distance(origin: Coordinates, bearing: Angle, distance: Length) -> Coordinates:
    """Point reached by travelling ``distance`` from ``origin`` on ``bearing``.

    The resulting longitude is folded into (-180°, 180°], so paths that
    cross the antimeridian or a pole come back in the conventional range.

    Args:
        origin (Coordinates): Start point.
        bearing (Angle): Initial bearing, clockwise from true north.
        distance (Length): Great-circle distance to travel.

    Returns:
        Coordinates: Destination point.
    """
    radial = _radial(distance)

    lat = Radian.asin(
        origin.lat.sin() * radial.cos() + origin.lat.cos() * radial.sin() * bearing.cos()
    )
    long = clamp_either(
        origin.long
        + Radian.atan2(
            bearing.sin() * radial.sin() * origin.lat.cos(),
            radial.cos() - origin.lat.sin() * lat.sin(),
        )
    )

    return Coordinates(lat, long)


def distance_bounds(center: Coordinates, distance: Length) -> tuple[Coordinates, Coordinates]:
    """South-west and north-east corners of a box containing a circle.

    Every point within ``distance`` of ``center`` lies inside the box.

    When the box straddles the antimeridian its south-west longitude is
    greater than its north-east longitude. When the circle contains a pole
    the box spans all longitudes, signalled by both corner longitudes being
    ``MIN_LONG``; the latitudes are then limited toward the pole.

    Args:
        center (Coordinates): Circle centre.
        distance (Length): Circle radius.

    Returns:
        tuple[Coordinates, Coordinates]: ``(south_west, north_east)``.
    """
    radial = _radial(distance)

    low_lat = center.lat - radial
    high_lat = center.lat + radial

    if low_lat > MIN_LAT and high_lat < MAX_LAT:
        delta_long = Radian.asin(radial.sin() / center.lat.cos())

        low_long = center.long - delta_long
        if low_long < MIN_LONG:
            low_long += FULL_TURN

        high_long = center.long + delta_long
        if high_long > MAX_LONG:
            high_long -= FULL_TURN
    else:
        low_lat = max(low_lat, MIN_LAT)
        # max, not min: a northern bound inside the circle is pushed to the pole
        high_lat = max(high_lat, MAX_LAT)

        low_long = MIN_LONG
        high_long = MIN_LONG

    return Coordinates(low_lat, low_long), Coordinates(high_lat, high_long)
