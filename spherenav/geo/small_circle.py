"""Intersection of a small circle with a great circle.

A small circle is every point at a fixed distance (``radius``) from a centre.
Finding where it crosses a great circle amounts to intersecting three
surfaces in Earth-scaled Cartesian space: the Earth sphere, the great
circle's plane through the origin, and a sphere of radius ``radius`` around
the centre. Subtracting the two sphere equations leaves a second plane;
together with the great-circle plane it expresses two axes as affine
functions of the third::

    axis_j = a + b·axis_i
    axis_k = c + d·axis_i

Substituting back into the Earth sphere gives a quadratic in ``axis_i``. The
denominator shared by ``a, b, c, d`` can vanish for a given choice of free
axis, so up to three axis permutations are tried before settling on one.

The selection wrappers resolve the two roots into a single answer:

- ``first_small_circle_intersection``: first crossing met when travelling
  along the bearing (depends on the bearing's direction)
- ``closest_small_circle_intersection``: crossing nearest the reference
  point (same answer for a bearing and its reciprocal)
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

import numpy as np

from spherenav.config import AXIS_PERMUTATIONS, BASE_TYPE, PERMUTATION_DENOMINATOR_THRESHOLD
from spherenav.geo.angles import Direction, diff_angle
from spherenav.geo.bearing_distance import bearing_to, distance_to
from spherenav.geo.cartesian import XYZ, calculate_v
from spherenav.geo.constants import EARTH_RADIUS, QUARTER_TURN
from spherenav.geo.coordinates import Coordinates
from spherenav.unit import Angle, Length

logger = logging.getLogger(__name__)

Intercepts = tuple[Coordinates, Coordinates]


def _denominator(center: BASE_TYPE, normal: BASE_TYPE, permutation: Sequence[int]) -> float:
    _, j, k = permutation
    return normal[k] * center[j] - normal[j] * center[k]


def solve_with_permutations(
    small_circle_xyz: XYZ,
    normal: XYZ,
    small_circle_radius: Length,
    permutations: Sequence[Sequence[int]] = AXIS_PERMUTATIONS,
) -> Intercepts | None:
    """Solve the sphere / plane / sphere system for its two surface points.

    Works on raw SI floats (meters) so that axis permutation stays simple
    index bookkeeping.

    Args:
        small_circle_xyz (XYZ): Centre of the small circle.
        normal (XYZ): Normal of the great circle's plane.
        small_circle_radius (Length): Straight-line radius of the small
            circle's sphere.
        permutations: Axis orderings ``(free, j, k)`` to try in order. The
            first with ``|denominator| >= PERMUTATION_DENOMINATOR_THRESHOLD``
            is used; otherwise the last one is used anyway.

    Returns:
        tuple[Coordinates, Coordinates] | None: Both intersections (the root
        taken with ``-√disc`` first), or None when the discriminant is
        negative and the circles do not meet.
    """
    center = small_circle_xyz.to_array()
    ns = normal.to_array()
    radius = np.float64(EARTH_RADIUS)

    permutation = permutations[0]
    denominator = _denominator(center, ns, permutation)
    i = 1
    while abs(denominator) < PERMUTATION_DENOMINATOR_THRESHOLD and i < len(permutations):
        permutation = permutations[i]
        denominator = _denominator(center, ns, permutation)
        i += 1

    if abs(denominator) < PERMUTATION_DENOMINATOR_THRESHOLD:
        logger.debug(
            "no well-conditioned axis permutation, using %s (denominator %g)",
            permutation,
            denominator,
        )

    p0, p1, p2 = permutation
    spheres = float(small_circle_radius) ** 2 - 2.0 * radius**2

    # a vanishing denominator propagates as inf/nan
    with np.errstate(divide="ignore", invalid="ignore"):
        a = (-ns[p2] * spheres) / 2.0 / denominator
        b = -(ns[p2] * center[p0] - ns[p0] * center[p2]) / denominator
        c = (ns[p1] * spheres) / 2.0 / denominator
        d = (ns[p1] * center[p0] - ns[p0] * center[p1]) / denominator

        discriminant = (
            -(c**2) * (1.0 + b**2)
            + 2.0 * a * b * c * d
            - a**2 * (1.0 + d**2)
            + (1.0 + b**2 + d**2) * radius**2
        )

        if discriminant < 0.0:
            return None

        result1 = [0.0, 0.0, 0.0]
        result2 = [0.0, 0.0, 0.0]

        result1[p0] = (-a * b - c * d - np.sqrt(discriminant)) / (1.0 + b**2 + d**2)
        result2[p0] = (-a * b - c * d + np.sqrt(discriminant)) / (1.0 + b**2 + d**2)

        result1[p1] = a + b * result1[p0]
        result2[p1] = a + b * result2[p0]

        result1[p2] = c + d * result1[p0]
        result2[p2] = c + d * result2[p0]

    return (
        XYZ.from_meters(*result1).to_coordinates(),
        XYZ.from_meters(*result2).to_coordinates(),
    )


def small_circle_great_circle_intersection(
    center: Coordinates,
    radius: Length,
    great_circle_reference: Coordinates,
    great_circle_bearing: Angle,
) -> Intercepts | None:
    """Both points where a small circle meets a great circle.

    Args:
        center (Coordinates): Centre of the small circle.
        radius (Length): Radius of the small circle.
        great_circle_reference (Coordinates): Point on the great circle.
        great_circle_bearing (Angle): Bearing of the great circle at
            ``great_circle_reference``.

    Returns:
        tuple[Coordinates, Coordinates] | None: The two intersections, or
        None when the circles never meet.

    Example:
        >>> first, second = small_circle_great_circle_intersection(
        ...     Coordinates.new(90.0, 0.0), NauticalMile(5),
        ...     Coordinates.new(85.0, 10.0), Degree(0),
        ... )
        >>> first.long.to(Degree), second.long.to(Degree)
        (-170.0..., 10.0...)
    """
    small_circle_xyz = XYZ.from_coordinates(center)
    great_circle_xyz = XYZ.from_coordinates(great_circle_reference)

    v = calculate_v(great_circle_reference, great_circle_bearing)
    normal = great_circle_xyz.cross(v)

    return solve_with_permutations(small_circle_xyz, normal, radius)


def _within_quarter_turn(bearing: Angle, other: Angle) -> bool:
    return abs(diff_angle(bearing, other, Direction.EITHER)) <= QUARTER_TURN


def first_small_circle_intersection(
    center: Coordinates,
    radius: Length,
    bearing_reference: Coordinates,
    bearing: Angle,
) -> Coordinates | None:
    """The first intersection met travelling from a point along a bearing.

    "First" is judged along ``bearing`` from ``bearing_reference``:

    - reference inside (or on) the small circle: the crossing ahead, within
      90° of ``bearing``
    - centre ahead of the reference: the nearer crossing
    - centre behind the reference: the farther crossing

    If there is an intersection close behind the reference the returned
    point may be on the other side of the planet; reversing the bearing by
    180° would return the one close behind instead.

    Returns:
        Coordinates | None: The selected intersection, or None when the
        circles never meet.
    """
    intercepts = small_circle_great_circle_intersection(center, radius, bearing_reference, bearing)
    if intercepts is None:
        return None

    first, second = intercepts

    if distance_to(bearing_reference, center) <= radius:
        # reference inside the circle: take the crossing ahead on the bearing
        if _within_quarter_turn(bearing, bearing_to(bearing_reference, first)):
            return first
        return second

    if _within_quarter_turn(bearing, bearing_to(bearing_reference, center)):
        # centre ahead: nearest crossing
        if distance_to(bearing_reference, first) < distance_to(bearing_reference, second):
            return first
        return second

    # centre behind: furthest crossing
    if distance_to(bearing_reference, first) > distance_to(bearing_reference, second):
        return first
    return second


def closest_small_circle_intersection(
    center: Coordinates,
    radius: Length,
    great_circle_reference: Coordinates,
    great_circle_bearing: Angle,
) -> Coordinates | None:
    """The intersection nearest to ``great_circle_reference``.

    Unlike ``first_small_circle_intersection``, reversing the bearing by
    180° does not change the result.

    Returns:
        Coordinates | None: The nearer intersection, or None when the
        circles never meet.
    """
    intercepts = small_circle_great_circle_intersection(
        center, radius, great_circle_reference, great_circle_bearing
    )
    if intercepts is None:
        return None

    first, second = intercepts
    if distance_to(great_circle_reference, first) < distance_to(great_circle_reference, second):
        return first
    return second
