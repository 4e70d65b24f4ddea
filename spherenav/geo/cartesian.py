"""Cartesian projections of geographic coordinates.

Two independent conventions coexist and are deliberately kept as separate
types with no conversion between them:

``Spherical``
    Dimensionless vector on the unit sphere built from latitude/longitude
    trigonometry, ``(cos lat cos long, cos lat sin long, sin lat)``. Used by
    the great-circle intersection.

``XYZ``
    Lengths scaled by ``EARTH_RADIUS`` built from colatitude ``theta`` and
    azimuth ``phi``, ``(R sin θ cos φ, R sin θ sin φ, R cos θ)``. Used by the
    small-circle intersection.

``UnitVector`` carries dimensionless direction vectors in the theta/phi
frame (tangent-plane basis vectors and course vectors).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from spherenav.geo.constants import (
    EARTH_RADIUS,
    FULL_TURN,
    HALF_TURN,
    QUARTER_TURN,
    ZERO_ANGLE,
)
from spherenav.geo.coordinates import Coordinates
from spherenav.unit import Angle, Meter, Radian, Ratio


def theta(coordinates: Coordinates) -> Angle:
    """Colatitude, 90° - latitude."""
    return QUARTER_TURN - coordinates.lat


def phi(coordinates: Coordinates) -> Angle:
    """Azimuth, longitude shifted into [0°, 360°)."""
    if coordinates.long < ZERO_ANGLE:
        return coordinates.long + FULL_TURN
    return coordinates.long


def from_theta_phi(theta: Angle, phi: Angle) -> Coordinates:
    """Inverse of ``theta``/``phi``.

    Azimuths above 180° map to ``180° - phi``, not ``phi - 360°``: an azimuth
    just past 180° lands near longitude 0°, not near -180°.
    """
    return Coordinates(
        lat=QUARTER_TURN - theta,
        long=HALF_TURN - phi if phi > HALF_TURN else phi,
    )


@dataclass(frozen=True)
class UnitVector:
    """Dimensionless direction vector."""

    x: Ratio
    y: Ratio
    z: Ratio

    def __getitem__(self, index: int) -> Ratio:
        return (self.x, self.y, self.z)[index]

    def to_array(self) -> np.ndarray:
        return np.array([float(self.x), float(self.y), float(self.z)])


def theta_unit_vector(coordinates: Coordinates) -> UnitVector:
    """Basis vector pointing toward increasing colatitude (due south)."""
    t = theta(coordinates)
    p = phi(coordinates)
    return UnitVector(t.cos() * p.cos(), t.cos() * p.sin(), -t.sin())


def phi_unit_vector(coordinates: Coordinates) -> UnitVector:
    """Basis vector pointing toward increasing azimuth (due east)."""
    p = phi(coordinates)
    return UnitVector(-p.sin(), p.cos(), Ratio(0.0))


def calculate_v(coordinates: Coordinates, course: Angle) -> UnitVector:
    """Tangent-plane direction of ``course`` at ``coordinates``.

    ``v = -cos(course)·θ̂ + sin(course)·φ̂``
    """
    theta_unit = theta_unit_vector(coordinates)
    phi_unit = phi_unit_vector(coordinates)
    cos_course = course.cos()
    sin_course = course.sin()
    return UnitVector(
        -cos_course * theta_unit.x + sin_course * phi_unit.x,
        -cos_course * theta_unit.y + sin_course * phi_unit.y,
        -cos_course * theta_unit.z + sin_course * phi_unit.z,
    )


@dataclass(frozen=True)
class Spherical:
    """Point on the unit sphere (lat/long trigonometry convention)."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, values: np.ndarray) -> Spherical:
        return cls(float(values[0]), float(values[1]), float(values[2]))

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates) -> Spherical:
        cos_lat = float(coordinates.lat.cos())
        return cls(
            cos_lat * float(coordinates.long.cos()),
            cos_lat * float(coordinates.long.sin()),
            float(coordinates.lat.sin()),
        )

    def to_coordinates(self) -> Coordinates:
        """Latitude ``asin(z)``, longitude ``atan2(y, x)``; NaN if ``|z| > 1``."""
        return Coordinates(Radian.asin(self.z), Radian.atan2(self.y, self.x))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def cross(self, other: Spherical) -> Spherical:
        return Spherical.from_array(np.cross(self.to_array(), other.to_array()))

    def norm(self) -> float:
        return float(np.linalg.norm(self.to_array()))

    def __truediv__(self, k: float) -> Spherical:
        # a zero divisor yields inf/nan components
        with np.errstate(divide="ignore", invalid="ignore"):
            return Spherical.from_array(self.to_array() / np.float64(k))

    def __neg__(self) -> Spherical:
        return Spherical(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class XYZ:
    """Earth-radius scaled Cartesian point (theta/phi convention)."""

    x: Meter
    y: Meter
    z: Meter

    def __getitem__(self, index: int) -> Meter:
        return (self.x, self.y, self.z)[index]

    @classmethod
    def from_meters(cls, x: float, y: float, z: float) -> XYZ:
        return cls(Meter(x), Meter(y), Meter(z))

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates) -> XYZ:
        t = theta(coordinates)
        p = phi(coordinates)
        return cls(
            EARTH_RADIUS * t.sin() * p.cos(),
            EARTH_RADIUS * t.sin() * p.sin(),
            EARTH_RADIUS * t.cos(),
        )

    def to_coordinates(self) -> Coordinates:
        """Recover coordinates, resolving the azimuth quadrant explicitly.

        ``x > 0``: ``atan(y/x)``; ``x < 0, y >= 0``: ``atan(y/x) + 180°``;
        ``x < 0, y < 0``: ``atan(y/x) - 180°``; ``x == 0, y > 0``: ``180°``;
        anything else ``-180°``.
        """
        x, y, z = self.x, self.y, self.z
        zero = Meter(0.0)

        horizontal = Meter(float(np.sqrt(float(x) ** 2 + float(y) ** 2)))
        colatitude = Radian.atan2(horizontal, z)

        if x > zero:
            azimuth = Radian.atan(y / x)
        elif x < zero and y >= zero:
            azimuth = Radian.atan(y / x) + HALF_TURN
        elif x < zero and y < zero:
            azimuth = Radian.atan(y / x) - HALF_TURN
        elif x == zero and y > zero:
            azimuth = HALF_TURN
        else:
            azimuth = -HALF_TURN

        return from_theta_phi(colatitude, azimuth)

    def to_array(self) -> np.ndarray:
        return np.array([float(self.x), float(self.y), float(self.z)])

    def cross(self, direction: UnitVector) -> XYZ:
        """Cross product with a dimensionless direction; stays in meters."""
        return XYZ.from_meters(*np.cross(self.to_array(), direction.to_array()))
