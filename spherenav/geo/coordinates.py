"""Geographic coordinates on the spherical Earth model."""

from __future__ import annotations

from dataclasses import dataclass, replace

from spherenav.geo.angles import clamp_either
from spherenav.geo.constants import ZERO_ANGLE
from spherenav.unit import Angle, Degree, Radian


@dataclass(frozen=True)
class Coordinates:
    """A location on the surface of a sphere.

    Latitude is the angular distance from the equator and lies in
    [-90°, 90°]. Longitude is the angular distance from the prime meridian;
    callers conventionally keep it in (-180°, 180°] but it is not normalized
    on construction, see ``normalized``.

    Attributes:
        lat (Angle): Latitude.
        long (Angle): Longitude.

    Example:
        >>> berlin = Coordinates.new(52.518611, 13.408056)
        >>> berlin.lat.to(Degree)
        52.518611
        >>> Coordinates.new(0.0, 190.0).normalized().to_deg()
        (0.0, -170.0...)
    """

    lat: Angle = ZERO_ANGLE
    long: Angle = ZERO_ANGLE

    @classmethod
    def new(cls, lat: float, long: float) -> Coordinates:
        """Create Coordinates from latitude and longitude in degrees.

        Args:
            lat (float): Latitude in decimal degrees (-90 to +90).
            long (float): Longitude in decimal degrees.

        Returns:
            Coordinates: New coordinates (angles stored as ``Degree``).
        """
        return cls(Degree(lat), Degree(long))

    from_deg = new

    @classmethod
    def from_rad(cls, lat: float, long: float) -> Coordinates:
        """Create Coordinates from latitude and longitude in radians."""
        return cls(Radian(lat), Radian(long))

    def normalized(self) -> Coordinates:
        """Return a copy with longitude folded into (-180°, 180°]."""
        return replace(self, long=clamp_either(self.long))

    def to_deg(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)`` as plain degrees."""
        return self.lat.to(Degree), self.long.to(Degree)

    def __str__(self) -> str:
        lat, long = self.to_deg()
        return f"({lat:.6f}°, {long:.6f}°)"
