"""Type-safe quantity management for spherical navigation.

This package provides the unit system the geometry code computes with. It
implements automatic SI conversion, unit family type checking, and
mathematical operations between compatible units while preventing mixing of
incompatible physical quantities.

Architecture:
    - unit_base: Foundation Unit class with family management system
    - unit_float: Float-based units with automatic SI conversion
    - unit_ratio: Dimensionless Ratio (results of trig and of length / length)
    - unit_angle: Angular units (Radian, Degree) with trigonometry
    - unit_distance: Distance units (Meter, Kilometer, NauticalMile)

Unit Families:
    - Angle Family: Radian (root), Degree
    - Distance Family: Meter (root), Kilometer, NauticalMile
    - Ratio Family: Ratio (root)

Example:
    >>> from spherenav.unit import Degree, Meter, NauticalMile
    >>>
    >>> leg = NauticalMile(60)
    >>> heading = Degree(45)
    >>>
    >>> total = leg + Meter(500)  # ✅ OK: both distances
    >>> arc = leg / Meter(6_378_137)  # Ratio
    >>> # heading + leg  # ❌ TypeError: incompatible units
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, NauticalMile
from .unit_float import UnitFloat
from .unit_ratio import Ratio

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Dimensionless
    "Ratio",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Length",
]
