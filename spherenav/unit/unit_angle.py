"""Angular unit definitions for bearings, latitudes and longitudes.

All angular measurements are internally stored in radians (the SI base unit)
for mathematical consistency, while supporting input and display in both
radians and degrees.

Trigonometry lives on the angle types: ``angle.sin()`` returns a ``Ratio``,
and the inverse functions are class methods building a ``Radian`` from
ratios (``Radian.atan2(y, x)``). Every function is evaluated through numpy so
out-of-domain inputs yield NaN instead of raising.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees with automatic radian conversion.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(45)  # 45 degrees
    >>> print(heading)  # "45.0 °"
    >>> print(float(heading))  # 0.7854 (radians in SI)
    >>>
    >>> turn_angle = Radian(3.14159)  # π radians
    >>> print(turn_angle.to(Degree))  # 180.0 (degrees)
"""

from __future__ import annotations

from math import pi

import numpy as np

from .unit_float import Number, UnitFloat
from .unit_ratio import Ratio


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    SI defines the radian as m/m, so angles are dimensionless: multiplying a
    length by an angle in radians gives an arc length.

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        DIMENSIONLESS (bool): True, angles scale lengths (arc length).
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad", the standard symbol for radians.

    Example:
        >>> angle = Radian(1.5708)  # π/2 radians (90 degrees)
        >>> print(angle)  # "1.5708 rad"
        >>> print(float(angle))  # 1.5708
    """

    IS_FAMILY_ROOT = True
    DIMENSIONLESS = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"

    def sin(self) -> Ratio:
        with np.errstate(invalid="ignore"):
            return Ratio.from_si(float(np.sin(float(self))))

    def cos(self) -> Ratio:
        with np.errstate(invalid="ignore"):
            return Ratio.from_si(float(np.cos(float(self))))

    def tan(self) -> Ratio:
        with np.errstate(invalid="ignore"):
            return Ratio.from_si(float(np.tan(float(self))))

    @classmethod
    def asin(cls, ratio: Ratio | Number) -> Radian:
        """Arc sine; NaN outside [-1, 1]."""
        with np.errstate(invalid="ignore"):
            return Radian.from_si(float(np.arcsin(float(ratio))))

    @classmethod
    def acos(cls, ratio: Ratio | Number) -> Radian:
        """Arc cosine; NaN outside [-1, 1]."""
        with np.errstate(invalid="ignore"):
            return Radian.from_si(float(np.arccos(float(ratio))))

    @classmethod
    def atan(cls, ratio: Ratio | Number) -> Radian:
        return Radian.from_si(float(np.arctan(float(ratio))))

    @classmethod
    def atan2(cls, y: UnitFloat | Number, x: UnitFloat | Number) -> Radian:
        """Four-quadrant arc tangent of ``y / x``.

        ``y`` and ``x`` may be ratios, plain numbers, or two quantities of the
        same family (e.g. two lengths).

        Raises:
            TypeError: If ``y`` and ``x`` are quantities of different families.
        """
        if isinstance(y, UnitFloat) and isinstance(x, UnitFloat):
            y._check_same_root(type(x))
        return Radian.from_si(float(np.arctan2(float(y), float(x))))


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Values are automatically converted to radians for internal storage and
    calculations.

    Attributes:
        SCALE_TO_SI (float): π/180, conversion factor from degrees to radians.
        SYMBOL (str): "°", the standard symbol for degrees.

    Example:
        >>> bearing = Degree(90)  # 90 degrees (due east)
        >>> print(bearing)  # "90.0 °"
        >>> print(float(bearing))  # 1.5708 (π/2 radians)
        >>> print(bearing.to(Radian))  # 1.5708
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


# Union type for angle units (defined after classes are created)
Angle = Radian | Degree  # Type alias for any angle unit (radians or degrees)
