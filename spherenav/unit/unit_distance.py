"""Distance and length unit definitions for navigation.

All distance measurements are internally stored in meters (the SI base unit)
for consistency, while supporting input and display in kilometers and
nautical miles.

Classes:
    Meter: Base distance unit in meters (SI unit).
    Kilometer: Distance unit in kilometers with automatic meter conversion.
    NauticalMile: International nautical mile (1852 m).

Type Aliases:
    Length: Union type for all distance units.

Example:
    >>> leg = NauticalMile(60)  # roughly one degree of arc
    >>> print(leg)  # "60.0 NM"
    >>> print(float(leg))  # 111120.0 (meters in SI)
    >>>
    >>> radius = Meter(926_000)
    >>> print(radius.to(NauticalMile))  # 500.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root distance unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "m", the standard symbol for meters.

    Example:
        >>> altitude = Meter(150.5)  # 150.5 meters
        >>> print(altitude)  # "150.5 m"
        >>> print(float(altitude))  # 150.5
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 meters).

    Attributes:
        SCALE_TO_SI (float): 1000.0, conversion factor from km to meters.
        SYMBOL (str): "km", the standard symbol for kilometers.
    """

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Distance unit: international nautical mile (1852 meters).

    The working unit for flight planning, ATC and marine routing; one
    nautical mile is close to one minute of arc on the Earth's surface.

    Attributes:
        SCALE_TO_SI (float): 1852.0, conversion factor from NM to meters.
        SYMBOL (str): "NM".
    """

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


Length = Meter | Kilometer | NauticalMile  # Type alias for any length unit
