"""Dimensionless ratio unit.

Ratios are what trigonometric functions of an angle return, and what dividing
two quantities of the same family produces (``Meter / Meter``). They scale any
other quantity without changing its unit.

Classes:
    Ratio: Dimensionless quantity (SI scale 1).

Example:
    >>> Meter(926_000) / Meter(6_378_137)  # Ratio
    >>> Degree(30).sin()  # Ratio(0.5)
"""

from __future__ import annotations

import numpy as np

from .unit_float import UnitFloat


class Ratio(UnitFloat):
    """Dimensionless quantity.

    Attributes:
        IS_FAMILY_ROOT (bool): True, ratios form their own family.
        DIMENSIONLESS (bool): True, ratios scale other quantities.
        SYMBOL (str): Empty, ratios print as bare numbers.
    """

    IS_FAMILY_ROOT = True
    DIMENSIONLESS = True
    SCALE_TO_SI = 1.0
    SYMBOL = ""

    def sqrt(self) -> Ratio:
        """Square root; NaN for negative values."""
        with np.errstate(invalid="ignore"):
            return Ratio.from_si(float(np.sqrt(float(self))))
