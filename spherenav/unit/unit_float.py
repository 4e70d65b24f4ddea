"""Float-based unit system with automatic SI conversion and type safety.

This module provides the UnitFloat class, which serves as the foundation for
all numeric quantities in the navigation math. It combines Python's float
type with unit safety, automatic SI conversion, and dimensional checks to
prevent mixing incompatible units.

Arithmetic rules:
- ``+``, ``-``, ``%`` and comparisons require the same unit family
- scaling by a plain number or a dimensionless quantity keeps the unit
- dividing two quantities of the same family yields a ``Ratio``
- multiplying two dimensioned quantities is rejected

Classes:
    UnitFloat: Base class for all float-based units with automatic SI conversion.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    ...
    >>> distance = Kilometer(5.2)  # 5.2 km
    >>> print(distance)  # "5.2 km"
    >>> print(float(distance))  # 5200.0 (meters in SI)
"""
from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for type-safe unit calculations with automatic SI conversion.

    This class stores values internally in SI units while allowing operations
    only between compatible unit types (same 'root' family).

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    __hash__ = float.__hash__

    def __new__(cls, value: Number = 0.0):
        """Create a new UnitFloat instance with automatic SI conversion.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with value stored in SI units.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from SI unit value.

        Args:
            si_value: Value already in SI units.

        Returns:
            UnitFloat: New instance with the SI value.
        """
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            UnitFloat: New instance of the target unit type.
        """
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def _same_family(self, other) -> float:
        """Return ``other`` as a raw SI float after checking its family."""
        if not isinstance(other, UnitFloat):
            msg = f"expected a {self.ROOT.__name__} quantity, got {type(other).__name__}"
            raise TypeError(msg)
        self._check_same_root(type(other))
        return float(other)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        return type(self).from_si(float(self) + self._same_family(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        return type(self).from_si(float(self) - self._same_family(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        return type(self).from_si(self._same_family(other) - float(self))

    def __mod__(self, other: UnitFloat) -> UnitFloat:
        """Floor-modulo by a unit of the same family (sign follows ``other``)."""
        return type(self).from_si(float(self) % self._same_family(other))

    def __mul__(self, k: Number | UnitFloat) -> UnitFloat:
        """Scale by a plain number or a dimensionless quantity.

        The unit of the dimensioned operand survives: ``Meter * Ratio`` and
        ``Ratio * Meter`` are both ``Meter``.

        Raises:
            TypeError: If both operands carry a dimension.
        """
        if isinstance(k, UnitFloat):
            if k.DIMENSIONLESS:
                return type(self).from_si(float(self) * float(k))
            if self.DIMENSIONLESS:
                return type(k).from_si(float(self) * float(k))
            msg = f"cannot multiply {self.ROOT.__name__} by {k.ROOT.__name__}"
            raise TypeError(msg)
        if isinstance(k, Number):
            return type(self).from_si(float(self) * float(k))
        return NotImplemented

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number | UnitFloat) -> UnitFloat:
        """Divide by a scalar, or by a quantity of the same family.

        Returns:
            UnitFloat: Same unit for a scalar divisor, ``Ratio`` for a
            same-family divisor.

        Raises:
            TypeError: If ``k`` is a quantity of another dimensioned family.
        """
        from .unit_ratio import Ratio

        if isinstance(k, UnitFloat):
            if k.ROOT is self.ROOT:
                return Ratio.from_si(float(self) / float(k))
            if k.DIMENSIONLESS:
                return type(self).from_si(float(self) / float(k))
            msg = f"cannot divide {self.ROOT.__name__} by {k.ROOT.__name__}"
            raise TypeError(msg)
        if isinstance(k, Number):
            return type(self).from_si(float(self) / float(k))
        return NotImplemented

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __pos__(self) -> UnitFloat:
        return self

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparison Operations --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        return float(self) < self._same_family(other)

    def __le__(self, other: UnitFloat) -> bool:
        return float(self) <= self._same_family(other)

    def __gt__(self, other: UnitFloat) -> bool:
        return float(self) > self._same_family(other)

    def __ge__(self, other: UnitFloat) -> bool:
        return float(self) >= self._same_family(other)

    def __eq__(self, other: object) -> bool:
        """Equality between two units of the same family.

        Comparing against anything that is not a quantity returns
        ``NotImplemented``; comparing across families raises.
        """
        if not isinstance(other, UnitFloat):
            return NotImplemented
        return float(self) == self._same_family(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, UnitFloat):
            return NotImplemented
        return float(self) != self._same_family(other)

    def __str__(self) -> str:
        """Return human-readable string representation in the unit's native scale.

        Returns:
            str: Value and symbol in the unit's natural scale (e.g., "90.0 °").
        """
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return detailed string representation showing both native and SI values.

        Returns:
            str: Value in native scale with SI equivalent (e.g., "90 ° (= 1.5708 SI)").
        """
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
