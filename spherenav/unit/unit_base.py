"""Base unit system foundation for type-safe physical quantities.

This module provides the fundamental Unit class that serves as the abstract
base for all quantity types used by the navigation math. It implements the
unit family system using automatic ROOT class assignment, which enables
type-safe operations between compatible units while preventing mixing of
incompatible physical quantities.

The unit system is designed around the concept of "unit families" where each
family represents a distinct physical quantity (angle, length, ratio).
Units within the same family can be added, subtracted and compared, while
operations between different families are rejected at runtime.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- DIMENSIONLESS: Marks families that may scale any other quantity
  (plain ratios, and plane angles, which SI treats as m/m)
- Automatic Assignment: ROOT classes are determined automatically via MRO

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Meter(Unit):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for length units
    >>> class NauticalMile(Meter):
    ...     pass  # Automatically gets ROOT = Meter
    >>> # Meter and NauticalMile can operate together (same ROOT)
    >>> # But lengths cannot be added to angles (different ROOT)
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    All concrete unit classes should inherit from UnitFloat rather than
    directly from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
        DIMENSIONLESS (ClassVar[bool]): Family may multiply other quantities
            without changing their unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False
    DIMENSIONLESS: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT is the first ancestor (or the class itself) carrying
        IS_FAMILY_ROOT=True in its own namespace.
        """
        super().__init_subclass__(**kwargs)
        cls.ROOT = next(
            (klass for klass in cls.mro() if klass.__dict__.get("IS_FAMILY_ROOT", False)),
            cls,
        )

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check if two unit types belong to the same physical quantity family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If ``unit_type`` is not a unit, or belongs to a
                different physical quantity family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            other_name = other_root.__name__ if other_root else unit_type.__name__
            msg = f"incompatible units: {cls.ROOT.__name__} and {other_name}"
            raise TypeError(msg)
