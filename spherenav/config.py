"""Global configuration and type definitions for the navigation engine.

This module provides centralized numeric tunables and fundamental type
definitions used throughout spherenav. Every value is an immutable,
process-wide constant; there is no environment or file based configuration.

Type Definitions:
    BASE_TYPE: Union type defining acceptable raw numeric types. Supports
               Python native types (int, float) and NumPy arrays, which the
               Cartesian vector helpers use for cross products and norms.

Tunables:
    INTERMEDIATE_PLACE_DISTANCE: How far each great circle's reference point
        is projected along its bearing to obtain a second point on the
        circle. Large enough for the two points to define the plane reliably
        at double precision, small enough to stay clear of antipodal blow-up.
    PERMUTATION_DENOMINATOR_THRESHOLD: Minimum magnitude (square meters) of
        the linear-system denominator accepted by the small-circle solver
        before it moves on to the next axis permutation.
    AXIS_PERMUTATIONS: Axis orderings (free, first dependent, second
        dependent) tried by the small-circle solver, in order.

Example:
    >>> from spherenav.config import BASE_TYPE, INTERMEDIATE_PLACE_DISTANCE
    >>> import numpy as np
    >>> scalar_float: BASE_TYPE = 3.14159
    >>> array_data: BASE_TYPE = np.array([1.0, 2.0, 3.0])
    >>> print(INTERMEDIATE_PLACE_DISTANCE.to(NauticalMile))  # 500.0
"""

from numpy import ndarray

from spherenav.unit import Meter

BASE_TYPE = int | float | ndarray

INTERMEDIATE_PLACE_DISTANCE = Meter(926_000.0)

PERMUTATION_DENOMINATOR_THRESHOLD = 1e-4

AXIS_PERMUTATIONS: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (2, 0, 1),
    (1, 2, 0),
)
