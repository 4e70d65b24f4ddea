"""Angle normalization helpers.

Each clamp folds an angle into a canonical half-open range by repeatedly
adding or subtracting a full turn. The loops (rather than ``%``) fix which
end of the range is open. Input beyond a few turns is first reduced with
``fmod`` so the loops stay short:

    clamp_cw      [0°, 360°)
    clamp_acw     (-360°, 0°]
    clamp_either  (-180°, 180°]

Example:
    >>> clamp_cw(Degree(-50)).to(Degree)
    310.0
    >>> clamp_either(Degree(200)).to(Degree)
    -160.0
    >>> diff_angle(Degree(45), Degree(180), Direction.LEFT).to(Degree)
    -225.0
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from spherenav.geo.constants import FULL_TURN, HALF_TURN, ZERO_ANGLE
from spherenav.unit import Angle


_REDUCE_ABOVE = 4.0 * float(FULL_TURN)


class Direction(Enum):
    """Which way an angular difference is measured.

    Attributes:
        LEFT: Anticlockwise only, result in (-360°, 0°].
        RIGHT: Clockwise only, result in [0°, 360°).
        EITHER: Shortest signed turn, result in (-180°, 180°].
    """

    LEFT = "left"
    RIGHT = "right"
    EITHER = "either"


def _reduced(angle: Angle) -> Angle:
    """Strip whole turns with fmod once |angle| exceeds a few turns.

    Keeps the clamp loops short for large input; infinity becomes NaN.
    """
    if abs(float(angle)) <= _REDUCE_ABOVE:
        return angle
    with np.errstate(invalid="ignore"):
        return type(angle).from_si(float(np.fmod(float(angle), float(FULL_TURN))))


def clamp_cw(angle: Angle) -> Angle:
    """Return ``angle`` folded into [0°, 360°)."""
    angle = _reduced(angle)
    while angle >= FULL_TURN:
        angle -= FULL_TURN
    while angle < ZERO_ANGLE:
        angle += FULL_TURN
    return angle


def clamp_acw(angle: Angle) -> Angle:
    """Return ``angle`` folded into (-360°, 0°]."""
    angle = _reduced(angle)
    while angle <= -FULL_TURN:
        angle += FULL_TURN
    while angle > ZERO_ANGLE:
        angle -= FULL_TURN
    return angle


def clamp_either(angle: Angle) -> Angle:
    """Return ``angle`` folded into (-180°, 180°]."""
    angle = _reduced(angle)
    while angle > HALF_TURN:
        angle -= FULL_TURN
    while angle <= -HALF_TURN:
        angle += FULL_TURN
    return angle


_CLAMPS = {
    Direction.LEFT: clamp_acw,
    Direction.RIGHT: clamp_cw,
    Direction.EITHER: clamp_either,
}


def diff_angle(a: Angle, b: Angle, direction: Direction) -> Angle:
    """Angular difference ``b - a`` measured in ``direction``.

    Args:
        a: Starting angle.
        b: Target angle.
        direction: LEFT gives (-360°, 0°], RIGHT gives [0°, 360°),
            EITHER gives (-180°, 180°].

    Returns:
        Angle: The folded difference.
    """
    return _CLAMPS[direction](b - a)
