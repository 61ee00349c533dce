"""Helpers for working with angles in degrees."""

from __future__ import annotations

import math

FULL_TURN = 360.0


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation in degrees that takes `a0` to `a1`."""
    da = math.fmod(a1 - a0, FULL_TURN)
    return math.fmod(2.0 * da, FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate from `a0` toward `a1` along the shorter way round."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_degrees(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into 0..360."""
    if angle >= FULL_TURN:
        return angle - FULL_TURN
    if angle < 0.0:
        return angle + FULL_TURN
    return angle