"""
Utility functions for game mechanics
"""

from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def sign(x: float) -> int:
    """Return -1, 0 or 1 depending on the sign of x"""
    return (x > 0) - (x < 0)


def step_velocity(v: int, a: int, max_v: int) -> int:
    """
    Advance one axis of the ship velocity by a single frame.

    Accelerates by one unit towards the acceleration sign while below the
    cap; without acceleration the velocity decays linearly towards zero.
    """
    if a and abs(v) < max_v:
        return v + a
    if a == 0 and v != 0:
        return v - sign(v)
    return v


def in_bounds(x: float, y: float, width: float, height: float) -> bool:
    """Check if a point lies inside the arena, borders included"""
    return 0 <= x <= width and 0 <= y <= height


def box_collide(x1, y1, x2, y2, size) -> bool:
    """Check if two centers are within `size` of each other on both axes"""
    return abs(x1 - x2) <= size and abs(y1 - y2) <= size
