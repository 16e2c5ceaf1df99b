"""Angle helpers for turning 2D directions into headings."""

from __future__ import annotations

import math


def vec2_to_degrees(x: float, y: float) -> float:
    """Angle in degrees of the vector ``(x, y)`` from the positive x axis."""
    return math.degrees(math.atan2(y, x))


def _direction_degrees(direction_x: float, direction_y: float) -> float:
    # -1 maps to -90 degrees and 1 maps to 90 degrees on each axis.
    angle_x = direction_x * 90.0
    angle_y = direction_y * 90.0
    return math.degrees(math.atan2(angle_y, angle_x))


def combine_direction_with_rotation_to_degrees(
    direction_x: float, direction_y: float, previous_rotation_degrees: float
) -> float:
    """Heading of a normalised direction plus a previous rotation, in degrees."""
    return _direction_degrees(direction_x, direction_y) + previous_rotation_degrees


def combine_direction_with_rotation_to_eulers(
    direction_x: float, direction_y: float, previous_rotation_degrees: float
) -> tuple[float, float]:
    """Unit vector of a normalised direction turned by a previous rotation."""
    combined = combine_direction_with_rotation_to_degrees(
        direction_x, direction_y, previous_rotation_degrees
    )
    radians = math.radians(combined)
    x = min(max(math.cos(radians), -1.0), 1.0)
    y = min(max(math.sin(radians), -1.0), 1.0)
    return x, y