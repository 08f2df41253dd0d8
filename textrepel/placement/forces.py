"""
Repulsion and Spring Forces

Synthetic forces acting on label centroids. Repulsion falls off with the
squared distance, similar to magnets; the spring grows linearly with the
distance from the label's original position, similar to Hooke's law.

Both forces are anisotropic so that labels separate along the short axis
instead of sliding along the dominant one.
"""

import math
from enum import Enum

from ..geometry.primitives import Point

# Floor on squared centroid distance (minimum separation of 0.02 units)
MIN_DISTANCE_SQUARED = 0.0004
# Springs are inactive within this distance of the resting point
SPRING_DEAD_ZONE = 0.02

DEFAULT_FORCE = 1e-6
TEXT_REPULSION_MULTIPLIER = 3.0
SPRING_MULTIPLIER = 2e3
DAMPING = 1 - 1e-3

# Anisotropic shaping factors
REPEL_MINOR_AXIS_GAIN = 2.0
SPRING_MINOR_AXIS_GAIN = 1.5
SPRING_MAJOR_AXIS_GAIN = 0.5


class ForceType(Enum):
    """Sources of force acting on a label."""
    ANCHOR = "anchor"             # Label's own data point
    TEXT = "text"                 # Another overlapping label
    DATA_POINT = "data_point"     # Another label's data point
    SPRING = "spring"             # Pull back toward original position


def repel_force(a: Point, b: Point, force: float = DEFAULT_FORCE) -> Point:
    """
    Compute the repulsion force upon point ``a`` from point ``b``.

    Args:
        a: Centroid being pushed
        b: Source of the repulsion
        force: Magnitude of the force

    Returns:
        Force vector to add to ``a``
    """
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    # Never divide by zero for coincident centroids
    d2 = max(dx * dx + dy * dy, MIN_DISTANCE_SQUARED)
    v = (a - b) / math.sqrt(d2)
    f = force * v / d2
    if dx > dy:
        return Point(f.x, f.y * REPEL_MINOR_AXIS_GAIN)
    return Point(f.x * REPEL_MINOR_AXIS_GAIN, f.y)


def spring_force(a: Point, b: Point, force: float = DEFAULT_FORCE) -> Point:
    """
    Compute the spring force pulling point ``b`` back toward ``a``.

    Args:
        a: Resting (original) position
        b: Current centroid
        force: Spring constant

    Returns:
        Force vector to add to ``b``; exactly zero inside the dead zone
    """
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    d = math.sqrt(dx * dx + dy * dy)
    if d <= SPRING_DEAD_ZONE:
        return Point(0.0, 0.0)

    v = (a - b) / d
    f = force * v * d
    if dy < dx:
        return Point(f.x * SPRING_MAJOR_AXIS_GAIN, f.y * SPRING_MINOR_AXIS_GAIN)
    return Point(f.x * SPRING_MINOR_AXIS_GAIN, f.y * SPRING_MAJOR_AXIS_GAIN)