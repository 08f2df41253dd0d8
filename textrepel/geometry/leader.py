"""
Leader Line Helpers

Plain-sequence geometry used by callers that draw a segment from a data
point to its repelled label. These are not used by the repulsion loop.

Points are ``(x, y)`` sequences and rectangles are ``(x1, y1, x2, y2)``.
"""

import math
from typing import Sequence, Tuple

import numpy as np

NO_INTERSECTION = (-math.inf, -math.inf)


def euclid(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def centroid(b: Sequence[float]) -> Tuple[float, float]:
    """Center of a rectangle like ``(x1, y1, x2, y2)``."""
    return ((b[0] + b[2]) / 2, (b[1] + b[3]) / 2)


def intersect_line_rectangle(p1: Sequence[float], p2: Sequence[float],
                             b: Sequence[float]) -> Tuple[float, float]:
    """
    Find where the line through p1 and p2 crosses the rectangle boundary.

    Each of the four edges is intersected with the line; candidates that fall
    outside the edge's closed interval are discarded. The candidate closest
    to ``p1`` is returned, which is where a leader line starting at ``p1``
    should stop.

    Args:
        p1: First point of the segment, usually the data point
        p2: Second point, usually the label centroid
        b: Rectangle like ``(x1, y1, x2, y2)``

    Returns:
        ``(x, y)`` of the nearest intersection, or ``(-inf, -inf)`` when the
        line misses every edge.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        slope = np.float64(p2[1] - p1[1]) / np.float64(p2[0] - p1[0])
        intercept = p2[1] - p2[0] * slope

        candidates = [NO_INTERSECTION] * 4

        # Left and right edges
        for k, x in enumerate((b[0], b[2])):
            y = slope * x + intercept
            if b[1] <= y <= b[3]:
                candidates[k] = (float(x), float(y))

        # Bottom and top edges
        for k, y in enumerate((b[1], b[3])):
            x = (y - intercept) / slope
            if b[0] <= x <= b[2]:
                candidates[2 + k] = (float(x), float(y))

    best = 0
    best_d = math.inf
    for k, c in enumerate(candidates):
        d = euclid(c, p1)
        if d < best_d:
            best_d = d
            best = k
    return candidates[best]
