"""Point/box primitives and leader-line helpers."""

from .primitives import (
    Point,
    Box,
    euclid,
    euclid2,
    centroid,
    overlaps,
    put_within_bounds,
)
from .leader import intersect_line_rectangle

__all__ = [
    "Point",
    "Box",
    "euclid",
    "euclid2",
    "centroid",
    "overlaps",
    "put_within_bounds",
    "intersect_line_rectangle",
]
