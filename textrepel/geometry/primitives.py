"""
Geometry Primitives

Point and axis-aligned box value types used by the label repulsion engine.
All operations are pure and perform no bounds checking; the simulation loop
is responsible for keeping boxes well formed.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D point or vector (data-point anchor, centroid, or force)."""
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Point":
        return Point(self.x / k, self.y / k)


@dataclass(frozen=True)
class Box:
    """Axis-aligned box given by opposite corners (x1, y1) and (x2, y2).

    Callers keep x1 <= x2 and y1 <= y2; translation and clamping never
    change width or height.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    def __add__(self, p: Point) -> "Box":
        """Translate the box by a vector."""
        return Box(self.x1 + p.x, self.y1 + p.y, self.x2 + p.x, self.y2 + p.y)

    @property
    def width(self) -> float:
        return abs(self.x2 - self.x1)

    @property
    def height(self) -> float:
        return abs(self.y2 - self.y1)

    @classmethod
    def around(cls, p: Point, pad_x: float, pad_y: float) -> "Box":
        """Exclusion box centered on a point with the given half-padding."""
        return cls(p.x - pad_x, p.y - pad_y, p.x + pad_x, p.y + pad_y)

    def as_tuple(self):
        return (self.x1, self.y1, self.x2, self.y2)


def euclid(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    d = a - b
    return math.sqrt(d.x * d.x + d.y * d.y)


def euclid2(a: Point, b: Point) -> float:
    """Squared Euclidean distance between two points."""
    d = a - b
    return d.x * d.x + d.y * d.y


def centroid(b: Box) -> Point:
    """Center of the box."""
    return Point((b.x1 + b.x2) / 2, (b.y1 + b.y2) / 2)


def overlaps(a: Box, b: Box) -> bool:
    """True if the boxes intersect or touch (closed intervals on both axes)."""
    return (
        b.x1 <= a.x2 and
        b.y1 <= a.y2 and
        b.x2 >= a.x1 and
        b.y2 >= a.y1
    )


def put_within_bounds(b: Box, xlim: Point, ylim: Point) -> Box:
    """Translate a box back inside the viewport, preserving its size.

    Args:
        b: Box to clamp
        xlim: Point holding (min, max) of the x axis as (x, y)
        ylim: Point holding (min, max) of the y axis as (x, y)

    Returns:
        The translated box (or ``b`` itself if already inside)
    """
    width = b.width
    height = b.height
    x1, y1, x2, y2 = b.x1, b.y1, b.x2, b.y2

    if x1 < xlim.x:
        x1 = xlim.x
        x2 = x1 + width
    elif x2 > xlim.y:
        x2 = xlim.y
        x1 = x2 - width

    if y1 < ylim.x:
        y1 = ylim.x
        y2 = y1 + height
    elif y2 > ylim.y:
        y2 = ylim.y
        y1 = y2 - height

    if (x1, y1, x2, y2) == (b.x1, b.y1, b.x2, b.y2):
        return b
    return Box(x1, y1, x2, y2)
