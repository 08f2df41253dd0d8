"""
textrepel - Force-Directed Text Label Repulsion

Nudges rectangular labels anchored to data points until they no longer
overlap each other or the points they annotate.
"""

__version__ = "0.1.0"

from .geometry.primitives import Box, Point
from .placement.jitter import GaussianJitter, NoJitter
from .placement.repeller import (
    BoxRepeller,
    RepelConfig,
    RepelResult,
    repel_boxes,
)

__all__ = [
    "Box",
    "Point",
    "GaussianJitter",
    "NoJitter",
    "BoxRepeller",
    "RepelConfig",
    "RepelResult",
    "repel_boxes",
]
