"""Label repulsion engine: forces, jitter and the simulation loop."""

from .forces import ForceType, repel_force, spring_force
from .jitter import JitterSource, GaussianJitter, NoJitter
from .repeller import (
    BoxRepeller,
    RepelConfig,
    RepelResult,
    RepelState,
    repel_boxes,
)

__all__ = [
    "ForceType",
    "repel_force",
    "spring_force",
    "JitterSource",
    "GaussianJitter",
    "NoJitter",
    "BoxRepeller",
    "RepelConfig",
    "RepelResult",
    "RepelState",
    "repel_boxes",
]
