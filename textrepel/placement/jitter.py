"""
Initial Jitter Sources

Labels receive a tiny random translation before the first iteration so that
boxes with coincident centroids have a direction to separate in. The source
is pluggable so runs can be made reproducible.
"""

from typing import List, Optional

import numpy as np


class JitterSource:
    """Produces one offset per label; the same offset is applied to x and y."""

    def __call__(self, n: int, scale: float) -> List[float]:
        raise NotImplementedError


class GaussianJitter(JitterSource):
    """Normally distributed offsets with mean 0 and standard deviation ``scale``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __call__(self, n: int, scale: float) -> List[float]:
        return self._rng.normal(0.0, scale, size=n).tolist()

    def __repr__(self):
        return f"GaussianJitter(seed={self.seed!r})"


class NoJitter(JitterSource):
    """Leaves labels exactly where the caller put them."""

    def __call__(self, n: int, scale: float) -> List[float]:
        return [0.0] * n

    def __repr__(self):
        return "NoJitter()"
