"""
Shared test fixtures for textrepel tests.

Provides reusable point/box layouts and deterministic jitter sources.
"""

import pytest
import numpy as np

from textrepel.placement.jitter import NoJitter, JitterSource


class FixedJitter(JitterSource):
    """Returns the given offsets, in order."""

    def __init__(self, offsets):
        self.offsets = list(offsets)

    def __call__(self, n, scale):
        assert n == len(self.offsets)
        return list(self.offsets)


@pytest.fixture
def no_jitter() -> NoJitter:
    return NoJitter()


@pytest.fixture
def fixed_jitter():
    """Factory for jitter sources with explicit offsets."""
    return FixedJitter


@pytest.fixture
def separated_layout():
    """Two labels far apart, each centered on its own data point."""
    points = np.array([[1.0, 1.0], [5.0, 5.0]])
    boxes = np.array([
        [0.5, 0.75, 1.5, 1.25],
        [4.5, 4.75, 5.5, 5.25],
    ])
    return points, boxes


@pytest.fixture
def half_overlap_layout():
    """Two unit boxes whose centers are 0.5 apart along x."""
    points = np.array([[0.0, 0.0], [0.5, 0.0]])
    boxes = np.array([
        [-0.5, -0.5, 0.5, 0.5],
        [0.0, -0.5, 1.0, 0.5],
    ])
    return points, boxes


@pytest.fixture
def cluster_layout():
    """Six small labels piled around the middle of the unit square."""
    rng = np.random.default_rng(7)
    centers = 0.5 + rng.normal(0.0, 0.01, size=(6, 2))
    half_w, half_h = 0.04, 0.015
    boxes = np.column_stack([
        centers[:, 0] - half_w,
        centers[:, 1] - half_h,
        centers[:, 0] + half_w,
        centers[:, 1] + half_h,
    ])
    return centers, boxes
