"""
Label Repulsion

Moves rectangular text labels away from each other and from padded data
points with a simple physical simulation:
- Overlapping labels push each other apart (inverse-square repulsion)
- Labels are pushed out of the exclusion box around data points
- Once a pass finds no overlap, springs pull labels back home
- Labels that keep colliding are frozen so the run always terminates

Labels are updated in place one at a time, so later labels in a pass see
the already-moved positions of earlier ones.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pandas as pd

from ..data import as_boxes, as_limits, as_points, empty_result_frame
from ..geometry.primitives import Box, Point, centroid, overlaps, put_within_bounds
from .forces import (
    DAMPING,
    DEFAULT_FORCE,
    SPRING_MULTIPLIER,
    TEXT_REPULSION_MULTIPLIER,
    ForceType,
    repel_force,
    spring_force,
)
from .jitter import GaussianJitter, JitterSource

logger = logging.getLogger(__name__)


def _coerce(kind, name: str, value):
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


@dataclass
class RepelConfig:
    """Tuning parameters for a repulsion run."""
    # Half-size of the exclusion box around each data point
    point_padding_x: float = 0.0
    point_padding_y: float = 0.0

    force: Optional[float] = DEFAULT_FORCE  # Also the jitter standard deviation
    maxiter: int = 2000
    check_overlap: int = 10  # Freeze a label once overlaps > check_overlap * iteration

    seed: Optional[int] = None  # Seed for the default Gaussian jitter
    log_every: int = 100  # Iterations between debug progress lines

    def __post_init__(self):
        if self.force is not None:
            self.force = _coerce(float, "force", self.force)
        if self.force is None or not math.isfinite(self.force):
            logger.debug("Replacing force=%r with default %g", self.force, DEFAULT_FORCE)
            self.force = DEFAULT_FORCE
        if self.force < 0:
            raise ValueError(f"force must be non-negative, got {self.force}")

        self.point_padding_x = _coerce(float, "point_padding_x", self.point_padding_x)
        self.point_padding_y = _coerce(float, "point_padding_y", self.point_padding_y)
        self.maxiter = _coerce(int, "maxiter", self.maxiter)
        self.check_overlap = _coerce(int, "check_overlap", self.check_overlap)
        self.log_every = _coerce(int, "log_every", self.log_every)
        if self.seed is not None:
            self.seed = _coerce(int, "seed", self.seed)

        if self.maxiter <= 0:
            raise ValueError(f"maxiter must be positive, got {self.maxiter}")
        if self.check_overlap <= 0:
            raise ValueError(f"check_overlap must be positive, got {self.check_overlap}")
        if self.log_every <= 0:
            raise ValueError(f"log_every must be positive, got {self.log_every}")
        if self.point_padding_x < 0 or self.point_padding_y < 0:
            raise ValueError(
                f"point padding must be non-negative, got "
                f"({self.point_padding_x}, {self.point_padding_y})"
            )

    @property
    def has_padding(self) -> bool:
        return not (self.point_padding_x == 0 and self.point_padding_y == 0)


@dataclass
class RepelState:
    """Mutable state of one repulsion run."""
    text_boxes: List[Box]
    original_centroids: List[Point]
    overlap_counts: List[int]
    ratios: List[float]  # height / width, diagnostic only
    iteration: int = 0
    any_overlaps: bool = True
    contributions: Counter = field(default_factory=Counter)  # Per pass, by ForceType

    def is_frozen(self, i: int, check_overlap: int) -> bool:
        """True once label i has overlapped more than check_overlap times per pass."""
        return self.overlap_counts[i] > check_overlap * self.iteration


@dataclass
class RepelResult:
    """Final label positions and overlap counters."""
    x: List[float]
    y: List[float]
    overlaps: List[int]
    boxes: List[Box]
    iterations: int
    converged: bool  # Last pass found no overlaps
    frozen: List[bool]

    def to_frame(self) -> pd.DataFrame:
        """One row per label with columns ``x``, ``y`` and ``overlaps``."""
        if not self.x:
            return empty_result_frame()
        return pd.DataFrame({
            "x": pd.Series(self.x, dtype=float),
            "y": pd.Series(self.y, dtype=float),
            "overlaps": pd.Series(self.overlaps, dtype=int),
        })


def _aspect_ratio(b: Box) -> float:
    width = b.x2 - b.x1
    height = b.y2 - b.y1
    if width == 0:
        return math.nan if height == 0 else math.inf
    return height / width


class BoxRepeller:
    """
    Resolves overlaps among labels anchored to data points.

    Label ``i`` belongs to data point ``i``; there are usually at least as
    many data points as labels; extra points act only as obstacles.
    """

    def __init__(self, data_points, boxes, xlim, ylim,
                 config: Optional[RepelConfig] = None,
                 jitter: Optional[JitterSource] = None):
        """
        Args:
            data_points: ``n x 2`` matrix of ``(x, y)`` anchors
            boxes: ``m x 4`` matrix of ``(x1, y1, x2, y2)`` label boxes
            xlim: ``(min, max)`` of the x axis
            ylim: ``(min, max)`` of the y axis
            config: Tuning parameters
            jitter: Source of the initial jitter (default: seeded Gaussian)
        """
        self.config = config or RepelConfig()
        self.jitter = jitter or GaussianJitter(self.config.seed)

        xmin, xmax = as_limits(xlim, "xlim")
        ymin, ymax = as_limits(ylim, "ylim")
        self.xlim = Point(float(xmin), float(xmax))
        self.ylim = Point(float(ymin), float(ymax))

        pad_x = self.config.point_padding_x
        pad_y = self.config.point_padding_y
        self.points = [Point(float(x), float(y)) for x, y in as_points(data_points)]
        self.data_boxes = [Box.around(p, pad_x, pad_y) for p in self.points]
        self.boxes = [Box(*(float(v) for v in row)) for row in as_boxes(boxes)]

    @property
    def n_points(self) -> int:
        return len(self.points)

    @property
    def n_texts(self) -> int:
        return len(self.boxes)

    def _initialize_state(self) -> RepelState:
        """Jitter the input boxes and record spring anchors."""
        offsets = self.jitter(self.n_texts, self.config.force)
        text_boxes = [b + Point(r, r) for b, r in zip(self.boxes, offsets)]
        return RepelState(
            text_boxes=text_boxes,
            original_centroids=[centroid(b) for b in text_boxes],
            overlap_counts=[0] * self.n_texts,
            ratios=[_aspect_ratio(b) for b in text_boxes],
        )

    def _move_label(self, state: RepelState, i: int):
        """Accumulate forces on label ``i`` and move it."""
        cfg = self.config
        force = cfg.force
        has_padding = cfg.has_padding
        boxes = state.text_boxes
        counts = state.overlap_counts
        n_texts = self.n_texts

        ci = centroid(boxes[i])
        f = Point(0.0, 0.0)

        # Own data point
        if has_padding and i < self.n_points and overlaps(self.data_boxes[i], boxes[i]):
            state.any_overlaps = True
            f = f + repel_force(ci, self.points[i], force)
            state.contributions[ForceType.ANCHOR] += 1

        for j in range(max(self.n_points, n_texts)):
            if j == i:
                continue

            if (j < n_texts and overlaps(boxes[i], boxes[j])
                    and not state.is_frozen(j, cfg.check_overlap)):
                state.any_overlaps = True
                counts[i] += 1
                f = f + repel_force(ci, centroid(boxes[j]), force * TEXT_REPULSION_MULTIPLIER)
                state.contributions[ForceType.TEXT] += 1

            if has_padding and j < self.n_points and overlaps(self.data_boxes[j], boxes[i]):
                state.any_overlaps = True
                f = f + repel_force(ci, self.points[j], force)
                state.contributions[ForceType.DATA_POINT] += 1

        # Any overlap earlier in this pass disables springs for every label
        if not state.any_overlaps:
            f = f + spring_force(state.original_centroids[i], ci, force * SPRING_MULTIPLIER)
            state.contributions[ForceType.SPRING] += 1

        f = f * DAMPING
        boxes[i] = put_within_bounds(boxes[i] + f, self.xlim, self.ylim)

    def repel(self, callback: Optional[Callable[[RepelState], None]] = None
              ) -> RepelResult:
        """
        Run the simulation until a pass finds no overlaps or ``maxiter``.

        Args:
            callback: Optional function called after each pass with the state

        Returns:
            RepelResult with final centroids and overlap counters
        """
        cfg = self.config

        if self.n_texts == 0:
            logger.debug("No labels to repel")
            return RepelResult(x=[], y=[], overlaps=[], boxes=[],
                               iterations=0, converged=True, frozen=[])

        state = self._initialize_state()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Label repulsion start: labels=%d points=%d xlim=(%g, %g) ylim=(%g, %g)",
                self.n_texts, self.n_points,
                self.xlim.x, self.xlim.y, self.ylim.x, self.ylim.y,
            )
            logger.debug(
                "Repel config: force=%g maxiter=%d check_overlap=%d padding=(%g, %g) jitter=%r",
                cfg.force, cfg.maxiter, cfg.check_overlap,
                cfg.point_padding_x, cfg.point_padding_y, self.jitter,
            )
            if not cfg.has_padding:
                logger.debug("  Note: zero point padding - data point repulsion disabled")

        while state.any_overlaps and state.iteration < cfg.maxiter:
            state.iteration += 1
            state.any_overlaps = False
            state.contributions.clear()

            for i in range(self.n_texts):
                if state.is_frozen(i, cfg.check_overlap):
                    continue
                self._move_label(state, i)

            if callback:
                callback(state)

            if logger.isEnabledFor(logging.DEBUG) and state.iteration % cfg.log_every == 0:
                frozen = sum(
                    1 for i in range(self.n_texts)
                    if state.is_frozen(i, cfg.check_overlap)
                )
                logger.debug(
                    "Iteration %d: frozen=%d/%d total_overlaps=%d",
                    state.iteration, frozen, self.n_texts, sum(state.overlap_counts),
                )
                logger.debug(
                    "  Force counts: anchor=%d text=%d data_point=%d spring=%d",
                    state.contributions.get(ForceType.ANCHOR, 0),
                    state.contributions.get(ForceType.TEXT, 0),
                    state.contributions.get(ForceType.DATA_POINT, 0),
                    state.contributions.get(ForceType.SPRING, 0),
                )

        converged = not state.any_overlaps
        if converged:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Converged at iteration %d", state.iteration)
        else:
            logger.warning(
                "Label repulsion stopped at maxiter=%d with overlaps remaining "
                "(labels with overlaps=%d). Consider increasing maxiter or force.",
                cfg.maxiter,
                sum(1 for c in state.overlap_counts if c > 0),
            )

        centroids = [centroid(b) for b in state.text_boxes]
        return RepelResult(
            x=[c.x for c in centroids],
            y=[c.y for c in centroids],
            overlaps=list(state.overlap_counts),
            boxes=list(state.text_boxes),
            iterations=state.iteration,
            converged=converged,
            frozen=[state.is_frozen(i, cfg.check_overlap) for i in range(self.n_texts)],
        )


def repel_boxes(data_points, point_padding_x: float, point_padding_y: float,
                boxes, xlim, ylim, force: Optional[float] = DEFAULT_FORCE,
                maxiter: int = 2000, check_overlap: int = 10, *,
                seed: Optional[int] = None,
                jitter: Optional[JitterSource] = None,
                callback: Optional[Callable[[RepelState], None]] = None
                ) -> pd.DataFrame:
    """
    Adjust the layout of potentially overlapping label boxes.

    Args:
        data_points: ``n x 2`` matrix of ``(x, y)`` data points
        point_padding_x: Padding around each data point on the x axis
        point_padding_y: Padding around each data point on the y axis
        boxes: ``m x 4`` matrix of ``(x1, y1, x2, y2)`` label boxes
        xlim: ``(xmin, xmax)`` limits of the x axis
        ylim: ``(ymin, ymax)`` limits of the y axis
        force: Magnitude of the force; missing or non-finite means 1e-6
        maxiter: Maximum number of iterations to try to resolve overlaps
        check_overlap: Freeze a label once its overlap count exceeds
            ``check_overlap * iteration``
        seed: Seed for the initial Gaussian jitter
        jitter: Custom jitter source (overrides ``seed``)
        callback: Optional function called after each pass

    Returns:
        DataFrame with one row per label: ``x``, ``y`` (final centroid) and
        ``overlaps`` (final overlap counter)
    """
    config = RepelConfig(
        point_padding_x=point_padding_x,
        point_padding_y=point_padding_y,
        force=force,
        maxiter=maxiter,
        check_overlap=check_overlap,
        seed=seed,
    )
    repeller = BoxRepeller(data_points, boxes, xlim, ylim, config, jitter=jitter)
    return repeller.repel(callback=callback).to_frame()
