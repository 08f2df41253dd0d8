"""
Input/Output Marshalling

Converts caller data (numpy arrays, nested lists, DataFrames, CSV files)
into the float matrices the repeller expects, and writes result tables.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

POINT_COLUMNS = ["x", "y"]
BOX_COLUMNS = ["x1", "y1", "x2", "y2"]
RESULT_COLUMNS = ["x", "y", "overlaps"]

PathLike = Union[str, Path]


def _as_matrix(obj, ncols: int, name: str) -> np.ndarray:
    if isinstance(obj, pd.DataFrame):
        arr = obj.to_numpy(dtype=float)
    else:
        arr = np.asarray(obj, dtype=float)

    if arr.size == 0:
        return np.empty((0, ncols), dtype=float)
    if arr.ndim == 1 and arr.shape[0] == ncols:
        arr = arr.reshape(1, ncols)
    if arr.ndim != 2 or arr.shape[1] != ncols:
        raise ValueError(
            f"{name} must be an n x {ncols} matrix, got shape {arr.shape}"
        )
    return arr


def as_points(obj) -> np.ndarray:
    """Coerce data points to an ``n x 2`` float array of ``(x, y)`` rows."""
    return _as_matrix(obj, 2, "data_points")


def as_boxes(obj) -> np.ndarray:
    """Coerce label boxes to an ``n x 4`` float array of ``(x1, y1, x2, y2)`` rows."""
    return _as_matrix(obj, 4, "boxes")


def as_limits(obj, name: str = "limits") -> np.ndarray:
    """Coerce axis limits to a ``(min, max)`` float pair.

    Raises:
        ValueError: If the limits are not two finite values with min < max
    """
    arr = np.asarray(obj, dtype=float).reshape(-1)
    if arr.shape[0] != 2:
        raise ValueError(f"{name} must have exactly 2 values, got {arr.shape[0]}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite, got {arr.tolist()}")
    if arr[0] >= arr[1]:
        raise ValueError(f"{name} must satisfy min < max, got {arr.tolist()}")
    return arr


def _read_columns(path: PathLike, columns, name: str) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{name} file not found: {path}")
    frame = pd.read_csv(path)
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise ValueError(
            f"{name} file {path} is missing column(s): {', '.join(missing)}"
        )
    logger.debug("Read %d %s rows from %s", len(frame), name, path)
    return frame[columns]


def read_points_csv(path: PathLike) -> np.ndarray:
    """Read data points from a CSV file with ``x`` and ``y`` columns."""
    return as_points(_read_columns(path, POINT_COLUMNS, "points"))


def read_boxes_csv(path: PathLike) -> np.ndarray:
    """Read label boxes from a CSV file with ``x1``, ``y1``, ``x2``, ``y2`` columns."""
    return as_boxes(_read_columns(path, BOX_COLUMNS, "boxes"))


def empty_result_frame() -> pd.DataFrame:
    return pd.DataFrame({
        "x": pd.Series([], dtype=float),
        "y": pd.Series([], dtype=float),
        "overlaps": pd.Series([], dtype=int),
    })


def write_result_csv(frame: pd.DataFrame, path: PathLike):
    """Write a result table (``x``, ``y``, ``overlaps``) to CSV."""
    path = Path(path)
    frame[RESULT_COLUMNS].to_csv(path, index=False)
    logger.debug("Wrote %d result rows to %s", len(frame), path)
