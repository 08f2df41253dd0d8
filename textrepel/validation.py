"""
Layout Validation

Checks a set of label boxes for remaining overlaps and for boxes that
stick out of the viewport.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .data import as_boxes, as_limits
from .geometry.primitives import Box, overlaps


@dataclass
class OverlapReport:
    """Result of a layout check."""
    n_boxes: int
    pairs: List[Tuple[int, int]] = field(default_factory=list)
    out_of_bounds: List[int] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.pairs and not self.out_of_bounds

    def summary(self) -> str:
        lines = [f"Boxes: {self.n_boxes}"]
        lines.append(f"Overlapping pairs: {len(self.pairs)}")
        for i, j in self.pairs:
            lines.append(f"  - {i} / {j}")
        lines.append(f"Out of bounds: {len(self.out_of_bounds)}")
        for i in self.out_of_bounds:
            lines.append(f"  - {i}")
        lines.append("PASSED" if self.passed else "FAILED")
        return "\n".join(lines)


def _to_boxes(boxes) -> List[Box]:
    if isinstance(boxes, (list, tuple)) and boxes and isinstance(boxes[0], Box):
        return list(boxes)
    return [Box(*(float(v) for v in row)) for row in as_boxes(boxes)]


def find_overlaps(boxes) -> List[Tuple[int, int]]:
    """All index pairs ``(i, j)`` with ``i < j`` whose boxes overlap or touch."""
    items = _to_boxes(boxes)
    pairs = []
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if overlaps(items[i], items[j]):
                pairs.append((i, j))
    return pairs


def check_layout(boxes, xlim, ylim) -> OverlapReport:
    """Report overlapping pairs and boxes outside ``xlim`` x ``ylim``."""
    items = _to_boxes(boxes)
    xmin, xmax = as_limits(xlim, "xlim")
    ymin, ymax = as_limits(ylim, "ylim")

    report = OverlapReport(n_boxes=len(items), pairs=find_overlaps(items))
    for i, b in enumerate(items):
        if b.x1 < xmin or b.x2 > xmax or b.y1 < ymin or b.y2 > ymax:
            report.out_of_bounds.append(i)
    return report
