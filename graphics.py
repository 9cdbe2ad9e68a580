# Character-cell rendering of a BodyPath: segment runs, rasterization, text output.
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

try:
    from .rectilinear import Axis, Point
except ImportError:
    from rectilinear import Axis, Point


BOX_CHAR = "█"
BLANK_CHAR = " "


@dataclass(frozen=True)
class Run:
    """Straight run of cells starting at (x, y); `length` is signed along `axis`."""
    x: int
    y: int
    length: int
    axis: Axis

    def cells(self) -> Iterator[Point]:
        step = 1 if self.length > 0 else -1
        for offset in range(0, self.length, step):
            if self.axis is Axis.HORIZONTAL:
                yield Point(self.x + offset, self.y)
            else:
                yield Point(self.x, self.y + offset)


def segment_runs(points: Iterable[Point]) -> list[Run]:
    """One run per adjacent pair, each stretched one cell past its end so corners are shared."""
    pts = list(points)
    if not pts:
        return []
    if len(pts) == 1:
        return [Run(pts[0].x, pts[0].y, 1, Axis.HORIZONTAL)]

    runs: list[Run] = []
    for start, end in zip(pts, pts[1:]):
        delta = end - start
        if delta.y == 0:
            sign_x = -1 if delta.x < 0 else 1
            runs.append(Run(start.x, start.y, delta.x + sign_x, Axis.HORIZONTAL))
        else:
            sign_y = -1 if delta.y < 0 else 1
            runs.append(Run(start.x, start.y, delta.y + sign_y, Axis.VERTICAL))
    return runs


def rasterize(points: Iterable[Point], width: int, height: int) -> np.ndarray:
    """Boolean (height, width) occupancy grid; cells outside the grid are clipped."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    grid = np.zeros((height, width), dtype=bool)
    for run in segment_runs(points):
        for cell in run.cells():
            if 0 <= cell.x < width and 0 <= cell.y < height:
                grid[cell.y, cell.x] = True
    return grid


def render_text(grid: np.ndarray, glyph: str = BOX_CHAR, blank: str = BLANK_CHAR) -> str:
    rows = np.where(grid, glyph, blank)
    return "\n".join("".join(row) for row in rows)


def board_middle(width: int, height: int) -> Point:
    return Point(width // 2, height // 2)
