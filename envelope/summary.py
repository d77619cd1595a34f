# envelope/summary.py
from typing import NamedTuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from envelope.occupancy_grid import CELL, GRID_EXTENT


class ReachPoint(NamedTuple):
    x: int
    y: int
    z: int
    weight: float   # ln(hit count)


# the 13 populated positions per axis, -30..30 cm
SCAN_COORDS = tuple(range(-GRID_EXTENT, GRID_EXTENT + 1, CELL))


class EnvelopeSummary:
    """
    Read-only view of a mirrored grid.

    Iterating yields one ReachPoint per non-empty cell, x outermost and z
    innermost. Every iteration rescans the grid, so repeated scans agree.
    """

    def __init__(self, grid: np.ndarray):
        grid = np.array(grid, dtype=np.int64, copy=True)
        grid.setflags(write=False)
        self.grid = grid

        idx = np.array(SCAN_COORDS) + GRID_EXTENT
        self._counts = grid[np.ix_(idx, idx, idx)]

    def __iter__(self):
        for i, x in enumerate(SCAN_COORDS):
            for j, y in enumerate(SCAN_COORDS):
                for k, z in enumerate(SCAN_COORDS):
                    v = int(self._counts[i, j, k])
                    if v > 0:
                        yield ReachPoint(x, y, z, float(np.log(v)))

    def __len__(self):
        return self.unique_count

    @property
    def unique_count(self) -> int:
        return int(np.count_nonzero(self._counts > 0))

    @property
    def total_count(self) -> int:
        return int(self._counts[self._counts > 0].sum())

    def as_array(self) -> np.ndarray:
        """(N, 4) array of [x, y, z, weight] rows in scan order."""
        pts = np.array([tuple(p) for p in self], dtype=float)
        return pts.reshape(-1, 4)

    def text(self) -> str:
        return f"{self.unique_count} unique, {self.total_count} total points found"

    def __str__(self):
        return self.text()


def summarize(grid):
    """Return (points, unique_count, total_count) for a mirrored grid."""
    summary = EnvelopeSummary(grid)
    return summary, summary.unique_count, summary.total_count


def hull_volume(points) -> float:
    """
    Convex hull volume (cm^3) of the populated cells.
    0.0 for fewer than 4 points or a flat set.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or len(pts) < 4:
        return 0.0
    pts = pts[:, :3]
    try:
        hull = ConvexHull(pts)
    except QhullError:
        return 0.0
    return float(hull.volume)
