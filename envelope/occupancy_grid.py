# envelope/occupancy_grid.py
import numpy as np

from envelope.errors import OutOfBoundsPosition


GRID_EXTENT = 30           # cm, grid spans [-GRID_EXTENT, GRID_EXTENT] on each axis
GRID_SIZE = 2 * GRID_EXTENT + 1
CELL = 5                   # cm, positions are rounded to multiples of CELL
Y_AXIS = 1


def new_grid() -> np.ndarray:
    """Zeroed (61, 61, 61) hit-count grid; index = coordinate + 30."""
    return np.zeros((GRID_SIZE, GRID_SIZE, GRID_SIZE), dtype=np.int64)


def round_half_away(v):
    return np.sign(v) * np.floor(np.abs(v) + 0.5)


def quantize(p) -> np.ndarray:
    """
    Round a position (cm) to the nearest multiple of CELL on each axis.
    Halves round away from zero.
    """
    p = np.asarray(p, dtype=float).reshape(3)
    return (round_half_away(p / CELL) * CELL).astype(int)


def grid_index(p):
    """
    Grid index (ix, iy, iz) of the cell containing position p (cm).

    Raises OutOfBoundsPosition if a rounded coordinate leaves [-30, 30].
    """
    r = round_half_away(np.asarray(p, dtype=float).reshape(3) / CELL) * CELL
    # checked before the int cast, which wraps for huge or non-finite values
    if not np.all(np.abs(r) <= GRID_EXTENT):
        raise OutOfBoundsPosition(
            f"end-effector position {np.round(np.asarray(p, float), 3).tolist()} cm "
            f"rounds outside the +-{GRID_EXTENT} cm grid"
        )
    ix, iy, iz = (r.astype(int) + GRID_EXTENT).tolist()
    return ix, iy, iz


def accumulate(grid: np.ndarray, p) -> None:
    """Count one hit for position p."""
    grid[grid_index(p)] += 1


def merge_grids(grids) -> np.ndarray:
    """Elementwise sum of any number of grids (order does not matter)."""
    total = new_grid()
    for g in grids:
        total += g
    return total


def reflect_y(grid: np.ndarray) -> np.ndarray:
    """Cell (x, y, z) -> (x, -y, z)."""
    return np.flip(grid, axis=Y_AXIS)


def plane_slice(grid: np.ndarray) -> np.ndarray:
    """Copy of grid keeping only the y = 0 plane."""
    out = new_grid()
    out[:, GRID_EXTENT, :] = grid[:, GRID_EXTENT, :]
    return out


def mirror(grid: np.ndarray, seam=None) -> np.ndarray:
    """
    Rebuild the full envelope from the half computed over first-joint
    angles [-max, 0]:

        full = grid + reflect_y(grid) - reflect_y(seam)

    With seam=None the overlap is kept, so y=0 cells are counted twice.
    """
    full = grid + reflect_y(grid)
    if seam is not None:
        full -= reflect_y(seam)
    return full


def grid_to_world(ix, iy, iz):
    """Grid index -> position (cm)."""
    return np.array([ix, iy, iz], dtype=float) - GRID_EXTENT
