# envelope/work_envelope.py
import logging
import time
from dataclasses import dataclass

import numpy as np

from envelope.config import EnvelopeConfig, MirrorSeam
from envelope.occupancy_grid import mirror, plane_slice
from envelope.parallel import split_first_joint
from envelope.summary import EnvelopeSummary


logger = logging.getLogger(__name__)


@dataclass
class WorkEnvelope:
    config: EnvelopeConfig
    seam: MirrorSeam
    half_grid: np.ndarray       # first-joint range [-max, 0]
    grid: np.ndarray            # mirrored, full envelope
    summary: EnvelopeSummary
    n_tasks: int
    elapsed: float              # seconds


def compute_work_envelope(config: EnvelopeConfig, processes=None, seam=MirrorSeam.DOUBLE) -> WorkEnvelope:
    """
    Split -> enumerate -> merge -> mirror -> summarize.

    The run either completes or raises; no partial grid is returned.
    """
    seam = MirrorSeam(seam)
    t0 = time.perf_counter()

    logger.info(
        "work envelope: dof=%d reach=%.3g cm step=%.3g deg max=%.3g deg seam=%s",
        config.dof, config.reach, config.angle_increment, config.max_angle, seam.value,
    )
    half_grid, zero_grid, n_tasks = split_first_joint(config, processes=processes)

    if seam is MirrorSeam.PLANE:
        seam_grid = plane_slice(half_grid)
    elif seam is MirrorSeam.ZERO_ANGLE:
        seam_grid = zero_grid
    else:
        seam_grid = None
    grid = mirror(half_grid, seam=seam_grid)

    summary = EnvelopeSummary(grid)
    elapsed = time.perf_counter() - t0
    logger.info("%s (%.2f s)", summary.text(), elapsed)

    return WorkEnvelope(
        config=config,
        seam=seam,
        half_grid=half_grid,
        grid=summary.grid,
        summary=summary,
        n_tasks=n_tasks,
        elapsed=elapsed,
    )
