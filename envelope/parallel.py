# envelope/parallel.py
import itertools
import logging
import multiprocessing as mp

import numpy as np

from envelope.config import first_joint_angles
from envelope.enumerate_angles import build_transform_tables, enumerate_angles
from envelope.occupancy_grid import accumulate, merge_grids, new_grid
from rigid_arm.joint_transforms import joint_transform


logger = logging.getLogger(__name__)


def default_processes() -> int:
    return max(1, mp.cpu_count() - 1)


def first_joint_tasks(config):
    """One (config, angle_deg) task per first-joint step in [-max, 0], angle 0 first."""
    return [(config, float(a)) for a in first_joint_angles(config.max_angle, config.angle_increment)]


def first_joint_worker(task):
    """
    Sweep joints 2..dof with the first joint fixed at one angle.
    Runs in a worker process and returns a private grid.
    """
    config, angle = task
    grid = new_grid()

    T = joint_transform(1, config.dof, np.radians(angle), config.link_length)
    if config.dof > 1:
        enumerate_angles(2, T, grid, config, build_transform_tables(config))
    else:
        accumulate(grid, T[:3, 3])

    logger.debug("first joint %.3f deg: %d hits", angle, int(grid.sum()))
    return grid


def split_first_joint(config, processes=None):
    """
    Fork-join over the halved first-joint range.

    Args:
        config: EnvelopeConfig
        processes: worker count (None = cpu_count - 1, 1 = run in-process)

    Returns:
        half_grid: merged grid of all tasks
        zero_grid: grid of the angle 0 task
        n_tasks: number of first-joint tasks

    Any worker exception propagates and the pool is torn down.
    """
    tasks = first_joint_tasks(config)
    n_procs = default_processes() if processes is None else max(1, int(processes))
    n_procs = min(n_procs, len(tasks))

    logger.info(
        "enumerating %d first-joint tasks (dof=%d) on %d process(es)",
        len(tasks), config.dof, n_procs,
    )

    if n_procs == 1:
        grids = map(first_joint_worker, tasks)
        zero_grid = next(grids)
        half_grid = merge_grids(itertools.chain([zero_grid], grids))
    else:
        with mp.Pool(processes=n_procs) as pool:
            grids = pool.imap(first_joint_worker, tasks)
            zero_grid = next(grids)
            half_grid = merge_grids(itertools.chain([zero_grid], grids))

    return half_grid, zero_grid, len(tasks)
