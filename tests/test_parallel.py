import numpy as np
import pytest

from envelope.config import EnvelopeConfig
from envelope.errors import OutOfBoundsPosition
from envelope.occupancy_grid import grid_index
from envelope.parallel import first_joint_tasks, first_joint_worker, split_first_joint


def test_tasks_cover_halved_range():
    config = EnvelopeConfig(dof=3, reach=15, angle_increment=30, max_angle=90)
    angles = [a for _, a in first_joint_tasks(config)]
    assert angles == [0.0, -30.0, -60.0, -90.0]


def test_single_joint_worker():
    config = EnvelopeConfig(dof=1, reach=10, angle_increment=90, max_angle=180)
    grid = first_joint_worker((config, -90.0))
    assert grid.sum() == 1
    assert grid[grid_index((0, 0, 10))] == 1


def test_workers_own_private_grids():
    config = EnvelopeConfig(dof=2, reach=20, angle_increment=90, max_angle=90)
    a = first_joint_worker((config, 0.0))
    b = first_joint_worker((config, -90.0))
    assert a is not b
    assert a.sum() == b.sum() == 3


def test_two_joint_half_grid():
    config = EnvelopeConfig(dof=2, reach=20, angle_increment=90, max_angle=90)
    half, zero, n_tasks = split_first_joint(config, processes=1)

    assert n_tasks == 2
    assert half.sum() == 6
    assert zero.sum() == 3
    assert half[grid_index((0, 0, 20))] == 2
    assert half[grid_index((0, -10, 10))] == 1
    assert half[grid_index((0, 10, 10))] == 1


def test_worker_count_does_not_change_result():
    config = EnvelopeConfig(dof=3, reach=21, angle_increment=30, max_angle=90)
    serial, serial_zero, _ = split_first_joint(config, processes=1)
    pooled, pooled_zero, _ = split_first_joint(config, processes=3)

    np.testing.assert_array_equal(serial, pooled)
    np.testing.assert_array_equal(serial_zero, pooled_zero)
    assert serial.tobytes() == pooled.tobytes()


def test_worker_failure_propagates_from_pool():
    config = EnvelopeConfig(dof=1, reach=1000, angle_increment=45, max_angle=90)
    with pytest.raises(OutOfBoundsPosition):
        split_first_joint(config, processes=2)
