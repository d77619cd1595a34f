# envelope/enumerate_angles.py
from envelope.config import joint_angles
from envelope.errors import UnsupportedConfiguration
from envelope.occupancy_grid import accumulate
from rigid_arm.joint_transforms import joint_transform_table


def build_transform_tables(config):
    """
    Per-joint transform tables {joint_index: (n_angles, 4, 4)} for joints 2..dof.
    The first joint is handled by the splitter.
    """
    angles = joint_angles(config.max_angle, config.angle_increment)
    return {
        j: joint_transform_table(j, config.dof, angles, config.link_length)
        for j in range(2, config.dof + 1)
    }


def enumerate_angles(joint_index, prev_T, grid, config, tables=None):
    """
    Recursively sweep joints joint_index..dof and count every end-effector
    position in `grid`.

    Args:
        joint_index: joint to iterate (2 = first joint after the base)
        prev_T: (4, 4) transform of the chain up to joint_index - 1
        grid: hit-count grid, updated in place
        config: EnvelopeConfig
        tables: precomputed transform tables (built from config if None)

    Returns:
        grid
    """
    if not 2 <= joint_index <= config.dof:
        raise UnsupportedConfiguration(
            f"cannot enumerate joint {joint_index} of a {config.dof}-DOF chain"
        )
    if tables is None:
        tables = build_transform_tables(config)

    for T_joint in tables[joint_index]:
        T = prev_T @ T_joint
        if joint_index < config.dof:
            enumerate_angles(joint_index + 1, T, grid, config, tables)
        else:
            accumulate(grid, T[:3, 3])

    return grid
