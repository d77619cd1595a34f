# rigid_arm/joint_transforms.py
from enum import Enum

import numpy as np

from envelope.errors import UnsupportedConfiguration


MAX_DOF = 9


class JointRole(Enum):
    BASE = "base"
    TURN_SIDE = "turn_side"
    REPEAT_SIDE = "repeat_side"
    TURN_UP = "turn_up"


def t_base(q, d):
    """Rotation about the chain axis, offset d along it."""
    c, s = np.cos(q), np.sin(q)
    return np.array([[c, -s, 0, 0],
                     [s,  c, 0, 0],
                     [0,  0, 1, d],
                     [0,  0, 0, 1]], dtype=float)


def t_turn_side(q, d):
    """Turns the chain direction 90 deg to the side."""
    c, s = np.cos(q), np.sin(q)
    return np.array([[c, -s,  0, -d * s],
                     [0,  0, -1,      0],
                     [s,  c,  0,  d * c],
                     [0,  0,  0,      1]], dtype=float)


def t_repeat_side(q, d):
    """Stays in the plane of the previous side joint."""
    c, s = np.cos(q), np.sin(q)
    return np.array([[c, -s, 0, -d * s],
                     [s,  c, 0,  d * c],
                     [0,  0, 1,      0],
                     [0,  0, 0,      1]], dtype=float)


def t_turn_up(q, d):
    """Turns the chain direction back up (opposite permutation of turn_side)."""
    c, s = np.cos(q), np.sin(q)
    return np.array([[ c, -s, 0, 0],
                     [ 0,  0, 1, d],
                     [-s, -c, 0, 0],
                     [ 0,  0, 0, 1]], dtype=float)


_BUILDERS = {
    JointRole.BASE: t_base,
    JointRole.TURN_SIDE: t_turn_side,
    JointRole.REPEAT_SIDE: t_repeat_side,
    JointRole.TURN_UP: t_turn_up,
}


# =========================================================
# Joint-role table: roles of joints 1..dof for each dof
# =========================================================
_B = JointRole.BASE
_TS = JointRole.TURN_SIDE
_RS = JointRole.REPEAT_SIDE
_TU = JointRole.TURN_UP

_ROLE_SEQUENCES = {
    1: (_B,),
    2: (_B, _TS),
    3: (_B, _TS, _RS),
    4: (_B, _TS, _RS, _RS),
    5: (_B, _TS, _RS, _RS, _TU),
    6: (_B, _TS, _RS, _TU, _TS, _TU),
    7: (_B, _TS, _TU, _TS, _TU, _TS, _TU),
    8: (_B, _TS, _TU, _TS, _TU, _TS, _TU, _TS),
    9: (_B, _TS, _TU, _TS, _TU, _TS, _TU, _TS, _TU),
}

JOINT_ROLES = {
    (joint_index, dof): role
    for dof, roles in _ROLE_SEQUENCES.items()
    for joint_index, role in enumerate(roles, start=1)
}


def joint_role(joint_index: int, dof: int) -> JointRole:
    """
    Role of joint `joint_index` (1 = base) in a chain of `dof` joints.

    Raises UnsupportedConfiguration for dof > MAX_DOF or joint_index outside 1..dof.
    """
    if dof > MAX_DOF:
        raise UnsupportedConfiguration(
            f"dof={dof} is not supported (maximum is {MAX_DOF})"
        )
    try:
        return JOINT_ROLES[(joint_index, dof)]
    except KeyError:
        raise UnsupportedConfiguration(
            f"joint {joint_index} has no role in a {dof}-DOF chain"
        ) from None


def joint_transform(joint_index: int, dof: int, angle: float, link_length: float) -> np.ndarray:
    """
    4x4 homogeneous transform of one joint.

    Args:
        joint_index: 1-based joint position in the chain
        dof: total number of joints
        angle: joint angle (rad)
        link_length: link length d (cm)
    """
    role = joint_role(joint_index, dof)
    return _BUILDERS[role](angle, link_length)


def joint_transform_table(joint_index, dof, angles_deg, link_length):
    """
    Transforms of one joint for every angle step, shape (n_angles, 4, 4).
    Angles are in degrees.
    """
    role = joint_role(joint_index, dof)
    build = _BUILDERS[role]
    q = np.radians(np.asarray(angles_deg, dtype=float).reshape(-1))
    return np.stack([build(qi, link_length) for qi in q])
