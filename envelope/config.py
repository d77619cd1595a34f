# envelope/config.py
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from envelope.errors import InvalidConfiguration, UnsupportedConfiguration
from rigid_arm.joint_transforms import MAX_DOF


# absorbs float error when the increment divides the range
STEP_TOL = 1e-9


class MirrorSeam(Enum):
    """
    What `mirror` subtracts where the computed half and its reflection overlap.

    DOUBLE      nothing (legacy output, y=0 cells counted twice)
    PLANE       the y=0 slice of the half grid
    ZERO_ANGLE  the grid of the first-joint angle 0 task
    """
    DOUBLE = "double"
    PLANE = "plane"
    ZERO_ANGLE = "zero-angle"


def _is_positive_real(v) -> bool:
    if isinstance(v, bool) or not isinstance(v, (int, float, np.number)):
        return False
    v = float(v)
    return math.isfinite(v) and v > 0.0


@dataclass(frozen=True)
class EnvelopeConfig:
    """
    Equal-link articulated arm swept on a fixed angle grid.

    dof: number of joints (1..9)
    reach: total arm length (cm)
    angle_increment: angle step (deg)
    max_angle: symmetric joint limit, +-max_angle (deg), at most 180
    """
    dof: int
    reach: float
    angle_increment: float
    max_angle: float

    def __post_init__(self):
        if isinstance(self.dof, bool) or not isinstance(self.dof, (int, np.integer)):
            raise InvalidConfiguration(f"dof must be an integer, got {self.dof!r}")
        if self.dof < 1:
            raise InvalidConfiguration(f"dof must be >= 1, got {self.dof}")
        if self.dof > MAX_DOF:
            raise UnsupportedConfiguration(
                f"dof={self.dof} is not supported (maximum is {MAX_DOF})"
            )
        if not _is_positive_real(self.reach):
            raise InvalidConfiguration(f"reach must be > 0 cm, got {self.reach!r}")
        if not _is_positive_real(self.angle_increment):
            raise InvalidConfiguration(
                f"angle_increment must be > 0 deg, got {self.angle_increment!r}"
            )
        if not _is_positive_real(self.max_angle) or float(self.max_angle) > 180.0:
            raise InvalidConfiguration(
                f"max_angle must be in (0, 180] deg, got {self.max_angle!r}"
            )
        for name in ("reach", "angle_increment", "max_angle"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def link_length(self) -> float:
        return float(self.reach) / self.dof


def joint_angles(max_angle, increment):
    """
    Inner-joint steps: -max_angle, -max_angle + increment, ... up to +max_angle.
    The endpoint is only present when increment divides 2*max_angle.
    """
    n = int(math.floor(2.0 * max_angle / increment + STEP_TOL))
    return -float(max_angle) + float(increment) * np.arange(n + 1, dtype=float)


def first_joint_angles(max_angle, increment):
    """
    Halved first-joint steps: 0, -increment, ... down to -max_angle.
    Angle 0 is always the first entry.
    """
    n = int(math.floor(max_angle / increment + STEP_TOL))
    return -float(increment) * np.arange(n + 1, dtype=float)
