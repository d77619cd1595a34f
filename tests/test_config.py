import numpy as np
import pytest

from envelope.config import EnvelopeConfig, first_joint_angles, joint_angles
from envelope.errors import InvalidConfiguration, UnsupportedConfiguration


def test_link_length():
    assert EnvelopeConfig(dof=4, reach=20, angle_increment=10, max_angle=90).link_length == 5.0


@pytest.mark.parametrize("kwargs", [
    dict(dof=0, reach=10, angle_increment=10, max_angle=90),
    dict(dof=2.5, reach=10, angle_increment=10, max_angle=90),
    dict(dof=True, reach=10, angle_increment=10, max_angle=90),
    dict(dof=2, reach=0, angle_increment=10, max_angle=90),
    dict(dof=2, reach=float("nan"), angle_increment=10, max_angle=90),
    dict(dof=2, reach=10, angle_increment=-5, max_angle=90),
    dict(dof=2, reach=10, angle_increment=10, max_angle=0),
    dict(dof=2, reach=10, angle_increment=10, max_angle=181),
    dict(dof=2, reach="far", angle_increment=10, max_angle=90),
    dict(dof=2, reach="10", angle_increment=10, max_angle=90),
    dict(dof=2, reach=20, angle_increment="90", max_angle=90),
    dict(dof=2, reach=20, angle_increment=90, max_angle="90"),
    dict(dof=2, reach=20, angle_increment=90, max_angle=None),
])
def test_invalid_configuration(kwargs):
    with pytest.raises(InvalidConfiguration):
        EnvelopeConfig(**kwargs)


def test_dof_ten_is_unsupported():
    with pytest.raises(UnsupportedConfiguration):
        EnvelopeConfig(dof=10, reach=10, angle_increment=10, max_angle=90)


def test_max_angle_180_allowed():
    EnvelopeConfig(dof=1, reach=10, angle_increment=90, max_angle=180)


def test_joint_angles_inclusive_endpoint():
    np.testing.assert_allclose(joint_angles(90, 45), [-90, -45, 0, 45, 90])


def test_joint_angles_uneven_step_stops_short():
    np.testing.assert_allclose(joint_angles(90, 40), [-90, -50, -10, 30, 70])


def test_joint_angles_step_larger_than_range():
    np.testing.assert_allclose(joint_angles(10, 50), [-10])


def test_joint_angles_float_step():
    a = joint_angles(0.3, 0.1)
    assert len(a) == 7
    assert a[-1] == pytest.approx(0.3)


def test_first_joint_angles_start_at_zero():
    np.testing.assert_allclose(first_joint_angles(180, 90), [0, -90, -180])
    np.testing.assert_allclose(first_joint_angles(90, 40), [0, -40, -80])
    assert first_joint_angles(10, 50)[0] == 0.0


def test_numeric_fields_stored_as_float():
    config = EnvelopeConfig(dof=np.int64(2), reach=20, angle_increment=np.float32(45), max_angle=90)
    assert isinstance(config.reach, float)
    assert isinstance(config.angle_increment, float)
    assert isinstance(config.max_angle, float)
    assert config.angle_increment == 45.0
    assert config.link_length == 10.0


def test_first_joint_angles_stay_inside_limit():
    # 90 / 35 = 2.57 steps; rounding to 3 would reach -105
    np.testing.assert_allclose(first_joint_angles(90, 35), [0, -35, -70])
