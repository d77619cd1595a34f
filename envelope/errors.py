# envelope/errors.py


class EnvelopeError(Exception):
    """Base class for every failure raised while computing a work envelope."""


class InvalidConfiguration(EnvelopeError, ValueError):
    """An input parameter violates its constraint; enumeration never starts."""


class UnsupportedConfiguration(InvalidConfiguration):
    """DOF outside the joint-role table, or a joint index with no role."""


class OutOfBoundsPosition(EnvelopeError):
    """An end-effector position rounds outside the fixed +-30 cm grid."""
