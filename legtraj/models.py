"""Endeffector naming, the robots on offer and their kinematic limits."""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class BipedID(IntEnum):
    """Endeffector indices of a two-legged robot."""

    L = 0
    R = 1


class QuadrupedID(IntEnum):
    """Endeffector indices of a four-legged robot."""

    LF = 0
    RF = 1
    LH = 2
    RH = 3


class Robot(IntEnum):
    """Robots for which kinematic and dynamic models are provided."""

    MONOPED = 0
    """One-legged hopper."""
    BIPED = 1
    """Two-legged robot."""
    HYQ = 2
    """Four-legged robot HyQ."""
    ANYMAL = 3
    """Four-legged robot ANYmal."""
    GODDARD = 4
    """Four-legged robot Goddard."""


_ROBOT_NAMES = {
    Robot.MONOPED: "Monoped",
    Robot.BIPED: "Biped",
    Robot.HYQ: "Hyq",
    Robot.ANYMAL: "Anymal",
    Robot.GODDARD: "Goddard",
}


def robot_name(robot: Robot | int) -> str:
    """The display name of a robot; raises ValueError for an unknown one."""
    return _ROBOT_NAMES[Robot(robot)]


class KinematicModel:
    """Robot-specific kinematic parameters.

    Holds the nominal position of each endeffector relative to the base,
    expressed in the base frame, and how far each may deviate from it.
    A fresh model has every nominal position at the origin and zero range
    of motion; subclasses fill in ``nominal_stance`` and
    ``max_dev_from_nominal``.
    """

    def __init__(self, n_ee: int) -> None:
        if n_ee < 0:
            raise ValueError(f"number of endeffectors must not be negative, got {n_ee}")
        self.nominal_stance: list[np.ndarray] = [np.zeros(3) for _ in range(n_ee)]
        self.max_dev_from_nominal: np.ndarray = np.zeros(3)

    def nominal_stance_in_base(self) -> list[np.ndarray]:
        """The xyz-position [m] of each foot in default stance, in the base frame."""
        return [np.array(p, dtype=float) for p in self.nominal_stance]

    def maximum_deviation_from_nominal(self) -> np.ndarray:
        """How far [m] each foot may deviate from its nominal position."""
        return np.array(self.max_dev_from_nominal, dtype=float)

    def number_of_endeffectors(self) -> int:
        """The number of endeffectors of this robot."""
        return len(self.nominal_stance)