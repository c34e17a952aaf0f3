"""Kinematic limits and rigid-body parameters of the example robots."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from legtraj.models import BipedID, KinematicModel, QuadrupedID, Robot


def _quadruped_stance(model: KinematicModel, x: float, y: float, z: float) -> None:
    model.nominal_stance[QuadrupedID.LF] = np.array([x, y, z])
    model.nominal_stance[QuadrupedID.RF] = np.array([x, -y, z])
    model.nominal_stance[QuadrupedID.LH] = np.array([-x, y, z])
    model.nominal_stance[QuadrupedID.RH] = np.array([-x, -y, z])


class MonopedKinematicModel(KinematicModel):
    """Kinematics of a one-legged hopper with a HyQ leg."""

    def __init__(self) -> None:
        super().__init__(1)
        self.nominal_stance[0] = np.array([0.0, 0.0, -0.58])
        self.max_dev_from_nominal = np.array([0.25, 0.15, 0.2])


class BipedKinematicModel(KinematicModel):
    """Kinematics of a two-legged robot built from HyQ legs."""

    def __init__(self) -> None:
        super().__init__(2)
        z_nominal_b = -0.65
        y_nominal_b = 0.20
        self.nominal_stance[BipedID.L] = np.array([0.0, y_nominal_b, z_nominal_b])
        self.nominal_stance[BipedID.R] = np.array([0.0, -y_nominal_b, z_nominal_b])
        self.max_dev_from_nominal = np.array([0.25, 0.15, 0.15])


class HyqKinematicModel(KinematicModel):
    """Kinematics of the quadruped robot HyQ."""

    def __init__(self) -> None:
        super().__init__(4)
        _quadruped_stance(self, 0.31, 0.29, -0.58)
        self.max_dev_from_nominal = np.array([0.25, 0.20, 0.10])


class AnymalKinematicModel(KinematicModel):
    """Kinematics of the quadruped robot ANYmal."""

    def __init__(self) -> None:
        super().__init__(4)
        _quadruped_stance(self, 0.34, 0.19, -0.42)
        self.max_dev_from_nominal = np.array([0.15, 0.1, 0.10])


class GoddardKinematicModel(KinematicModel):
    """Kinematics of the quadruped robot Goddard."""

    def __init__(self) -> None:
        super().__init__(4)
        _quadruped_stance(self, 0.34, 0.19, -0.57)
        self.max_dev_from_nominal = np.array([0.15, 0.1, 0.10])


@dataclass(frozen=True)
class RigidBodyParameters:
    """Mass [kg], inertia elements around the CoM and endeffector count."""

    mass: float
    ixx: float
    iyy: float
    izz: float
    ixy: float
    ixz: float
    iyz: float
    ee_count: int


_KINEMATIC_MODELS = {
    Robot.MONOPED: MonopedKinematicModel,
    Robot.BIPED: BipedKinematicModel,
    Robot.HYQ: HyqKinematicModel,
    Robot.ANYMAL: AnymalKinematicModel,
    Robot.GODDARD: GoddardKinematicModel,
}

_DYNAMIC_PARAMETERS = {
    Robot.MONOPED: RigidBodyParameters(20.0, 1.2, 5.5, 6.0, 0.0, -0.2, -0.01, 1),
    Robot.BIPED: RigidBodyParameters(20.0, 1.209, 5.583, 6.056, 0.005, -0.190, -0.012, 2),
    Robot.HYQ: RigidBodyParameters(83.0, 4.26, 8.97, 9.88, -0.0063, 0.193, 0.0126, 4),
    Robot.ANYMAL: RigidBodyParameters(
        29.5, 0.946438, 1.94478, 2.01835, 0.000938112, -0.00595386, -0.00146328, 4
    ),
    Robot.GODDARD: RigidBodyParameters(
        29.5, 0.946438, 1.94478, 2.01835, 0.000938112, -0.00595386, -0.00146328, 4
    ),
}


def kinematic_model(robot: Robot | int) -> KinematicModel:
    """A fresh kinematic model of the given robot; ValueError if unknown."""
    return _KINEMATIC_MODELS[Robot(robot)]()


def dynamic_parameters(robot: Robot | int) -> RigidBodyParameters:
    """The single-rigid-body parameters of the given robot; ValueError if unknown."""
    return _DYNAMIC_PARAMETERS[Robot(robot)]