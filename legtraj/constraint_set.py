"""Constraint sets over named optimization variables.

A constraint set produces a vector of values ``g(x)``, lower and upper
bounds for each row and the Jacobian of ``g`` with respect to each named
variable set it depends on.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

import numpy as np

INFINITY = 1.0e20
"""Magnitude treated as unbounded by the solvers."""


@dataclass(frozen=True)
class Bounds:
    """Lower and upper bound of a single constraint row or variable."""

    lower: float = 0.0
    upper: float = 0.0


BOUND_ZERO = Bounds(0.0, 0.0)
NO_BOUND = Bounds(-INFINITY, INFINITY)


class Dx(IntEnum):
    """Derivative order of a node value."""

    POS = 0
    VEL = 1
    ACC = 2
    JERK = 3


class Dim(IntEnum):
    """Cartesian dimension."""

    X = 0
    Y = 1
    Z = 2


@dataclass(frozen=True)
class NodeValueInfo:
    """Identifies one scalar value of a node: its index, derivative and dimension."""

    node_id: int
    deriv: Dx
    dim: int


class ConstraintSet(ABC):
    """A block of constraint rows with values, bounds and Jacobians.

    ``rows`` may be ``None`` when the number of rows is only known once the
    variables have been linked; a subclass then sets it in
    :meth:`init_variable_depended_quantities`.
    """

    def __init__(self, rows: int | None, name: str) -> None:
        if rows is not None and rows < 0:
            raise ValueError(f"row count must not be negative, got {rows}")
        self.rows = rows
        self.name = name
        self.variables: Mapping[str, Any] | None = None

    def init_variable_depended_quantities(self, variables: Mapping[str, Any]) -> None:
        """Link the constraint to the variable sets, keyed by name."""
        self.variables = variables

    def _require_rows(self) -> int:
        if self.rows is None:
            raise ValueError(f"number of rows of constraint '{self.name}' is not set")
        return self.rows

    @abstractmethod
    def get_values(self) -> np.ndarray:
        """The constraint values for the current variables."""

    @abstractmethod
    def get_bounds(self) -> list[Bounds]:
        """One pair of bounds per constraint row."""

    @abstractmethod
    def fill_jacobian_block(self, var_set: str, jac: np.ndarray) -> None:
        """Write the derivatives with respect to ``var_set`` into ``jac``."""

    def get_jacobian(self, var_set: str, n_cols: int) -> np.ndarray:
        """The ``rows x n_cols`` Jacobian with respect to the variable set ``var_set``."""
        if n_cols < 0:
            raise ValueError(f"column count must not be negative, got {n_cols}")
        jac = np.zeros((self._require_rows(), n_cols))
        self.fill_jacobian_block(var_set, jac)
        return jac


class TimeDiscretizationConstraint(ConstraintSet):
    """Constraints evaluated at discrete times along a trajectory.

    Subclasses fill in the rows belonging to a single time instance; this
    class assembles the complete value vector, bounds and Jacobian.
    """

    def __init__(self, times: Iterable[float], name: str) -> None:
        super().__init__(None, name)
        self.times = tuple(float(t) for t in times)

    @classmethod
    def from_horizon(cls, total_time: float, dt: float, name: str):
        """Evaluate every ``dt`` from zero, and once more exactly at ``total_time``."""
        if dt <= 0.0:
            raise ValueError(f"discretization interval must be positive, got {dt}")
        if total_time < 0.0:
            raise ValueError(f"total time must not be negative, got {total_time}")
        times = [0.0]
        t = 0.0
        for _ in range(math.floor(total_time / dt)):
            t += dt
            times.append(t)
        times.append(total_time)
        return cls(times, name)

    def number_of_nodes(self) -> int:
        """How many time instances the constraint is evaluated at."""
        return len(self.times)

    def get_values(self) -> np.ndarray:
        g = np.zeros(self._require_rows())
        for k, t in enumerate(self.times):
            self.update_constraint_at_instance(t, k, g)
        return g

    def get_bounds(self) -> list[Bounds]:
        bounds = [BOUND_ZERO] * self._require_rows()
        for k, t in enumerate(self.times):
            self.update_bounds_at_instance(t, k, bounds)
        return bounds

    def fill_jacobian_block(self, var_set: str, jac: np.ndarray) -> None:
        for k, t in enumerate(self.times):
            self.update_jacobian_at_instance(t, k, var_set, jac)

    @abstractmethod
    def update_constraint_at_instance(self, t: float, k: int, g: np.ndarray) -> None:
        """Fill the rows of ``g`` belonging to time ``t``, the ``k``-th instance."""

    @abstractmethod
    def update_bounds_at_instance(self, t: float, k: int, bounds: list[Bounds]) -> None:
        """Set the entries of ``bounds`` belonging to time ``t``."""

    @abstractmethod
    def update_jacobian_at_instance(
        self, t: float, k: int, var_set: str, jac: np.ndarray
    ) -> None:
        """Fill the Jacobian rows of time ``t`` with respect to ``var_set``."""