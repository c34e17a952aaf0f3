"""Turning a hard constraint into a quadratic cost."""

from __future__ import annotations

import numpy as np

from legtraj.constraint_set import NO_BOUND, Bounds, ConstraintSet


class SoftConstraint:
    """Cost ``0.5 (g-b)^T W (g-b)`` built from a constraint ``g``.

    ``b`` is the midpoint of each row's bounds and ``W`` a diagonal weight,
    all ones unless changed through :attr:`weights`.
    """

    def __init__(self, constraint: ConstraintSet) -> None:
        if constraint.rows is None:
            raise ValueError(f"constraint '{constraint.name}' must be fully initialized")
        self.constraint = constraint
        self.name = "soft-" + constraint.name
        self.rows = 1
        self.targets = np.array(
            [(b.upper + b.lower) / 2.0 for b in constraint.get_bounds()], dtype=float
        )
        self.weights = np.ones(constraint.rows)

    def _violation(self) -> np.ndarray:
        return self.constraint.get_values() - self.targets

    def get_values(self) -> np.ndarray:
        """The cost as a one-element vector."""
        d = self._violation()
        return np.array([0.5 * float(d @ (self.weights * d))])

    def get_jacobian(self, var_set: str, n_cols: int) -> np.ndarray:
        """The ``1 x n_cols`` gradient of the cost with respect to ``var_set``."""
        jac = self.constraint.get_jacobian(var_set, n_cols)
        grad = jac.T @ (self.weights * self._violation())
        return grad.reshape(1, -1)

    def get_bounds(self) -> list[Bounds]:
        """A cost is unbounded."""
        return [NO_BOUND] * self.rows