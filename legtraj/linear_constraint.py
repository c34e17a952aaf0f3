"""Linear equality constraints on a single variable set."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from legtraj.constraint_set import Bounds, ConstraintSet


class LinearEqualityConstraint(ConstraintSet):
    """The constraint ``M x + v = 0`` on the variable set named ``variable_set``.

    Values are ``M x`` and each row is bounded to exactly ``-v``.
    """

    def __init__(self, matrix, offset, variable_set: str) -> None:
        matrix = np.atleast_2d(np.asarray(matrix, dtype=float))
        offset = np.asarray(offset, dtype=float).reshape(-1)
        if matrix.shape[0] != offset.shape[0]:
            raise ValueError(
                f"matrix has {matrix.shape[0]} rows but offset has {offset.shape[0]} entries"
            )
        super().__init__(matrix.shape[0], "linear-equality-" + variable_set)
        self.matrix = matrix
        self.offset = offset
        self.variable_name = variable_set
        self._variable: Any = None

    def init_variable_depended_quantities(self, variables: Mapping[str, Any]) -> None:
        super().init_variable_depended_quantities(variables)
        try:
            self._variable = variables[self.variable_name]
        except KeyError:
            raise KeyError(f"no variable set named '{self.variable_name}'") from None

    def get_values(self) -> np.ndarray:
        if self._variable is None:
            raise RuntimeError(f"constraint '{self.name}' is not linked to its variables")
        x = np.asarray(self._variable.get_values(), dtype=float).reshape(-1)
        if x.shape[0] != self.matrix.shape[1]:
            raise ValueError(
                f"matrix has {self.matrix.shape[1]} columns but "
                f"'{self.variable_name}' holds {x.shape[0]} values"
            )
        return self.matrix @ x

    def get_bounds(self) -> list[Bounds]:
        return [Bounds(-v, -v) for v in self.offset.tolist()]

    def fill_jacobian_block(self, var_set: str, jac: np.ndarray) -> None:
        if var_set == self.variable_name:
            jac[:, : self.matrix.shape[1]] = self.matrix