"""Keeps swing-phase foot nodes between the surrounding stance nodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from legtraj.constraint_set import BOUND_ZERO, Bounds, ConstraintSet, Dim, Dx, NodeValueInfo

_PLANAR_DIMS = (Dim.X, Dim.Y)
_CONSTRAINED_DERIVS = 2  # position and velocity of every swing node


def _node_at(nodes: Sequence[Any], index: int) -> Any:
    if not 0 <= index < len(nodes):
        raise IndexError(f"node {index} out of range for {len(nodes)} nodes")
    return nodes[index]


class SwingConstraint(ConstraintSet):
    """Constrains the xy position and velocity of every pure swing node.

    Each swing node is assumed to lie between two stance nodes. Its xy
    position must equal the midpoint of its neighbours, and its xy velocity
    the distance between them divided by an average swing duration.

    The linked endeffector variable set must provide ``name``, ``nodes()``
    (objects with ``p`` and ``v`` arrays), ``indices_of_non_constant_nodes()``
    and ``opt_index(NodeValueInfo)``.
    """

    def __init__(self, ee_motion_id: str) -> None:
        super().__init__(None, "swing-" + ee_motion_id)
        self.ee_motion_id = ee_motion_id
        self.t_swing_avg = 0.3
        self.pure_swing_node_ids: list[int] = []
        self._ee_motion: Any = None

    def init_variable_depended_quantities(self, variables: Mapping[str, Any]) -> None:
        super().init_variable_depended_quantities(variables)
        try:
            self._ee_motion = variables[self.ee_motion_id]
        except KeyError:
            raise KeyError(f"no variable set named '{self.ee_motion_id}'") from None
        self.pure_swing_node_ids = list(self._ee_motion.indices_of_non_constant_nodes())
        self.rows = len(self.pure_swing_node_ids) * _CONSTRAINED_DERIVS * len(_PLANAR_DIMS)

    def _motion(self) -> Any:
        if self._ee_motion is None:
            raise RuntimeError(f"constraint '{self.name}' is not linked to its variables")
        return self._ee_motion

    def get_values(self) -> np.ndarray:
        nodes = self._motion().nodes()
        values: list[float] = []
        for node_id in self.pure_swing_node_ids:
            curr = _node_at(nodes, node_id)
            prev = np.asarray(_node_at(nodes, node_id - 1).p, dtype=float)[:2]
            nxt = np.asarray(_node_at(nodes, node_id + 1).p, dtype=float)[:2]
            distance_xy = nxt - prev
            xy_center = prev + 0.5 * distance_xy
            des_vel_center = distance_xy / self.t_swing_avg
            p = np.asarray(curr.p, dtype=float)
            v = np.asarray(curr.v, dtype=float)
            for dim in _PLANAR_DIMS:
                values.append(p[dim] - xy_center[dim])
                values.append(v[dim] - des_vel_center[dim])
        return np.array(values, dtype=float).reshape(self._require_rows())

    def get_bounds(self) -> list[Bounds]:
        return [BOUND_ZERO] * self._require_rows()

    def fill_jacobian_block(self, var_set: str, jac: np.ndarray) -> None:
        motion = self._motion()
        if var_set != motion.name:
            return

        def col(node_id: int, deriv: Dx, dim: Dim) -> int:
            index = motion.opt_index(NodeValueInfo(node_id, deriv, dim))
            if index < 0:
                raise ValueError(f"node {node_id} value {deriv.name}/{dim.name} is not optimized")
            return index

        row = 0
        for node_id in self.pure_swing_node_ids:
            for dim in _PLANAR_DIMS:
                jac[row, col(node_id, Dx.POS, dim)] = 1.0
                jac[row, col(node_id + 1, Dx.POS, dim)] = -0.5
                jac[row, col(node_id - 1, Dx.POS, dim)] = -0.5
                row += 1

                jac[row, col(node_id, Dx.VEL, dim)] = 1.0
                jac[row, col(node_id + 1, Dx.POS, dim)] = -1.0 / self.t_swing_avg
                jac[row, col(node_id - 1, Dx.POS, dim)] = +1.0 / self.t_swing_avg
                row += 1