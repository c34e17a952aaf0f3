"""Keeps endeffector nodes on or above the terrain."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from legtraj.constraint_set import BOUND_ZERO, Bounds, ConstraintSet, Dim, Dx, NodeValueInfo

MAX_DISTANCE_ABOVE_TERRAIN = 1e20
"""Upper bound on the height of a swing node above the terrain [m]."""


class TerrainConstraint(ConstraintSet):
    """Ensures every endeffector node lies on or above the terrain height.

    The first node is skipped, since the initial stance already fixes it.
    Nodes held constant (stance) must lie exactly on the terrain.

    The terrain must provide ``height(x, y)`` and
    ``derivative_of_height_wrt(dim, x, y)`` for ``dim`` in X or Y. The linked
    endeffector variable set must provide ``name``, ``nodes()`` (objects with
    a ``p`` array), ``is_constant_node(id)`` and ``opt_index(NodeValueInfo)``.
    """

    def __init__(self, terrain: Any, ee_motion_id: str) -> None:
        super().__init__(None, "terrain-" + ee_motion_id)
        self.terrain = terrain
        self.ee_motion_id = ee_motion_id
        self.node_ids: list[int] = []
        self._ee_motion: Any = None

    def init_variable_depended_quantities(self, variables: Mapping[str, Any]) -> None:
        super().init_variable_depended_quantities(variables)
        try:
            self._ee_motion = variables[self.ee_motion_id]
        except KeyError:
            raise KeyError(f"no variable set named '{self.ee_motion_id}'") from None
        self.node_ids = list(range(1, len(self._ee_motion.nodes())))
        self.rows = len(self.node_ids)

    def _motion(self) -> Any:
        if self._ee_motion is None:
            raise RuntimeError(f"constraint '{self.name}' is not linked to its variables")
        return self._ee_motion

    def get_values(self) -> np.ndarray:
        nodes = self._motion().nodes()
        values = []
        for node_id in self.node_ids:
            p = np.asarray(nodes[node_id].p, dtype=float)
            values.append(p[Dim.Z] - self.terrain.height(p[Dim.X], p[Dim.Y]))
        return np.array(values, dtype=float).reshape(self._require_rows())

    def get_bounds(self) -> list[Bounds]:
        motion = self._motion()
        return [
            BOUND_ZERO
            if motion.is_constant_node(node_id)
            else Bounds(0.0, MAX_DISTANCE_ABOVE_TERRAIN)
            for node_id in self.node_ids
        ]

    def fill_jacobian_block(self, var_set: str, jac: np.ndarray) -> None:
        motion = self._motion()
        if var_set != motion.name:
            return
        nodes = motion.nodes()
        for row, node_id in enumerate(self.node_ids):
            jac[row, motion.opt_index(NodeValueInfo(node_id, Dx.POS, Dim.Z))] = 1.0
            p = np.asarray(nodes[node_id].p, dtype=float)
            for dim in (Dim.X, Dim.Y):
                idx = motion.opt_index(NodeValueInfo(node_id, Dx.POS, dim))
                jac[row, idx] = -self.terrain.derivative_of_height_wrt(
                    dim, p[Dim.X], p[Dim.Y]
                )