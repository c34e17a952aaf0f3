"""Bounds the sum of the optimized phase durations of one endeffector."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from legtraj.constraint_set import Bounds, ConstraintSet

MIN_TOTAL_OPTIMIZED_DURATION = 0.1
"""Lower bound on the summed optimized phase durations [s]."""

# The last phase is not optimized over; its minimum duration is whole seconds.
_MIN_DURATION_LAST_PHASE = int(0.2)


class TotalDurationConstraint(ConstraintSet):
    """Keeps the optimized phase durations of an endeffector within the horizon.

    The value is the sum of the optimized durations, which excludes the last
    phase. The linked schedule must provide ``name``, ``rows`` and
    ``get_values()``.
    """

    def __init__(self, total_time: float, ee: int, schedule_name: str) -> None:
        super().__init__(1, f"totalduration-{ee}")
        self.total_time = float(total_time)
        self.ee = ee
        self.schedule_name = schedule_name
        self._phase_durations: Any = None

    def init_variable_depended_quantities(self, variables: Mapping[str, Any]) -> None:
        super().init_variable_depended_quantities(variables)
        try:
            self._phase_durations = variables[self.schedule_name]
        except KeyError:
            raise KeyError(f"no variable set named '{self.schedule_name}'") from None

    def _durations(self) -> Any:
        if self._phase_durations is None:
            raise RuntimeError(f"constraint '{self.name}' is not linked to its variables")
        return self._phase_durations

    def get_values(self) -> np.ndarray:
        total = float(np.sum(np.asarray(self._durations().get_values(), dtype=float)))
        return np.array([total])

    def get_bounds(self) -> list[Bounds]:
        upper = self.total_time - _MIN_DURATION_LAST_PHASE
        return [Bounds(MIN_TOTAL_OPTIMIZED_DURATION, upper)] * self._require_rows()

    def fill_jacobian_block(self, var_set: str, jac: np.ndarray) -> None:
        durations = self._durations()
        if var_set == durations.name:
            jac[0, : durations.rows] = 1.0