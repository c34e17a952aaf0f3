from dataclasses import dataclass

import numpy as np
import pytest

from legtraj.constraint_set import BOUND_ZERO
from legtraj.swing_constraint import SwingConstraint


@dataclass
class FakeNode:
    p: np.ndarray
    v: np.ndarray


class FakeNodes:
    def __init__(self, name, positions, velocities, constant_ids):
        self.name = name
        self.x = np.concatenate(
            [np.concatenate([p, v]) for p, v in zip(positions, velocities)]
        ).astype(float)
        self.constant_ids = set(constant_ids)
        self.count = len(positions)

    def nodes(self):
        return [FakeNode(self.x[6 * i : 6 * i + 3], self.x[6 * i + 3 : 6 * i + 6])
                for i in range(self.count)]

    def opt_index(self, info):
        return info.node_id * 6 + int(info.deriv) * 3 + int(info.dim)

    def indices_of_non_constant_nodes(self):
        return [i for i in range(self.count) if i not in self.constant_ids]

    def is_constant_node(self, i):
        return i in self.constant_ids


def numeric_jacobian(constraint, holder, eps=1e-6):
    base = constraint.get_values()
    cols = []
    for i in range(holder.x.size):
        holder.x[i] += eps
        cols.append((constraint.get_values() - base) / eps)
        holder.x[i] -= eps
    return np.column_stack(cols)


def make_three_nodes(curr_p=(0.5, 0.0, 0.2), curr_v=(1.0 / 0.3, 0.0, 0.0)):
    holder = FakeNodes(
        "foot",
        [(0.0, 0.0, 0.0), curr_p, (1.0, 0.0, 0.0)],
        [(0.0, 0.0, 0.0), curr_v, (0.0, 0.0, 0.0)],
        constant_ids=[0, 2],
    )
    c = SwingConstraint("foot")
    c.init_variable_depended_quantities({"foot": holder})
    return c, holder


def test_name_and_rows():
    c, _ = make_three_nodes()
    assert c.name == "swing-foot"
    assert c.rows == 4
    assert c.pure_swing_node_ids == [1]


def test_values_vanish_at_midpoint_with_average_velocity():
    c, _ = make_three_nodes()
    np.testing.assert_allclose(c.get_values(), np.zeros(4), atol=1e-12)


def test_values_measure_offset_from_midpoint():
    c, _ = make_three_nodes(curr_p=(0.7, 0.1, 0.2))
    g = c.get_values()
    assert g[0] == pytest.approx(0.2)
    assert g[2] == pytest.approx(0.1)


def test_bounds_are_zero():
    c, _ = make_three_nodes()
    assert c.get_bounds() == [BOUND_ZERO] * 4


def test_jacobian_position_row_coefficients():
    c, holder = make_three_nodes()
    jac = c.get_jacobian("foot", holder.x.size)
    assert jac[0, 6] == 1.0
    assert jac[0, 12] == -0.5
    assert jac[0, 0] == -0.5


def test_jacobian_matches_finite_differences():
    holder = FakeNodes(
        "foot",
        [(0, 0, 0), (0.4, 0.2, 0.3), (1.0, 0.5, 0), (1.2, 0.3, 0.1), (2.0, 0.1, 0)],
        [(0, 0, 0), (0.1, 0.2, 0), (0, 0, 0), (0.3, -0.1, 0), (0, 0, 0)],
        constant_ids=[0, 2, 4],
    )
    c = SwingConstraint("foot")
    c.init_variable_depended_quantities({"foot": holder})
    assert c.rows == 8
    jac = c.get_jacobian("foot", holder.x.size)
    np.testing.assert_allclose(jac, numeric_jacobian(c, holder), atol=1e-5)


def test_jacobian_of_other_set_is_zero():
    c, holder = make_three_nodes()
    jac = c.get_jacobian("other", holder.x.size)
    assert not jac.any()


def test_missing_variable_set_raises():
    c = SwingConstraint("foot")
    with pytest.raises(KeyError):
        c.init_variable_depended_quantities({})


def test_unlinked_constraint_raises():
    with pytest.raises(RuntimeError):
        SwingConstraint("foot").get_values()


def test_swing_node_without_neighbour_raises():
    holder = FakeNodes("foot", [(0, 0, 0), (1, 0, 0)], [(0, 0, 0), (0, 0, 0)], [0])
    c = SwingConstraint("foot")
    c.init_variable_depended_quantities({"foot": holder})
    with pytest.raises(IndexError):
        c.get_values()