import numpy as np
import pytest

from legtraj.constraint_set import Bounds
from legtraj.total_duration_constraint import TotalDurationConstraint


class FakeDurations:
    def __init__(self, name, values):
        self.name = name
        self.values = list(values)
        self.rows = len(self.values)

    def get_values(self):
        return np.array(self.values)


def make(values=(0.4, 0.2, 0.4), total=2.0):
    schedule = FakeDurations("schedule-0", values)
    c = TotalDurationConstraint(total, 0, "schedule-0")
    c.init_variable_depended_quantities({"schedule-0": schedule})
    return c, schedule


def test_name_and_single_row():
    c, _ = make()
    assert c.name == "totalduration-0"
    assert c.rows == 1


def test_value_is_sum_of_durations():
    values = (0.4, 0.2, 0.4, 0.2)
    c, _ = make(values)
    assert c.get_values()[0] == pytest.approx(sum(values))


def test_value_follows_changed_durations():
    c, schedule = make()
    schedule.values = [0.3, 0.3, 0.3]
    assert c.get_values()[0] == pytest.approx(sum(schedule.values))


def test_bounds_lower_and_upper():
    c, _ = make(total=2.4)
    assert c.get_bounds() == [Bounds(0.1, 2.4)]


def test_jacobian_is_row_of_ones_over_durations():
    c, schedule = make()
    jac = c.get_jacobian("schedule-0", 5)
    assert jac.shape == (1, 5)
    np.testing.assert_array_equal(jac[0, : schedule.rows], np.ones(schedule.rows))
    assert not jac[0, schedule.rows :].any()


def test_jacobian_of_other_set_is_zero():
    c, _ = make()
    assert not c.get_jacobian("base", 3).any()


def test_missing_schedule_raises():
    c = TotalDurationConstraint(1.0, 1, "schedule-1")
    with pytest.raises(KeyError):
        c.init_variable_depended_quantities({"schedule-0": FakeDurations("schedule-0", [1.0])})


def test_unlinked_constraint_raises():
    with pytest.raises(RuntimeError):
        TotalDurationConstraint(1.0, 0, "schedule-0").get_values()