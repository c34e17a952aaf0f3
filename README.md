# legtraj

Building blocks for trajectory optimization of legged robots: constraint
sets with their values, bounds and Jacobians, a cost that turns a
constraint into a quadratic penalty, and kinematic limits and rigid-body
parameters for several example robots.

Everything is plain Python on top of NumPy. Values come back as NumPy
arrays, bounds as lists of `Bounds(lower, upper)`, and Jacobians as dense
`rows x n_cols` arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `legtraj.constraint_set`
  - `ConstraintSet`: abstract base with `rows`, `name`,
    `init_variable_depended_quantities(variables)` (a mapping from
    variable-set names to objects), `get_values()`, `get_bounds()`,
    `fill_jacobian_block(var_set, jac)` and `get_jacobian(var_set, n_cols)`.
    `rows` may be `None` until the variables are linked.
  - `Bounds`, with the constants `BOUND_ZERO` and `NO_BOUND`
    (`INFINITY = 1e20` stands for unbounded).
  - The enums `Dx` (`POS`, `VEL`, `ACC`, `JERK`) and `Dim` (`X`, `Y`, `Z`),
    and `NodeValueInfo(node_id, deriv, dim)`.
  - `TimeDiscretizationConstraint`: evaluates a constraint at a list of
    times. Subclasses set `rows` and implement
    `update_constraint_at_instance`, `update_bounds_at_instance` and
    `update_jacobian_at_instance`. `from_horizon(total_time, dt, name)`
    places an instance at `0, dt, 2*dt, ...` for `floor(total_time / dt)`
    steps and one more at exactly `total_time`; `number_of_nodes()` counts
    the instances.
- `legtraj.linear_constraint`: `LinearEqualityConstraint(matrix, offset,
  variable_set)` enforces `M x + v = 0`. Its values are `M x`, each row is
  bounded to exactly `-v`, and its Jacobian is `M`. The linked variable set
  must provide `get_values()`.
- `legtraj.soft_constraint`: `SoftConstraint(constraint)` is the cost
  `0.5 (g - b)^T W (g - b)`, where `b` is the midpoint of each row's bounds
  and `W` the diagonal `weights` (all ones by default). `get_values()`
  returns the cost as a one-element array, `get_jacobian(var_set, n_cols)`
  the `1 x n_cols` gradient, and `get_bounds()` a single `NO_BOUND`.
- `legtraj.swing_constraint`: `SwingConstraint(ee_motion_id)` requires
  every non-constant foot node to sit at the xy midpoint of its neighbours,
  with an xy velocity equal to their distance divided by `t_swing_avg`
  (0.3 s).
- `legtraj.terrain_constraint`: `TerrainConstraint(terrain, ee_motion_id)`
  keeps every foot node after the first on or above the terrain; constant
  (stance) nodes must lie exactly on it. The terrain object must provide
  `height(x, y)` and `derivative_of_height_wrt(dim, x, y)`.
- `legtraj.total_duration_constraint`: `TotalDurationConstraint(total_time,
  ee, schedule_name)` bounds the sum of one endeffector's optimized phase
  durations to lie between 0.1 s and `total_time`.
- `legtraj.models`: `KinematicModel(n_ee)` with
  `nominal_stance_in_base()`, `maximum_deviation_from_nominal()` and
  `number_of_endeffectors()`; the enums `BipedID`, `QuadrupedID` and
  `Robot` (`MONOPED`, `BIPED`, `HYQ`, `ANYMAL`, `GODDARD`); and
  `robot_name(robot)`.
- `legtraj.robot_examples`: `MonopedKinematicModel`,
  `BipedKinematicModel`, `HyqKinematicModel`, `AnymalKinematicModel` and
  `GoddardKinematicModel`; `kinematic_model(robot)` returns a fresh one for
  a `Robot`, and `dynamic_parameters(robot)` its `RigidBodyParameters`
  (mass, the six inertia elements and the endeffector count). An unknown
  robot raises `ValueError`.

The swing and terrain constraints read the foot variables through a small
interface: `name`, `nodes()` (objects with `p` and, for the swing
constraint, `v` arrays), `opt_index(NodeValueInfo)`, and either
`indices_of_non_constant_nodes()` or `is_constant_node(id)`. The
total-duration constraint's schedule provides `name`, `rows` and
`get_values()`.

## Example

```python
import numpy as np

from legtraj.linear_constraint import LinearEqualityConstraint
from legtraj.soft_constraint import SoftConstraint


class Point:
    name = "x"

    def __init__(self, values):
        self.values = np.asarray(values, dtype=float)

    def get_values(self):
        return self.values


matrix = np.array([[1.0, 2.0], [0.0, 1.0]])
offset = np.array([-1.0, 0.5])
constraint = LinearEqualityConstraint(matrix, offset, "x")
constraint.init_variable_depended_quantities({"x": Point([1.0, 1.0])})

print(constraint.get_values())          # M x
print(constraint.get_bounds())          # each row fixed to -v

cost = SoftConstraint(constraint)
print(cost.get_values())
print(cost.get_jacobian("x", 2))
```

Robot parameters:

```python
from legtraj.models import Robot, robot_name
from legtraj.robot_examples import dynamic_parameters, kinematic_model

model = kinematic_model(Robot.HYQ)
print(robot_name(Robot.HYQ), model.number_of_endeffectors())
print(model.nominal_stance_in_base())
print(model.maximum_deviation_from_nominal())
print(dynamic_parameters(Robot.HYQ))
```

## What this package does not do

It has no optimization variables of its own (no node splines, phase
durations or terrain height maps): the constraints work on whatever objects
you link to them through the interfaces above. It provides no solver, no
dynamics model that evaluates motion against the rigid-body parameters, no
gait generation and no command-line program.