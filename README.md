# gravisim

Building blocks for a simulation of point masses in two dimensions.

## Modules

- `gravisim.vector2d.Vector2d` is an immutable 2D vector with the fields `x`
  and `y`. It supports `+` and `-` between vectors, and `*` and `/` by a
  scalar. You can index it with `[0]` and `[1]`; any other index raises
  `IndexError`. It can be unpacked as `x, y = v`. Its Euclidean norm comes
  from `length()`.
- `gravisim.bounding_box.BoundingBox(x_min, x_max, y_min, y_max)` is a mutable
  axis-aligned box.
  - `contains(position)` is inclusive of the borders.
  - `quadrant(0..3)` returns one quarter of the box: 0 is upper-left,
    1 upper-right, 2 lower-left and 3 lower-right. Any other id raises
    `ValueError`.
  - `diagonal()` gives the length of the diagonal, never less than 1.0.
  - `scaled(factor)` keeps the same centre and makes each half-extent the
    full size times the factor.
  - `plotting_sanity_check()` widens a box that has no extent in one
    direction into a square, in place. It raises `ValueError` if the box has
    no extent in either direction.
  - `str(box)` gives `"x_min x_max  -  y_min y_max"` with six decimals.
- `gravisim.universe.Universe` holds the bodies column by column: `weights`
  (kg), `positions` (m), `velocities` (m/s) and `forces` (N). It also has a
  `current_simulation_epoch` counter.
  - `add_body(weight, position, velocity, force)` appends a body. Velocity
    and force default to zero.
  - `remove_body(index)` deletes a body and returns its
    `(weight, position, velocity, force)`.
  - `num_bodies` is a property.
  - `bounding_box()` returns the box around all positions. The upper bounds
    never drop below the smallest positive float.
  - `describe()` returns a text listing of every body.
- `gravisim.motion` provides `EPOCH_IN_SECONDS` (2.628e6 s, one month) and
  `calculate_positions(universe)`. The latter moves every body by
  velocity × epoch.
- `gravisim.collisions` provides `COLLISION_DISTANCE` (1e11 m).
  - `detect_collisions(universe)` lists every ordered pair `(i, j)` of
    distinct bodies that are closer than this distance.
  - `find_collisions(universe)` merges colliding bodies in place. The
    heaviest participant goes first and absorbs all of its partners: masses
    add up and momentum is conserved. The absorbed bodies are then removed.
  - `find_collisions_parallel(universe, workers=None)` does the same, but
    splits detection across a thread pool. By default it uses one thread per
    CPU. `workers` below 1 raises `ValueError`.

## What it does not do

The package does not compute gravitational forces or update velocities.
`forces` and `velocities` are whatever the caller sets. It has no spatial
tree for approximate force summation, no plotting or image output, no
loading or saving of universes, and no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from gravisim.universe import Universe
from gravisim.vector2d import Vector2d
from gravisim.motion import calculate_positions
from gravisim.collisions import find_collisions

universe = Universe()
universe.add_body(100.0, Vector2d(2e11, 2e11), Vector2d(1000.0, 0.0))
universe.add_body(300.0, Vector2d(2e11, 2.005e11), Vector2d(600.0, -1000.0))

find_collisions(universe)
print(universe.num_bodies)   # 1
print(universe.weights)      # [400.0]
print(universe.describe())

calculate_positions(universe)
print(universe.bounding_box())
```