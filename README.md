# cloudidw

Interpolate weights from several random 3D point clouds onto a regular
cubic grid using inverse distance weighting (IDW).

Every point carries a scalar weight. For each grid node, the package looks
up the `k` nearest points in each cloud with a k-d tree. It then combines
their weights by inverse squared distance and averages the results over all
clouds.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install ".[test]"
```

## Command line

```
cloudidw
cloudidw --seed 42
```

The command reads its parameters from standard input, printing a prompt
before each one:

- the number of clouds and the number of points in each cloud
- the coordinate range and the weight range for the random points
- the grid centre `x y z`, the grid step and the grid radius
- `k`, the number of nearest points to use; values outside 1..10 become 10

Values may be given on one line or on several; they are read as
whitespace-separated tokens. `--seed` makes the random clouds reproducible.

It prints the number of grid nodes first. After that comes one line per
node, `x,y,z weight extrapolated` (the flag is `1` once a node has been
interpolated), and finally `time: N ms`. Malformed or missing input, or
parameters that cannot be interpolated (for example an empty cloud), are
reported on standard error and the command exits with status 1.

## Library use

```python
import random

from cloudidw.point import Point, generate_random_point_cloud
from cloudidw.grid import generate_grid
from cloudidw.kdtree import KDTree
from cloudidw.idw import IDWInterpolator

rng = random.Random(42)
clouds = [
    generate_random_point_cloud(500, -5.0, 5.0, 0.0, 1.0, rng)
    for _ in range(3)
]

grid = generate_grid(0.0, 0.0, 0.0, 1.0, 2.0)   # 5 x 5 x 5 nodes
IDWInterpolator(k=4).interpolate(clouds, grid)

for node in grid[:3]:
    print(node.x, node.y, node.z, node.weight, node.is_extrapolated)

tree = KDTree(clouds[0])
print(len(tree))
print(tree.nearest_neighbor(Point(0.0, 0.0, 0.0)))
print(tree.k_nearest_neighbors(Point(0.0, 0.0, 0.0), 3))
```

- `cloudidw.point`: `Point`, `noise_mask`, `generate_random_point_cloud`.
  Random clouds are thinned by the smooth noise mask: candidates where the
  mask is 0.9 or more are rejected, which leaves holes in the cloud.
- `cloudidw.grid`: `GridNode` and `generate_grid`, a cube of
  `int(radius / step)` steps on each side of the centre, ordered with x
  varying slowest and z fastest.
- `cloudidw.kdtree`: `KDTree` with `nearest_neighbor` and
  `k_nearest_neighbors` (nearest first), plus `squared_distance` and
  `to_point`.
- `cloudidw.idw`: `IDWInterpolator`, which updates grid nodes in place.
  When `k` is 1, a node takes the weight of the nearest point in each cloud.
  When `k` is larger, a point closer than 0.01 to the node, meaning a
  squared distance below 1e-4, decides that cloud's value on its own.
  `k` below 1, no clouds, or an empty cloud raise `ValueError`.

## What it does not do

Clouds are always generated at random; the command does not read point
data from files, and results are only printed to standard output, not
saved in any file format.