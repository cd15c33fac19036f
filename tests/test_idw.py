import random

import pytest

from cloudidw.grid import GridNode, generate_grid
from cloudidw.idw import IDWInterpolator
from cloudidw.kdtree import KDTree
from cloudidw.point import Point, generate_random_point_cloud


def _cloud(seed, weight_range=(1.0, 5.0)):
    return generate_random_point_cloud(60, 0.0, 10.0, *weight_range, random.Random(seed))


def test_k_one_takes_nearest_weight():
    cloud = _cloud(1)
    grid = generate_grid(5.0, 5.0, 5.0, 1.0, 2.0)
    IDWInterpolator(1).interpolate([cloud], grid)
    tree = KDTree(cloud)
    for node in grid:
        assert node.weight == tree.nearest_neighbor(node).weight


def test_nodes_marked_extrapolated():
    grid = generate_grid(5.0, 5.0, 5.0, 1.0, 1.0)
    IDWInterpolator(4).interpolate([_cloud(2)], grid)
    assert all(n.is_extrapolated for n in grid)


def test_weights_within_cloud_range():
    grid = generate_grid(5.0, 5.0, 5.0, 1.5, 3.0)
    IDWInterpolator(6).interpolate([_cloud(3), _cloud(4)], grid)
    for n in grid:
        assert 1.0 <= n.weight <= 5.0


def test_coincident_point_dominates():
    cloud = [Point(0, 0, 0, 7.0), Point(1, 0, 0, 1.0), Point(0, 1, 0, 2.0)]
    grid = [GridNode(0.0, 0.0, 0.0)]
    IDWInterpolator(3).interpolate([cloud], grid)
    assert grid[0].weight == 7.0


def test_constant_weights_reproduced():
    cloud = _cloud(5, (2.5, 2.5))
    grid = generate_grid(3.0, 3.0, 3.0, 1.0, 1.0)
    IDWInterpolator(5).interpolate([cloud], grid)
    for n in grid:
        assert n.weight == pytest.approx(2.5)


def test_mean_over_clouds():
    a = [Point(0, 0, 0, 1.0), Point(2, 0, 0, 1.0)]
    b = [Point(0, 0, 1, 3.0), Point(0, 2, 0, 3.0)]
    grid = [GridNode(0.5, 0.5, 0.5)]
    IDWInterpolator(2).interpolate([a, b], grid)
    assert grid[0].weight == pytest.approx(2.0)


def test_no_clouds_raises():
    with pytest.raises(ValueError):
        IDWInterpolator(3).interpolate([], [GridNode(0, 0, 0)])


def test_invalid_k_raises():
    with pytest.raises(ValueError):
        IDWInterpolator(0)