"""Inverse-distance-weighted interpolation of point clouds onto a grid."""

from __future__ import annotations

from typing import Iterable, Sequence

from cloudidw.grid import GridNode
from cloudidw.kdtree import KDTree, squared_distance, to_point
from cloudidw.point import Point

COINCIDENT_DISTANCE = 1e-4


class IDWInterpolator:
    """Interpolates weights from the ``k`` nearest points of each cloud."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k

    def _cloud_estimate(self, tree: KDTree, node: GridNode) -> float:
        target = to_point(node)
        if self.k == 1:
            return tree.nearest_neighbor(target).weight
        weighted = 0.0
        total = 0.0
        for pt in tree.k_nearest_neighbors(target, self.k):
            dist2 = squared_distance(pt, node)
            if dist2 < COINCIDENT_DISTANCE:
                return pt.weight
            weighted += pt.weight / dist2
            total += 1.0 / dist2
        if total == 0.0:
            raise ValueError("cannot interpolate from an empty point cloud")
        return weighted / total

    def interpolate(
        self, clouds: Iterable[Sequence[Point]], grid: Iterable[GridNode]
    ) -> None:
        """Set every node's weight to the mean of the per-cloud estimates.

        The nodes are updated in place and marked as extrapolated.
        """
        trees = [KDTree(cloud) for cloud in clouds]
        if not trees:
            raise ValueError("at least one point cloud is required")
        for node in grid:
            estimates = [self._cloud_estimate(tree, node) for tree in trees]
            node.weight = sum(estimates) / len(estimates)
            node.is_extrapolated = True