"""A 3-D k-d tree for nearest-neighbour queries over weighted points."""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Iterable, Protocol

from cloudidw.grid import GridNode
from cloudidw.point import Point


class _HasCoords(Protocol):
    x: float
    y: float
    z: float


def squared_distance(a: _HasCoords, b: _HasCoords) -> float:
    """Squared Euclidean distance between two objects with x, y, z."""
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz


def to_point(node: GridNode) -> Point:
    """Turn a grid node into a point with the same coordinates and weight."""
    return Point(node.x, node.y, node.z, node.weight)


def _coord(p: _HasCoords, axis: int) -> float:
    return (p.x, p.y, p.z)[axis]


@dataclass(slots=True)
class _Node:
    point: Point
    axis: int
    left: _Node | None
    right: _Node | None


class KDTree:
    """Median-split k-d tree cycling through the x, y and z axes."""

    def __init__(self, points: Iterable[Point]) -> None:
        self.points = list(points)
        self._root = self._build(self.points, 0)

    def __len__(self) -> int:
        return len(self.points)

    @classmethod
    def _build(cls, pts: list[Point], depth: int) -> _Node | None:
        if not pts:
            return None
        axis = depth % 3
        ordered = sorted(pts, key=lambda p: _coord(p, axis))
        mid = len(ordered) // 2
        return _Node(
            ordered[mid],
            axis,
            cls._build(ordered[:mid], depth + 1),
            cls._build(ordered[mid + 1 :], depth + 1),
        )

    def nearest_neighbor(self, target: _HasCoords) -> Point:
        """Return the stored point closest to ``target``."""
        if self._root is None:
            raise ValueError("nearest-neighbour query on an empty tree")
        best: Point | None = None
        best_dist = math.inf

        def visit(node: _Node | None) -> None:
            nonlocal best, best_dist
            if node is None:
                return
            d = squared_distance(node.point, target)
            if d < best_dist:
                best_dist = d
                best = node.point
            delta = _coord(target, node.axis) - _coord(node.point, node.axis)
            first, second = (
                (node.left, node.right) if delta < 0 else (node.right, node.left)
            )
            visit(first)
            if delta * delta < best_dist:
                visit(second)

        visit(self._root)
        assert best is not None
        return best

    def k_nearest_neighbors(self, target: _HasCoords, k: int) -> list[Point]:
        """Return up to ``k`` stored points closest to ``target``, nearest first."""
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        heap: list[tuple[float, int, Point]] = []  # max-heap via negated distance
        counter = itertools.count()

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            d = squared_distance(node.point, target)
            if len(heap) < k:
                heapq.heappush(heap, (-d, next(counter), node.point))
            elif d < -heap[0][0]:
                heapq.heapreplace(heap, (-d, next(counter), node.point))
            delta = _coord(target, node.axis) - _coord(node.point, node.axis)
            first, second = (
                (node.left, node.right) if delta < 0 else (node.right, node.left)
            )
            visit(first)
            if len(heap) < k or delta * delta < -heap[0][0]:
                visit(second)

        visit(self._root)
        return [p for _, _, p in sorted(heap, key=lambda e: (-e[0], e[1]))]