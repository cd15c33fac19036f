"""Weighted points and random point-cloud generation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

HOLE_THRESHOLD = 0.9


@dataclass
class Point:
    """A point in 3-D space carrying a scalar weight."""

    x: float
    y: float
    z: float
    weight: float = 0.0


def noise_mask(x: float, y: float, z: float) -> float:
    """Simple trigonometric noise used to punch holes into a cloud."""
    return abs(
        math.sin(x * 0.5 + 332 + 0.1)
        + math.cos(y * 0.7 * (2 + 0.1))
        + math.sin(z * 0.3)
    )


def generate_random_point_cloud(
    n: int,
    min_coord: float,
    max_coord: float,
    min_weight: float,
    max_weight: float,
    rng: random.Random | None = None,
) -> list[Point]:
    """Return ``n`` uniformly random points kept only where the noise mask is low.

    Coordinates are drawn from ``[min_coord, max_coord]`` and weights from
    ``[min_weight, max_weight]``. Candidates whose noise value is not below
    the hole threshold are discarded, which leaves holes in the cloud.
    """
    if n < 0:
        raise ValueError(f"point count must not be negative, got {n}")
    rng = rng if rng is not None else random.Random()
    cloud: list[Point] = []
    while len(cloud) < n:
        x = rng.uniform(min_coord, max_coord)
        y = rng.uniform(min_coord, max_coord)
        z = rng.uniform(min_coord, max_coord)
        weight = rng.uniform(min_weight, max_weight)
        if noise_mask(x, y, z) < HOLE_THRESHOLD:
            cloud.append(Point(x, y, z, weight))
    return cloud