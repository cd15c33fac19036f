"""Regular cubic grids of interpolation targets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GridNode:
    """A grid position together with its interpolated weight."""

    x: float
    y: float
    z: float
    weight: float = 0.0
    is_extrapolated: bool = False


def generate_grid(
    cx: float, cy: float, cz: float, step: float, radius: float
) -> list[GridNode]:
    """Return a cube of nodes centred on ``(cx, cy, cz)``.

    The cube spans ``int(radius / step)`` steps on each side of the centre
    along every axis; nodes are ordered with x varying slowest and z fastest.
    """
    steps = int(radius / step)
    offsets = range(-steps, steps + 1)
    return [
        GridNode(cx + i * step, cy + j * step, cz + k * step)
        for i in offsets
        for j in offsets
        for k in offsets
    ]