"""Interactive command: interpolate random point clouds onto a cubic grid."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Iterator, TextIO

from cloudidw.grid import GridNode, generate_grid
from cloudidw.idw import IDWInterpolator
from cloudidw.point import generate_random_point_cloud

MAX_K = 10


def clamp_k(k: int) -> int:
    """Return ``k`` if it lies in 1..10, otherwise fall back to 10."""
    return MAX_K if k > MAX_K or k < 1 else k


def format_node(node: GridNode) -> str:
    """Render a node as ``x,y,z weight flag``."""
    return (
        f"{node.x:g},{node.y:g},{node.z:g} "
        f"{node.weight:g} {int(node.is_extrapolated)}"
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Prompter:
    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._tokens = _tokens(stream)
        self._out = out

    def ask(self, prompt: str, kind: type, count: int = 1) -> list:
        self._out.write(prompt)
        self._out.flush()
        values = []
        for _ in range(count):
            try:
                token = next(self._tokens)
            except StopIteration:
                raise ValueError("unexpected end of input") from None
            values.append(kind(token))
        return values


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cloudidw",
        description="Interpolate random point clouds onto a grid by IDW.",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    out = sys.stdout
    prompter = _Prompter(sys.stdin, out)
    try:
        (count_clouds,) = prompter.ask("Enter count clouds: ", int)
        (count_points,) = prompter.ask("Enter count points: ", int)
        (min_coord,) = prompter.ask("Enter min coord: ", float)
        (max_coord,) = prompter.ask("Enter max coord: ", float)
        (min_weight,) = prompter.ask("Enter min weight: \n", float)
        (max_weight,) = prompter.ask("Enter max weight: \n", float)
        cx, cy, cz = prompter.ask("Center of grid(x,y,z): \n", float, 3)
        (step,) = prompter.ask("Grid step: \n", float)
        (radius,) = prompter.ask("Grid radius: \n", float)
        (k,) = prompter.ask("Interpolation by k nearest points \n k(<=10)=\n", int)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    k = clamp_k(k)

    start = time.perf_counter()
    try:
        grid = generate_grid(cx, cy, cz, step, radius)
        print(len(grid), file=out)
        rng = random.Random(args.seed)
        clouds = [
            generate_random_point_cloud(
                count_points, min_coord, max_coord, min_weight, max_weight, rng
            )
            for _ in range(count_clouds)
        ]
        IDWInterpolator(k).interpolate(clouds, grid)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for node in grid:
        print(format_node(node), file=out)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"time: {elapsed_ms} ms", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())