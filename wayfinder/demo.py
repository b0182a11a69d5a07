"""Compare plain and bidirectional breadth-first search on a square grid."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Optional

from wayfinder.bfs import bfs, bfs_bidirectional

Point = tuple[int, int]

_DELTAS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def neighbours(point: Point, size: int) -> list[Point]:
    """Orthogonal neighbours of ``point`` inside the grid ``[0, size]²``."""
    x, y = point
    return [
        (x + dx, y + dy)
        for dx, dy in _DELTAS
        if 0 <= x + dx <= size and 0 <= y + dy <= size
    ]


@dataclass(frozen=True)
class Comparison:
    """Paths found by both searches and the time each one took, in seconds."""

    bfs_path: Optional[list]
    bidirectional_path: Optional[list]
    bfs_seconds: float
    bidirectional_seconds: float


def compare(start: Point, goal: Point, size: int) -> Comparison:
    """Run both searches from ``start`` to ``goal`` on a grid of side ``size``."""

    def step(p: Point) -> list[Point]:
        return neighbours(p, size)

    began = time.perf_counter()
    plain = bfs(start, step, lambda p: p == goal)
    plain_time = time.perf_counter() - began

    began = time.perf_counter()
    both = bfs_bidirectional(start, goal, step, step)
    both_time = time.perf_counter() - began

    return Comparison(plain, both, plain_time, both_time)


def _report(title: str, result: Comparison) -> str:
    return (
        f"\n{title}\n{'=' * len(title)}\n"
        f"BFS took {result.bfs_seconds * 1000:.3f}ms\n"
        f"Bidirectional BFS took {result.bidirectional_seconds * 1000:.3f}ms\n"
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Time both searches corner to corner and centre to corner."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=64, help="side of the grid")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")
    size = args.size
    bottom_left = (0, 0)
    top_right = (size, size)
    center = (size // 2, size // 2)
    print(_report("Corner to Corner", compare(bottom_left, top_right, size)), end="")
    print(_report("Center to Corner", compare(center, top_right, size)), end="")
    return 0