"""Count the number of distinct paths that reach a destination."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable


def count_paths(
    start: Hashable,
    successors: Callable[[Any], Iterable[Any]],
    success: Callable[[Any], bool],
) -> int:
    """Count the paths from ``start`` to nodes accepted by ``success``.

    A node accepted by ``success`` ends a path and is not expanded further.
    The graph must contain no loop; a loop raises :class:`ValueError`.
    """
    cache: dict[Any, int] = {}
    if success(start):
        return 1
    active = {start}
    stack = [[start, iter(successors(start)), 0]]
    while stack:
        frame = stack[-1]
        for child in frame[1]:
            known = cache.get(child)
            if known is not None:
                frame[2] += known
                continue
            if success(child):
                cache[child] = 1
                frame[2] += 1
                continue
            if child in active:
                raise ValueError("graph contains a loop")
            active.add(child)
            stack.append([child, iter(successors(child)), 0])
            break
        else:
            node, _, total = stack.pop()
            active.discard(node)
            cache[node] = total
            if stack:
                stack[-1][2] += total
    return cache[start]