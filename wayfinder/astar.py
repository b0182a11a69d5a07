"""Shortest paths (one or all of them) with the A* search algorithm."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional

Successors = Callable[[Any], Iterable[tuple[Any, Any]]]


def _path_to(nodes: list, parent_of: list, index: Optional[int]) -> list:
    """Follow parent indices from ``index`` back to the root; return root first."""
    path = []
    while index is not None:
        path.append(nodes[index])
        index = parent_of[index]
    path.reverse()
    return path


def astar(
    start: Hashable,
    successors: Successors,
    heuristic: Callable[[Any], Any],
    success: Callable[[Any], bool],
) -> Optional[tuple[list, Any]]:
    """Find a shortest path from ``start`` to a node accepted by ``success``.

    ``successors`` yields ``(node, move_cost)`` pairs with non-negative costs and
    ``heuristic`` must never overestimate the remaining cost.  Return the path
    (start and end included) with its total cost, or ``None`` if there is none.
    """
    nodes = [start]
    index_of = {start: 0}
    parent_of: list[Optional[int]] = [None]
    best_cost = [0]
    tie = count()
    to_see = [(0, 0, next(tie), 0, 0)]
    while to_see:
        _, _, _, cost, index = heapq.heappop(to_see)
        node = nodes[index]
        if success(node):
            return _path_to(nodes, parent_of, index), cost
        # Stale heap entry: a cheaper route to this node was found later.
        if cost > best_cost[index]:
            continue
        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            n = index_of.get(successor)
            if n is None:
                n = len(nodes)
                nodes.append(successor)
                index_of[successor] = n
                parent_of.append(index)
                best_cost.append(new_cost)
            elif best_cost[n] > new_cost:
                parent_of[n] = index
                best_cost[n] = new_cost
            else:
                continue
            estimated = new_cost + heuristic(nodes[n])
            heapq.heappush(to_see, (estimated, -new_cost, next(tie), new_cost, n))
    return None


class AstarSolution:
    """Iterator over every shortest path found by :func:`astar_bag`."""

    def __init__(self, sinks: list[int], parents: list[tuple[Any, list[int]]]):
        self._sinks = list(sinks)
        self._parents = list(parents)
        self._current: list[list[int]] = []
        self._terminated = False

    def _complete(self) -> None:
        while True:
            if self._current:
                ps = list(self._parents[self._current[-1][-1]][1])
            else:
                ps = list(self._sinks)
            if not ps:
                break
            self._current.append(ps)

    def _next_vec(self) -> None:
        while self._current and len(self._current[-1]) == 1:
            self._current.pop()
        if self._current:
            self._current[-1].pop()

    def __iter__(self) -> Iterator[list]:
        return self

    def __next__(self) -> list:
        if self._terminated:
            raise StopIteration
        self._complete()
        path = [self._parents[choices[-1]][0] for choices in reversed(self._current)]
        self._next_vec()
        self._terminated = not self._current
        return path


def astar_bag(
    start: Hashable,
    successors: Successors,
    heuristic: Callable[[Any], Any],
    success: Callable[[Any], bool],
) -> Optional[tuple[AstarSolution, Any]]:
    """Find all shortest paths from ``start`` to nodes accepted by ``success``.

    Return an iterator over the paths together with their common cost, or
    ``None`` if no path exists.  Paths may end at different goal nodes.
    """
    nodes = [start]
    index_of = {start: 0}
    parent_sets: list[dict[int, None]] = [{}]
    best_cost = [0]
    sinks: dict[int, None] = {}
    min_cost = None
    tie = count()
    to_see = [(0, 0, next(tie), 0, 0)]
    while to_see:
        estimated, _, _, cost, index = heapq.heappop(to_see)
        if min_cost is not None and estimated > min_cost:
            break
        node = nodes[index]
        if success(node):
            min_cost = cost
            sinks[index] = None
        if cost > best_cost[index]:
            continue
        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            n = index_of.get(successor)
            if n is None:
                n = len(nodes)
                nodes.append(successor)
                index_of[successor] = n
                parent_sets.append({index: None})
                best_cost.append(new_cost)
            elif best_cost[n] > new_cost:
                parent_sets[n] = {index: None}
                best_cost[n] = new_cost
            else:
                if best_cost[n] == new_cost:
                    # Another parent at the same cost: record it, do not requeue.
                    parent_sets[n][index] = None
                continue
            estimated_new = new_cost + heuristic(nodes[n])
            heapq.heappush(to_see, (estimated_new, -new_cost, next(tie), new_cost, n))

    if min_cost is None:
        return None
    parents = [(node, list(ps)) for node, ps in zip(nodes, parent_sets)]
    return AstarSolution(list(sinks), parents), min_cost


def astar_bag_collect(
    start: Hashable,
    successors: Successors,
    heuristic: Callable[[Any], Any],
    success: Callable[[Any], bool],
) -> Optional[tuple[list[list], Any]]:
    """Like :func:`astar_bag` but return the paths as a list."""
    result = astar_bag(start, successors, heuristic, success)
    if result is None:
        return None
    solutions, cost = result
    return list(solutions), cost