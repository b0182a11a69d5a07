"""Shortest paths and reachable sets with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Hashable, Iterable, Iterator, Optional

Successors = Callable[[Any], Iterable[tuple[Any, Any]]]


class _Search:
    """Nodes in discovery order, with their best parent index and cost."""

    def __init__(self, start: Hashable):
        self.nodes: list = [start]
        self.index_of: dict[Any, int] = {start: 0}
        self.parent_of: list[Optional[int]] = [None]
        self.best_cost: list = [0]

    def relax(self, successor: Any, parent: int, new_cost: Any) -> Optional[int]:
        """Record ``successor`` reached from ``parent`` at ``new_cost``.

        Return its index if this is a new node or a cheaper route, else ``None``.
        """
        n = self.index_of.get(successor)
        if n is None:
            n = len(self.nodes)
            self.nodes.append(successor)
            self.index_of[successor] = n
            self.parent_of.append(parent)
            self.best_cost.append(new_cost)
            return n
        if self.best_cost[n] > new_cost:
            self.parent_of[n] = parent
            self.best_cost[n] = new_cost
            return n
        return None

    def path_to(self, index: Optional[int]) -> list:
        path = []
        while index is not None:
            path.append(self.nodes[index])
            index = self.parent_of[index]
        path.reverse()
        return path


def _run(
    start: Hashable, successors: Successors, stop: Callable[[Any], bool]
) -> tuple[_Search, Optional[int]]:
    search = _Search(start)
    tie = count()
    to_see = [(0, next(tie), 0)]
    while to_see:
        cost, _, index = heapq.heappop(to_see)
        node = search.nodes[index]
        if stop(node):
            return search, index
        # Stale heap entry: a cheaper route to this node was found later.
        if cost > search.best_cost[index]:
            continue
        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            n = search.relax(successor, index, new_cost)
            if n is not None:
                heapq.heappush(to_see, (new_cost, next(tie), n))
    return search, None


def dijkstra(
    start: Hashable,
    successors: Successors,
    success: Callable[[Any], bool],
) -> Optional[tuple[list, Any]]:
    """Find a shortest path from ``start`` to a node accepted by ``success``.

    ``successors`` yields ``(node, move_cost)`` pairs with non-negative costs.
    Return the path (start and end included) with its total cost, or ``None``.
    """
    search, reached = _run(start, successors, success)
    if reached is None:
        return None
    return search.path_to(reached), search.best_cost[reached]


def _parents_map(search: _Search) -> dict:
    return {
        node: (search.nodes[parent], cost)
        for node, parent, cost in zip(
            search.nodes[1:], search.parent_of[1:], search.best_cost[1:]
        )
    }


def dijkstra_all(start: Hashable, successors: Successors) -> dict:
    """Map every node reachable from ``start`` (start excluded) to
    ``(optimal_parent, cost)``."""
    return dijkstra_partial(start, successors, lambda _: False)[0]


def dijkstra_partial(
    start: Hashable,
    successors: Successors,
    stop: Callable[[Any], bool],
) -> tuple[dict, Optional[Any]]:
    """Explore from ``start`` until ``stop`` accepts an examined node.

    Return a map from every node seen (start excluded) to ``(parent, cost)``
    and the node that stopped the search, or ``None`` if none did.
    """
    search, reached = _run(start, successors, stop)
    stopped_at = None if reached is None else search.nodes[reached]
    return _parents_map(search), stopped_at


def build_path(target: Hashable, parents: dict) -> list:
    """Build the path leading to ``target`` from a ``node -> (parent, cost)`` map.

    The map must hold no loop.  The path runs from the farthest ancestor to
    ``target`` included.
    """
    path = [target]
    node = target
    while node in parents:
        node = parents[node][0]
        path.append(node)
    path.reverse()
    return path


@dataclass(frozen=True)
class DijkstraReachableItem:
    """A node reached by :func:`dijkstra_reach`."""

    node: Any
    parent: Optional[Any]
    total_cost: Any


class DijkstraReachable:
    """Iterator over reachable nodes, closest first."""

    def __init__(self, start: Hashable, successors: Successors):
        self._search = _Search(start)
        self._successors = successors
        self._tie = count()
        self._to_see = [(0, next(self._tie), 0)]
        self._seen: set[int] = set()

    def __iter__(self) -> Iterator[DijkstraReachableItem]:
        return self

    def __next__(self) -> DijkstraReachableItem:
        search = self._search
        while self._to_see:
            cost, _, index = heapq.heappop(self._to_see)
            if index in self._seen:
                continue
            self._seen.add(index)
            node = search.nodes[index]
            parent_index = search.parent_of[index]
            item = DijkstraReachableItem(
                node=node,
                parent=None if parent_index is None else search.nodes[parent_index],
                total_cost=search.best_cost[index],
            )
            for successor, move_cost in self._successors(node):
                new_cost = cost + move_cost
                n = search.relax(successor, index, new_cost)
                if n is not None:
                    heapq.heappush(self._to_see, (new_cost, next(self._tie), n))
            return item
        raise StopIteration


def dijkstra_reach(start: Hashable, successors: Successors) -> DijkstraReachable:
    """Visit every node reachable from ``start`` in order of increasing cost."""
    return DijkstraReachable(start, successors)