"""Paths and reachable sets with depth-first search."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator, Optional

Neighbours = Callable[[Any], Iterable[Any]]


def _build_path(node: Any, parents: dict) -> list:
    path = [node]
    while node in parents:
        node = parents[node]
        path.append(node)
    path.reverse()
    return path


def dfs(
    start: Hashable,
    successors: Neighbours,
    success: Callable[[Any], bool],
) -> Optional[list]:
    """Find a path from ``start`` to a node accepted by ``success``.

    Successors are tried in the order ``successors`` yields them.  Return the
    path, start and end included, or ``None`` if no such path exists.
    """
    to_visit = [start]
    visited: set = set()
    parents: dict = {}
    while to_visit:
        node = to_visit.pop()
        if node in visited:
            continue
        visited.add(node)
        if success(node):
            return _build_path(node, parents)
        for nxt in reversed(list(successors(node))):
            if nxt not in visited:
                parents[nxt] = node
                to_visit.append(nxt)
    return None


class DfsReachable:
    """Iterator over the nodes reachable from a start node, in DFS order."""

    def __init__(self, start: Hashable, successors: Neighbours):
        self._to_see = [start]
        self._visited: set = set()
        self._successors = successors

    def remaining_nodes_low_bound(self) -> int:
        """Lower bound of the number of nodes still to be visited."""
        return len(set(self._to_see))

    def __iter__(self) -> Iterator:
        return self

    def __next__(self) -> Any:
        while self._to_see:
            node = self._to_see.pop()
            if node in self._visited:
                continue
            self._visited.add(node)
            fresh = [s for s in self._successors(node) if s not in self._visited]
            self._to_see.extend(reversed(fresh))
            return node
        raise StopIteration


def dfs_reach(start: Hashable, successors: Neighbours) -> DfsReachable:
    """Visit every node reachable from ``start`` in DFS order."""
    return DfsReachable(start, successors)