"""Shortest paths with breadth-first search, one-way or bidirectional."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Iterator, Optional

Neighbours = Callable[[Any], Iterable[Any]]


def _start_nodes(start: Any) -> list:
    """Return the start node(s) as a duplicate-free list.

    A list or set stands for several start nodes; anything else is a single
    node (lists and sets cannot be nodes since they are not hashable).
    """
    candidates = start if isinstance(start, (list, set)) else [start]
    return list(dict.fromkeys(candidates))


class _Tree:
    """Nodes in discovery order, each with the index of the node it came from."""

    def __init__(self, roots: Iterable[Any]):
        self.nodes: list = []
        self.index_of: dict[Any, int] = {}
        self.parent_of: list[Optional[int]] = []
        self.cursor = 0
        for root in roots:
            self.add(root, None)

    def __contains__(self, node: Any) -> bool:
        return node in self.index_of

    def __len__(self) -> int:
        return len(self.nodes)

    def add(self, node: Any, parent: Optional[int]) -> None:
        if node not in self.index_of:
            self.index_of[node] = len(self.nodes)
            self.nodes.append(node)
            self.parent_of.append(parent)

    def path_to(self, index: Optional[int]) -> list:
        """Nodes from the root down to the node at ``index``."""
        path = []
        while index is not None:
            path.append(self.nodes[index])
            index = self.parent_of[index]
        path.reverse()
        return path

    def expand_layer(self, neighbours: Neighbours, other: _Tree) -> Optional[list]:
        """Expand every node known when the call starts.

        Return ``[meeting_node]`` as soon as a neighbour is already in
        ``other``, or ``None`` once the layer is exhausted.
        """
        for _ in range(len(self.nodes) - self.cursor):
            for neighbour in neighbours(self.nodes[self.cursor]):
                self.add(neighbour, self.cursor)
                if neighbour in other:
                    return [neighbour]
            self.cursor += 1
        return None

    @property
    def exhausted(self) -> bool:
        return self.cursor == len(self.nodes)


def _bfs_core(
    starts: list,
    successors: Neighbours,
    success: Callable[[Any], bool],
    check_first: bool,
) -> Optional[list]:
    if check_first:
        for node in starts:
            if success(node):
                return [node]
    tree = _Tree(starts)
    i = 0
    while i < len(tree):
        for successor in successors(tree.nodes[i]):
            if success(successor):
                return tree.path_to(i) + [successor]
            tree.add(successor, i)
        i += 1
    return None


def bfs(
    start: Any,
    successors: Neighbours,
    success: Callable[[Any], bool],
) -> Optional[list]:
    """Find a shortest path from ``start`` to a node accepted by ``success``.

    ``start`` is a node, or a list or set of start nodes.  Return the path,
    start and end included, or ``None`` if no such path exists.
    """
    return _bfs_core(_start_nodes(start), successors, success, True)


def bfs_loop(start: Any, successors: Neighbours) -> Optional[list]:
    """Find one of the shortest loops leading from ``start`` back to itself.

    The start node appears at both ends of the returned path.  Return
    ``None`` if there is no such loop.
    """
    starts = _start_nodes(start)
    members = set(starts)
    return _bfs_core(starts, successors, lambda node: node in members, False)


def bfs_bidirectional(
    start: Any,
    end: Any,
    successors_fn: Neighbours,
    predecessors_fn: Neighbours,
) -> Optional[list]:
    """Find a shortest path from ``start`` to ``end`` searching from both ends.

    ``predecessors_fn`` gives the nodes leading to a node; for an undirected
    graph it is the same as ``successors_fn``.  Return the path, start and
    end included, or ``None`` if no such path exists.
    """
    forward = _Tree(_start_nodes(start))
    backward = _Tree(_start_nodes(end))
    while True:
        met = forward.expand_layer(successors_fn, backward)
        if met is None:
            met = backward.expand_layer(predecessors_fn, forward)
        if met is not None:
            break
        if forward.exhausted and backward.exhausted:
            return None

    middle = met[0]
    path = forward.path_to(forward.index_of[middle])
    index = backward.parent_of[backward.index_of[middle]]
    while index is not None:
        path.append(backward.nodes[index])
        index = backward.parent_of[index]
    return path


class BfsReachable:
    """Iterator over the nodes reachable from a start node, in BFS order."""

    def __init__(self, start: Hashable, successors: Neighbours):
        self._nodes = [start]
        self._seen = {start}
        self._successors = successors
        self._i = 0

    def remaining_nodes_low_bound(self) -> int:
        """Lower bound of the number of nodes still to be visited."""
        return len(self._nodes) - self._i

    def __iter__(self) -> Iterator:
        return self

    def __next__(self) -> Any:
        if self._i >= len(self._nodes):
            raise StopIteration
        node = self._nodes[self._i]
        for successor in self._successors(node):
            if successor not in self._seen:
                self._seen.add(successor)
                self._nodes.append(successor)
        self._i += 1
        return node


def bfs_reach(start: Hashable, successors: Neighbours) -> BfsReachable:
    """Visit every node reachable from ``start`` in BFS order."""
    return BfsReachable(start, successors)