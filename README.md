# wayfinder

Search algorithms over graphs that you describe with plain functions.

Nothing is built up front. You give a start node and a function that returns
the successors of a node, and the search explores only as much of the graph as
it needs. Any hashable value can be a node: integers, tuples, strings, frozen
dataclasses.

## Installation

```
pip install wayfinder
```

The package has no runtime dependencies. To run the test suite, install the
`test` extra:

```
pip install "wayfinder[test]"
```

## What is included

| Module                      | Functions and classes                                                              |
|-----------------------------|------------------------------------------------------------------------------------|
| `wayfinder.astar`           | `astar`, `astar_bag`, `astar_bag_collect`, `AstarSolution`                         |
| `wayfinder.bfs`             | `bfs`, `bfs_loop`, `bfs_bidirectional`, `bfs_reach`, `BfsReachable`                |
| `wayfinder.dfs`             | `dfs`, `dfs_reach`, `DfsReachable`                                                 |
| `wayfinder.dijkstra`        | `dijkstra`, `dijkstra_all`, `dijkstra_partial`, `dijkstra_reach`, `build_path`, `DijkstraReachable`, `DijkstraReachableItem` |
| `wayfinder.count_paths`     | `count_paths`                                                                      |
| `wayfinder.cycle_detection` | `floyd`, `brent`                                                                   |
| `wayfinder.demo`            | `neighbours`, `compare`, `main` (the `wayfinder-demo` command)                     |

For the weighted searches (`astar`, `astar_bag`, `dijkstra` and the other
Dijkstra functions), the successor function yields `(node, cost)` pairs.
Costs must not be negative, and an A* heuristic must never overestimate the
remaining cost. For the unweighted searches (`bfs`, `dfs`, `count_paths`),
it yields bare nodes.

When no path exists, the path-finding functions return `None`. A path that is
found includes both the start node and the end node.

In `bfs`, `bfs_loop` and `bfs_bidirectional`, a start (or end) given as a
list or a set stands for several nodes at once; any other value is a single
node.

## Examples

The examples below search for the shortest knight's journey on an open board,
from `(1, 1)` to `(4, 6)`.

```python
from wayfinder.astar import astar
from wayfinder.bfs import bfs, bfs_bidirectional
from wayfinder.dijkstra import dijkstra

GOAL = (4, 6)

def knight_moves(pos):
    x, y = pos
    return [(x + 1, y + 2), (x + 1, y - 2), (x - 1, y + 2), (x - 1, y - 2),
            (x + 2, y + 1), (x + 2, y - 1), (x - 2, y + 1), (x - 2, y - 1)]

def weighted(pos):
    return [(p, 1) for p in knight_moves(pos)]

path = bfs((1, 1), knight_moves, lambda p: p == GOAL)
assert len(path) == 5

path = bfs_bidirectional((1, 1), GOAL, knight_moves, knight_moves)
assert len(path) == 5

path, cost = dijkstra((1, 1), weighted, lambda p: p == GOAL)
assert cost == 4

def heuristic(pos):
    return (abs(pos[0] - GOAL[0]) + abs(pos[1] - GOAL[1])) // 3

path, cost = astar((1, 1), weighted, heuristic, lambda p: p == GOAL)
assert cost == 4
```

### Every shortest path

`astar_bag` returns an `AstarSolution` iterator together with the common cost.
The iterator yields each shortest path once; paths may end at different goal
nodes. `astar_bag_collect` returns the same paths as a list.

```python
from wayfinder.astar import astar_bag_collect

graph = {1: [(2, 1), (3, 1)], 2: [(4, 1)], 3: [(4, 1)], 4: []}
paths, cost = astar_bag_collect(1, lambda n: graph[n], lambda n: 0, lambda n: n == 4)
assert cost == 2
assert sorted(paths) == [[1, 2, 4], [1, 3, 4]]
```

### Loops

`bfs_loop` finds one of the shortest paths that leads from a node back to
itself; the start node appears at both ends.

```python
from wayfinder.bfs import bfs_loop

graph = {0: [1], 1: [0, 6], 6: []}
assert bfs_loop(0, lambda n: graph[n]) == [0, 1, 0]
```

### Visiting everything reachable

`bfs_reach`, `dfs_reach` and `dijkstra_reach` are lazy iterators. They
discover nodes as they go, so they also work on infinite graphs.
`BfsReachable` and `DfsReachable` also offer `remaining_nodes_low_bound()`,
a lower bound on the number of nodes still to be visited.

```python
from itertools import islice
from wayfinder.bfs import bfs_reach
from wayfinder.dfs import dfs_reach

assert list(islice(bfs_reach(1, lambda n: [n * 2, n * 3]), 7)) == [1, 2, 3, 4, 6, 9, 8]

small = lambda n: [m for m in (n * 2, n * 3) if m < 15]
assert list(dfs_reach(1, small)) == [1, 2, 4, 8, 12, 6, 3, 9]
```

`dijkstra_reach` yields `DijkstraReachableItem` values with the fields
`node`, `parent` (`None` for the start) and `total_cost`, closest nodes first.

`dijkstra_all` maps every reachable node (start excluded) to an optimal parent
and its cost. `dijkstra_partial` does the same but stops at the first examined
node accepted by a `stop` function, and also returns that node. `build_path`
turns such a map into a path.

```python
from wayfinder.dijkstra import dijkstra_all, build_path

def successors(n):
    return [(n * 2, 10), (n * 2 + 1, 10)] if n <= 4 else []

reachable = dijkstra_all(1, successors)
assert reachable[9] == (4, 30)
assert build_path(9, reachable) == [1, 2, 4, 9]
```

### Counting paths

`count_paths` counts the paths to nodes accepted by its `success` function.
It works on graphs without loops only; a loop raises `ValueError`.

```python
from wayfinder.count_paths import count_paths

def step(pos):
    x, y = pos
    return [(a, b) for a, b in ((x + 1, y), (x, y + 1)) if a < 8 and b < 8]

assert count_paths((0, 0), step, lambda c: c == (7, 7)) == 3432
```

### Finding cycles

`floyd` and `brent` take the first element of a sequence and a function that
gives the next one. Each returns `(cycle_length, first_repeated_element,
index_of_that_element)`. If the sequence never repeats, they loop forever.

```python
from wayfinder.cycle_detection import brent, floyd

assert brent(1, lambda x: (x * 2) % 7) == (3, 1, 0)
assert floyd(1, lambda x: (x * 2) % 7) == (3, 1, 0)
```

## Demo

This command compares plain breadth-first search with bidirectional search on
a square grid, corner to corner and then centre to corner, and prints the time
each search took:

```
wayfinder-demo
wayfinder-demo --size 128
```

`--size` sets the side of the grid (64 by default). From Python,
`wayfinder.demo.compare(start, goal, size)` returns both paths and both
timings.

## What it does not do

The package covers searches over directed graphs given by successor
functions. It has no grid or matrix types, no algorithms for undirected
graphs such as spanning trees or connected components, no strongly connected
components or topological sorting, no iterative-deepening searches, no
k-shortest-paths search, and no flow or assignment solvers.