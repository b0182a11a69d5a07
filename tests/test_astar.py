import math

import pytest

from wayfinder.astar import AstarSolution, astar, astar_bag, astar_bag_collect

MAZE = """\
#########
#.#.....#
###.##..#
#...#...#
#...#...#
#...#...#
#...#...#
#########
"""

OPEN = [[c == "." for c in line] for line in MAZE.splitlines()]


def maze_successors(node):
    x, y = node
    return [
        ((nx, ny), 1)
        for nx, ny in [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
        if OPEN[ny][nx]
    ]


def distance(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def counting(calls):
    def successors(node):
        calls.append(node)
        return maze_successors(node)

    return successors


def knight_moves(p):
    x, y = p
    return [
        ((x + 1, y + 2), 1), ((x + 1, y - 2), 1), ((x - 1, y + 2), 1), ((x - 1, y - 2), 1),
        ((x + 2, y + 1), 1), ((x + 2, y - 1), 1), ((x - 2, y + 1), 1), ((x - 2, y - 1), 1),
    ]


def test_knight_moves():
    goal = (4, 6)
    result = astar(
        (1, 1),
        knight_moves,
        lambda p: (abs(goal[0] - p[0]) + abs(goal[1] - p[1])) // 3,
        lambda p: p == goal,
    )
    assert result is not None
    assert result[1] == 4
    assert result[0][0] == (1, 1)
    assert result[0][-1] == goal


EX1 = [
    [(1, 7), (2, 7), (3, 6)],
    [(0, 8), (6, 7)],
    [(5, 7)],
    [(7, 7)],
    [(4, 2)],
    [(1, 1)],
    [(2, 5), (4, 5), (5, 2)],
    [(5, 8)],
    [],
]

EX1_EXPECTED = {
    0: ([1, 0], 8),
    1: ([1], 0),
    2: ([1, 6, 2], 12),
    3: ([1, 0, 3], 14),
    4: ([1, 6, 4], 12),
    5: ([1, 6, 5], 9),
    6: ([1, 6], 7),
    7: ([1, 0, 3, 7], 21),
    8: None,
}


@pytest.mark.parametrize("target", range(9))
def test_astar_with_zero_heuristic(target):
    result = astar(1, lambda n: EX1[n], lambda _: 0, lambda n: n == target)
    assert result == EX1_EXPECTED[target]


def test_astar_path_ok():
    goal = (6, 3)
    calls = []
    path, cost = astar((2, 3), counting(calls), lambda n: distance(n, goal), lambda n: n == goal)
    assert cost == 8
    assert all(OPEN[y][x] for x, y in path)
    assert len(calls) == 11


def test_astar_bag_path_single_ok():
    goal = (6, 3)
    calls = []
    paths, cost = astar_bag_collect(
        (2, 3), counting(calls), lambda n: distance(n, goal), lambda n: n == goal
    )
    assert cost == 8
    assert len(paths) == 1
    assert all(OPEN[y][x] for path in paths for x, y in path)
    assert len(calls) == 15


def test_astar_bag_path_multiple_ok():
    goal = (7, 3)
    calls = []
    paths, cost = astar_bag_collect(
        (2, 3), counting(calls), lambda n: distance(n, goal), lambda n: n == goal
    )
    assert cost == 9
    assert len(paths) == 3
    assert all(OPEN[y][x] for path in paths for x, y in path)
    assert len(calls) == 18


def test_astar_bag_iter_is_fused():
    goal = (7, 3)
    it, _ = astar_bag((2, 3), maze_successors, lambda n: distance(n, goal), lambda n: n == goal)
    assert isinstance(it, AstarSolution)
    for _ in range(3):
        assert next(it, None) is not None
    for _ in range(3):
        assert next(it, None) is None


def test_astar_no_path():
    goal = (1, 1)
    assert astar((2, 3), maze_successors, lambda n: distance(n, goal), lambda n: n == goal) is None


def test_astar_bag_no_path():
    goal = (1, 1)
    assert astar_bag((2, 3), maze_successors, lambda n: distance(n, goal), lambda n: n == goal) is None
    assert astar_bag_collect((2, 3), maze_successors, lambda n: distance(n, goal), lambda n: n == goal) is None


def test_multiple_sinks():
    graph = {1: [(2, 1), (3, 1)], 2: [(4, 3), (5, 1)], 3: [(4, 3), (5, 1)], 5: [(6, 1)], 6: [(7, 1)]}
    solutions, cost = astar_bag(1, lambda n: graph.get(n, []), lambda _: 0, lambda n: n in (4, 7))
    assert cost == 4
    assert sorted(solutions) == [
        [1, 2, 4],
        [1, 2, 5, 6, 7],
        [1, 3, 4],
        [1, 3, 5, 6, 7],
    ]


def test_numerous_solutions():
    n_blocks = 10
    goal = 3 * n_blocks

    def successors(x):
        if x % 3 == 2:
            return [(x + 1, 1)]
        return [(x + 1, 1), (x + 2, 1)]

    solutions, cost = astar_bag(0, successors, lambda x: max(goal - x, 0) // 2, lambda x: x == goal)
    assert cost == n_blocks * 2
    assert sum(1 for _ in solutions) == 1 << n_blocks


COORDS = {
    "Paris": (48.8567, 2.3508),
    "Lyon": (45.76, 4.84),
    "Marseille": (43.2964, 5.37),
    "Bordeaux": (44.84, -0.58),
    "Cannes": (43.5513, 7.0128),
    "Toulouse": (43.6045, 1.444),
    "Reims": (49.2628, 4.0347),
}

LINKS = {
    "Paris": "Lyon,Bordeaux,Reims",
    "Lyon": "Paris,Marseille",
    "Marseille": "Lyon,Cannes,Toulouse",
    "Bordeaux": "Toulouse,Paris",
    "Cannes": "Marseille",
    "Toulouse": "Marseille,Bordeaux",
    "Reims": "Paris",
}


def distance_in_meters(a, b):
    lat_a, lon_a = (math.radians(v) for v in a)
    lat_b, lon_b = (math.radians(v) for v in b)
    x = (lon_b - lon_a) * math.cos((lat_a + lat_b) / 2)
    y = lat_b - lat_a
    return round(math.hypot(x, y) * 6_371_000.0)


def test_gps():
    successors = {
        city: [(other, distance_in_meters(COORDS[city], COORDS[other])) for other in targets.split(",")]
        for city, targets in LINKS.items()
    }
    goal = "Cannes"
    path, cost = astar(
        "Paris",
        lambda city: successors[city],
        lambda city: distance_in_meters(COORDS[goal], COORDS[city]),
        lambda city: city == goal,
    )
    assert path == ["Paris", "Lyon", "Marseille", "Cannes"]
    assert cost == sum(
        distance_in_meters(COORDS[a], COORDS[b]) for a, b in zip(path, path[1:])
    )