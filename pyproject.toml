[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wayfinder"
version = "1.0.0"
description = "Graph search over successor functions: A*, BFS, DFS, Dijkstra, path counting and cycle detection"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "shortest-path",
    "astar",
    "dijkstra",
    "bfs",
    "dfs",
    "graph",
    "cycle-detection",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wayfinder-demo = "wayfinder.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wayfinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
