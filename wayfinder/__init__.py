"""Graph search over successor functions: A*, breadth- and depth-first search, Dijkstra, path counting and cycle detection."""

__version__ = "1.0.0"