"""
Pathfinder: a small in-memory weighted graph with shortest-path queries.

Usage:
    from pathfinder import new_graph

    graph = new_graph()
    graph.add_node("a")
    graph.add_node("b")
    graph.add_edge("a", "b", 1.5)

    path, cost, status = graph.shortest_path("a", "b")
"""

from pathfinder.errors import NoPathError, UnknownNodeError
from pathfinder.graph import Edge, Node, PathResult, PathStatus, WeightedGraph

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Node",
    "NoPathError",
    "PathResult",
    "PathStatus",
    "UnknownNodeError",
    "WeightedGraph",
    "new_graph",
]


def new_graph() -> WeightedGraph:
    """Return a new, empty graph."""
    return WeightedGraph()
