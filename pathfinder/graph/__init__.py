"""
Graph module.

Provides the weighted graph and its shortest-path query:
- WeightedGraph: Node/edge construction, enable/disable, shortest_path
- Node, Edge: Graph records
- PathResult, PathStatus: Query outcome
- dijkstra: The search itself, over Node records
"""

from pathfinder.graph.search import dijkstra
from pathfinder.graph.model import Edge, Node
from pathfinder.graph.result import PathResult, PathStatus
from pathfinder.graph.weighted import WeightedGraph

__all__ = [
    "Edge",
    "Node",
    "PathResult",
    "PathStatus",
    "WeightedGraph",
    "dijkstra",
]
