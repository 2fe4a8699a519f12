"""
Dijkstra's single-source shortest path over Node/Edge records.

The frontier is a binary heap with lazy deletion: a node may be pushed
several times as its tentative distance improves, and stale entries are
skipped when popped. Disabled nodes are never relaxed into, so they can
appear neither as intermediate hops nor as the destination. A disabled
source is rejected before the search starts.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math

from pathfinder.graph.model import Node
from pathfinder.graph.result import PathResult, PathStatus

logger = logging.getLogger(__name__)


def dijkstra(source: Node, target: Node) -> PathResult:
    """
    Find the cheapest path from source to target.

    Args:
        source: Node the path starts from
        target: Node the path must reach

    Returns:
        PathResult with the payload path and its cost, or a NO_PATH result
        (empty path, infinite cost) if target is unreachable or either
        endpoint is disabled.
    """
    if source.disabled:
        logger.debug(f"Source {source.payload!r} is disabled, no path")
        return PathResult.no_path(source.payload, target.payload)

    distance: dict[Node, float] = {source: 0.0}
    previous: dict[Node, Node] = {}
    finalized: set[Node] = set()

    # Sequence numbers break distance ties so Nodes are never compared
    sequence = itertools.count()
    frontier = [(0.0, next(sequence), source)]

    while frontier:
        dist, _, node = heapq.heappop(frontier)
        if node in finalized:
            continue
        finalized.add(node)

        if node is target:
            logger.debug(f"Reached {target.payload!r} after finalizing {len(finalized)} nodes")
            break

        for edge in node.edges:
            neighbor = edge.target
            if neighbor.disabled:
                continue
            cost = dist + edge.cost
            if cost < distance.get(neighbor, math.inf):
                distance[neighbor] = cost
                previous[neighbor] = node
                heapq.heappush(frontier, (cost, next(sequence), neighbor))

    if target is not source and target not in previous:
        logger.debug(f"No path from {source.payload!r} to {target.payload!r}")
        return PathResult.no_path(source.payload, target.payload)

    # Walk predecessors back to the source
    path = [target.payload]
    node = target
    while node is not source:
        node = previous[node]
        path.append(node.payload)
    path.reverse()

    return PathResult(
        source=source.payload,
        target=target.payload,
        path=path,
        cost=distance[target],
        status=PathStatus.OK,
    )
