"""
Weighted directed graph with enable/disable toggles and shortest-path queries.
"""

from __future__ import annotations

import logging
from typing import Hashable

from pathfinder.errors import UnknownNodeError
from pathfinder.graph.search import dijkstra
from pathfinder.graph.model import Edge, Node
from pathfinder.graph.result import PathResult

logger = logging.getLogger(__name__)


class WeightedGraph:
    """
    In-memory weighted directed graph keyed by caller payloads.

    Payloads must be hashable. Adding the same payload twice is a caller
    error; lookups always resolve to the first node added with it.

    Referencing a payload that was never added raises UnknownNodeError.
    Unreachable destinations are not errors: shortest_path returns a
    NO_PATH result instead.

    The graph has no internal locking. Concurrent mutation or querying
    from several threads must be serialized by the caller.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._index: dict[Hashable, Node] = {}

    # =========================================================================
    # Lookup
    # =========================================================================

    @property
    def nodes(self) -> tuple[Node, ...]:
        """All nodes in insertion order."""
        return tuple(self._nodes)

    def node(self, payload: Hashable) -> Node:
        """Resolve a payload to its node, or raise UnknownNodeError."""
        try:
            return self._index[payload]
        except KeyError:
            raise UnknownNodeError(payload) from None

    def has_node(self, payload: Hashable) -> bool:
        """Check if a node with this payload exists."""
        return payload in self._index

    def is_disabled(self, payload: Hashable) -> bool:
        """Check whether the node with this payload is disabled."""
        return self.node(payload).disabled

    def __contains__(self, payload: Hashable) -> bool:
        return self.has_node(payload)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        edge_count = sum(len(n.edges) for n in self._nodes)
        return f"{self.__class__.__name__}(nodes={len(self._nodes)}, edges={edge_count})"

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, payload: Hashable) -> None:
        """Append an enabled node with no edges."""
        node = Node(payload=payload)
        self._nodes.append(node)
        self._index.setdefault(payload, node)
        logger.debug(f"Added node {payload!r}")

    def add_edge(self, from_payload: Hashable, to_payload: Hashable, cost: float) -> None:
        """
        Add a directed edge.

        Args:
            from_payload: Payload of the node the edge leaves
            to_payload: Payload of the node the edge enters
            cost: Non-negative traversal cost (zero allowed)

        Raises:
            UnknownNodeError: If either payload is not in the graph
        """
        source = self.node(from_payload)
        target = self.node(to_payload)
        source.edges.append(Edge(target=target, cost=float(cost)))
        logger.debug(f"Added edge {from_payload!r} -> {to_payload!r} (cost {cost})")

    def add_bidirectional_edge(
        self,
        from_payload: Hashable,
        to_payload: Hashable,
        cost: float,
    ) -> None:
        """Add two independent directed edges, one in each direction."""
        self.add_edge(from_payload, to_payload, cost)
        self.add_edge(to_payload, from_payload, cost)

    def enable_node(self, payload: Hashable) -> None:
        """Make a node available to subsequent queries again."""
        self.node(payload).disabled = False
        logger.debug(f"Enabled node {payload!r}")

    def disable_node(self, payload: Hashable) -> None:
        """Exclude a node from subsequent queries without removing its edges."""
        self.node(payload).disabled = True
        logger.debug(f"Disabled node {payload!r}")

    # =========================================================================
    # Queries
    # =========================================================================

    def shortest_path(self, from_payload: Hashable, to_payload: Hashable) -> PathResult:
        """
        Find the cheapest path between two nodes.

        Args:
            from_payload: Payload of the start node
            to_payload: Payload of the destination node

        Returns:
            PathResult. A path from a node to itself is the one-node path
            with cost 0, unless that node is disabled.

        Raises:
            UnknownNodeError: If either payload is not in the graph
        """
        source = self.node(from_payload)
        target = self.node(to_payload)
        result = dijkstra(source, target)
        logger.debug(
            f"Shortest path {from_payload!r} -> {to_payload!r}: "
            f"{result.status.value}, {result.hops} hops, cost {result.cost}"
        )
        return result
