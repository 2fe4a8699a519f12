"""
Node and edge records for the weighted graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable


@dataclass(eq=False)
class Node:
    """
    A graph vertex.

    Nodes compare and hash by identity, so two nodes holding equal
    payloads stay distinct keys in the search's distance maps.

    Attributes:
        payload: Caller-defined identity used to look the node up
        disabled: Whether the node is excluded from traversal
        edges: Outgoing edges, in the order they were added
    """

    payload: Hashable
    disabled: bool = False
    edges: list[Edge] = field(default_factory=list, repr=False)


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted connection to another node.

    Attributes:
        target: Node the edge leads to
        cost: Non-negative traversal cost
    """

    target: Node
    cost: float
