"""
Result types returned by shortest-path queries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterator

from pathfinder.errors import NoPathError


class PathStatus(Enum):
    """Outcome of a shortest-path query."""

    OK = "ok"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a single shortest-path query.

    Unpacks as ``path, cost, status`` so callers can write
    ``path, cost, status = graph.shortest_path(a, b)``.

    Attributes:
        source: Payload the query started from
        target: Payload the query was looking for
        path: Payloads from source to target inclusive (empty if no path)
        cost: Summed edge cost along path (inf if no path)
        status: PathStatus.OK or PathStatus.NO_PATH
    """

    source: Hashable
    target: Hashable
    path: list[Hashable] = field(default_factory=list)
    cost: float = math.inf
    status: PathStatus = PathStatus.NO_PATH

    @classmethod
    def no_path(cls, source: Hashable, target: Hashable) -> PathResult:
        """Build the canonical failure result: empty path, infinite cost."""
        return cls(source=source, target=target)

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return self.status is PathStatus.OK

    @property
    def hops(self) -> int:
        """Number of edges traversed (0 for the trivial path or no path)."""
        return max(len(self.path) - 1, 0)

    def raise_for_status(self) -> PathResult:
        """Raise NoPathError if no path was found, else return self."""
        if not self.found:
            raise NoPathError(self.source, self.target)
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter((self.path, self.cost, self.status))
