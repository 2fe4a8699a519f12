"""
Exceptions raised by pathfinder.

UnknownNodeError signals a programmer error (a payload that was never
added to the graph) and is never caught inside the library.
NoPathError is only raised on request via PathResult.raise_for_status().
"""

from __future__ import annotations

from typing import Any, Hashable


class UnknownNodeError(LookupError):
    """Raised when an operation references a payload not in the graph."""

    def __init__(self, payload: Hashable) -> None:
        super().__init__(f"no node found with requested payload: {payload!r}")
        self.payload = payload


class NoPathError(LookupError):
    """Raised when a caller asks a NO_PATH result to raise."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"no path from {source!r} to {target!r}")
        self.source = source
        self.target = target
