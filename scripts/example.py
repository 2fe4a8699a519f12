#!/usr/bin/env python3
"""
Worked example: cheapest route through a four-node diamond.

    a-------------------+
     \                   \
      b                   c
       \                   \
        d-------------------+

Taking the c route is much more costly, so the answer is a -> b -> d.

Usage:
    python scripts/example.py
    python scripts/example.py --disable b
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathfinder import new_graph  # noqa: E402
from pathfinder.config import LOG_LEVEL  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Shortest path on the diamond example graph")
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="NODE",
        help="Disable a node before querying (repeatable)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=LOG_LEVEL)

    graph = new_graph()
    for payload in ("a", "b", "c", "d"):
        graph.add_node(payload)

    graph.add_edge("a", "b", 1)
    graph.add_edge("a", "c", 10)
    graph.add_edge("b", "d", 1)
    graph.add_edge("c", "d", 10)

    for payload in args.disable:
        graph.disable_node(payload)

    result = graph.shortest_path("a", "d")
    if not result.found:
        print("No path to wanted destination")
        return 1

    print("Path:")
    for payload in result.path:
        print(f"\t{payload}")
    print(f"Cost: {result.cost:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
