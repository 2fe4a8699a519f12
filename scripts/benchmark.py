#!/usr/bin/env python3
"""
Time graph construction and shortest-path queries.

Two measurements per node count:
- construct: build a fully connected graph (every ordered pair, no self-loops)
- query: shortest_path(0, N-1) on a random graph where each candidate
  edge is dropped with probability --dropout

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --nodes 100 500 --repeats 50 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathfinder import WeightedGraph, new_graph  # noqa: E402
from pathfinder.config import (  # noqa: E402
    BENCHMARK_DROPOUT,
    BENCHMARK_NODE_COUNTS,
    BENCHMARK_REPEATS,
    BENCHMARK_SEED,
    LOG_LEVEL,
)

logger = logging.getLogger(__name__)


def build_fully_connected(n_nodes: int) -> WeightedGraph:
    """Build a graph with a unit-cost edge between every ordered pair."""
    graph = new_graph()
    for i in range(n_nodes):
        graph.add_node(i)
    for src in range(n_nodes):
        for dst in range(n_nodes):
            if src != dst:
                graph.add_edge(src, dst, 1)
    return graph


def build_random(n_nodes: int, dropout: float, rng: np.random.Generator) -> WeightedGraph:
    """Build a unit-cost graph keeping each non-loop edge with probability 1 - dropout."""
    graph = new_graph()
    for i in range(n_nodes):
        graph.add_node(i)

    keep = rng.random((n_nodes, n_nodes)) >= dropout
    np.fill_diagonal(keep, False)
    for src, dst in zip(*np.nonzero(keep)):
        graph.add_edge(int(src), int(dst), 1)
    return graph


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Benchmark pathfinder graphs")
    parser.add_argument(
        "--nodes",
        type=int,
        nargs="+",
        default=list(BENCHMARK_NODE_COUNTS),
        help=f"Node counts to benchmark (default: {' '.join(map(str, BENCHMARK_NODE_COUNTS))})",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=BENCHMARK_REPEATS,
        help=f"Timed queries per node count (default: {BENCHMARK_REPEATS})",
    )
    parser.add_argument(
        "--dropout",
        type=float,
        default=BENCHMARK_DROPOUT,
        help=f"Probability of dropping each random edge (default: {BENCHMARK_DROPOUT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=BENCHMARK_SEED,
        help="RNG seed for the random graphs",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=LOG_LEVEL)
    rng = np.random.default_rng(args.seed)

    print(f"{'Nodes':>8} {'Construct':>12} {'Query (avg)':>14} {'Hops':>6}")
    print("-" * 44)

    for n_nodes in args.nodes:
        start = time.perf_counter()
        build_fully_connected(n_nodes)
        construct_s = time.perf_counter() - start

        graph = build_random(n_nodes, args.dropout, rng)
        start = time.perf_counter()
        for _ in range(args.repeats):
            result = graph.shortest_path(0, n_nodes - 1)
        query_ms = (time.perf_counter() - start) * 1000 / args.repeats

        logger.info(f"{n_nodes} nodes: {result.status.value}, cost {result.cost}")
        print(f"{n_nodes:>8} {construct_s:>11.3f}s {query_ms:>12.3f}ms {result.hops:>6}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
