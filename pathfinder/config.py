"""
Configuration constants for pathfinder.

The library itself only reads LOG_LEVEL indirectly (scripts pass it to
logging.basicConfig). Benchmark settings are used by scripts/benchmark.py.
Values can be overridden through environment variables or a .env file in
the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathfinder/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Graph sizes timed by scripts/benchmark.py
BENCHMARK_NODE_COUNTS = (100, 1000)

# Fraction of candidate edges dropped when building random graphs
BENCHMARK_DROPOUT = 0.3

# Number of timed queries per graph size
BENCHMARK_REPEATS = 20

# Optional RNG seed for reproducible benchmark graphs
_seed = os.environ.get("PATHFINDER_SEED")
BENCHMARK_SEED = int(_seed) if _seed else None
