"""
Run the bounded search and shared-node propagation demonstrations.

Usage:
    uv run python main.py [--target N] [--delta N] [--iterative] [--trace] [--debug]
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from constants import DEBUG, PROPAGATION_DELTA, PROPAGATION_ORDER, SEARCH_TARGET
from localtypes import Index
from utils.algorithms.propagation import Node, propagate, propagate_iterative
from utils.algorithms.search import (
    binary_search,
    binary_search_iterative,
    bisection_trace,
    is_non_decreasing,
)
from utils.display import display_nodes, display_search_result, display_trace
from utils.loader import demo_nodes, demo_sequence

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def run_propagation(
    delta: int = PROPAGATION_DELTA, iterative: bool = False
) -> dict[str, Node]:
    """Propagates `delta` from each demo node in turn and returns the nodes."""
    nodes = demo_nodes()
    update = propagate_iterative if iterative else propagate

    for name in PROPAGATION_ORDER:
        logger.info(f"Propagating {delta} from {name}")
        update(nodes[name], delta)

    return nodes


def run_search(
    target: int = SEARCH_TARGET, iterative: bool = False, trace: bool = False
) -> Index | None:
    """Searches the demo sequence over its whole range."""
    sequence = demo_sequence()
    if not is_non_decreasing(sequence):
        logger.warning("Demo sequence is not sorted, the result is meaningless")
    if not sequence:
        return None

    start, end = 0, len(sequence) - 1
    if trace:
        display_trace(bisection_trace(sequence, target, start, end))

    search = binary_search_iterative if iterative else binary_search
    return search(sequence, target, start, end)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Bounded binary search and shared-node propagation"
    )
    parser.add_argument(
        "--target", type=int, default=SEARCH_TARGET, help="Value to search for"
    )
    parser.add_argument(
        "--delta", type=int, default=PROPAGATION_DELTA, help="Propagated increment"
    )
    parser.add_argument(
        "--iterative", action="store_true", help="Use the non-recursive variants"
    )
    parser.add_argument("--trace", action="store_true", help="Print bisection steps")
    parser.add_argument(
        "--debug", action="store_true", default=DEBUG, help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    root = logging.getLogger()
    level = root.level
    if args.debug:
        root.setLevel(logging.DEBUG)

    try:
        nodes = run_propagation(args.delta, args.iterative)
        display_nodes(nodes)

        index = run_search(args.target, args.iterative, args.trace)
        display_search_result(args.target, index)
    finally:
        root.setLevel(level)

    return 0


if __name__ == "__main__":
    sys.exit(main())
