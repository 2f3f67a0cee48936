"""
Binary Tree Formatter Command-Line Interface (CLI)

Fills a min-heap with random integers and prints it as a tree whose
indentation follows the depth of each row. It ties together:
- Value source (bounded random integers, optionally seeded)
- Heap store (push with bubble-up)
- Row renderer (plain or annotated rows)

Usage examples:
    python -m treeformatter.cli
    python -m treeformatter.cli --range 100 --nodes 31
    python -m treeformatter.cli -n 12 --seed 7 --annotate --no-color
"""

import argparse
import logging
import sys

from . import __version__
from .config import DEFAULT_NODE_COUNT, DEFAULT_RANGE, ConfigError, FormatterConfig
from .datastructures.heap import build_min_heap
from .render.printer import print_report
from .source import RandomInteger

logger = logging.getLogger(__name__)

NAME = "Binary Tree Formatter"
PURPOSE = "Prints out a binary tree with formatting."


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser."""
    p = argparse.ArgumentParser(
        prog="python -m treeformatter.cli",
        description=f"{NAME} ({__version__}): {PURPOSE}",
    )
    p.add_argument(
        "-r", "--range", dest="value_range", type=int, default=DEFAULT_RANGE,
        help=f"Exclusive upper bound for node values, nodes range over [0..range-1] (default: {DEFAULT_RANGE}).",
    )
    p.add_argument(
        "-n", "--nodes", dest="node_count", type=int, default=DEFAULT_NODE_COUNT,
        help=f"Number of nodes in the tree (default: {DEFAULT_NODE_COUNT}).",
    )
    p.add_argument("-s", "--seed", type=int, default=None, help="Seed for reproducible trees.")
    p.add_argument(
        "-a", "--annotate", action="store_true",
        help="Prefix each row with its row size and spacing unit.",
    )
    p.add_argument("--no-color", action="store_true", help="Disable ANSI styling.")
    p.add_argument("--no-array", action="store_true", help="Skip the 'Heap (N): [...]' line.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return p


def config_from_args(args) -> FormatterConfig:
    """Turn parsed arguments into a validated FormatterConfig."""
    return FormatterConfig(
        value_range=args.value_range,
        node_count=args.node_count,
        seed=args.seed,
        color=not args.no_color,
        annotate=args.annotate,
        show_array=not args.no_array,
    ).validate()


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m treeformatter.cli`."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = config_from_args(args)
    except ConfigError as exc:
        parser.error(str(exc))

    logger.info("Building heap: %s", config)
    source = RandomInteger(config.value_range, seed=config.seed)
    heap = build_min_heap(source.take(config.node_count))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Heap property holds: %s", heap.is_heap())

    print_report(heap, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
