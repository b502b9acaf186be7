"""Apply grid transforms to a grid stored on disk.

Usage::

    grid_tool board.yaml --op rotate_left --op flip_vertically

The input file is YAML or JSON holding a ``rows`` (or ``columns``) entry.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from gridstore.src.core.errors import GridError
from gridstore.src.core.grid import GridStore
from gridstore.src.utils import config_loader
from gridstore.src.utils.grid_utils import load_grid, render_grid
from gridstore.src.utils.logger import get_logger

OPERATIONS = {
    "flip_horizontally": GridStore.flip_horizontally,
    "flip_vertically": GridStore.flip_vertically,
    "rotate_left": GridStore.rotate_left,
    "rotate_right": GridStore.rotate_right,
}

# Failures reading a grid or config file; reported with exit code 2.
INPUT_ERRORS = (OSError, ValueError, TypeError, yaml.YAMLError, GridError)


def apply_operations(grid: GridStore, operations: List[str]) -> GridStore:
    """Apply ``operations`` to ``grid`` in order and return it."""
    logger = get_logger(__name__)
    for name in operations:
        OPERATIONS[name](grid)
        logger.info(f"Applied {name}: size={grid.size().width}x{grid.size().height}")
    return grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Transform a grid stored as YAML or JSON")
    parser.add_argument("path", type=Path, help="grid document with 'rows' or 'columns'")
    parser.add_argument(
        "--op",
        dest="operations",
        action="append",
        default=[],
        choices=sorted(OPERATIONS),
        help="transform to apply; repeat to chain",
    )
    parser.add_argument("--config", type=Path, help="YAML/JSON file overriding meta_config")
    parser.add_argument("--verbose", action="store_true", help="log each applied transform")
    parser.add_argument(
        "--show_config", action="store_true", help="print the runtime configuration first"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger(__name__)

    if args.config:
        try:
            config_loader.apply_config(config_loader.load_config(str(args.config)))
        except INPUT_ERRORS as exc:
            logger.error(f"Cannot load config from {args.config}: {exc}")
            return 2
    if args.verbose:
        config_loader.set_log_level("INFO")
    if args.show_config:
        config_loader.print_runtime_config()

    try:
        grid = load_grid(config_loader.load_config(str(args.path)))
    except INPUT_ERRORS as exc:
        logger.error(f"Cannot load grid from {args.path}: {exc}")
        return 2

    apply_operations(grid, args.operations)
    print(render_grid(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
