"""
Command-line entry point.

Usage:
    aoc-catalog --inputs-dir ./inputs
    aoc-catalog --headless --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from aoc_core.catalog import build_catalog
from aoc_core.config import DEFAULT_INPUTS_DIR, DEFAULT_TICK_RATE, AppConfig
from aoc_days import DAY_SPECS

from .controller import KEY_SOLVE_ALL, App
from .logging_config import setup_logging
from .ui import CatalogView, render_table

LOGGED_PACKAGES = ("aoc_core", "aoc_days", "aoc_app")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Browse and solve Advent of Code puzzles in the terminal"
    )
    parser.add_argument(
        "--inputs-dir",
        type=Path,
        default=DEFAULT_INPUTS_DIR,
        help=f"Directory holding day_<N>/input_<P>.txt (default: {DEFAULT_INPUTS_DIR})",
    )
    parser.add_argument(
        "--tick-rate",
        type=float,
        default=DEFAULT_TICK_RATE,
        help=f"Seconds between UI refreshes (default: {DEFAULT_TICK_RATE})",
    )
    parser.add_argument(
        "--enhanced-graphics",
        action="store_true",
        help="Use richer table styling",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Write logs to this file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Solve every part and print the table instead of starting the UI",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = getattr(logging, args.log_level)
    setup_logging(LOGGED_PACKAGES, args.log_file, level=level, console=args.headless)

    config = AppConfig(
        inputs_dir=args.inputs_dir,
        tick_rate=args.tick_rate,
        enhanced_graphics=args.enhanced_graphics,
    )
    catalog = build_catalog(config, DAY_SPECS)
    app = App(config.title, catalog, enhanced_graphics=config.enhanced_graphics)

    if args.headless:
        app.on_key(KEY_SOLVE_ALL)
        Console().print(render_table(app))
        return 0

    view = CatalogView(app, config.tick_rate)
    view.run()
    return view.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
