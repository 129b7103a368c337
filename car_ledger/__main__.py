#!/usr/bin/env python3
"""Command-line entry point: python -m car_ledger [cars|bank]"""

import argparse
import sys
from typing import List, Optional

from .config import get_config
from .console import create_bank_console, create_car_console
from .logging_config import LOG_LEVELS, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="car_ledger",
        description="In-memory car inventory manager and single-account bank ledger"
    )
    parser.add_argument(
        "program", nargs="?", choices=["cars", "bank"], default="cars",
        help="console to start (default: cars)"
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
        help="override the configured log level"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Start the selected console"""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()

    try:
        setup_logging(
            level=args.log_level or config.log_level,
            log_format=config.log_format,
            log_file=config.log_file
        )
    except ValueError as e:
        parser.error(str(e))

    if args.program == "bank":
        console = create_bank_console(config)
    else:
        console = create_car_console(config)

    try:
        console.run()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
