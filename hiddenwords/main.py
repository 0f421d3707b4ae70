"""
Main entry point for searching a letter grid for hidden words.

Usage:
    python -m hiddenwords
    python -m hiddenwords data/grid.txt --words HELLO WORLD
    python -m hiddenwords --config search.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config import LOG_LEVELS, SearchConfig
from .report import format_validation, print_grid, print_results
from .search import search_all_words
from .utils.logger import configure_logging, get_logger
from .verifiers import load_grid, verify


LOGGER = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def load_config(config_path: str) -> SearchConfig:
    """Load search configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return SearchConfig(**(data or {}))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search a letter grid for hidden words in all eight directions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example search.yaml:
  grid_path: data/grid.txt
  words:
    - HELLO
    - WORLD
  log_level: INFO
        """
    )
    parser.add_argument(
        "grid",
        nargs="?",
        help="Path to the grid file, one row per line (default: data/grid.txt)"
    )
    parser.add_argument(
        "--words", "-w",
        nargs="+",
        metavar="WORD",
        help="Words to search for, in report order (default: built-in list)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.grid:
        overrides["grid_path"] = args.grid
    if args.words:
        overrides["words"] = args.words
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        config = load_config(args.config) if args.config else SearchConfig()
        config = SearchConfig(**{**config.model_dump(), **overrides})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(getattr(logging, config.log_level))

    try:
        grid = load_grid(config.grid_path)
    except OSError as e:
        print(f"Error: Failed to read grid: {e}", file=sys.stderr)
        return EXIT_ERROR

    LOGGER.info("Searching %d words in %s", len(config.words), config.grid_path)

    result = verify(grid, config.words)
    for line in format_validation(result):
        print(line)

    if not result.grid_valid:
        print("Grid validation failed. Exiting...")
        return EXIT_INVALID

    if not result.valid:
        print("Word list validation failed. Exiting...")
        return EXIT_INVALID

    print_grid(grid)
    print_results(search_all_words(grid, config.words))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
