#!/usr/bin/env python3
"""Load the drug dataset and print a sample drug with its interactions.

Renders the drug at the configured sample index, then the first drug it
interacts with, then the interaction between the sample drug and the
configured lookup drug (Abacavir by default).

Usage:
  python -m drugdb.scripts.show [PATH]
"""

import argparse
import sys
import time
from pathlib import Path

from drugdb.config import load_config
from drugdb.errors import DrugLoadError
from drugdb.loader import DrugLoader
from drugdb.logging import setup_logging


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load the FDA small-molecule drug dataset and print a sample drug.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Dataset file (default: data_file from drugdb.toml)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    logger = setup_logging()
    config = load_config()
    width = config.display.line_width
    path = args.path if args.path is not None else config.data_file

    start = time.perf_counter()
    loader = DrugLoader(config=config.loader)
    try:
        loader.load_file(path)
    except DrugLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    storage = loader.storage

    index = config.display.sample_index
    if index >= storage.count():
        print(f"Error: dataset has only {storage.count()} drugs, no drug at index {index}", file=sys.stderr)
        return 1
    drug = storage.get_by_index(index)
    print("Testing the display of a drug...")
    print(drug.render(width))

    interactions = storage.interactions_of(drug)
    if interactions:
        print("\n\n\nTesting to print one of its interacting drugs...")
        print(interactions[0][0].render(width))

    lookup_name = config.display.lookup_name
    print(f"\n\n\nLooking for the interaction between the current drug and {lookup_name}: ")
    target = storage.find_by_name(lookup_name)
    description = storage.interaction_between(drug, target) if target is not None else None
    print(description if description is not None else "No known interaction.")

    logger.info(f"The whole process took {time.perf_counter() - start:.3f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
