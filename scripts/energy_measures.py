#!/usr/bin/env python3
"""
List energy measure names or resolve names to energy measures.

Usage:
    # List all energy measures with their canonical names and aliases
    python scripts/energy_measures.py

    # Only list transformation constraints
    python scripts/energy_measures.py --category "transformation constraint"

    # Resolve names as the energy term selection does
    python scripts/energy_measures.py NCC "Landmark error" JAC
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from regkit.energy import (
    EnergyCategory,
    aliases_of,
    energy_measure_from_string,
)
from regkit.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="List or resolve energy measure names",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "names",
        nargs="*",
        help="Names to resolve. If none are given, all energy measures are listed",
    )
    parser.add_argument(
        "--category",
        type=str,
        default=None,
        choices=[str(category) for category in EnergyCategory],
        help="Only list energy measures of this category",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug output",
    )

    return parser.parse_args(argv)


def list_measures(category: Optional[str] = None) -> None:
    """Print the energy measures of each category."""
    for cat in EnergyCategory:
        if category is not None and str(cat) != category:
            continue
        print(f"{str(cat).capitalize()}:")
        for measure in cat.measures:
            line = f"  {measure:<28} {measure.name}"
            aliases = aliases_of(measure)
            if aliases:
                line += f"  (aliases: {', '.join(aliases)})"
            print(line)


def resolve_names(names: List[str]) -> int:
    """
    Print the energy measure each name resolves to.

    Returns:
        Number of names that could not be resolved.
    """
    failed = 0
    for name in names:
        measure, ok = energy_measure_from_string(name)
        if ok:
            print(f"{name} -> {measure} ({measure.name})")
        else:
            print(f"{name} -> Unknown")
            failed += 1
    return failed


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    args = parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if not args.names:
        list_measures(args.category)
        return 0

    failed = resolve_names(args.names)
    if failed:
        print(f"ERROR: {failed} name(s) could not be resolved")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
