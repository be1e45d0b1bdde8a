"""Starforge - command line entry point.

Generates a star system from a seed and prints either a summary table or the
full system as JSON. Nothing is written to disk.
"""

import argparse
import logging
import sys
from typing import Optional

from .engine import GenerationError, generate_system
from .models import CelestialObject, CelestialType
from .schemas import GeneratorConfig, SystemExport
from .utils.constants import AU, EARTH_MASS, SOLAR_MASS


def _format_mass(obj: CelestialObject) -> str:
    if obj.type == CelestialType.STAR:
        return f"{obj.mass_kg / SOLAR_MASS:.3f} Msun"
    if obj.mass_kg == 0:
        return "-"
    return f"{obj.mass_kg / EARTH_MASS:.4g} Mearth"


def _format_orbit(obj: CelestialObject) -> str:
    if obj.orbit is None:
        return "-"
    return f"{obj.orbit.semi_major_axis_m / AU:.4g} AU"


def print_summary(objects: list[CelestialObject], seed: str):
    """Print a human-readable table of the generated system."""
    print("\n" + "=" * 78)
    print(f"System '{seed}' - {len(objects)} objects")
    print("=" * 78)
    print(f"{'Type':<15} {'Name':<24} {'Mass':<20} {'Orbit':<12} {'Temp (K)':>8}")
    print("-" * 78)
    for obj in objects:
        indent = "  " if obj.type in (CelestialType.MOON, CelestialType.RING_SYSTEM) else ""
        print(
            f"{obj.type.value:<15} {indent + obj.name:<24} {_format_mass(obj):<20} "
            f"{_format_orbit(obj):<12} {obj.temperature_k:>8.0f}"
        )
    print("=" * 78)


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, generate the system and print it."""
    parser = argparse.ArgumentParser(
        prog="starforge",
        description="Starforge - deterministic procedural star system generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --seed alpha-test                  # Summary table
  %(prog)s --seed alpha-test --modifier 5     # Fewer orbit slots
  %(prog)s --seed alpha-test --json           # Full JSON export
  %(prog)s --seed alpha-test --oort-cloud     # Include an Oort cloud
        """,
    )
    parser.add_argument("--seed", type=str, required=True, help="System seed string")
    parser.add_argument(
        "--modifier",
        type=int,
        default=20,
        help="Max system modifier; orbit cap is 5 + 0..modifier slots (default: 20)",
    )
    parser.add_argument("--json", action="store_true", help="Print the system as JSON")
    parser.add_argument(
        "--oort-cloud", action="store_true", help="Append an Oort cloud around the main star"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    # Logs go to stderr so JSON on stdout stays parseable
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if args.modifier < 0:
        print(f"Error: --modifier must be >= 0 (got {args.modifier})", file=sys.stderr)
        return 2

    config = GeneratorConfig(
        max_system_modifier=args.modifier, include_oort_cloud=args.oort_cloud
    )
    try:
        stream = generate_system(args.seed, config=config)
        objects = stream.to_list()
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        export = SystemExport.from_objects(
            args.seed, args.modifier, objects, stream.diagnostics.records
        )
        print(export.model_dump_json(indent=2))
    else:
        print_summary(objects, args.seed)
        if stream.diagnostics.records:
            print(f"{len(stream.diagnostics.records)} diagnostic(s) recorded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
