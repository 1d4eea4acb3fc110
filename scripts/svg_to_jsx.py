#!/usr/bin/env python3
"""Convert a directory of SVG icons into JSX component files."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import yaml

from svg_jsx.component import build_components, format_build_report
from svg_jsx.config import parse_config_file
from svg_jsx.errors import ConfigurationError
from svg_jsx.mappings import VALID_TARGETS


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Config file error
        - 3: Conversion errors detected
    """
    parser = argparse.ArgumentParser(
        description="Convert a directory of SVG icons into JSX components.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build with the config in the current directory
  %(prog)s

  # Build with an explicit config and target
  %(prog)s icons/svg-jsx.yaml --target preact
""",
    )
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=Path("svg-jsx.yaml"),
        help="Path to YAML config file (default: svg-jsx.yaml)",
    )
    parser.add_argument(
        "--target",
        "-t",
        choices=VALID_TARGETS,
        help="Override the target from the config file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = parse_config_file(args.config)
    except (ConfigurationError, yaml.YAMLError, UnicodeDecodeError) as e:
        print(f"Error: Failed to parse config file: {e}", file=sys.stderr)
        return 2

    if args.target is not None:
        config.target = args.target

    try:
        report = build_components(config)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_build_report(report))

    if report.has_errors:
        return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
