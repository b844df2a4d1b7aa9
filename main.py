#!/usr/bin/env python3
"""
EDA Shapes - Main Entry Point

A tool for reading and normalizing the flat array codes used for
footprint and symbol outlines.
"""

import argparse
import sys


def run_parse(args):
    """Parse and display a shape code."""
    from eda_shapes.shapes.parser import ShapeCodeParser
    from eda_shapes.shapes.encoder import ShapeCodeEncoder

    try:
        shapes = ShapeCodeParser.parse_paths(args.code)
        print(f"Shape code: {args.code}")
        print(f"Normalized: {ShapeCodeParser.normalize(args.code)}")
        print(f"Paths: {len(shapes)}")
        for shape in shapes:
            print()
            print(ShapeCodeEncoder.format_for_display(shape, multiline=True))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


def run_normalize(args):
    """Print the canonical form of a shape code."""
    from eda_shapes.shapes.parser import ShapeCodeParser

    try:
        print(ShapeCodeParser.normalize(args.code))
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    return 0


def run_validate(args):
    """Check a shape code and report the first problem."""
    from eda_shapes.shapes.parser import ShapeCodeParser

    valid, error = ShapeCodeParser.validate(args.code)
    if valid:
        print("valid")
        return 0
    print(f"Error: {error}")
    return 1


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="EDA Shapes - Parse and normalize shape path codes"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse shape command
    parse_parser = subparsers.add_parser("parse", help="Parse and display a shape code")
    parse_parser.add_argument("code", help='Shape code, e.g. \'[0,0,"L",10,0,10,10]\'')

    normalize_parser = subparsers.add_parser("normalize", help="Print the canonical shape code")
    normalize_parser.add_argument("code", help="Shape code to normalize")

    validate_parser = subparsers.add_parser("validate", help="Check a shape code")
    validate_parser.add_argument("code", help="Shape code to check")

    args = parser.parse_args(argv)

    if args.command == "parse":
        return run_parse(args)
    elif args.command == "normalize":
        return run_normalize(args)
    elif args.command == "validate":
        return run_validate(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
