import sys
from pathlib import Path

from coordinate_parser.coordinates import Coordinates


def print_examples():
    """Print usage examples."""
    print("""
Coordinate Parser
=================

Usage:
  python parse_coordinates.py "<coordinates>" [more coordinates...] [options]
  python parse_coordinates.py --file <path> [options]

Examples:
  # Decimal degrees
  python parse_coordinates.py "40.7484, -73.9857"
  python parse_coordinates.py "40.7484 N 73.9857 W"

  # Degrees and decimal minutes
  python parse_coordinates.py "40 26.767 N 79 58.933 W"

  # Degrees, minutes and seconds (symbols are ignored)
  python parse_coordinates.py "40°44'54.84\\" N 73°59'08.52\\" W"

  # Packed DDMM / DDMMSS
  python parse_coordinates.py "4026.767 N 7958.933 W"
  python parse_coordinates.py "404454 N 735908 W"

  # One coordinate per line, progress bar while parsing
  python parse_coordinates.py --file waypoints.txt --precision 4

Options:
  --file, -f        Read coordinates from a file, one per line
  --precision, -p   Digits after the decimal point (default from parser_config.toml)
  --check-range     Reject latitudes beyond 90 and longitudes beyond 180
  --examples        Show these examples

Lines that are empty or start with '#' are skipped.
Put -- before a coordinate that starts with a minus sign, e.g. -- "-73.98,40.7".
""")


def resolve_cli_input(args):
    """Return the coordinate strings to parse from the parsed arguments."""
    # If nothing to parse, show examples
    if args.examples or (not args.coordinates and not args.file):
        print_examples()
        sys.exit(0)

    if args.file and args.coordinates:
        print("Error: pass coordinates either as arguments or with --file, not both.\n")
        print_examples()
        sys.exit(1)

    if args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"Error: File '{args.file}' not found.")
            sys.exit(1)
        try:
            return read_coordinate_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"✗ Error: Could not read '{args.file}': {e}")
            sys.exit(1)

    return list(args.coordinates)


def read_coordinate_lines(path):
    lines = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            lines.append(line)
    return lines


def check_range(coordinates: Coordinates):
    """
    Reject coordinates outside the physical latitude/longitude range.

    Raises:
        ValueError: If latitude is outside [-90, 90] or longitude outside [-180, 180]
    """
    if not -90 <= coordinates.latitude <= 90:
        raise ValueError(f"Latitude out of range: {coordinates.latitude}")
    if not -180 <= coordinates.longitude <= 180:
        raise ValueError(f"Longitude out of range: {coordinates.longitude}")


def format_coordinates(coordinates: Coordinates, precision=6, separator=", ") -> str:
    return f"{coordinates.latitude:.{precision}f}{separator}{coordinates.longitude:.{precision}f}"
