import argparse
import sys

from tqdm import tqdm

import coordinate_parser.cli
from coordinate_parser.config import ConfigError, load_config
from coordinate_parser.coordinates import Coordinates


def parse_all(lines, precision, separator, range_check):
    """
    Parse every line, reporting failures without stopping.

    Returns:
        Number of lines that could not be parsed
    """
    failures = 0
    show_progress = len(lines) > 1
    with tqdm(total=len(lines), desc="Parsing", ncols=80, disable=not show_progress) as pbar:
        for line in lines:
            try:
                coordinates = Coordinates(line)
                if range_check:
                    coordinate_parser.cli.check_range(coordinates)
                tqdm.write(coordinate_parser.cli.format_coordinates(coordinates, precision, separator))
            except ValueError as e:
                failures += 1
                tqdm.write(f"✗ Error: {line!r}: {e}")
            pbar.update(1)
    return failures


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert coordinate text into decimal degrees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python parse_coordinates.py "40.7484, -73.9857"
  python parse_coordinates.py "40 26.767 N 79 58.933 W" --precision 4
  python parse_coordinates.py --file waypoints.txt --check-range

A coordinate starting with a minus sign and no space is read as an option;
put -- before it:
  python parse_coordinates.py -- "-73.98,40.7"
        """
    )

    parser.add_argument('coordinates', nargs='*', help='Coordinate strings to parse')
    parser.add_argument('--file', '-f', type=str, help='Read coordinates from a file, one per line')
    parser.add_argument('--precision', '-p', type=int, default=None, help='Digits after the decimal point')
    parser.add_argument('--check-range', dest='check_range', action='store_true', help='Reject out of range latitude/longitude values')
    parser.add_argument('--examples', action='store_true', help='Show usage examples')

    args = parser.parse_args(argv)

    lines = coordinate_parser.cli.resolve_cli_input(args)

    try:
        config = load_config()
    except ConfigError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    precision = args.precision if args.precision is not None else config["output"]["precision"]
    separator = config["output"]["separator"]
    range_check = args.check_range or config["validation"]["check_range"]

    failures = parse_all(lines, precision, separator, range_check)
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
