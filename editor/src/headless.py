"""Headless Post Composer tools: CLI entry point.

Runs background removal on an image file without starting the editor.

Usage:
    python editor/src/headless.py remove-bg <input_file> <output_file> [-t TOLERANCE]

Examples:
    python editor/src/headless.py remove-bg robot.png robot_keyed.png
    python editor/src/headless.py remove-bg robot.jpg robot.png -t 60 -v
"""

import sys
import os
import argparse
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from constants import DEFAULT_REMOVAL_TOLERANCE, MAX_RGB_DISTANCE


def _tolerance(value):
    tolerance = float(value)
    if not 0 <= tolerance <= MAX_RGB_DISTANCE:
        raise argparse.ArgumentTypeError(f"tolerance must be between 0 and {MAX_RGB_DISTANCE:.0f}")
    return tolerance


def build_parser():
    parser = argparse.ArgumentParser(
        description='Post Composer image tools (headless).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    remove_bg = subparsers.add_parser(
        'remove-bg',
        help='Make the flat background of an image transparent.',
    )
    remove_bg.add_argument('input_file', help='Image to process.')
    remove_bg.add_argument('output_file', help='Where to write the PNG result.')
    remove_bg.add_argument(
        '-t', '--tolerance',
        type=_tolerance,
        default=DEFAULT_REMOVAL_TOLERANCE,
        help=f'RGB distance from the top-left pixel colour to key out (default: {DEFAULT_REMOVAL_TOLERANCE}).',
    )
    return parser


def run_remove_background(input_path, output_path, tolerance):
    """Key out an image file's background into a PNG file.

    Returns:
        int: process exit code
    """
    from models.raster import RasterImage
    from services.background_removal import remove_background
    from utils.errors import InputError

    try:
        source = RasterImage.from_file(input_path)
        result = remove_background(source, tolerance)
    except OSError as e:
        print(f"Error: Could not read {input_path}: {e}")
        return 1
    except InputError as e:
        print(f"Error: {e}")
        return 1

    try:
        output_dir = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(output_dir, exist_ok=True)
        with open(output_path, 'wb') as f:
            f.write(result.data)
    except OSError as e:
        print(f"Error: Could not write {output_path}: {e}")
        return 1

    print(f"Wrote {output_path}")
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.command == 'remove-bg':
        input_path = os.path.abspath(args.input_file)
        if not os.path.isfile(input_path):
            print(f"Error: Input file not found: {input_path}")
            return 1
        return run_remove_background(input_path, args.output_file, args.tolerance)

    return 1


if __name__ == '__main__':
    sys.exit(main())
