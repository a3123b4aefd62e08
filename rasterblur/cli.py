# -*- coding: utf-8 -*-
"""
Command Line Interface - Filter one raster file into another.

Usage:
  rasterblur -i photo.png -o smooth.png
  rasterblur -i photo.png -o smooth.jpg -a bilateral -s 5 --sr 30 --sp 1.5
  rasterblur -i photo.png -o streak.png -a motion -s 9 -m horizontal
  rasterblur --list
  rasterblur --help

Every parameter and the output extension are validated before the input
is decoded. Errors, including malformed arguments, are logged to stderr
and reported through exit status 1.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# rasterblur internal
from rasterblur.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_SIGMA_RANGE,
    DEFAULT_SIGMA_SPACE,
    DEFAULT_STRENGTH,
    FilterConfig,
)
from rasterblur.exceptions import RasterBlurError, ValidationError
from rasterblur.image_processing.dispatch import FILTER_PROCESSORS, blur
from rasterblur.image_processing.quantize import ROUNDING_MODES
from rasterblur.IO import format_for_path, get_writer, read_image
from rasterblur.vocabulary import FilterAlgorithm, MotionDirection

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises ``ValidationError`` on bad arguments.

    ``main`` logs the message and returns 1 instead of letting argparse
    exit with status 2.
    """

    def error(self, message: str) -> None:
        raise ValidationError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the ``rasterblur`` command.
    """
    parser = _ArgumentParser(
        prog='rasterblur',
        description="Apply a spatial smoothing, denoising or motion-blur "
                    "filter to an image.",
    )
    parser.add_argument(
        "-i", "--input",
        type=Path,
        help="Input image file.",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output image file (.png, .jpg or .jpeg).",
    )
    parser.add_argument(
        "-a", "--algo",
        dest="algorithm",
        choices=[a.value for a in FilterAlgorithm],
        default=DEFAULT_ALGORITHM.value,
        help=f"Filter algorithm (default: {DEFAULT_ALGORITHM.value}).",
    )
    parser.add_argument(
        "-s", "--strength",
        type=int,
        default=DEFAULT_STRENGTH,
        help=f"Kernel / window size in pixels (default: {DEFAULT_STRENGTH}).",
    )
    parser.add_argument(
        "--sr", "--sigma-range", "--sigma_range",
        dest="sigma_range",
        type=float,
        default=DEFAULT_SIGMA_RANGE,
        help=f"Intensity sigma for bilateral blur "
             f"(default: {DEFAULT_SIGMA_RANGE}).",
    )
    parser.add_argument(
        "--sp", "--sigma-space", "--sigma_space",
        dest="sigma_space",
        type=float,
        default=DEFAULT_SIGMA_SPACE,
        help=f"Spatial sigma for bilateral blur "
             f"(default: {DEFAULT_SIGMA_SPACE}).",
    )
    parser.add_argument(
        "-m", "--motion-direction", "--motion_direction",
        dest="motion_direction",
        help="Direction for motion blur: "
             + ", ".join(d.value for d in MotionDirection) + ".",
    )
    parser.add_argument(
        "--rounding",
        choices=ROUNDING_MODES,
        default='round',
        help="Float to 8-bit conversion (default: round).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available filters and exit.",
    )
    return parser


def list_filters() -> List[str]:
    """One line per algorithm: name, processor category and description."""
    lines = []
    for algorithm, processor in FILTER_PROCESSORS.items():
        tags = processor.__processor_tags__
        lines.append(
            f"{algorithm.value:<10} {tags['category'].value:<10} "
            f"{tags['description']}"
        )
    return lines


def run(args: argparse.Namespace) -> None:
    """Validate *args*, filter the input image and write the output.

    Raises
    ------
    RasterBlurError
        On invalid parameters, unsupported output format or a decode or
        encode failure.
    FileNotFoundError
        If the input file does not exist.
    """
    config = FilterConfig.from_mapping(vars(args))
    output_format = format_for_path(args.output)

    image = read_image(args.input)
    logger.info("Loaded %s (%d x %d, %d channel(s))",
                args.input, image.shape[1], image.shape[0], image.shape[2])

    result = blur(image, config, rounding=args.rounding)

    with get_writer(output_format, args.output) as writer:
        writer.write(result)
    logger.info("Wrote %s", args.output)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the ``rasterblur`` command.

    Parameters
    ----------
    argv : list of str, optional
        Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit status: 0 on success or when only help or the filter
        list was shown,
        1 on any error.
    """
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
    except ValidationError as e:
        _configure_logging(verbose=False)
        logger.error("Error: %s", e)
        return 1
    _configure_logging(args.verbose)

    if args.list:
        print("\n".join(list_filters()))
        return 0

    if args.input is None:
        logger.error("Error: please specify input image")
        return 1
    if args.output is None:
        logger.error("Error: please specify output path")
        return 1

    try:
        run(args)
    except FileNotFoundError:
        logger.error("Error: could not load image: %s", args.input)
        return 1
    except RasterBlurError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
