# -*- coding: utf-8 -*-
"""Arguments shared by the commands that read a .tro file."""

import argparse
from pathlib import Path

from vtopo_lib.constants import VISUALTOPO_ENCODING
from vtopo_lib.interface import VisualTopoInterface
from vtopo_lib.models import VisualTopoModel


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="Input file path (.tro)",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        default=VISUALTOPO_ENCODING,
        help=f"Character encoding of the input file (default: {VISUALTOPO_ENCODING})",
    )
    parser.add_argument(
        "--sexagesimal",
        action="store_false",
        dest="decimal_degrees",
        help="Angles are written as degrees.minutes instead of decimal degrees",
    )
    parser.add_argument(
        "--keep-stars",
        action="store_false",
        dest="ignore_stars",
        help="Keep legs whose destination station is `*`",
    )


def load_input(parsed_args: argparse.Namespace) -> VisualTopoModel:
    """Load the survey named by the parsed input arguments.

    Raises:
        FileNotFoundError: If the input file doesn't exist
        VisualTopoParseError: If the file is malformed
    """
    if not parsed_args.input_file.exists():
        raise FileNotFoundError(f"Input file not found: {parsed_args.input_file}")

    return VisualTopoInterface.load_tro(
        parsed_args.input_file,
        encoding=parsed_args.encoding,
        decimal_degrees=parsed_args.decimal_degrees,
        ignore_stars=parsed_args.ignore_stars,
    )
