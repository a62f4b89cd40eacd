# -*- coding: utf-8 -*-
"""Convert command for VisualTopo files.

Parses a .tro file and prints the survey as JSON on stdout using
Pydantic's built-in serialization.
"""

import argparse
import logging

from vtopo_lib.commands._common import add_input_arguments
from vtopo_lib.commands._common import load_input
from vtopo_lib.errors import VisualTopoParseError
from vtopo_lib.interface import VisualTopoInterface

logger = logging.getLogger(__name__)


def convert(args: list[str]) -> int:
    """Entry point for the convert command."""
    parser = argparse.ArgumentParser(
        prog="vtopo convert",
        description="Convert a VisualTopo .tro file to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vtopo convert -i cave.tro                    # Decimal degrees, drop `*` legs
  vtopo convert -i cave.tro --sexagesimal      # Angles written as deg.min
  vtopo convert -i cave.tro --keep-stars       # Keep legs ending at `*`
  vtopo convert -i cave.tro -e utf-8 > cave.json
""",
    )
    add_input_arguments(parser)

    parsed_args = parser.parse_args(args)

    try:
        model = load_input(parsed_args)
    except FileNotFoundError:
        logger.exception("Cannot convert `%s`", parsed_args.input_file)
        return 1
    except VisualTopoParseError as e:
        logger.error("Cannot convert `%s`: %s", parsed_args.input_file, e)  # noqa: TRY400
        return 1

    print(VisualTopoInterface.to_json(model))  # noqa: T201
    return 0
