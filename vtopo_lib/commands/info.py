# -*- coding: utf-8 -*-
"""Info command: print a short summary of a VisualTopo file."""

import argparse
import logging

from vtopo_lib.commands._common import add_input_arguments
from vtopo_lib.commands._common import load_input
from vtopo_lib.errors import VisualTopoParseError
from vtopo_lib.models import VisualTopoModel

logger = logging.getLogger(__name__)


def format_summary(model: VisualTopoModel) -> str:
    projection = model.projection.value if model.projection else "-"
    lines = [
        f"Cave: {model.name or '<unnamed>'}",
        f"Club: {model.author or '-'}",
        f"Projection: {projection} (EPSG:{model.srid or '-'})",
    ]
    if model.entry_point is not None:
        northing, easting, elevation = model.entry_point.as_tuple()
        lines.append(f"Entry point: {northing} {easting} {elevation}")

    lines.append(f"Sets: {len(model.sets)}, legs: {model.total_legs}")
    lines.extend(
        f"  {name}: {len(survey_set.legs)} leg(s)"
        for name, survey_set in zip(model.set_names, model.sets, strict=True)
    )
    return "\n".join(lines)


def info(args: list[str]) -> int:
    """Entry point for the info command."""
    parser = argparse.ArgumentParser(
        prog="vtopo info",
        description="Summarize a VisualTopo .tro file",
    )
    add_input_arguments(parser)

    parsed_args = parser.parse_args(args)

    try:
        model = load_input(parsed_args)
    except FileNotFoundError:
        logger.exception("Cannot read `%s`", parsed_args.input_file)
        return 1
    except VisualTopoParseError as e:
        logger.error("Cannot read `%s`: %s", parsed_args.input_file, e)  # noqa: TRY400
        return 1

    print(format_summary(model))  # noqa: T201
    return 0
