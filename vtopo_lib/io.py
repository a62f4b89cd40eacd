# -*- coding: utf-8 -*-
"""File I/O operations for VisualTopo files.

Thin wrappers around VisualTopoInterface, maintained for API stability.
"""

from pathlib import Path

from vtopo_lib.interface import DEFAULT_ENCODING
from vtopo_lib.interface import VisualTopoInterface
from vtopo_lib.models import VisualTopoModel

__all__ = [
    "DEFAULT_ENCODING",
    "parse_survey_file",
]


def parse_survey_file(
    path: Path | str,
    encoding: str = DEFAULT_ENCODING,
    *,
    decimal_degrees: bool = True,
    ignore_stars: bool = True,
) -> VisualTopoModel:
    """Parse a VisualTopo .tro file into a survey model.

    Args:
        path: Path to the .tro file
        encoding: Character encoding (default: Windows-1252)
        decimal_degrees: Angles are in decimal degrees, not sexagesimal
        ignore_stars: Drop legs whose destination is `*`

    Returns:
        The parsed survey

    Raises:
        VisualTopoParseError: If the file is malformed
    """
    return VisualTopoInterface.load_tro(
        Path(path),
        encoding=encoding,
        decimal_degrees=decimal_degrees,
        ignore_stars=ignore_stars,
    )
