# -*- coding: utf-8 -*-
"""VisualTopo Parser Library.

A Python library for parsing VisualTopo cave survey data files (.tro).

Usage:
    from vtopo_lib import parse_survey_file
    model = parse_survey_file(Path("cave.tro"), decimal_degrees=False)

    for survey_set in model.sets:
        print(f"Set: {survey_set.name}")
        for leg in survey_set.legs:
            print(f"  {leg.from_station} -> {leg.to_station}: {leg.length}")
"""

__version__ = "0.1.0"

# Constants
from vtopo_lib.constants import DEFAULT_SECTION_SIZE
from vtopo_lib.constants import VISUALTOPO_ENCODING

# Conversions
from vtopo_lib.conversions import convert_angle
from vtopo_lib.conversions import parse_color

# Enums
from vtopo_lib.enums import HeaderKey
from vtopo_lib.enums import Projection

# Errors
from vtopo_lib.errors import MalformedColorError
from vtopo_lib.errors import MalformedDataLineError
from vtopo_lib.errors import MalformedEntryError
from vtopo_lib.errors import MalformedNumberError
from vtopo_lib.errors import MalformedSetHeaderError
from vtopo_lib.errors import SourceLocation
from vtopo_lib.errors import UnexpectedEndOfStreamError
from vtopo_lib.errors import UnsupportedProjectionError
from vtopo_lib.errors import VisualTopoParseError

# I/O
from vtopo_lib.interface import VisualTopoInterface
from vtopo_lib.io import parse_survey_file

# Models
from vtopo_lib.models import CrossSection
from vtopo_lib.models import EntryPoint
from vtopo_lib.models import GeoLocation
from vtopo_lib.models import VisualTopoLeg
from vtopo_lib.models import VisualTopoModel
from vtopo_lib.models import VisualTopoSet
from vtopo_lib.parser import VisualTopoParser

__all__ = [
    "DEFAULT_SECTION_SIZE",
    "VISUALTOPO_ENCODING",
    "CrossSection",
    "EntryPoint",
    "GeoLocation",
    "HeaderKey",
    "MalformedColorError",
    "MalformedDataLineError",
    "MalformedEntryError",
    "MalformedNumberError",
    "MalformedSetHeaderError",
    "Projection",
    "SourceLocation",
    "UnexpectedEndOfStreamError",
    "UnsupportedProjectionError",
    "VisualTopoInterface",
    "VisualTopoLeg",
    "VisualTopoModel",
    "VisualTopoParseError",
    "VisualTopoParser",
    "VisualTopoSet",
    "convert_angle",
    "parse_color",
    "parse_survey_file",
]
