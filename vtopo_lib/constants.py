# -*- coding: utf-8 -*-
"""Constants used throughout the vtopo_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Default encoding for VisualTopo files (Windows-1252 / CP1252)
VISUALTOPO_ENCODING = "cp1252"

# -----------------------------------------------------------------------------
# Sentinels
# -----------------------------------------------------------------------------

#: Token standing for an unknown station or a default cross-section value
PLACEHOLDER_TOKEN: str = "*"

#: Prefix of the embedded configuration block that ends the survey data
CONFIGURATION_PREFIX: str = "[Configuration "

#: Color literal meaning "standard color" (opaque white)
STANDARD_COLOR_TOKEN: str = "Std"

#: RGB value of the standard color
STANDARD_COLOR_RGB: tuple[int, int, int] = (255, 255, 255)

# -----------------------------------------------------------------------------
# Line Layout
# -----------------------------------------------------------------------------

#: Number of space separated fields on a data line
DATA_LINE_FIELD_COUNT: int = 13

#: Number of comma separated fields in the ``Trou`` header value
ENTRY_FIELD_COUNT: int = 5

#: Separator between the fields of a data line and its comment
COMMENT_SEPARATOR: str = ";"

#: Number of lines after a set header that carry nothing we model
SET_HEADER_SKIP_LINES: int = 1

# -----------------------------------------------------------------------------
# Measurements
# -----------------------------------------------------------------------------

#: Cross-section half-width used when the source token is a placeholder
DEFAULT_SECTION_SIZE: float = 2.0

#: Upper bound of the packed minutes fraction (60 minutes written as .60)
SEXAGESIMAL_MINUTES_SPAN: float = 0.6

#: Scale applied to projected entry coordinates (kilometers to meters)
PROJECTED_COORDINATE_SCALE: float = 1000.0

#: Scale applied to geographic entry coordinates (already in degrees)
GEOGRAPHIC_COORDINATE_SCALE: float = 1.0

#: EPSG code of WGS 84 geographic coordinates
WGS84_EPSG: int = 4326

# -----------------------------------------------------------------------------
# JSON Envelope
# -----------------------------------------------------------------------------

#: Envelope version written by the convert command
JSON_ENVELOPE_VERSION: str = "1.0"
