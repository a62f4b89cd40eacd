# -*- coding: utf-8 -*-
"""Value conversions for VisualTopo tokens.

Numbers in VisualTopo files are always written with a dot decimal
separator, whatever the locale of the machine that produced them, since
commas already separate the fields of colors and of the ``Trou`` line.
"""

import math
import re

from pydantic_extra_types.color import Color

from vtopo_lib.constants import DEFAULT_SECTION_SIZE
from vtopo_lib.constants import PLACEHOLDER_TOKEN
from vtopo_lib.constants import SEXAGESIMAL_MINUTES_SPAN
from vtopo_lib.constants import STANDARD_COLOR_RGB
from vtopo_lib.constants import STANDARD_COLOR_TOKEN
from vtopo_lib.errors import MalformedColorError
from vtopo_lib.errors import MalformedNumberError

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?", re.ASCII)
BYTE_PATTERN = re.compile(r"\d{1,3}", re.ASCII)


def parse_number(token: str, field: str) -> float:
    """Parse a real number written with a dot decimal separator.

    Args:
        token: Raw token
        field: Field name used in the error message

    Returns:
        Parsed value

    Raises:
        MalformedNumberError: If the token is not a plain, finite real number
    """
    if not NUMBER_PATTERN.fullmatch(token):
        raise MalformedNumberError(field, token)

    value = float(token)
    # Exponents past the float range overflow to infinity
    if not math.isfinite(value):
        raise MalformedNumberError(field, token)
    return value


def parse_section_size(token: str, field: str) -> float:
    """Parse a cross-section half-width, `*` meaning the default size."""
    if token == PLACEHOLDER_TOKEN:
        return DEFAULT_SECTION_SIZE
    return parse_number(token, field)


def convert_angle(value: float, *, decimal_degrees: bool) -> float:
    """Normalize an angle to decimal degrees.

    In sexagesimal-packed notation the fractional part holds minutes on a
    0 to 0.6 scale: ``125.30`` is 125 degrees 30 minutes, i.e. ``125.5``.
    Fractions beyond 0.6 are extrapolated linearly, not clamped.

    Args:
        value: Raw angle
        decimal_degrees: Whether ``value`` is already in decimal degrees

    Returns:
        Angle in decimal degrees
    """
    if decimal_degrees:
        return value

    int_part = math.trunc(value)
    minutes = abs(value - int_part)
    return int_part + math.copysign(minutes / SEXAGESIMAL_MINUTES_SPAN, value)


def parse_color(token: str) -> Color:
    """Parse a color literal.

    Args:
        token: Either ``Std`` or ``r,g,b`` with byte components

    Returns:
        The RGB color

    Raises:
        MalformedColorError: If the literal has the wrong shape
    """
    if token == STANDARD_COLOR_TOKEN:
        return Color(STANDARD_COLOR_RGB)

    slots = token.split(",")
    if len(slots) != 3:
        raise MalformedColorError(token, f"expected 3 components, got {len(slots)}")

    rgb: list[int] = []
    for slot in slots:
        if not BYTE_PATTERN.fullmatch(slot) or int(slot) > 255:
            raise MalformedColorError(token, f"`{slot}` is not a byte")
        rgb.append(int(slot))

    return Color(tuple(rgb))
