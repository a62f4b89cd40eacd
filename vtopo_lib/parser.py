# -*- coding: utf-8 -*-
"""Parser for VisualTopo .tro survey data files.

This module implements the parser for reading VisualTopo files, which
contain a header describing the cave entry followed by sets of survey legs.

Architecture: The parser produces dictionaries (like loading JSON) which are
then fed to Pydantic models via a single `model_validate()` call. This keeps
parsing logic separate from model construction.

Layout of a file::

    Version 5.11             <- preamble, skipped up to the first blank line
    Verification 1

    Trou Cave,623.35,3087.42,1510.00,LT3
    Club Some club
    Couleur 0,0,0

    Param Deca Degd Clino Degd 0.0000 Dir,Dir,Dir Arr 255,0,0 01/01/2020 A;Set
                             <- one skipped line
    A1 A2 10.00 120.00 -5.00 * * * * N I * N ;comment
                             <- empty line ends the set
    [Configuration 5.11]     <- everything from here on is ignored

Every error is fatal: the first malformed line aborts the parse.
"""

import io
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from vtopo_lib.constants import COMMENT_SEPARATOR
from vtopo_lib.constants import CONFIGURATION_PREFIX
from vtopo_lib.constants import DATA_LINE_FIELD_COUNT
from vtopo_lib.constants import ENTRY_FIELD_COUNT
from vtopo_lib.constants import PLACEHOLDER_TOKEN
from vtopo_lib.constants import SET_HEADER_SKIP_LINES
from vtopo_lib.constants import VISUALTOPO_ENCODING
from vtopo_lib.conversions import convert_angle
from vtopo_lib.conversions import parse_color
from vtopo_lib.conversions import parse_number
from vtopo_lib.conversions import parse_section_size
from vtopo_lib.cursor import LineCursor
from vtopo_lib.cursor import is_blank
from vtopo_lib.enums import HeaderKey
from vtopo_lib.enums import Projection
from vtopo_lib.errors import MalformedDataLineError
from vtopo_lib.errors import MalformedEntryError
from vtopo_lib.errors import MalformedNumberError
from vtopo_lib.errors import MalformedSetHeaderError
from vtopo_lib.errors import SourceLocation
from vtopo_lib.errors import VisualTopoParseError
from vtopo_lib.models import VisualTopoModel

logger = logging.getLogger(__name__)


class VisualTopoParser:
    """Parser for VisualTopo .tro survey data files.

    Attributes:
        decimal_degrees: Angles are written in decimal degrees rather than
            in sexagesimal-packed degrees
        ignore_stars: Legs whose destination is ``*`` are dropped
    """

    # Fields are separated by runs of spaces only
    FIELD = re.compile(r"[^ ]+")

    def __init__(
        self,
        *,
        decimal_degrees: bool = True,
        ignore_stars: bool = True,
    ) -> None:
        self.decimal_degrees = decimal_degrees
        self.ignore_stars = ignore_stars

    # -------------------------------------------------------------------------
    # Dictionary-returning methods (primary API)
    # -------------------------------------------------------------------------

    def parse_file_to_dict(
        self,
        path: Path,
        encoding: str = VISUALTOPO_ENCODING,
    ) -> dict[str, Any]:
        """Parse a VisualTopo file to dictionary.

        The file is closed on every exit path.

        Args:
            path: Path to the .tro file
            encoding: Character encoding of the file

        Returns:
            Dictionary that can be fed to `VisualTopoModel.model_validate()`
        """
        with path.open(mode="r", encoding=encoding) as f:
            return self.parse_stream_to_dict(f, str(path))

    def parse_string_to_dict(
        self,
        data: str,
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse survey data from a string to dictionary."""
        return self.parse_stream_to_dict(io.StringIO(data), source)

    def parse_stream_to_dict(
        self,
        stream: Iterable[str],
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse survey data from an iterable of text lines.

        Args:
            stream: Decoded lines, with or without their terminators
            source: Source identifier for error messages

        Returns:
            Dictionary with the header fields and a "sets" list
        """
        cursor = LineCursor(stream, source)

        model = self._parse_header_to_dict(cursor)
        model["sets"] = []

        while (survey_set := self._parse_set_to_dict(cursor)) is not None:
            model["sets"].append(survey_set)

        logger.info(
            "Parsed `%s`: %d set(s), %d leg(s)",
            source,
            len(model["sets"]),
            sum(len(s["legs"]) for s in model["sets"]),
        )
        return model

    # -------------------------------------------------------------------------
    # Model-returning methods
    # -------------------------------------------------------------------------

    def parse_file(
        self,
        path: Path,
        encoding: str = VISUALTOPO_ENCODING,
    ) -> VisualTopoModel:
        """Parse a VisualTopo file into a model."""
        return VisualTopoModel.model_validate(
            self.parse_file_to_dict(path, encoding=encoding)
        )

    def parse_string(
        self,
        data: str,
        source: str = "<string>",
    ) -> VisualTopoModel:
        """Parse survey data from a string into a model."""
        return VisualTopoModel.model_validate(self.parse_string_to_dict(data, source))

    # -------------------------------------------------------------------------
    # Header
    # -------------------------------------------------------------------------

    def _parse_header_to_dict(self, cursor: LineCursor) -> dict[str, Any]:
        """Parse the header block.

        The preamble up to the first blank line is skipped, the header block
        runs up to the next blank line. Unknown keys are ignored.
        """
        cursor.read_until_blank("file preamble")
        first_line = cursor.line_number + 1
        lines = cursor.read_until_blank("header block")

        header: dict[str, Any] = {}
        for offset, line in enumerate(lines):
            key, _, value = line.strip().partition(" ")
            value = value.strip()

            try:
                self._apply_header_entry(header, key, value)
            except VisualTopoParseError as e:
                raise e.with_location(
                    SourceLocation(
                        source=cursor.source,
                        line=first_line + offset,
                        text=line,
                    )
                )

        return header

    def _apply_header_entry(
        self,
        header: dict[str, Any],
        key: str,
        value: str,
    ) -> None:
        match HeaderKey.lookup(key):
            case HeaderKey.TROU:
                header.update(self._parse_entry_to_dict(value))

            case HeaderKey.CLUB:
                header["author"] = value

            case HeaderKey.ENTREE:
                header["entry"] = value

            case HeaderKey.TOPOROBOT:
                header["toporobot"] = value == "1"

            case HeaderKey.COULEUR:
                header["default_color"] = parse_color(value)

            case None:
                logger.debug("Ignoring unknown header key `%s`", key)

    def _parse_entry_to_dict(self, value: str) -> dict[str, Any]:
        """Parse the ``Trou`` value: ``name,A,B,elevation,projection``.

        Args:
            value: Comma separated value list

        Returns:
            Dictionary with name, entry point and projection fields

        Raises:
            MalformedEntryError: If the field count is wrong
            UnsupportedProjectionError: If the projection is not supported
            MalformedNumberError: If a coordinate is not a number
        """
        fields = value.split(",")
        if len(fields) != ENTRY_FIELD_COUNT:
            raise MalformedEntryError(
                f"entry must have {ENTRY_FIELD_COUNT} comma separated fields, "
                f"got {len(fields)}"
            )

        name, coord_a, coord_b, elevation, code = (f.strip() for f in fields)
        projection = Projection.from_code(code)
        scale = projection.coordinate_scale

        return {
            "name": name,
            "projection_code": projection.value,
            "srid": projection.srid,
            "entry_point": {
                "northing": parse_number(coord_b, "entry coordinate B") * scale,
                "easting": parse_number(coord_a, "entry coordinate A") * scale,
                "elevation": parse_number(elevation, "entry elevation"),
            },
        }

    # -------------------------------------------------------------------------
    # Sets
    # -------------------------------------------------------------------------

    def _parse_set_to_dict(self, cursor: LineCursor) -> dict[str, Any] | None:
        """Parse one set block.

        Returns:
            Set dictionary, or None once the stream is exhausted or the
            configuration block has been reached
        """
        header_line = cursor.read_line()
        while header_line is not None and is_blank(header_line):
            header_line = cursor.read_line()

        if header_line is None:
            return None

        if header_line.startswith(CONFIGURATION_PREFIX):
            dropped = cursor.drain()
            logger.debug(
                "Reached configuration block at line %d, ignoring %d line(s)",
                cursor.line_number - dropped + 1,
                dropped,
            )
            return None

        survey_set = self._parse_set_header_to_dict(header_line, cursor)

        cursor.skip(SET_HEADER_SKIP_LINES, "set header")

        legs: list[dict[str, Any]] = []
        while (line := cursor.require_line("set data")) != "":
            try:
                if leg := self._parse_data_line_to_dict(line):
                    legs.append(leg)
            except VisualTopoParseError as e:
                raise e.with_location(cursor.location())

        survey_set["legs"] = legs
        return survey_set

    def _parse_set_header_to_dict(
        self,
        line: str,
        cursor: LineCursor,
    ) -> dict[str, Any]:
        """Parse a set header line: ``... <color> <tok> <tok>[;<name>]``."""
        slots = line.split(COMMENT_SEPARATOR)
        tokens = self.FIELD.findall(slots[0])
        if len(tokens) < 3:
            raise MalformedSetHeaderError(
                f"set header must have at least 3 fields, got {len(tokens)}",
                cursor.location(),
            )

        try:
            color = parse_color(tokens[-3])
        except VisualTopoParseError as e:
            raise e.with_location(cursor.location())

        return {
            "name": slots[1].strip() if len(slots) > 1 else "",
            "color": color,
        }

    def _parse_data_line_to_dict(self, line: str) -> dict[str, Any] | None:
        """Split a data line into fields and comment, then parse the leg."""
        payload, _, comment = line.partition(COMMENT_SEPARATOR)
        tokens = self.FIELD.findall(payload)
        if len(tokens) != DATA_LINE_FIELD_COUNT:
            raise MalformedDataLineError(len(tokens), DATA_LINE_FIELD_COUNT)

        return self._parse_leg_to_dict(
            tokens,
            comment.strip() or None,
        )

    def _parse_leg_to_dict(
        self,
        tokens: list[str],
        comment: str | None = None,
    ) -> dict[str, Any] | None:
        """Parse the fields of one leg.

        Fields: FROM TO LENGTH AZIMUTH INCLINATION LEFT RIGHT UP DOWN, the
        four trailing fields are not used.

        Args:
            tokens: The fixed fields of the data line
            comment: Trimmed text after the comment separator, None if empty

        Returns:
            Leg dictionary, or None if the leg is a placeholder to ignore
        """
        from_station, to_station = tokens[0], tokens[1]

        if to_station == PLACEHOLDER_TOKEN and self.ignore_stars:
            logger.debug("Ignoring placeholder leg from `%s`", from_station)
            return None

        length = parse_number(tokens[2], "length")
        if length < 0:
            raise MalformedNumberError("length", tokens[2])

        return {
            "from_station": from_station,
            "to_station": to_station,
            "length": length,
            "azimuth": convert_angle(
                parse_number(tokens[3], "azimuth"),
                decimal_degrees=self.decimal_degrees,
            ),
            "inclination": convert_angle(
                parse_number(tokens[4], "inclination"),
                decimal_degrees=self.decimal_degrees,
            ),
            "section": {
                "left": parse_section_size(tokens[5], "left"),
                "right": parse_section_size(tokens[6], "right"),
                "up": parse_section_size(tokens[7], "up"),
                "down": parse_section_size(tokens[8], "down"),
            },
            "comment": comment,
        }
