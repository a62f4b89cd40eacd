# -*- coding: utf-8 -*-
"""Unified interface for VisualTopo file I/O.

This module provides the primary entry point for reading VisualTopo files:

1. The parser produces a dictionary (like loading JSON from disk)
2. The dictionary feeds the Pydantic model via a single `model_validate()`
3. The model serializes to JSON via `model_dump_json()`
"""

import json
from pathlib import Path

from vtopo_lib.constants import JSON_ENVELOPE_VERSION
from vtopo_lib.constants import VISUALTOPO_ENCODING
from vtopo_lib.enums import FormatIdentifier
from vtopo_lib.models import VisualTopoModel
from vtopo_lib.parser import VisualTopoParser

DEFAULT_ENCODING = VISUALTOPO_ENCODING


class VisualTopoInterface:
    """Unified interface for VisualTopo file I/O.

    Example:
        model = VisualTopoInterface.load_tro(Path("cave.tro"))

        for survey_set in model.sets:
            print(survey_set.name, len(survey_set.legs))

        print(VisualTopoInterface.to_json(model))
    """

    # -------------------------------------------------------------------------
    # Loading Methods (File → Model)
    # -------------------------------------------------------------------------

    @classmethod
    def load_tro(
        cls,
        path: Path,
        *,
        encoding: str = DEFAULT_ENCODING,
        decimal_degrees: bool = True,
        ignore_stars: bool = True,
    ) -> VisualTopoModel:
        """Load a VisualTopo .tro file.

        Args:
            path: Path to the .tro file
            encoding: Character encoding (default: Windows-1252)
            decimal_degrees: Angles are in decimal degrees, not sexagesimal
            ignore_stars: Drop legs whose destination is `*`

        Returns:
            The parsed survey

        Raises:
            VisualTopoParseError: If the file is malformed
            FileNotFoundError: If the file doesn't exist
        """
        parser = VisualTopoParser(
            decimal_degrees=decimal_degrees,
            ignore_stars=ignore_stars,
        )
        data = parser.parse_file_to_dict(path, encoding=encoding)

        # Single model_validate() call
        return VisualTopoModel.model_validate(data)

    @classmethod
    def parse_string(
        cls,
        data: str,
        *,
        source: str = "<string>",
        decimal_degrees: bool = True,
        ignore_stars: bool = True,
    ) -> VisualTopoModel:
        """Parse VisualTopo content already held in memory."""
        parser = VisualTopoParser(
            decimal_degrees=decimal_degrees,
            ignore_stars=ignore_stars,
        )
        return VisualTopoModel.model_validate(parser.parse_string_to_dict(data, source))

    # -------------------------------------------------------------------------
    # JSON Methods
    # -------------------------------------------------------------------------

    @classmethod
    def to_json(cls, model: VisualTopoModel) -> str:
        """Serialize a survey as JSON, wrapped in a format envelope."""
        envelope = {
            "version": JSON_ENVELOPE_VERSION,
            "format": FormatIdentifier.VISUALTOPO_TRO.value,
            "survey": json.loads(model.model_dump_json()),
        }
        return json.dumps(envelope, indent=2, sort_keys=True)

    @classmethod
    def from_json(cls, json_str: str) -> VisualTopoModel:
        """Load a survey from the JSON produced by `to_json`."""
        data = json.loads(json_str)
        return VisualTopoModel.model_validate(data.get("survey", data))
