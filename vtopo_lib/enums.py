# -*- coding: utf-8 -*-
"""Enumerations for the VisualTopo file format.

This module contains the closed sets of values recognized by the parser:
projection codes, header keys and the JSON format identifier.
"""

from enum import Enum

from vtopo_lib.constants import GEOGRAPHIC_COORDINATE_SCALE
from vtopo_lib.constants import PROJECTED_COORDINATE_SCALE
from vtopo_lib.errors import UnsupportedProjectionError


class FormatIdentifier(str, Enum):
    """Format identifiers used in JSON files."""

    VISUALTOPO_TRO = "visualtopo_tro"


class Projection(str, Enum):
    """Projection codes supported in the ``Trou`` header line.

    The enum values match the exact strings used in VisualTopo files.

    Attributes:
        UTM31: UTM zone 31 north (WGS 84)
        LT3: NTF (Paris) / Lambert zone III
        WGS84: WGS 84 geographic coordinates
    """

    UTM31 = "UTM31"
    LT3 = "LT3"
    WGS84 = "WGS84"

    @property
    def srid(self) -> int:
        """Get the EPSG spatial reference id for this projection."""
        return {
            Projection.UTM31: 32631,
            Projection.LT3: 27573,
            Projection.WGS84: 4326,
        }[self]

    @property
    def coordinate_scale(self) -> float:
        """Get the factor applied to raw entry coordinates.

        Projected coordinates are written in kilometers, geographic ones
        in degrees.
        """
        if self is Projection.WGS84:
            return GEOGRAPHIC_COORDINATE_SCALE
        return PROJECTED_COORDINATE_SCALE

    @classmethod
    def from_code(cls, code: str) -> "Projection":
        """Resolve a projection code as written in the file.

        Args:
            code: Projection code (case-sensitive)

        Returns:
            The matching Projection

        Raises:
            UnsupportedProjectionError: If the code is not supported
        """
        try:
            return cls(code)
        except ValueError:
            raise UnsupportedProjectionError(code) from None


class HeaderKey(str, Enum):
    """Keys recognized in the file header block.

    Attributes:
        TROU: Cave name, entry coordinates and projection
        CLUB: Author or club
        ENTREE: Entry station description
        TOPOROBOT: Generated-by-Toporobot flag
        COULEUR: Default color
    """

    TROU = "Trou"
    CLUB = "Club"
    ENTREE = "Entree"
    TOPOROBOT = "Toporobot"
    COULEUR = "Couleur"

    @classmethod
    def lookup(cls, key: str) -> "HeaderKey | None":
        """Get the header key for a raw key, or None if not recognized."""
        try:
            return cls(key)
        except ValueError:
            return None
