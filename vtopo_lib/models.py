# -*- coding: utf-8 -*-
"""Survey data models for VisualTopo .tro files.

This module contains Pydantic models for representing survey data:
- CrossSection: Left/right/up/down half-widths around a leg
- VisualTopoLeg: A single shot between two stations
- VisualTopoSet: An ordered, named, colored group of legs
- EntryPoint: Geodetic position of the cave entry
- VisualTopoModel: A complete .tro file

All models are frozen: a parsed survey cannot be modified.
Angles are stored in decimal degrees, lengths in the file's own unit.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic_extra_types.color import Color
from pydantic_extra_types.coordinate import Latitude
from pydantic_extra_types.coordinate import Longitude
from pyproj import CRS
from pyproj import Transformer

from vtopo_lib.constants import DEFAULT_SECTION_SIZE
from vtopo_lib.constants import STANDARD_COLOR_RGB
from vtopo_lib.constants import WGS84_EPSG
from vtopo_lib.enums import Projection


class CrossSection(BaseModel):
    """Cross-section half-widths measured at a leg."""

    model_config = ConfigDict(frozen=True)

    left: float = DEFAULT_SECTION_SIZE
    right: float = DEFAULT_SECTION_SIZE
    up: float = DEFAULT_SECTION_SIZE
    down: float = DEFAULT_SECTION_SIZE


class VisualTopoLeg(BaseModel):
    """A single survey shot between two stations.

    Station names are plain labels: they need not be numeric nor unique,
    and ``*`` stands for an unsurveyed destination.
    """

    model_config = ConfigDict(frozen=True)

    from_station: str
    to_station: str
    length: float = Field(ge=0)
    azimuth: float
    inclination: float
    section: CrossSection = Field(default_factory=CrossSection)
    comment: str | None = None


class VisualTopoSet(BaseModel):
    """One contiguous block of legs in the source file."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    color: Color = Field(default_factory=lambda: Color(STANDARD_COLOR_RGB))
    legs: tuple[VisualTopoLeg, ...] = ()


class GeoLocation(BaseModel):
    """WGS 84 position in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: Latitude
    longitude: Longitude


class EntryPoint(BaseModel):
    """Position of the cave entry.

    The ``Trou`` line lists ``name,A,B,elevation,code``: ``northing`` is
    taken from B and ``easting`` from A, both multiplied by the projection
    scale. For WGS84 they hold latitude and longitude in degrees, otherwise
    meters. The elevation is never scaled.
    """

    model_config = ConfigDict(frozen=True)

    northing: float
    easting: float
    elevation: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.northing, self.easting, self.elevation)


class VisualTopoModel(BaseModel):
    """A parsed VisualTopo .tro file."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    author: str | None = None
    entry: str | None = None
    toporobot: bool = False
    default_color: Color = Field(default_factory=lambda: Color(STANDARD_COLOR_RGB))
    entry_point: EntryPoint | None = None
    projection_code: Projection | None = None
    srid: int | None = None
    sets: tuple[VisualTopoSet, ...] = ()

    @property
    def projection(self) -> Projection | None:
        return self.projection_code

    @property
    def total_legs(self) -> int:
        return sum(len(survey_set.legs) for survey_set in self.sets)

    @property
    def set_names(self) -> list[str]:
        return [survey_set.name or "<unnamed>" for survey_set in self.sets]

    def get_all_stations(self) -> set[str]:
        stations: set[str] = set()
        for survey_set in self.sets:
            for leg in survey_set.legs:
                stations.add(leg.from_station)
                stations.add(leg.to_station)
        return stations

    def entry_point_wgs84(self) -> GeoLocation | None:
        """Convert the entry point to WGS 84 latitude and longitude.

        Returns:
            The entry location, or None if the file has no ``Trou`` line
        """
        if self.entry_point is None or self.srid is None:
            return None

        if self.srid == WGS84_EPSG:
            return GeoLocation(
                latitude=self.entry_point.northing,
                longitude=self.entry_point.easting,
            )

        transformer = Transformer.from_crs(
            CRS.from_epsg(self.srid),
            CRS.from_epsg(WGS84_EPSG),
            always_xy=True,
        )
        lon, lat = transformer.transform(
            self.entry_point.easting, self.entry_point.northing
        )
        return GeoLocation(latitude=lat, longitude=lon)
