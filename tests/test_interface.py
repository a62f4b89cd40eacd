# -*- coding: utf-8 -*-
"""Tests for file loading through the public interface."""

import json

import pytest
from pydantic import ValidationError

from vtopo_lib import parse_survey_file
from vtopo_lib.errors import MalformedDataLineError
from vtopo_lib.interface import VisualTopoInterface


class TestSampleFile:
    """Tests against the bundled decimal degrees sample."""

    def test_header(self, sample_tro_path):
        model = parse_survey_file(sample_tro_path)

        assert model.name == "Grotte des Essais"
        assert model.author == "Speleo Club de Test"
        assert model.entry == "A0"
        assert model.toporobot is False
        assert model.default_color.as_rgb_tuple() == (0, 0, 0)
        assert model.projection_code == "LT3"
        assert model.srid == 27573
        assert model.entry_point.as_tuple() == pytest.approx(
            (3087420.0, 623350.0, 1510.0)
        )

    def test_sets(self, sample_tro_path):
        model = parse_survey_file(sample_tro_path)

        # The set after the configuration block is never read
        assert model.set_names == ["Galerie principale", "<unnamed>"]
        assert model.sets[0].color.as_rgb_tuple() == (255, 0, 0)
        assert model.sets[1].color.as_rgb_tuple() == (255, 255, 255)
        assert model.total_legs == 4
        assert "A10" not in model.get_all_stations()

    def test_legs(self, sample_tro_path):
        legs = parse_survey_file(sample_tro_path).sets[0].legs

        assert [(leg.from_station, leg.to_station) for leg in legs] == [
            ("A0", "A1"),
            ("A1", "A2"),
            ("A2", "A3"),
        ]
        assert legs[1].comment == "Salle du lac"
        assert legs[1].section.left == pytest.approx(1.0)
        assert legs[1].section.right == pytest.approx(1.5)
        assert legs[1].section.up == pytest.approx(0.5)
        assert legs[1].section.down == pytest.approx(0.75)
        assert legs[2].section.left == pytest.approx(0.5)
        assert legs[2].section.right == 2.0
        assert legs[2].section.up == pytest.approx(3.0)
        assert legs[2].section.down == 2.0

    def test_keep_stars(self, sample_tro_path):
        model = parse_survey_file(sample_tro_path, ignore_stars=False)

        assert model.total_legs == 5
        assert model.sets[0].legs[2].to_station == "*"

    def test_path_as_string(self, sample_tro_path):
        assert parse_survey_file(str(sample_tro_path)).total_legs == 4

    def test_deterministic(self, sample_tro_path):
        assert parse_survey_file(sample_tro_path) == parse_survey_file(
            sample_tro_path
        )

    def test_entry_point_wgs84(self, sample_tro_path):
        location = parse_survey_file(sample_tro_path).entry_point_wgs84()
        # Lambert III covers southern France
        assert 42.0 < location.latitude < 45.5
        assert -2.0 < location.longitude < 8.5


class TestSexagesimalFile:
    """Tests against the bundled sexagesimal sample."""

    def test_angles(self, sexagesimal_tro_path):
        model = parse_survey_file(sexagesimal_tro_path, decimal_degrees=False)
        first, second = model.sets[0].legs

        assert first.azimuth == pytest.approx(125.5)
        assert first.inclination == pytest.approx(-10.75)
        assert second.azimuth == pytest.approx(359.0 + 59 / 60)
        assert second.inclination == pytest.approx(-0.25)

    def test_header(self, sexagesimal_tro_path):
        model = parse_survey_file(sexagesimal_tro_path, decimal_degrees=False)

        assert model.toporobot is True
        assert model.default_color.as_rgb_tuple() == (255, 255, 255)
        assert model.srid == 4326
        assert model.entry_point.as_tuple() == pytest.approx((42.25, 2.5, 830.0))
        location = model.entry_point_wgs84()
        assert location.latitude == pytest.approx(42.25)
        assert location.longitude == pytest.approx(2.5)


class TestEncoding:
    """Tests for caller-supplied text encodings."""

    TEXT = (
        "Version 5.11\n\n"
        "Trou Grotte de l'Éléphant,1,2,3,LT3\n"
        "Club Spéléo Club\n\n"
        "Param Deca Degd Clino Degd 0.0000 Dir,Dir,Dir Arr Std 01/01/2020 A;Réseau\n"
        "\n"
        "A1 A2 1 0 0 * * * * N I * N ;Étroiture\n"
        "\n"
    )

    @pytest.mark.parametrize("encoding", ["cp1252", "utf-8", "latin-1"])
    def test_encoding(self, tmp_path, encoding):
        path = tmp_path / "cave.tro"
        path.write_text(self.TEXT, encoding=encoding)

        model = parse_survey_file(path, encoding)

        assert model.name == "Grotte de l'Éléphant"
        assert model.author == "Spéléo Club"
        assert model.sets[0].name == "Réseau"
        assert model.sets[0].legs[0].comment == "Étroiture"

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "cave.tro"
        path.write_bytes(self.TEXT.replace("\n", "\r\n").encode("cp1252"))

        model = parse_survey_file(path)
        assert model.total_legs == 1

    def test_error_reports_file(self, tmp_path):
        path = tmp_path / "broken.tro"
        path.write_text(
            "Version 5.11\n\nClub C\n\n"
            "Param Deca Degd Clino Degd 0.0000 Dir,Dir,Dir Arr Std 01/01/2020 A\n\n"
            "A1 A2 1 0 0\n\n",
            encoding="cp1252",
        )

        with pytest.raises(MalformedDataLineError) as exc_info:
            parse_survey_file(path)

        assert exc_info.value.location.source == str(path)
        assert "broken.tro" in str(exc_info.value)


class TestJson:
    """Tests for JSON serialization."""

    def test_envelope(self, sample_tro_path):
        model = parse_survey_file(sample_tro_path)
        data = json.loads(VisualTopoInterface.to_json(model))

        assert data["format"] == "visualtopo_tro"
        assert data["version"] == "1.0"
        assert data["survey"]["name"] == "Grotte des Essais"
        assert len(data["survey"]["sets"]) == 2

    def test_round_trip(self, sample_tro_path):
        model = parse_survey_file(sample_tro_path)
        assert VisualTopoInterface.from_json(VisualTopoInterface.to_json(model)) == model

    def test_unsupported_projection_rejected_on_load(self, sample_tro_path):
        data = json.loads(
            VisualTopoInterface.to_json(parse_survey_file(sample_tro_path))
        )
        data["survey"]["projection_code"] = "Lambert93"

        with pytest.raises(ValidationError):
            VisualTopoInterface.from_json(json.dumps(data))

    def test_parse_string(self, sample_tro_path):
        text = sample_tro_path.read_text(encoding="cp1252")
        assert VisualTopoInterface.parse_string(text) == parse_survey_file(
            sample_tro_path
        )
