# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the JSON response adapter."""
import json
from datetime import datetime, timezone

from satcoverage.adapters.json_io import (
    coverage_result_to_dict,
    satellite_to_dict,
    write_coverage_json,
)
from satcoverage.domain.coverage import CoverageMode, CoverageResult, suggest_camera
from satcoverage.domain.heatmap import HeatmapPoint
from satcoverage.domain.observation import Observer
from satcoverage.domain.visibility import EvaluatedSatellite


OTTAWA = Observer(45.42, -75.70, 100.0)
AT = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _sat(norad_id=101, range_km=794.63, path_loss_db=94.53, available=True):
    return EvaluatedSatellite(
        norad_id=norad_id,
        lat_deg=46.0,
        lon_deg=-74.0,
        altitude_km=780.0,
        elevation_deg=78.46,
        range_km=range_km,
        path_loss_db=path_loss_db,
        coverage_radius_km=2075.3,
        available=available,
    )


def _result(mode, ids, satellites, heatmap=None, degraded=()):
    return CoverageResult(
        observer=OTTAWA,
        constellation_ids=ids,
        mode=mode,
        satellites=tuple(satellites),
        camera=suggest_camera(mode, OTTAWA),
        evaluated_at=AT,
        degraded_constellations=degraded,
        heatmap_points=heatmap,
    )


class TestSatelliteToDict:

    def test_fields_and_rounding(self):
        d = satellite_to_dict(_sat())
        assert d == {
            "noradId": 101,
            "lat": 46.0,
            "lng": -74.0,
            "altitudeKm": 780.0,
            "elevation": 78.5,
            "rangeKm": 795,
            "pathLossDb": 95,
            "coverageRadiusKm": 2075.3,
            "available": True,
        }

    def test_degenerate_geometry_is_null(self):
        d = satellite_to_dict(_sat(range_km=None, path_loss_db=None, available=False))
        assert d["rangeKm"] is None
        assert d["pathLossDb"] is None
        assert d["available"] is False


class TestCoverageResultToDict:

    def test_station_document(self):
        doc = coverage_result_to_dict(_result(CoverageMode.STATION, ("iridium",), [_sat()]))
        assert doc["mode"] == "station"
        assert doc["constellation"] == "iridium"
        assert "constellations" not in doc
        assert doc["observer"] == {"lat": 45.42, "lng": -75.70, "altMeters": 100.0}
        assert doc["timestamp"] == "2026-03-01T12:00:00+00:00"
        assert doc["camera"] == {"lat": 45.42, "lng": -75.70, "height": 5_000_000.0}
        assert doc["degraded"] == []
        assert "heatmapPoints" not in doc
        assert len(doc["satellites"]) == 1

    def test_constellation_document(self):
        doc = coverage_result_to_dict(_result(
            CoverageMode.CONSTELLATION, ("starlink", "kuiper"),
            [_sat(1), _sat(2, available=False)],
            degraded=("kuiper",),
        ))
        assert doc["constellations"] == ["starlink", "kuiper"]
        assert "constellation" not in doc
        assert doc["degraded"] == ["kuiper"]
        assert doc["camera"]["height"] == 20_000_000.0

    def test_heatmap_points(self):
        points = (HeatmapPoint(46.0, -74.0), HeatmapPoint(47.5, -73.25))
        doc = coverage_result_to_dict(
            _result(CoverageMode.STATION, ("iridium",), [_sat()], heatmap=points)
        )
        assert doc["heatmapPoints"] == [[46.0, -74.0], [47.5, -73.25]]

    def test_empty_heatmap_kept(self):
        doc = coverage_result_to_dict(
            _result(CoverageMode.STATION, ("iridium",), [], heatmap=())
        )
        assert doc["heatmapPoints"] == []
        assert doc["satellites"] == []

    def test_serializable(self):
        doc = coverage_result_to_dict(_result(CoverageMode.STATION, ("iridium",), [_sat()]))
        assert json.loads(json.dumps(doc)) == doc


class TestWriteCoverageJson:

    def test_writes_file(self, tmp_path):
        path = tmp_path / "coverage.json"
        count = write_coverage_json(
            _result(CoverageMode.CONSTELLATION, ("iridium",), [_sat(1), _sat(2)]), str(path),
        )
        assert count == 2
        data = json.loads(path.read_text(encoding="utf-8"))
        assert [s["noradId"] for s in data["satellites"]] == [1, 2]
