# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON response adapter.

Serializes coverage results into the document consumed by globe front ends.
"""
import json
from typing import Any

from satcoverage.domain.coverage import CoverageMode, CoverageResult
from satcoverage.domain.visibility import EvaluatedSatellite


def satellite_to_dict(sat: EvaluatedSatellite) -> dict[str, Any]:
    return {
        "noradId": sat.norad_id,
        "lat": sat.lat_deg,
        "lng": sat.lon_deg,
        "altitudeKm": sat.altitude_km,
        "elevation": round(sat.elevation_deg, 1),
        "rangeKm": round(sat.range_km) if sat.range_km is not None else None,
        "pathLossDb": round(sat.path_loss_db) if sat.path_loss_db is not None else None,
        "coverageRadiusKm": sat.coverage_radius_km,
        "available": sat.available,
    }


def coverage_result_to_dict(result: CoverageResult) -> dict[str, Any]:
    """Build the response document for a coverage result."""
    doc: dict[str, Any] = {
        "observer": {
            "lat": result.observer.lat_deg,
            "lng": result.observer.lon_deg,
            "altMeters": result.observer.alt_m,
        },
        "mode": result.mode.value,
        "timestamp": result.evaluated_at.isoformat(),
    }
    if result.mode is CoverageMode.STATION:
        doc["constellation"] = result.constellation_ids[0]
    else:
        doc["constellations"] = list(result.constellation_ids)

    doc["satellites"] = [satellite_to_dict(sat) for sat in result.satellites]
    doc["camera"] = {
        "lat": result.camera.lat_deg,
        "lng": result.camera.lon_deg,
        "height": result.camera.height_m,
    }
    doc["degraded"] = list(result.degraded_constellations)

    if result.heatmap_points is not None:
        doc["heatmapPoints"] = [[p.lat_deg, p.lon_deg] for p in result.heatmap_points]

    return doc


def write_coverage_json(result: CoverageResult, path: str) -> int:
    """Write a coverage result to a JSON file; returns the satellite count."""
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(coverage_result_to_dict(result), f, indent=2, ensure_ascii=False)
    return len(result.satellites)
