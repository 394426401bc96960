# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coverage response modes and result types.

Two modes:
    station       : one constellation, link analysis for a single observer;
                    only available satellites are reported.
    constellation : one or more constellations for whole-sky display;
                    every evaluated satellite is reported.

"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from satcoverage.domain.heatmap import HeatmapPoint
from satcoverage.domain.observation import Observer
from satcoverage.domain.visibility import EvaluatedSatellite

STATION_CAMERA_HEIGHT_M = 5_000_000.0
CONSTELLATION_CAMERA_HEIGHT_M = 20_000_000.0


class CoverageMode(Enum):
    """Response mode of a coverage request."""
    STATION = "station"
    CONSTELLATION = "constellation"


@dataclass(frozen=True)
class CameraFrame:
    """Suggested viewing position for a globe front end (advisory)."""
    lat_deg: float
    lon_deg: float
    height_m: float


@dataclass(frozen=True)
class CoverageResult:
    """Outcome of one coverage request."""
    observer: Observer
    constellation_ids: tuple[str, ...]
    mode: CoverageMode
    satellites: tuple[EvaluatedSatellite, ...]
    camera: CameraFrame
    evaluated_at: datetime
    degraded_constellations: tuple[str, ...] = ()
    heatmap_points: tuple[HeatmapPoint, ...] | None = None

    @property
    def available_count(self) -> int:
        """Number of reported satellites that are currently available."""
        return sum(1 for sat in self.satellites if sat.available)


def parse_mode(mode: CoverageMode | str) -> CoverageMode:
    """Accept a CoverageMode or its string value."""
    if isinstance(mode, CoverageMode):
        return mode
    try:
        return CoverageMode(str(mode).lower())
    except ValueError:
        valid = ", ".join(m.value for m in CoverageMode)
        raise ValueError(f"Unknown coverage mode '{mode}' (valid: {valid})") from None


def suggest_camera(mode: CoverageMode, observer: Observer) -> CameraFrame:
    """Wide view over the observer for constellation mode, nearer for station mode."""
    height = (
        CONSTELLATION_CAMERA_HEIGHT_M
        if mode is CoverageMode.CONSTELLATION
        else STATION_CAMERA_HEIGHT_M
    )
    return CameraFrame(lat_deg=observer.lat_deg, lon_deg=observer.lon_deg, height_m=height)


def select_for_mode(
    mode: CoverageMode,
    satellites: list[EvaluatedSatellite],
) -> list[EvaluatedSatellite]:
    """Filter evaluated satellites according to the response mode."""
    if mode is CoverageMode.STATION:
        return [sat for sat in satellites if sat.available]
    return list(satellites)
