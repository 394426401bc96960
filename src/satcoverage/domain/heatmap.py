# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coverage heatmap sampling.

Approximates each satellite's footprint with ground points laid on a
golden-angle (sunflower) spiral. The point budget is proportional to the
footprint area, and square-root radial scaling gives uniform areal density.

Overlapping footprints are not deduplicated: stacked points mark places
covered by several satellites.
"""
import math
from dataclasses import dataclass
from typing import Iterable

from satcoverage.domain.constellations import EARTH_RADIUS_KM
from satcoverage.domain.visibility import EvaluatedSatellite

DEFAULT_POINT_SPACING_KM = 300.0

_GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0
_GOLDEN_ANGLE_RAD = 2.0 * math.pi / _GOLDEN_RATIO


@dataclass(frozen=True)
class HeatmapPoint:
    """A ground sample point."""
    lat_deg: float
    lon_deg: float


def normalize_longitude(lon_deg: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    return (lon_deg + 180.0) % 360.0 - 180.0


def destination_point(
    lat_deg: float,
    lon_deg: float,
    distance_km: float,
    bearing_rad: float,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> HeatmapPoint:
    """
    Point reached by travelling a great-circle distance along a bearing.

    Spherical direct geodesic:
        φ2 = asin(sin φ1·cos δ + cos φ1·sin δ·cos θ)
        λ2 = λ1 + atan2(sin θ·sin δ·cos φ1, cos δ − sin φ1·sin φ2)

    Args:
        lat_deg: Start latitude (degrees).
        lon_deg: Start longitude (degrees).
        distance_km: Distance along the surface (km).
        bearing_rad: Initial bearing, clockwise from north (radians).
        earth_radius_km: Sphere radius (km).

    Returns:
        HeatmapPoint with latitude in [-90, 90], longitude in [-180, 180).
    """
    phi1 = math.radians(lat_deg)
    lambda1 = math.radians(lon_deg)
    delta = distance_km / earth_radius_km

    sin_phi2 = (
        math.sin(phi1) * math.cos(delta)
        + math.cos(phi1) * math.sin(delta) * math.cos(bearing_rad)
    )
    sin_phi2 = max(-1.0, min(1.0, sin_phi2))
    phi2 = math.asin(sin_phi2)
    lambda2 = lambda1 + math.atan2(
        math.sin(bearing_rad) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * sin_phi2,
    )

    lat_out = max(-90.0, min(90.0, math.degrees(phi2)))
    return HeatmapPoint(lat_deg=lat_out, lon_deg=normalize_longitude(math.degrees(lambda2)))


def great_circle_distance_km(
    lat1_deg: float,
    lon1_deg: float,
    lat2_deg: float,
    lon2_deg: float,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Haversine great-circle distance between two points (km)."""
    phi1 = math.radians(lat1_deg)
    phi2 = math.radians(lat2_deg)
    d_phi = phi2 - phi1
    d_lambda = math.radians(lon2_deg - lon1_deg)

    a = (
        math.sin(d_phi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    )
    return 2.0 * earth_radius_km * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1.0 - a)))


def spiral_point_count(radius_km: float, point_spacing_km: float) -> int:
    """Number of samples for a footprint: ceil(π·r² / spacing²)."""
    if point_spacing_km <= 0:
        raise ValueError(f"Point spacing must be positive, got {point_spacing_km}")
    if radius_km <= 0:
        return 0
    return math.ceil(math.pi * radius_km**2 / point_spacing_km**2)


def sample_footprint(
    lat_deg: float,
    lon_deg: float,
    radius_km: float,
    point_spacing_km: float = DEFAULT_POINT_SPACING_KM,
) -> list[HeatmapPoint]:
    """Golden-angle spiral samples of one coverage circle, in spiral order."""
    count = spiral_point_count(radius_km, point_spacing_km)
    points: list[HeatmapPoint] = []
    for i in range(count):
        t = i / count
        angle = i * _GOLDEN_ANGLE_RAD
        distance = radius_km * math.sqrt(t)
        points.append(destination_point(lat_deg, lon_deg, distance, angle))
    return points


def sample_heatmap(
    satellites: Iterable[EvaluatedSatellite],
    point_spacing_km: float = DEFAULT_POINT_SPACING_KM,
) -> list[HeatmapPoint]:
    """
    Sample every satellite's coverage circle into ground points.

    Satellites with a zero coverage radius contribute nothing.

    Args:
        satellites: Evaluated satellites (sub-point and coverage radius).
        point_spacing_km: Nominal spacing; one point per spacing² of area.

    Returns:
        Points ordered satellite-major, spiral-index-minor.
    """
    if point_spacing_km <= 0:
        raise ValueError(f"Point spacing must be positive, got {point_spacing_km}")

    points: list[HeatmapPoint] = []
    for sat in satellites:
        if sat.coverage_radius_km > 0:
            points.extend(sample_footprint(
                sat.lat_deg, sat.lon_deg, sat.coverage_radius_km, point_spacing_km,
            ))
    return points
