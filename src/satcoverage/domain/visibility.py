# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-satellite visibility and link-budget evaluation.

Turns one satellite's element set into its geodetic position, look angles
from an observer, free-space path loss, coverage radius, and an
availability verdict for a single instant.

The propagator is passed in; any object with
``propagate(line1, line2, at_time)`` and ``sidereal_time(at_time)``
satisfies it (see satcoverage.ports.Propagator).
"""
import math
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from satcoverage.domain.constellations import ConstellationConfig
from satcoverage.domain.coordinate_frames import ecef_to_geodetic, eci_to_ecef
from satcoverage.domain.element_sets import SatelliteRecord
from satcoverage.domain.link_budget import coverage_radius_km, free_space_path_loss_db
from satcoverage.domain.observation import Observer, compute_look_angles

if TYPE_CHECKING:
    from satcoverage.ports.orbital_data import Propagator


@dataclass(frozen=True)
class EvaluatedSatellite:
    """One satellite's state relative to an observer at one instant.

    range_km and path_loss_db are both set or both None; None means the
    look geometry was degenerate for this observer.
    """
    norad_id: int
    lat_deg: float
    lon_deg: float
    altitude_km: float
    elevation_deg: float
    range_km: float | None
    path_loss_db: float | None
    coverage_radius_km: float
    available: bool


def evaluate_satellite(
    record: SatelliteRecord,
    observer: Observer,
    config: ConstellationConfig,
    at_time: datetime,
    propagator: "Propagator",
) -> EvaluatedSatellite | None:
    """
    Evaluate a satellite against an observer at a given instant.

    Args:
        record: Parsed element set of the satellite.
        observer: Ground observer.
        config: Frequency and thresholds of the satellite's constellation.
        at_time: UTC instant of evaluation.
        propagator: Source of ECI positions (km) and sidereal angles.

    Returns:
        EvaluatedSatellite, or None when the propagator has no valid
        position (decayed or invalid orbit).
    """
    pos_eci_km = propagator.propagate(record.line1, record.line2, at_time)
    if pos_eci_km is None:
        return None

    theta = propagator.sidereal_time(at_time)
    pos_ecef_km = eci_to_ecef(pos_eci_km, theta)
    pos_ecef_m = (pos_ecef_km[0] * 1000.0, pos_ecef_km[1] * 1000.0, pos_ecef_km[2] * 1000.0)

    lat_deg, lon_deg, alt_m = ecef_to_geodetic(pos_ecef_m)
    altitude_km = alt_m / 1000.0

    look = compute_look_angles(observer, pos_ecef_m)

    if math.isfinite(look.range_km) and look.range_km > 0:
        range_km = look.range_km
        path_loss_db = free_space_path_loss_db(range_km, config.frequency_ghz)
    else:
        range_km = None
        path_loss_db = None

    available = (
        path_loss_db is not None
        and look.elevation_deg > config.min_elevation_deg
        and path_loss_db < config.max_path_loss_db
    )

    return EvaluatedSatellite(
        norad_id=record.norad_id,
        lat_deg=lat_deg,
        lon_deg=lon_deg,
        altitude_km=altitude_km,
        elevation_deg=look.elevation_deg,
        range_km=range_km,
        path_loss_db=path_loss_db,
        coverage_radius_km=coverage_radius_km(altitude_km, config.min_elevation_deg),
        available=available,
    )
