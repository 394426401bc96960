# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Downlink path loss and coverage footprint geometry.

Free-space path loss in the km/GHz engineering form and the spherical-Earth
coverage-circle radius for a minimum usable elevation angle.

No external dependencies, only stdlib math.
"""
import math

from satcoverage.domain.constellations import EARTH_RADIUS_KM

_FSPL_KM_GHZ_CONSTANT_DB = 32.44  # 20·log10(4π/c) with d in km, f in GHz


def free_space_path_loss_db(range_km: float, frequency_ghz: float) -> float:
    """Free-space path loss in dB.

    FSPL(dB) = 32.44 + 20·log10(d_km) + 20·log10(f_GHz)

    Args:
        range_km: Slant range (km), must be positive.
        frequency_ghz: Carrier frequency (GHz), must be positive.

    Returns:
        FSPL in dB.
    """
    if range_km <= 0 or frequency_ghz <= 0:
        raise ValueError(
            f"Range and frequency must be positive, got {range_km} km, {frequency_ghz} GHz"
        )
    return (
        _FSPL_KM_GHZ_CONSTANT_DB
        + 20.0 * math.log10(range_km)
        + 20.0 * math.log10(frequency_ghz)
    )


def coverage_radius_km(
    altitude_km: float,
    min_elevation_deg: float,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Ground radius of the footprint seen above a minimum elevation.

    central_angle = acos(R·cos(ε) / (R + h)) − ε
    radius = R·central_angle

    Independent of any observer. Clamped to zero when the satellite cannot
    be seen above ε from anywhere (ε = 90°, or altitude at or below ground).

    Args:
        altitude_km: Satellite altitude above the sphere (km).
        min_elevation_deg: Minimum usable elevation (degrees).
        earth_radius_km: Sphere radius (km).

    Returns:
        Footprint radius along the ground (km), always >= 0.
    """
    elev_rad = math.radians(min_elevation_deg)
    orbit_radius = earth_radius_km + altitude_km
    if orbit_radius <= 0:
        return 0.0

    ratio = earth_radius_km * math.cos(elev_rad) / orbit_radius
    ratio = max(-1.0, min(1.0, ratio))
    central_angle = math.acos(ratio) - elev_rad

    return max(0.0, earth_radius_km * central_angle)
