# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric observation geometry.

Computes azimuth, elevation, and slant range from a ground observer
to a satellite given in ECEF coordinates.

"""
from dataclasses import dataclass

import numpy as np

from satcoverage.domain.coordinate_frames import geodetic_to_ecef


@dataclass(frozen=True)
class Observer:
    """A ground observer supplied per request."""
    lat_deg: float
    lon_deg: float
    alt_m: float = 0.0

    def __post_init__(self):
        if not -90 <= self.lat_deg <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat_deg}")
        if not -180 <= self.lon_deg <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.lon_deg}")


@dataclass(frozen=True)
class LookAngles:
    """Topocentric look angles: azimuth, elevation, slant range."""
    azimuth_deg: float
    elevation_deg: float
    range_km: float


def _ecef_to_enu(
    range_ecef: tuple[float, float, float],
    lat_rad: float,
    lon_rad: float,
) -> tuple[float, float, float]:
    """
    Rotate ECEF range vector to East-North-Up (ENU) frame.

    Args:
        range_ecef: (dx, dy, dz) range vector in ECEF.
        lat_rad: Observer geodetic latitude in radians.
        lon_rad: Observer geodetic longitude in radians.

    Returns:
        (E, N, U) components, same unit as the input.
    """
    sin_lat = float(np.sin(lat_rad))
    cos_lat = float(np.cos(lat_rad))
    sin_lon = float(np.sin(lon_rad))
    cos_lon = float(np.cos(lon_rad))

    rot = np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
    ])
    enu = rot @ np.array(range_ecef)

    return float(enu[0]), float(enu[1]), float(enu[2])


def compute_look_angles(
    observer: Observer,
    satellite_ecef_m: tuple[float, float, float],
) -> LookAngles:
    """
    Compute topocentric azimuth, elevation, and slant range.

    Range is the Euclidean distance in the Earth-fixed frame; elevation is
    the angle above the observer's local horizontal and may be negative.

    Args:
        observer: Ground observer with geodetic coordinates.
        satellite_ecef_m: Satellite ECEF position (x, y, z) in meters.

    Returns:
        LookAngles with azimuth [0, 360), elevation [-90, 90],
        and slant range in km (nan if the inputs are not finite).
    """
    observer_ecef = geodetic_to_ecef(observer.lat_deg, observer.lon_deg, observer.alt_m)

    range_vec = np.array(satellite_ecef_m, dtype=float) - np.array(observer_ecef)
    range_ecef = (float(range_vec[0]), float(range_vec[1]), float(range_vec[2]))

    lat_rad = float(np.radians(observer.lat_deg))
    lon_rad = float(np.radians(observer.lon_deg))
    e, n, u = _ecef_to_enu(range_ecef, lat_rad, lon_rad)

    slant_range_m = float(np.linalg.norm(range_vec))
    horizontal = float(np.sqrt(e**2 + n**2))

    elevation_deg = float(np.degrees(np.arctan2(u, horizontal)))
    azimuth_deg = float(np.degrees(np.arctan2(e, n))) % 360.0

    return LookAngles(
        azimuth_deg=azimuth_deg,
        elevation_deg=elevation_deg,
        range_km=slant_range_m / 1000.0,
    )
