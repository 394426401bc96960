# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coordinate frame conversions.

Pure mathematical transformations between ECI, ECEF, and Geodetic frames.
No external dependencies, only stdlib math.

Reference frames:
    ECI      : Earth-Centered Inertial (non-rotating, TEME as produced by SGP4)
    ECEF     : Earth-Centered Earth-Fixed (rotating with Earth)
    Geodetic : Latitude, Longitude, Altitude (WGS84 ellipsoid)

The ECI→ECEF rotation is a simple Z-axis rotation by the sidereal angle
of the instant. ECEF→Geodetic uses the iterative Bowring method on the
WGS84 ellipsoid.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class _Wgs84Constants:
    """WGS84 ellipsoid parameters."""
    R_EARTH_EQUATORIAL: float = 6_378_137.0       # m, semi-major axis
    R_EARTH_POLAR: float = 6_356_752.3142         # m, semi-minor axis
    FLATTENING: float = 1.0 / 298.257223563
    E_SQUARED: float = 0.00669437999014           # first eccentricity squared


WGS84: _Wgs84Constants = _Wgs84Constants()


def eci_to_ecef(
    pos_eci: tuple[float, float, float],
    sidereal_angle_rad: float,
) -> tuple[float, float, float]:
    """
    Rotate an ECI position into ECEF about the Z axis.

    The rotation matrix R_z(-θ) rotates from inertial to Earth-fixed:
        [x_ecef]   [ cos(θ)  sin(θ)  0] [x_eci]
        [y_ecef] = [-sin(θ)  cos(θ)  0] [y_eci]
        [z_ecef]   [   0       0     1] [z_eci]

    Args:
        pos_eci: Position in ECI frame (x, y, z), any length unit.
        sidereal_angle_rad: Earth rotation angle for the instant (radians).

    Returns:
        Position in ECEF frame, same unit as the input.
    """
    cos_t = math.cos(sidereal_angle_rad)
    sin_t = math.sin(sidereal_angle_rad)

    return (
        cos_t * pos_eci[0] + sin_t * pos_eci[1],
        -sin_t * pos_eci[0] + cos_t * pos_eci[1],
        pos_eci[2],
    )


def ecef_to_geodetic(
    pos_ecef: tuple[float, float, float],
) -> tuple[float, float, float]:
    """
    Convert ECEF position to geodetic coordinates (WGS84 ellipsoid).

    Uses the iterative Bowring method for latitude convergence.

    Args:
        pos_ecef: Position in ECEF frame (x, y, z) in meters.

    Returns:
        (latitude_deg, longitude_deg, altitude_m)
        Latitude in [-90, 90], longitude in (-180, 180].
    """
    a = WGS84.R_EARTH_EQUATORIAL
    b = WGS84.R_EARTH_POLAR
    e2 = WGS84.E_SQUARED

    x, y, z = pos_ecef
    p = math.sqrt(x**2 + y**2)

    lon_rad = math.atan2(y, x)

    # Initial estimate, then Bowring iterations
    lat_rad = math.atan2(z, p * (1.0 - e2))
    for _ in range(10):
        sin_lat = math.sin(lat_rad)
        n = a / math.sqrt(1.0 - e2 * sin_lat**2)
        lat_rad = math.atan2(z + e2 * n * sin_lat, p)

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    n = a / math.sqrt(1.0 - e2 * sin_lat**2)

    if abs(cos_lat) > 1e-10:
        alt = p / cos_lat - n
    else:
        alt = abs(z) - b

    return math.degrees(lat_rad), math.degrees(lon_rad), alt


def geodetic_to_ecef(
    lat_deg: float,
    lon_deg: float,
    alt_m: float,
) -> tuple[float, float, float]:
    """
    Convert geodetic coordinates to ECEF position (WGS84 ellipsoid).

    Inverse of ecef_to_geodetic.

    Args:
        lat_deg: Geodetic latitude in degrees [-90, 90].
        lon_deg: Geodetic longitude in degrees.
        alt_m: Altitude above WGS84 ellipsoid in meters.

    Returns:
        (x, y, z) in meters, ECEF frame.
    """
    a = WGS84.R_EARTH_EQUATORIAL
    e2 = WGS84.E_SQUARED

    lat_rad = math.radians(lat_deg)
    lon_rad = math.radians(lon_deg)

    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)

    n = a / math.sqrt(1.0 - e2 * sin_lat**2)

    x = (n + alt_m) * cos_lat * math.cos(lon_rad)
    y = (n + alt_m) * cos_lat * math.sin(lon_rad)
    z = (n * (1.0 - e2) + alt_m) * sin_lat

    return x, y, z
