# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
SGP4 adapter: propagates two-line element sets to TEME/ECI positions.

TLE mean elements are SGP4-specific, NOT pure Keplerian, so the sgp4
library does the propagation. The Earth rotation angle is the library's
Greenwich mean sidereal time for the same Julian date.

sgp4 is imported lazily so the domain stays importable without it.
"""
import math
from datetime import datetime, timezone

from satcoverage.ports.orbital_data import Propagator


def _require_sgp4():
    """Import sgp4 lazily; raise clear error if not installed."""
    try:
        from sgp4.api import Satrec, jday
        from sgp4.propagation import gstime
    except ImportError:
        raise ImportError(
            "sgp4 is required for orbit propagation. "
            "Install with: pip install satcoverage[live]"
        ) from None
    return Satrec, jday, gstime


def _as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware UTC (treat naive as UTC)."""
    return dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _datetime_to_jd(jday_fn, dt: datetime) -> tuple[float, float]:
    dt = _as_utc(dt)
    return jday_fn(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                   dt.second + dt.microsecond / 1e6)


class Sgp4Propagator(Propagator):
    """Propagator backed by the sgp4 package (WGS72 gravity model)."""

    def __init__(self):
        self._satrec_cls, self._jday, self._gstime = _require_sgp4()

    def propagate(
        self, line1: str, line2: str, at_time: datetime,
    ) -> tuple[float, float, float] | None:
        """
        Propagate a TLE to at_time.

        Returns:
            ECI (TEME) position in km, or None when SGP4 reports an error
            (decayed orbit, eccentricity out of range, etc.).

        Raises:
            ValueError: If the TLE lines cannot be parsed at all.
        """
        satrec = self._satrec_cls.twoline2rv(line1, line2)
        jd, fr = _datetime_to_jd(self._jday, at_time)

        error_code, position_km, _velocity = satrec.sgp4(jd, fr)
        if error_code != 0:
            return None
        if not all(math.isfinite(c) for c in position_km):
            return None
        return (position_km[0], position_km[1], position_km[2])

    def sidereal_time(self, at_time: datetime) -> float:
        jd, fr = _datetime_to_jd(self._jday, at_time)
        return self._gstime(jd + fr)
