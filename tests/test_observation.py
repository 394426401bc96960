# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for observer validation and topocentric look angles."""
import math

import pytest

from satcoverage.domain.coordinate_frames import geodetic_to_ecef
from satcoverage.domain.observation import LookAngles, Observer, compute_look_angles


class TestObserver:

    def test_defaults_to_sea_level(self):
        assert Observer(45.42, -75.70).alt_m == 0.0

    @pytest.mark.parametrize("lat", [-90.1, 91.0])
    def test_latitude_validated(self, lat):
        with pytest.raises(ValueError, match="Latitude"):
            Observer(lat, 0.0)

    @pytest.mark.parametrize("lon", [-180.5, 181.0])
    def test_longitude_validated(self, lon):
        with pytest.raises(ValueError, match="Longitude"):
            Observer(0.0, lon)

    def test_frozen(self):
        obs = Observer(10.0, 20.0)
        with pytest.raises(AttributeError):
            obs.lat_deg = 11.0


class TestComputeLookAngles:

    def test_zenith(self):
        obs = Observer(45.0, 10.0, 0.0)
        sat = geodetic_to_ecef(45.0, 10.0, 500_000.0)
        look = compute_look_angles(obs, sat)
        assert isinstance(look, LookAngles)
        assert look.elevation_deg == pytest.approx(90.0, abs=1e-6)
        assert look.range_km == pytest.approx(500.0, rel=1e-6)

    def test_below_horizon_is_negative(self):
        obs = Observer(45.42, -75.70, 100.0)
        sat = geodetic_to_ecef(-45.0, 104.0, 780_000.0)
        assert compute_look_angles(obs, sat).elevation_deg < 0

    def test_northward_azimuth(self):
        obs = Observer(0.0, 0.0, 0.0)
        sat = geodetic_to_ecef(5.0, 0.0, 800_000.0)
        look = compute_look_angles(obs, sat)
        assert look.azimuth_deg == pytest.approx(0.0, abs=1e-6) or \
            look.azimuth_deg == pytest.approx(360.0, abs=1e-6)
        assert 0 < look.elevation_deg < 90

    def test_eastward_azimuth(self):
        obs = Observer(0.0, 0.0, 0.0)
        sat = geodetic_to_ecef(0.0, 5.0, 800_000.0)
        assert compute_look_angles(obs, sat).azimuth_deg == pytest.approx(90.0, abs=1e-6)

    def test_coincident_position_has_zero_range(self):
        obs = Observer(0.0, 0.0, 21_863.0)
        look = compute_look_angles(obs, (6_400_000.0, 0.0, 0.0))
        assert look.range_km == 0.0

    def test_non_finite_input_gives_nan_range(self):
        obs = Observer(0.0, 0.0)
        look = compute_look_angles(obs, (math.nan, math.nan, math.nan))
        assert math.isnan(look.range_km)
