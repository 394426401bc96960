# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the SGP4 propagator adapter (requires sgp4)."""
import math
from datetime import datetime, timedelta, timezone

import pytest

sgp4 = pytest.importorskip("sgp4")

from satcoverage.adapters.sgp4_propagator import Sgp4Propagator  # noqa: E402
from satcoverage.domain.constellations import CONSTELLATIONS  # noqa: E402
from satcoverage.domain.element_sets import parse_element_sets  # noqa: E402
from satcoverage.domain.observation import Observer  # noqa: E402
from satcoverage.domain.visibility import evaluate_satellite  # noqa: E402
from satcoverage.ports.orbital_data import Propagator  # noqa: E402


ISS_L1 = "1 25544U 98067A   19343.69339541  .00001764  00000-0  38792-4 0  9991"
ISS_L2 = "2 25544  51.6439 211.2001 0007417  17.6667  85.6398 15.50103472202482"
EPOCH = datetime(2019, 12, 9, 16, 38, 29, tzinfo=timezone.utc)


@pytest.fixture(scope="module")
def propagator():
    return Sgp4Propagator()


class TestPropagate:

    def test_satisfies_port(self, propagator):
        assert isinstance(propagator, Propagator)

    def test_position_radius_at_epoch(self, propagator):
        pos = propagator.propagate(ISS_L1, ISS_L2, EPOCH)
        assert pos is not None
        assert 6700.0 < math.hypot(*pos) < 6850.0

    def test_moves_over_time(self, propagator):
        a = propagator.propagate(ISS_L1, ISS_L2, EPOCH)
        b = propagator.propagate(ISS_L1, ISS_L2, EPOCH + timedelta(minutes=10))
        distance = math.dist(a, b)
        # roughly 7.66 km/s over 600 s
        assert 4000.0 < distance < 5000.0

    def test_naive_datetime_is_utc(self, propagator):
        naive = propagator.propagate(ISS_L1, ISS_L2, EPOCH.replace(tzinfo=None))
        aware = propagator.propagate(ISS_L1, ISS_L2, EPOCH)
        assert naive == aware


class TestSiderealTime:

    def test_range(self, propagator):
        theta = propagator.sidereal_time(EPOCH)
        assert 0.0 <= theta < 2 * math.pi

    def test_advances_one_turn_per_sidereal_day(self, propagator):
        a = propagator.sidereal_time(EPOCH)
        b = propagator.sidereal_time(EPOCH + timedelta(hours=6))
        # about 90.25 degrees in six hours
        delta = (b - a) % (2 * math.pi)
        assert math.degrees(delta) == pytest.approx(90.25, abs=0.1)


class TestEvaluateWithSgp4:

    def test_iss_altitude(self, propagator):
        record = parse_element_sets(f"ISS (ZARYA)\n{ISS_L1}\n{ISS_L2}\n", 1)[0]
        sat = evaluate_satellite(
            record, Observer(45.42, -75.70, 100.0), CONSTELLATIONS["iridium"], EPOCH, propagator,
        )
        assert sat is not None
        assert 380.0 < sat.altitude_km < 450.0
        assert -52.5 <= sat.lat_deg <= 52.5
        assert (sat.range_km is None) == (sat.path_loss_db is None)
