# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for external orbital data and propagation.

Adapters handle the actual HTTP calls and the SGP4 library.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ElementSource(Protocol):
    """Port for fetching raw element-set text from an upstream provider."""

    def fetch_elements(self, group_name: str) -> str:
        """Fetch raw TLE text for a named group.

        Raises:
            ConnectionError: On network failure or timeout.
        """
        ...


@runtime_checkable
class Propagator(Protocol):
    """Port for orbit propagation and Earth rotation angle."""

    def propagate(
        self, line1: str, line2: str, at_time: datetime,
    ) -> tuple[float, float, float] | None:
        """ECI position (km) at at_time, or None for a decayed/invalid orbit."""
        ...

    def sidereal_time(self, at_time: datetime) -> float:
        """Earth rotation angle (radians) used to rotate ECI into ECEF."""
        ...
