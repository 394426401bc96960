# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Static per-constellation radio and geometry configuration.

One immutable record per constellation identifier. Values are read-only
configuration, never derived at runtime.
"""
from dataclasses import dataclass, replace
from types import MappingProxyType

from satcoverage.domain.errors import ConfigurationError

EARTH_RADIUS_KM = 6371.0  # mean spherical radius used for footprints


@dataclass(frozen=True)
class ConstellationConfig:
    """Downlink frequency and availability thresholds for a constellation."""
    name: str
    group_name: str
    frequency_ghz: float
    min_elevation_deg: float
    max_path_loss_db: float


CONSTELLATIONS = MappingProxyType({
    "iridium": ConstellationConfig(
        name="iridium",
        group_name="IRIDIUM-NEXT",
        frequency_ghz=1.6,
        min_elevation_deg=10.0,
        max_path_loss_db=160.0,
    ),
    "starlink": ConstellationConfig(
        name="starlink",
        group_name="STARLINK",
        frequency_ghz=12.0,
        min_elevation_deg=25.0,
        max_path_loss_db=155.0,
    ),
    "kuiper": ConstellationConfig(
        name="kuiper",
        group_name="KUIPER",
        frequency_ghz=12.0,
        min_elevation_deg=25.0,
        max_path_loss_db=155.0,
    ),
})


def get_constellation_config(constellation_id: str) -> ConstellationConfig:
    """
    Look up the configuration for a constellation identifier.

    Raises:
        ConfigurationError: If the identifier is not configured.
    """
    try:
        return CONSTELLATIONS[constellation_id]
    except KeyError:
        known = ", ".join(sorted(CONSTELLATIONS))
        raise ConfigurationError(
            f"Unknown constellation '{constellation_id}' (known: {known})"
        ) from None


def with_min_elevation(
    config: ConstellationConfig,
    min_elevation_deg: float | None,
) -> ConstellationConfig:
    """Return config with its minimum elevation overridden (None keeps it)."""
    if min_elevation_deg is None:
        return config
    if not -90.0 <= min_elevation_deg <= 90.0:
        raise ValueError(
            f"Minimum elevation must be between -90 and 90, got {min_elevation_deg}"
        )
    return replace(config, min_elevation_deg=float(min_elevation_deg))
