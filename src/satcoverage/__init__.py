# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
satcoverage

Satellite availability and ground-coverage analysis for a ground observer
or a whole constellation. Fetches and caches two-line element sets,
propagates them with SGP4, evaluates look angles and downlink path loss,
and samples coverage footprints into heatmap points.
"""

__version__ = "1.0.0"

from satcoverage.domain.errors import AcquisitionError, ConfigurationError
from satcoverage.domain.constellations import (
    CONSTELLATIONS,
    EARTH_RADIUS_KM,
    ConstellationConfig,
    get_constellation_config,
)
from satcoverage.domain.element_sets import (
    ElementSet,
    SatelliteRecord,
    parse_element_sets,
)
from satcoverage.domain.coordinate_frames import (
    eci_to_ecef,
    ecef_to_geodetic,
    geodetic_to_ecef,
)
from satcoverage.domain.observation import (
    LookAngles,
    Observer,
    compute_look_angles,
)
from satcoverage.domain.link_budget import (
    coverage_radius_km,
    free_space_path_loss_db,
)
from satcoverage.domain.visibility import (
    EvaluatedSatellite,
    evaluate_satellite,
)
from satcoverage.domain.heatmap import (
    HeatmapPoint,
    great_circle_distance_km,
    sample_heatmap,
)
from satcoverage.domain.coverage import (
    CameraFrame,
    CoverageMode,
    CoverageResult,
)
