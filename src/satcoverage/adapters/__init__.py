# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for upstream data, propagation, persistence, and output.

External dependencies (urllib, sgp4, file I/O, threads) are confined
to this layer.
"""
from satcoverage.adapters.acquisition import REFRESH_INTERVAL, Acquisition, ElementSetAcquirer
from satcoverage.adapters.celestrak import CelesTrakElementSource
from satcoverage.adapters.concurrent_coverage import CoverageOrchestrator
from satcoverage.adapters.file_cache import FileElementSetCache
from satcoverage.adapters.json_io import coverage_result_to_dict, write_coverage_json
from satcoverage.adapters.sgp4_propagator import Sgp4Propagator

__all__ = [
    "REFRESH_INTERVAL",
    "Acquisition",
    "ElementSetAcquirer",
    "CelesTrakElementSource",
    "CoverageOrchestrator",
    "FileElementSetCache",
    "coverage_result_to_dict",
    "write_coverage_json",
    "Sgp4Propagator",
]
