# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Concurrent coverage orchestrator: fans satellite evaluation out to threads.

Uses ThreadPoolExecutor from stdlib. Acquisition (the only network I/O)
stays sequential, one constellation at a time; evaluation of the
satellites within a constellation is parallelized. Evaluations share no
mutable state, so output order is not guaranteed.
"""
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from typing import Sequence

from satcoverage.adapters.acquisition import ElementSetAcquirer
from satcoverage.domain.constellations import (
    ConstellationConfig,
    get_constellation_config,
    with_min_elevation,
)
from satcoverage.domain.coverage import (
    CoverageMode,
    CoverageResult,
    parse_mode,
    select_for_mode,
    suggest_camera,
)
from satcoverage.domain.element_sets import SatelliteRecord
from satcoverage.domain.errors import AcquisitionError
from satcoverage.domain.heatmap import DEFAULT_POINT_SPACING_KM, sample_heatmap
from satcoverage.domain.observation import Observer
from satcoverage.domain.visibility import EvaluatedSatellite, evaluate_satellite
from satcoverage.ports.orbital_data import Propagator


_log = logging.getLogger(__name__)


class CoverageOrchestrator:
    """
    Computes coverage for one or more constellations against an observer.

    Args:
        acquirer: Source of parsed element sets (cache-backed).
        propagator: Orbit propagator used by every evaluation.
        max_workers: Thread pool size for satellite evaluation.
            Default: min(32, os.cpu_count() + 4), same as the Python default.
    """

    def __init__(
        self,
        acquirer: ElementSetAcquirer,
        propagator: Propagator,
        max_workers: int | None = None,
    ):
        self._acquirer = acquirer
        self._propagator = propagator
        self._max_workers = max_workers or min(32, (os.cpu_count() or 1) + 4)

    def compute_coverage(
        self,
        constellation_ids: Sequence[str],
        observer: Observer,
        max_sats: int,
        mode: CoverageMode | str = CoverageMode.STATION,
        at_time: datetime | None = None,
        min_elevation_override: float | None = None,
        include_heatmap: bool = False,
        point_spacing_km: float = DEFAULT_POINT_SPACING_KM,
    ) -> CoverageResult:
        """
        Evaluate every acquired satellite and assemble the response.

        Args:
            constellation_ids: Constellations to evaluate; exactly one in
                station mode.
            observer: Ground observer.
            max_sats: Upper bound on satellites per constellation.
            mode: "station" keeps available satellites only;
                "constellation" keeps every evaluated satellite.
            at_time: Evaluation instant (default: now, UTC).
            min_elevation_override: Replaces the configured minimum
                elevation for availability and coverage radius.
            include_heatmap: Attach spiral-sampled footprint points.
            point_spacing_km: Heatmap point spacing.

        Returns:
            CoverageResult.

        Raises:
            ConfigurationError: Unknown constellation identifier.
            ValueError: Invalid mode or constellation count for the mode.
            AcquisitionError: Acquisition failed for every constellation.
        """
        coverage_mode = parse_mode(mode)
        ids = tuple(constellation_ids)
        if not ids:
            raise ValueError("At least one constellation is required")
        if coverage_mode is CoverageMode.STATION and len(ids) != 1:
            raise ValueError(
                f"Station mode evaluates exactly one constellation, got {len(ids)}"
            )

        configs = {
            cid: with_min_elevation(get_constellation_config(cid), min_elevation_override)
            for cid in ids
        }

        if at_time is None:
            at_time = datetime.now(tz=timezone.utc)
        elif at_time.tzinfo is None:
            at_time = at_time.replace(tzinfo=timezone.utc)

        evaluated: list[EvaluatedSatellite] = []
        degraded: list[str] = []
        last_error: AcquisitionError | None = None
        acquired_any = False

        for cid in ids:
            try:
                acquisition = self._acquirer.acquire_detailed(cid, max_sats)
            except AcquisitionError as e:
                _log.warning("Skipping constellation %s: %s", cid, e)
                last_error = e
                continue

            acquired_any = True
            if acquisition.degraded:
                degraded.append(cid)
            evaluated.extend(self._evaluate_concurrent(
                acquisition.records, observer, configs[cid], at_time,
            ))

        if not acquired_any and last_error is not None:
            raise last_error

        satellites = select_for_mode(coverage_mode, evaluated)
        heatmap = (
            tuple(sample_heatmap(satellites, point_spacing_km))
            if include_heatmap else None
        )

        return CoverageResult(
            observer=observer,
            constellation_ids=ids,
            mode=coverage_mode,
            satellites=tuple(satellites),
            camera=suggest_camera(coverage_mode, observer),
            evaluated_at=at_time,
            degraded_constellations=tuple(degraded),
            heatmap_points=heatmap,
        )

    def _evaluate_concurrent(
        self,
        records: Sequence[SatelliteRecord],
        observer: Observer,
        config: ConstellationConfig,
        at_time: datetime,
    ) -> list[EvaluatedSatellite]:
        """Evaluate records on the thread pool; failures are dropped."""
        results: list[EvaluatedSatellite] = []
        if not records:
            return results

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {
                executor.submit(
                    evaluate_satellite, record, observer, config, at_time, self._propagator,
                ): record
                for record in records
            }

            for future in as_completed(futures):
                record = futures[future]
                try:
                    sat = future.result()
                except (RuntimeError, ValueError) as e:
                    _log.warning("Skipping %s (%d): %s", record.name, record.norad_id, e)
                    continue
                if sat is not None:
                    results.append(sat)

        return results
