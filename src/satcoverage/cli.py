# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for satellite coverage analysis.

Usage:
    # Available Iridium satellites over Ottawa (station mode)
    satcoverage --constellation iridium --lat 45.42 --lng -75.70 --alt 100

    # Whole-sky view of two constellations with heatmap points, to a file
    satcoverage --mode constellation -c starlink -c kuiper \\
        --lat 45.42 --lng -75.70 --heatmap -o coverage.json

    # Override the minimum elevation and refresh cadence
    satcoverage -c iridium --lat 51.5 --lng -0.12 --min-elevation 20 \\
        --refresh-hours 6 --cache-dir /var/cache/satcoverage
"""
import argparse
import json
import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

from satcoverage.adapters.acquisition import REFRESH_INTERVAL, ElementSetAcquirer
from satcoverage.adapters.celestrak import CelesTrakElementSource
from satcoverage.adapters.concurrent_coverage import CoverageOrchestrator
from satcoverage.adapters.file_cache import FileElementSetCache
from satcoverage.adapters.json_io import coverage_result_to_dict, write_coverage_json
from satcoverage.domain.constellations import CONSTELLATIONS
from satcoverage.domain.coverage import CoverageMode, CoverageResult
from satcoverage.domain.heatmap import DEFAULT_POINT_SPACING_KM
from satcoverage.domain.observation import Observer
from satcoverage.ports.orbital_data import ElementSource, Propagator

DEFAULT_CACHE_DIR = Path.home() / ".cache" / "satcoverage"
DEFAULT_MAX_SATS = 300


def run(
    constellation_ids: list[str],
    observer: Observer,
    max_sats: int = DEFAULT_MAX_SATS,
    mode: CoverageMode | str = CoverageMode.STATION,
    cache_dir: str | Path = DEFAULT_CACHE_DIR,
    refresh_interval: timedelta = REFRESH_INTERVAL,
    timeout: float = 30.0,
    max_workers: int | None = None,
    min_elevation_override: float | None = None,
    include_heatmap: bool = False,
    point_spacing_km: float = DEFAULT_POINT_SPACING_KM,
    at_time: datetime | None = None,
    source: ElementSource | None = None,
    propagator: Propagator | None = None,
) -> CoverageResult:
    """
    Wire the adapters together and compute one coverage result.

    The cache is opened for the duration of the call and closed afterwards.
    source and propagator default to CelesTrak and SGP4.
    """
    if source is None:
        source = CelesTrakElementSource(timeout=timeout)
    if propagator is None:
        from satcoverage.adapters.sgp4_propagator import Sgp4Propagator
        propagator = Sgp4Propagator()

    with FileElementSetCache(cache_dir) as cache:
        acquirer = ElementSetAcquirer(source, cache, refresh_interval=refresh_interval)
        orchestrator = CoverageOrchestrator(acquirer, propagator, max_workers=max_workers)
        return orchestrator.compute_coverage(
            constellation_ids,
            observer,
            max_sats,
            mode=mode,
            at_time=at_time,
            min_elevation_override=min_elevation_override,
            include_heatmap=include_heatmap,
            point_spacing_km=point_spacing_km,
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute satellite availability and ground coverage for an observer"
    )
    parser.add_argument(
        '--constellation', '-c', action='append', dest='constellations',
        choices=sorted(CONSTELLATIONS),
        help="Constellation to evaluate (repeat for constellation mode; default: iridium)"
    )
    parser.add_argument(
        '--mode', choices=[m.value for m in CoverageMode], default=CoverageMode.STATION.value,
        help="station: available satellites only; constellation: every satellite"
    )

    observer_group = parser.add_argument_group('observer')
    observer_group.add_argument('--lat', type=float, required=True, help="Latitude (deg)")
    observer_group.add_argument('--lng', type=float, required=True, help="Longitude (deg)")
    observer_group.add_argument(
        '--alt', type=float, default=0.0, help="Altitude above ellipsoid (m, default: 0)"
    )

    analysis_group = parser.add_argument_group('analysis')
    analysis_group.add_argument(
        '--max-sats', type=int, default=DEFAULT_MAX_SATS,
        help=f"Maximum satellites per constellation (default: {DEFAULT_MAX_SATS})"
    )
    analysis_group.add_argument(
        '--min-elevation', type=float, default=None,
        help="Override the constellation's minimum elevation (deg)"
    )
    analysis_group.add_argument(
        '--heatmap', action='store_true', default=False,
        help="Include heatmap points sampled from coverage footprints"
    )
    analysis_group.add_argument(
        '--spacing', type=float, default=DEFAULT_POINT_SPACING_KM,
        help=f"Heatmap point spacing in km (default: {DEFAULT_POINT_SPACING_KM:g})"
    )
    analysis_group.add_argument(
        '--workers', type=int, default=None,
        help="Thread pool size for satellite evaluation"
    )

    data_group = parser.add_argument_group('element data')
    data_group.add_argument(
        '--cache-dir', default=str(DEFAULT_CACHE_DIR),
        help=f"Element-set cache directory (default: {DEFAULT_CACHE_DIR})"
    )
    data_group.add_argument(
        '--refresh-hours', type=float,
        default=REFRESH_INTERVAL.total_seconds() / 3600.0,
        help="Refetch cached element sets older than this (default: 2)"
    )
    data_group.add_argument(
        '--timeout', type=float, default=30.0,
        help="Upstream fetch timeout in seconds (default: 30)"
    )

    parser.add_argument('--output', '-o', help="Write the JSON response to this file")
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Debug logging"
    )
    return parser


def main():
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    constellations = args.constellations or ['iridium']

    try:
        observer = Observer(lat_deg=args.lat, lon_deg=args.lng, alt_m=args.alt)
        result = run(
            constellation_ids=constellations,
            observer=observer,
            max_sats=args.max_sats,
            mode=args.mode,
            cache_dir=args.cache_dir,
            refresh_interval=timedelta(hours=args.refresh_hours),
            timeout=args.timeout,
            max_workers=args.workers,
            min_elevation_override=args.min_elevation,
            include_heatmap=args.heatmap,
            point_spacing_km=args.spacing,
        )
    except ImportError as e:
        print(f"{e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, ConnectionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for cid in result.degraded_constellations:
        print(f"Warning: using cached element sets for {cid} (upstream unavailable)",
              file=sys.stderr)

    if args.output:
        count = write_coverage_json(result, args.output)
        print(f"Wrote {count} satellites ({result.available_count} available) to {args.output}")
    else:
        json.dump(coverage_result_to_dict(result), sys.stdout, indent=2)
        print()


if __name__ == '__main__':
    main()
