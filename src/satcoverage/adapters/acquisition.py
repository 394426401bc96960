# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Element-set acquisition with cache and degraded fallback.

Fresh cache entries are served without touching the network. Stale or
missing entries trigger one upstream fetch; if that fails, the last stored
text is served (even when stale) and the result is flagged as degraded.
Only a failed fetch with nothing cached is an error.

No retries: the cache fallback is the only recovery path.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from satcoverage.domain.constellations import get_constellation_config
from satcoverage.domain.element_sets import SatelliteRecord, parse_element_sets
from satcoverage.domain.errors import AcquisitionError
from satcoverage.ports.element_cache import ElementSetCache
from satcoverage.ports.orbital_data import ElementSource


_log = logging.getLogger(__name__)

REFRESH_INTERVAL = timedelta(hours=2)


@dataclass(frozen=True)
class Acquisition:
    """Records served for one constellation and where they came from."""
    constellation_id: str
    records: tuple[SatelliteRecord, ...]
    fetched_at: datetime
    degraded: bool = False


class ElementSetAcquirer:
    """
    Serves parsed element sets per constellation.

    Args:
        source: Upstream element-text provider.
        cache: Persistent per-constellation cache.
        refresh_interval: Age after which a cached entry is refetched.
    """

    def __init__(
        self,
        source: ElementSource,
        cache: ElementSetCache,
        refresh_interval: timedelta = REFRESH_INTERVAL,
    ):
        self._source = source
        self._cache = cache
        self._refresh_interval = refresh_interval

    def acquire(self, constellation_id: str, max_records: int) -> list[SatelliteRecord]:
        """Ordered records for a constellation, at most max_records of them."""
        return list(self.acquire_detailed(constellation_id, max_records).records)

    def acquire_detailed(self, constellation_id: str, max_records: int) -> Acquisition:
        """
        Acquire records and report whether they came from a degraded fallback.

        Raises:
            ConfigurationError: Unknown constellation identifier.
            AcquisitionError: Fetch failed and no cached text exists.
        """
        config = get_constellation_config(constellation_id)

        if not self._cache.is_stale(constellation_id, self._refresh_interval):
            cached = self._cache.get(constellation_id)
            if cached is not None:
                _log.info("Using cached element sets for %s (fetched %s)",
                          constellation_id, cached.fetched_at.isoformat())
                return Acquisition(
                    constellation_id=constellation_id,
                    records=tuple(parse_element_sets(cached.raw_text, max_records)),
                    fetched_at=cached.fetched_at,
                )

        try:
            raw_text = self._source.fetch_elements(config.group_name)
            if not parse_element_sets(raw_text, 1):
                raise ValueError(f"No valid element sets in response for {config.group_name}")
        except (ConnectionError, TimeoutError, ValueError) as e:
            return self._fallback(constellation_id, max_records, e)

        records = parse_element_sets(raw_text, max_records)
        _log.info("Fetched %d element sets for %s", len(records), constellation_id)
        try:
            fetched_at = self._cache.put(constellation_id, raw_text).fetched_at
        except OSError as e:
            # fetched data is still served; the next request refetches
            _log.warning("Could not store element sets for %s: %s", constellation_id, e)
            fetched_at = datetime.now(tz=timezone.utc)

        return Acquisition(
            constellation_id=constellation_id,
            records=tuple(records),
            fetched_at=fetched_at,
        )

    def _fallback(
        self,
        constellation_id: str,
        max_records: int,
        cause: Exception,
    ) -> Acquisition:
        cached = self._cache.get(constellation_id)
        if cached is None:
            raise AcquisitionError(constellation_id, cause) from cause

        _log.warning(
            "Fetch failed for %s (%s); serving cached element sets from %s",
            constellation_id, cause, cached.fetched_at.isoformat(),
        )
        return Acquisition(
            constellation_id=constellation_id,
            records=tuple(parse_element_sets(cached.raw_text, max_records)),
            fetched_at=cached.fetched_at,
            degraded=True,
        )
