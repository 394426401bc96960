# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
File-backed element-set cache.

One JSON file per constellation identifier, holding the raw element text
and the UTC time it was stored. Writes go to a temporary file in the same
directory and are swapped in with os.replace, so a concurrent reader sees
either the previous entry or the new one, never a partial file.

The cache never raises on reads: a missing or corrupt file, or an id that
cannot name a cache file, is a miss. Writes reject such ids with ValueError.
"""
import json
import logging
import os
import re
import tempfile
import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

from satcoverage.domain.element_sets import ElementSet
from satcoverage.ports.element_cache import ElementSetCache


_log = logging.getLogger(__name__)

_VALID_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class FileElementSetCache(ElementSetCache):
    """
    Element-set cache persisted under a directory.

    Use as a context manager, or call open() at startup and close() at
    shutdown. Callers pass the handle around; there is no global instance.

    Args:
        directory: Directory holding one <constellation_id>.json per entry.
        clock: Returns the current UTC time; injectable for tests.
    """

    def __init__(self, directory: str | Path, clock: Callable[[], datetime] | None = None):
        self._dir = Path(directory)
        self._clock = clock or _utc_now
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def directory(self) -> Path:
        return self._dir

    def open(self) -> "FileElementSetCache":
        self._dir.mkdir(parents=True, exist_ok=True)
        return self

    def close(self) -> None:
        with self._locks_guard:
            self._locks.clear()

    def __enter__(self) -> "FileElementSetCache":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get(self, constellation_id: str) -> ElementSet | None:
        if not _VALID_ID.match(constellation_id):
            _log.warning("Ignoring cache lookup for invalid id %r", constellation_id)
            return None
        path = self._path_for(constellation_id)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            fetched_at = datetime.fromisoformat(data["fetched_at"])
            if fetched_at.tzinfo is None:
                fetched_at = fetched_at.replace(tzinfo=timezone.utc)
            return ElementSet(
                constellation_id=constellation_id,
                raw_text=str(data["raw_text"]),
                fetched_at=fetched_at,
            )
        except FileNotFoundError:
            return None
        except (OSError, ValueError, KeyError, TypeError) as e:
            _log.warning("Ignoring unreadable cache entry %s: %s", path, e)
            return None

    def put(self, constellation_id: str, raw_text: str) -> ElementSet:
        path = self._path_for(constellation_id)
        entry = ElementSet(
            constellation_id=constellation_id,
            raw_text=raw_text,
            fetched_at=self._clock(),
        )
        payload = {
            "constellation_id": constellation_id,
            "raw_text": raw_text,
            "fetched_at": entry.fetched_at.isoformat(),
        }

        with self._lock_for(constellation_id):
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._dir, prefix=f".{constellation_id}.", suffix=".tmp",
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, path)
            except BaseException:
                try:
                    os.unlink(tmp_path)
                except FileNotFoundError:
                    pass
                raise

        return entry

    def is_stale(self, constellation_id: str, max_age: timedelta) -> bool:
        entry = self.get(constellation_id)
        if entry is None:
            return True
        return self._clock() - entry.fetched_at >= max_age

    def _path_for(self, constellation_id: str) -> Path:
        if not _VALID_ID.match(constellation_id):
            raise ValueError(f"Invalid constellation id for cache: {constellation_id!r}")
        return self._dir / f"{constellation_id}.json"

    def _lock_for(self, constellation_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(constellation_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[constellation_id] = lock
            return lock
