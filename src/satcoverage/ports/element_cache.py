# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for the per-constellation element-set cache.

One slot per constellation identifier; a later put replaces the entry.
"""
from datetime import timedelta
from typing import Protocol, runtime_checkable

from satcoverage.domain.element_sets import ElementSet


@runtime_checkable
class ElementSetCache(Protocol):
    """Port for storing raw element text with its fetch time."""

    def get(self, constellation_id: str) -> ElementSet | None:
        """Return the stored entry, or None. Never raises."""
        ...

    def put(self, constellation_id: str, raw_text: str) -> ElementSet:
        """Store raw text, stamped with the current time."""
        ...

    def is_stale(self, constellation_id: str, max_age: timedelta) -> bool:
        """True if no entry exists or it is older than max_age."""
        ...
