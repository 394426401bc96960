# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces.

Adapters implement these to reach upstream providers, the propagator,
and persistent storage.
"""
from satcoverage.ports.element_cache import ElementSetCache
from satcoverage.ports.orbital_data import ElementSource, Propagator

__all__ = ["ElementSetCache", "ElementSource", "Propagator"]
