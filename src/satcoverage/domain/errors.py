# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error types raised across the coverage pipeline.

Expected absences (decayed orbits, degenerate geometry) are not errors;
they are represented as None values on the evaluated result.
"""


class ConfigurationError(ValueError):
    """Unknown constellation identifier or invalid static configuration."""


class AcquisitionError(ConnectionError):
    """No fresh element sets could be fetched and no cached copy exists."""

    def __init__(self, constellation_id: str, cause: BaseException | None = None):
        self.constellation_id = constellation_id
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Element sets for '{constellation_id}' unavailable "
            f"(fetch failed, no cache){detail}"
        )
