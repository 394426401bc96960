# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CelesTrak adapter: fetches raw two-line element text for a satellite group.

External dependencies (urllib) are confined to this layer.

Data source:
    CelesTrak GP API: https://celestrak.org/NORAD/elements/gp.php
    Groups: IRIDIUM-NEXT, STARLINK, KUIPER, ONEWEB, GPS-OPS, STATIONS, etc.

Rate limiting: CelesTrak updates at most every 2 hours, so callers are
expected to cache (see ElementSetAcquirer).
"""
import http.client
import logging
import urllib.error
import urllib.request
from urllib.parse import quote

from satcoverage.ports.orbital_data import ElementSource


_log = logging.getLogger(__name__)

BASE_URL = "https://celestrak.org/NORAD/elements/gp.php"
USER_AGENT = "satcoverage/1.0"


class CelesTrakElementSource(ElementSource):
    """
    Fetches TLE-format element sets from CelesTrak's GP API.

    Args:
        base_url: CelesTrak GP API URL.
        timeout: HTTP request timeout in seconds. A timeout is reported
            as ConnectionError like any other network failure.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: float = 30.0):
        self._base_url = base_url
        self._timeout = timeout

    def fetch_elements(self, group_name: str) -> str:
        url = f"{self._base_url}?GROUP={quote(group_name)}&FORMAT=TLE"
        _log.info("Fetching element sets for group %s", group_name)
        return self._fetch_text(url)

    def _fetch_text(self, url: str) -> str:
        """Fetch a text body from CelesTrak."""
        req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                text = response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise ConnectionError(f"CelesTrak API error {e.code}: {e.reason}") from e
        except urllib.error.URLError as e:
            raise ConnectionError(f"CelesTrak connection failed: {e.reason}") from e
        except TimeoutError as e:
            raise ConnectionError(
                f"CelesTrak request timed out after {self._timeout}s"
            ) from e
        except (http.client.HTTPException, OSError) as e:
            # connection dropped while reading the body
            raise ConnectionError(f"CelesTrak transfer failed: {e!r}") from e

        if text.strip() == "No GP data found":
            return ""
        return text
