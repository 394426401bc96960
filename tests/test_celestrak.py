# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the CelesTrak element source (network mocked)."""
import http.client
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from satcoverage.adapters.celestrak import BASE_URL, USER_AGENT, CelesTrakElementSource
from satcoverage.ports.orbital_data import ElementSource


ISS_TLE = (
    "ISS (ZARYA)\n"
    "1 25544U 98067A   19343.69339541  .00001764  00000-0  38792-4 0  9991\n"
    "2 25544  51.6439 211.2001 0007417  17.6667  85.6398 15.50103472202482\n"
)


def _mock_response(body: bytes) -> MagicMock:
    response = MagicMock()
    response.read.return_value = body
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


class TestFetchElements:

    def test_satisfies_port(self):
        assert isinstance(CelesTrakElementSource(), ElementSource)

    def test_returns_text(self):
        with patch("urllib.request.urlopen", return_value=_mock_response(ISS_TLE.encode())):
            text = CelesTrakElementSource().fetch_elements("STATIONS")
        assert text == ISS_TLE

    def test_request_url_and_headers(self):
        with patch("urllib.request.urlopen",
                   return_value=_mock_response(ISS_TLE.encode())) as mock_open:
            CelesTrakElementSource(timeout=12.5).fetch_elements("IRIDIUM-NEXT")

        request = mock_open.call_args[0][0]
        assert request.full_url == f"{BASE_URL}?GROUP=IRIDIUM-NEXT&FORMAT=TLE"
        assert request.get_header("User-agent") == USER_AGENT
        assert mock_open.call_args[1]["timeout"] == 12.5

    def test_custom_base_url(self):
        with patch("urllib.request.urlopen",
                   return_value=_mock_response(b"")) as mock_open:
            CelesTrakElementSource(base_url="http://mirror.local/gp.php").fetch_elements("KUIPER")
        assert mock_open.call_args[0][0].full_url.startswith("http://mirror.local/gp.php?")

    def test_no_data_is_empty(self):
        with patch("urllib.request.urlopen",
                   return_value=_mock_response(b"No GP data found\n")):
            assert CelesTrakElementSource().fetch_elements("KUIPER") == ""


class TestFetchErrors:

    def test_http_error(self):
        err = urllib.error.HTTPError(BASE_URL, 503, "Service Unavailable", None, None)
        with patch("urllib.request.urlopen", side_effect=err):
            with pytest.raises(ConnectionError, match="503"):
                CelesTrakElementSource().fetch_elements("STARLINK")

    def test_url_error(self):
        with patch("urllib.request.urlopen",
                   side_effect=urllib.error.URLError("name resolution failed")):
            with pytest.raises(ConnectionError, match="name resolution"):
                CelesTrakElementSource().fetch_elements("STARLINK")

    def test_timeout(self):
        with patch("urllib.request.urlopen", side_effect=TimeoutError("read timed out")):
            with pytest.raises(ConnectionError, match="timed out after 5"):
                CelesTrakElementSource(timeout=5).fetch_elements("STARLINK")

    def test_body_truncated_mid_transfer(self):
        response = _mock_response(b"")
        response.read.side_effect = http.client.IncompleteRead(b"SAT\n1 255", 4000)
        with patch("urllib.request.urlopen", return_value=response):
            with pytest.raises(ConnectionError, match="transfer failed") as info:
                CelesTrakElementSource().fetch_elements("IRIDIUM-NEXT")
        assert isinstance(info.value.__cause__, http.client.IncompleteRead)

    def test_connection_reset_during_read(self):
        response = _mock_response(b"")
        response.read.side_effect = ConnectionResetError("reset by peer")
        with patch("urllib.request.urlopen", return_value=response):
            with pytest.raises(ConnectionError, match="transfer failed"):
                CelesTrakElementSource().fetch_elements("IRIDIUM-NEXT")
