"""USGS API Client - Imperative Shell.

This module handles HTTP communication with the USGS Earthquake API.
All I/O is contained here; parsing is in the core module.
"""

import logging
from dataclasses import dataclass

import requests

from src.core.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT


logger = logging.getLogger(__name__)


# Significant earthquakes of 2014 (M7+), newest first
USGS_REQUEST_URL = (
    "https://earthquake.usgs.gov/fdsnws/event/1/query"
    "?format=geojson&starttime=2014-01-01&endtime=2014-12-01&minmagnitude=7"
)


@dataclass
class FetchResponse:
    """Response from the USGS API.

    Attributes:
        success: Whether a 200 response body was read
        status_code: HTTP status code (None if no response arrived)
        body: Response text, empty on any failure
        error: Error message if failed
    """
    success: bool
    status_code: int | None = None
    body: str = ""
    error: str | None = None


def create_url(string_url: str) -> str | None:
    """Validate a URL string.

    Args:
        string_url: URL to validate

    Returns:
        The normalised URL, or None if it is malformed
    """
    try:
        return requests.Request("GET", string_url).prepare().url
    except (requests.RequestException, ValueError):
        logger.error("Error with creating URL %r", string_url, exc_info=True)
        return None


class USGSClient:
    """Client for fetching earthquake data from USGS API.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
    ) -> None:
        """Initialize USGS client.

        Args:
            connect_timeout: Seconds to wait for the connection
            read_timeout: Seconds to wait for response data
        """
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    def make_http_request(self, url: str | None) -> FetchResponse:
        """GET the URL and read the whole body as text.

        This method performs HTTP I/O. The session and response are
        closed on every path.

        Args:
            url: URL to request (None returns an empty response)

        Returns:
            FetchResponse; body is empty unless the status was 200
        """
        if url is None:
            return FetchResponse(success=False, error="No URL")

        logger.info("Fetching earthquakes from USGS")

        try:
            with requests.Session() as session:
                with session.get(
                    url,
                    timeout=(self.connect_timeout, self.read_timeout),
                ) as response:
                    if response.status_code != 200:
                        logger.error("Error response code: %d", response.status_code)
                        return FetchResponse(
                            success=False,
                            status_code=response.status_code,
                            error=f"HTTP {response.status_code}",
                        )

                    response.encoding = "utf-8"
                    body = response.text

        except requests.RequestException as e:
            logger.error("Problem retrieving the earthquake JSON results: %s", e)
            return FetchResponse(success=False, error=str(e))

        logger.info("Fetched %d bytes from USGS", len(body))

        return FetchResponse(success=True, status_code=200, body=body)

