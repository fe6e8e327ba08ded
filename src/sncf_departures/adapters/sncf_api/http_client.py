"""HTTP client for SNCF API requests.

Uses the Navitia API exposed by SNCF open data.
API Documentation: https://doc.navitia.io/
"""

import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from sncf_departures.adapters.api_request_logger import log_api_request, log_api_response
from sncf_departures.adapters.sncf_api.constants import DEFAULT_HEADERS, departures_url
from sncf_departures.domain.models import BadStatus, BadUrl, FetchTimeout, NetworkError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from sncf_departures.adapters.config.app_config import AppConfig


class SncfHttpClient:
    """HTTP client for the departures endpoint of a single stop area."""

    def __init__(self, session: "ClientSession", config: "AppConfig") -> None:
        """Initialize with an aiohttp session and the application configuration."""
        self._session = session
        self._api_key = config.sncf_api_key
        self._timeout_seconds = config.api_timeout_seconds
        self._url = departures_url(
            config.sncf_api_base_url, config.stop_area_id, config.query_datetime
        )

    @property
    def departures_url(self) -> str:
        """Fixed URL queried for departures."""
        return self._url

    def _build_headers(self) -> dict[str, str]:
        """Build request headers with the static API credential."""
        return {**DEFAULT_HEADERS, "Authorization": self._api_key}

    def _build_request_options(self) -> dict[str, Any]:
        """Build keyword arguments for the request; the session default timeout applies unless configured."""
        options: dict[str, Any] = {"headers": self._build_headers()}
        if self._timeout_seconds is not None:
            options["timeout"] = aiohttp.ClientTimeout(total=self._timeout_seconds)
        return options

    async def _log_error_response(self, response: "ClientResponse") -> None:
        """Log error response details; a body that cannot be read is logged as such."""
        try:
            error_text = (await response.read()).decode("utf-8", errors="replace")
        except aiohttp.ClientError as e:
            error_text = f"(unreadable response body: {e})"
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"SNCF API returned status {response.status} for {self._url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def fetch_departures_body(self) -> bytes:
        """Fetch the raw departures body with a single GET request.

        Returns:
            The body of a 2xx response.

        Raises:
            FetchTimeout: If the request timed out.
            BadUrl: If the configured URL is not a valid URL.
            NetworkError: If the server could not be reached.
            BadStatus: If the server answered with a non-2xx status.
        """
        options = self._build_request_options()
        log_api_request("GET", self._url, options["headers"])
        started = time.monotonic()

        try:
            async with self._session.get(self._url, **options) as response:
                log_api_response(self._url, response.status, time.monotonic() - started)
                if not 200 <= response.status < 300:
                    await self._log_error_response(response)
                    raise BadStatus(response.status)
                return await response.read()
        except TimeoutError as e:
            logger.warning(f"Timed out fetching SNCF departures from {self._url}")
            raise FetchTimeout("Request timed out") from e
        except aiohttp.InvalidURL as e:
            logger.error(f"Invalid SNCF API URL {self._url}: {e}")
            raise BadUrl(self._url) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Network error fetching SNCF departures from {self._url}: {e}")
            raise NetworkError(str(e)) from e
