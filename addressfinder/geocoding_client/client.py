"""
Address Finder - Geocoding Client

Forward geocoding (free text -> addresses) against the Google Maps
Geocoding web service, or any endpoint speaking the same JSON format.
Calls are blocking and are meant to run on a worker thread.
"""

import logging
from typing import Callable, Optional

import requests

from geocoding_client.address import Address
from geocoding_client.errors import LimitExceededError, TransportError
from geocoding_client.retry import retry_call

logger = logging.getLogger("addressfinder.geocoder")

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

_STATUS_OK = "OK"
_STATUS_ZERO_RESULTS = "ZERO_RESULTS"
_STATUS_OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"


class Geocoder:
    """Blocking geocoding client.

    Args:
        api_key: Optional API key appended as ``key=``.
        language: Default language code for formatted addresses.
        base_url: JSON endpoint URL.
        timeout: Per-request timeout in seconds.
        max_attempts: Attempts per lookup for transport failures.
        session: Optional ``requests.Session`` (injected by tests).
    """

    def __init__(
        self,
        api_key: str | None = None,
        language: str = "en",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10,
        max_attempts: int = 2,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.language = language
        self.base_url = base_url
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_from_location_name(
        self,
        location_name: str,
        max_results: int = 20,
        parse_components: bool = True,
        language: str | None = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> list[Address]:
        """Look up addresses matching ``location_name``.

        Args:
            location_name: Free-form address or place name.
            max_results: Upper bound on the number of addresses returned.
            parse_components: Fill street/city/country fields from the
                response's address components.
            language: Overrides the client's default language.
            should_stop: Called between retries; returning True abandons
                the lookup with the last error.

        Returns:
            Addresses in backend order; empty when nothing matched.

        Raises:
            LimitExceededError: The backend quota or rate limit was hit.
            TransportError: The request failed or the response was unusable.
        """
        if max_results < 1:
            raise ValueError("max_results must be at least 1")

        params = {
            "address": location_name,
            "language": language or self.language,
        }
        if self.api_key:
            params["key"] = self.api_key

        data = retry_call(
            self._fetch,
            args=(params,),
            max_attempts=self.max_attempts,
            retryable_exceptions=(TransportError,),
            non_retryable_exceptions=(LimitExceededError,),
            stop_check=should_stop,
        )
        addresses = self._parse_results(data, parse_components)
        logger.debug(
            "Geocoded %r: %d result(s)", location_name, min(len(addresses), max_results)
        )
        return addresses[:max_results]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _fetch(self, params: dict) -> dict:
        """Perform one HTTP request and return the decoded, status-checked body."""
        try:
            resp = self._session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Geocoding request failed: {exc}") from exc

        if resp.status_code == 429:
            raise LimitExceededError("Geocoding rate limit exceeded (HTTP 429)")
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise TransportError(f"Geocoding request failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransportError(f"Invalid geocoding response: {exc}") from exc
        if not isinstance(data, dict):
            raise TransportError("Invalid geocoding response: expected a JSON object")

        self._check_status(data)
        return data

    @staticmethod
    def _check_status(data: dict) -> None:
        status = data.get("status", "")
        if status in (_STATUS_OK, _STATUS_ZERO_RESULTS):
            return
        message = data.get("error_message") or status or "missing status"
        if status == _STATUS_OVER_QUERY_LIMIT:
            raise LimitExceededError(f"Geocoding quota exceeded: {message}")
        raise TransportError(f"Geocoding failed ({status or 'no status'}): {message}")

    @staticmethod
    def _parse_results(data: dict, parse_components: bool) -> list[Address]:
        if data.get("status") == _STATUS_ZERO_RESULTS:
            return []
        results = []
        for item in data.get("results", []):
            address = Address.from_json(item, parse_components=parse_components)
            if address.formatted_address:
                results.append(address)
        return results


def make_lookup(geocoder: Geocoder, max_results: int, locale: str | None):
    """Bind a geocoder into the ``lookup_fn(query, should_stop)`` shape
    expected by the search controller."""

    def lookup(query: str, should_stop=None) -> list[Address]:
        return geocoder.get_from_location_name(
            query,
            max_results=max_results,
            language=locale,
            should_stop=should_stop,
        )

    return lookup
