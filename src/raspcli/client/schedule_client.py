"""Synchronous client for the schedule-search endpoint.

This module provides :class:`ScheduleClient`, which wraps
:class:`httpx.Client` and layers on:

- **Credential injection** -- the API key is sent as the ``apikey`` query
  parameter on every request.
- **Error mapping** -- non-2xx responses raise
  :class:`~raspcli.exceptions.TransportError`, network failures raise
  :class:`~raspcli.exceptions.ConnectionError_`, and undecodable bodies
  raise :class:`~raspcli.exceptions.ResponseParseError`.

There is no retry and no caching here; a failed request is reported once
and the cache tiers are handled by :class:`~raspcli.search.TripSearch`.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx

from raspcli.exceptions import ConnectionError_, ResponseParseError, TransportError
from raspcli.models import RequestConfig
from raspcli.output import get_output

SEARCH_PATH = "/search/"


class ScheduleClient:
    """Synchronous HTTP client for schedule searches.

    Must be used as a context manager so that the underlying connection pool
    is opened and closed around a single operation.

    Args:
        config: Endpoint, timeout, language and result limit.
        api_key: Provider credential.
        transport: Optional :mod:`httpx` transport, used by tests to serve
            canned responses.

    Example::

        with ScheduleClient(RequestConfig(), api_key="secret") as client:
            payload = client.search("c2", "c172", "2024-05-01")
    """

    def __init__(
        self,
        config: RequestConfig,
        api_key: str,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> ScheduleClient:
        self._client = httpx.Client(
            base_url=self._config.base_url.rstrip("/"),
            timeout=self._config.timeout,
            verify=self._config.verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def build_params(self, origin: str, destination: str, date: str) -> dict[str, Any]:
        """Return the query parameters for a search request."""
        return {
            "from": origin,
            "to": destination,
            "format": "json",
            "lang": self._config.lang,
            "apikey": self._api_key,
            "date": date,
            "limit": self._config.limit,
        }

    def search(self, origin: str, destination: str, date: str) -> Any:
        """Fetch the raw schedule document for a route and date.

        Returns:
            The decoded JSON document, exactly as the provider sent it.

        Raises:
            TransportError: On any non-2xx status.
            ConnectionError_: On network or timeout errors.
            ResponseParseError: If the body is not valid JSON.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        get_output().debug(f"GET {self._config.base_url}{SEARCH_PATH} from={origin} to={destination} date={date}")
        try:
            response = self._client.get(
                SEARCH_PATH,
                params=self.build_params(origin, destination, date),
                headers={"Accept": "application/json"},
            )
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            raise ConnectionError_(f"Connection to schedule API failed: {exc}") from exc

        self._map_response_error(response)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ResponseParseError(f"Cannot decode schedule API response: {exc}") from exc

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _map_response_error(self, response: httpx.Response) -> None:
        """Raise :class:`TransportError` for any non-2xx status."""
        status = response.status_code
        if 200 <= status < 300:
            return

        # The API reports errors as {"error": {"text": ..., "http_code": ...}}.
        msg = ""
        try:
            detail = response.json()
            if isinstance(detail, dict):
                err = detail.get("error")
                if isinstance(err, dict):
                    msg = str(err.get("text") or "")
                elif err:
                    msg = str(err)
                else:
                    msg = str(detail.get("message") or "")
        except ValueError:
            msg = response.text[:200] if response.text else ""

        prefix = f"Cannot fetch schedule data: HTTP {status}"
        raise TransportError(f"{prefix}: {msg}" if msg else prefix, status_code=status)
