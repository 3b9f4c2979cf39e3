"""HTTP client for the log-search backend.

Wraps a `requests.Session` so callers deal in decoded JSON and a single error type.

Failure policy differs per operation:
- `get_services`, `get_schema` and `search_logs` raise :class:`TransportError` on a
  non-2xx status.
- `get_field_stats` returns an empty list on a non-2xx status. Field statistics are
  best-effort and must never break the primary search flow.

Connection and JSON decode errors from `requests` are not wrapped.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from log_search_client.api.params import SearchParams
from log_search_client.errors import TransportError

logger = logging.getLogger(__name__)

SERVICES_PATH = "api/services"
SCHEMA_PATH = "api/logs/schema"
LOGS_PATH = "api/logs"
FIELD_STATS_PATH = "api/logs/stats/{field}"


class LogApiClient:
    """Typed facade over the log-search HTTP API."""

    def __init__(
        self,
        base_url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Absolute URL every API path is joined under. Resolved once by
                the caller (see :func:`log_search_client.config.resolve_base_url`).
            session: Optional session to send requests through.
            timeout: Optional per-request timeout in seconds. ``None`` waits forever.
        """
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _get(self, path: str, params: SearchParams | None = None) -> requests.Response:
        url = self._url(path)
        logger.debug("GET %s", url, extra={"path": path})
        resp = self._session.get(url, params=params, timeout=self._timeout)
        logger.debug(
            "Response received",
            extra={"path": path, "status_code": resp.status_code},
        )
        return resp

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        if not resp.ok:
            raise TransportError(resp.reason or "", status_code=resp.status_code)

    def get_services(self) -> list[str]:
        """Return the known service names, sorted ascending."""

        resp = self._get(SERVICES_PATH)
        self._raise_for_status(resp)
        body = resp.json()
        data = body.get("data") if isinstance(body, dict) else None
        return sorted(data or [])

    def get_schema(self) -> dict[str, Any]:
        """Return the log schema (``{"fields": ...}``) exactly as the backend sent it."""

        resp = self._get(SCHEMA_PATH)
        self._raise_for_status(resp)
        return resp.json()

    def search_logs(self, params: SearchParams) -> list[dict[str, Any]]:
        """Search logs.

        Args:
            params: Query parameters, sent in the given order without validation.

        Returns:
            The decoded log records, unmodified.

        Raises:
            TransportError: If the backend answers with a non-2xx status. The message
                is the status text only.
        """
        resp = self._get(LOGS_PATH, params)
        self._raise_for_status(resp)
        return resp.json()

    def get_field_stats(self, field: str, params: SearchParams) -> list[dict[str, Any]]:
        """Return ``{"count", "value"}`` aggregates for a field, in backend order.

        `field` is placed into the path as-is; callers must only pass known schema
        field names. A non-2xx status yields ``[]``.
        """
        resp = self._get(FIELD_STATS_PATH.format(field=field), params)
        if not resp.ok:
            return []
        return resp.json()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> LogApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
