"""HTTP API access for the log-search backend."""

from log_search_client.api.client import LogApiClient
from log_search_client.api.params import (
    DEFAULT_FIELD_STATS_LIMIT,
    DEFAULT_LOG_LIMIT,
    LogQuery,
    SearchParams,
)
from log_search_client.errors import TransportError

__all__ = [
    "DEFAULT_FIELD_STATS_LIMIT",
    "DEFAULT_LOG_LIMIT",
    "LogApiClient",
    "LogQuery",
    "SearchParams",
    "TransportError",
]
