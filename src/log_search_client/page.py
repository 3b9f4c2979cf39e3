"""Bootstrap helpers for a log search page.

Resolves the API base URL from settings once, wires up the client and the UI config
store, and loads the data every search page needs before its first query.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from log_search_client.api.client import LogApiClient
from log_search_client.config import LogSearchSettings
from log_search_client.stores.search_ui import PersistedConfigStore
from log_search_client.stores.storage import JsonFileStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchPageData:
    """Data loaded once per page: the service catalogue and the log schema."""

    services: list[str]
    schema: dict[str, Any]


def create_client(settings: LogSearchSettings) -> LogApiClient:
    base_url = settings.base_url
    logger.info(
        "Creating log API client",
        extra={"base_url": base_url, "environment": settings.environment},
    )
    return LogApiClient(base_url, timeout=settings.http_timeout_seconds)


def create_config_store(settings: LogSearchSettings) -> PersistedConfigStore:
    return PersistedConfigStore(JsonFileStorage(settings.storage_file))


def load_search_page(client: LogApiClient) -> SearchPageData:
    """Fetch services and schema concurrently.

    Either failure propagates to the caller unchanged.
    """

    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="search-page") as pool:
        services_future = pool.submit(client.get_services)
        schema_future = pool.submit(client.get_schema)
        services = services_future.result()
        schema = schema_future.result()

    logger.info("Search page data loaded", extra={"services": len(services)})
    return SearchPageData(services=services, schema=schema)
