"""Log search client.

Provides:
- a typed HTTP client for the log-search backend (services, schema, logs, field stats)
- a persisted, observable store for search UI preferences
- settings loaded from the environment / `.env`
"""

__version__ = "0.1.0"

from log_search_client.api.client import LogApiClient, TransportError
from log_search_client.config import LogSearchSettings
from log_search_client.stores.search_ui import PersistedConfigStore

__all__ = [
    "__version__",
    "LogApiClient",
    "LogSearchSettings",
    "PersistedConfigStore",
    "TransportError",
]
