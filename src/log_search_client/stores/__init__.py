"""Persisted client-side state."""

from log_search_client.stores.search_ui import CONFIG_KEY, PersistedConfigStore, initialize
from log_search_client.stores.storage import InMemoryStorage, JsonFileStorage, KeyValueStorage

__all__ = [
    "CONFIG_KEY",
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "PersistedConfigStore",
    "initialize",
]
