"""Persisted search UI preferences.

The store is an observable value cell. It is seeded once from storage when created
and writes the full value back to storage on every change (last write wins).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from log_search_client.stores.storage import KeyValueStorage

logger = logging.getLogger(__name__)

CONFIG_KEY = "config-log-search-ui"

UiConfig = dict[str, Any]
Observer = Callable[[UiConfig], None]


def initialize(storage: KeyValueStorage, key: str = CONFIG_KEY) -> UiConfig:
    """Read the persisted UI config.

    Absent entries, invalid JSON and JSON values that are not objects all yield ``{}``.
    A broken entry must never prevent the search page from loading.
    """

    raw = storage.get(key)
    if not raw:
        return {}

    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, RecursionError):
        logger.warning("Stored UI config is not valid JSON; using defaults", extra={"key": key})
        return {}

    if not isinstance(value, dict):
        logger.warning("Stored UI config is not an object; using defaults", extra={"key": key})
        return {}

    return value


class PersistedConfigStore:
    """Observable UI config backed by a key/value storage."""

    def __init__(self, storage: KeyValueStorage, key: str = CONFIG_KEY) -> None:
        self._storage = storage
        self._key = key
        self._observers: list[Observer] = []
        self._value: UiConfig = initialize(storage, key)

        # Registered like any other observer, so the loaded value is written back once.
        self.subscribe(self._persist)

    @property
    def key(self) -> str:
        return self._key

    def _persist(self, value: UiConfig) -> None:
        self._storage.set(self._key, json.dumps(value))
        logger.debug("UI config persisted", extra={"key": self._key})

    def get(self) -> UiConfig:
        return self._value

    def set(self, new_value: UiConfig) -> None:  # noqa: A003
        """Replace the value and notify observers in subscription order.

        Raises:
            TypeError: If `new_value` is not JSON-serialisable. The current value is kept.
        """
        json.dumps(new_value)
        self._value = new_value
        for observer in list(self._observers):
            observer(new_value)

    def update(self, updater: Callable[[UiConfig], UiConfig]) -> None:
        self.set(updater(self._value))

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register `observer`; it is called with the current value right away.

        Returns:
            A callable that removes the observer again.
        """
        self._observers.append(observer)
        observer(self._value)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe
