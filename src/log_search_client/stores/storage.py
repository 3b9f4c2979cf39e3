"""Key/value storage backends for persisted client state.

Values are opaque strings; callers own serialisation. The JSON file backend is a
best-effort durable store for a single process, not a database.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...  # noqa: A003


@dataclass
class InMemoryStorage:
    """Dict-backed storage; contents vanish with the process."""

    items: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.items.get(key)

    def set(self, key: str, value: str) -> None:  # noqa: A003
        self.items[key] = value


@dataclass
class JsonFileStorage:
    """Durable storage in a single JSON object file (``{key: value}``)."""

    path: Path

    def __post_init__(self) -> None:
        self._lock = threading.Lock()

    def _load_unlocked(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
            logger.warning(
                "Storage file is not valid JSON; treating as empty",
                extra={"path": str(self.path)},
            )
            return {}
        if not isinstance(raw, dict):
            logger.warning(
                "Storage file has unexpected shape; treating as empty",
                extra={"path": str(self.path)},
            )
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _save_unlocked(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(items, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._load_unlocked().get(key)

    def set(self, key: str, value: str) -> None:  # noqa: A003
        with self._lock:
            items = self._load_unlocked()
            items[key] = value
            self._save_unlocked(items)
