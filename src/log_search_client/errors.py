"""Exceptions raised by the log search client."""

from __future__ import annotations


class LogSearchClientError(Exception):
    """Base class for errors raised by this package."""


class TransportError(LogSearchClientError):
    """Raised when the backend answers a hard operation with a non-2xx status.

    The message is the HTTP status text only (e.g. ``"Not Found"``). Request URL,
    parameters and body are deliberately left out; callers add context when logging.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code

    def __str__(self) -> str:
        return self.reason
