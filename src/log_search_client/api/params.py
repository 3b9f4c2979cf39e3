"""Search parameter helpers.

The client forwards search parameters verbatim. :class:`LogQuery` is an optional
convenience for building them from the keys the log backend understands.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

from pydantic import BaseModel, Field

# An ordered mapping or an ordered sequence of pairs (repeated keys allowed).
SearchParams = Mapping[str, str] | Sequence[tuple[str, str]]

# Server-side page sizes applied when `limit` is omitted.
DEFAULT_LOG_LIMIT = 50
DEFAULT_FIELD_STATS_LIMIT = 20


def to_unix_micros(value: datetime) -> int:
    """Encode a datetime as integer microseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    delta = value - datetime(1970, 1, 1, tzinfo=UTC)
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


class LogQuery(BaseModel):
    """Filters for log search and field statistics queries."""

    service: str = Field(description="Service name; matched as a process id prefix")
    expr: str | None = Field(
        default=None,
        description="SQL-like filter expression; the backend falls back to a message search",
    )
    start: datetime | None = Field(default=None, description="Inclusive lower time bound")
    end: datetime | None = Field(default=None, description="Inclusive upper time bound")
    limit: int | None = Field(default=None, ge=0)
    skip: int | None = Field(default=None, ge=0)

    def to_search_params(self) -> list[tuple[str, str]]:
        """Return the query as ordered key/value pairs, omitting unset filters."""

        params: list[tuple[str, str]] = [("service", self.service)]
        if self.expr:
            params.append(("expr", self.expr))
        if self.start is not None:
            params.append(("start", str(to_unix_micros(self.start))))
        if self.end is not None:
            params.append(("end", str(to_unix_micros(self.end))))
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.skip is not None:
            params.append(("skip", str(self.skip)))
        return params

    def next_page(self) -> LogQuery:
        """Return the query for the page following this one."""

        limit = self.limit if self.limit is not None else DEFAULT_LOG_LIMIT
        return self.model_copy(update={"skip": (self.skip or 0) + limit, "limit": limit})
