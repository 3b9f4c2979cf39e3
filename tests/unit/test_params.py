"""Unit tests for search parameter construction."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from log_search_client.api.params import DEFAULT_LOG_LIMIT, LogQuery, to_unix_micros


def test_to_unix_micros() -> None:
    assert to_unix_micros(datetime(1970, 1, 1, tzinfo=UTC)) == 0
    assert to_unix_micros(datetime(2023, 11, 14, 22, 13, 20, 5, tzinfo=UTC)) == (
        1_700_000_000_000_005
    )
    # Naive datetimes are UTC.
    assert to_unix_micros(datetime(2023, 11, 14, 22, 13, 20)) == 1_700_000_000_000_000
    plus_two = timezone(timedelta(hours=2))
    assert to_unix_micros(datetime(1970, 1, 1, 2, tzinfo=plus_two)) == 0


def test_minimal_query_only_sends_service() -> None:
    assert LogQuery(service="checkout").to_search_params() == [("service", "checkout")]


def test_full_query_order_and_encoding() -> None:
    query = LogQuery(
        service="checkout",
        expr="level = 'ERROR'",
        start=datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC),
        end=datetime(1970, 1, 1, 0, 0, 2, tzinfo=UTC),
        limit=20,
        skip=0,
    )

    assert query.to_search_params() == [
        ("service", "checkout"),
        ("expr", "level = 'ERROR'"),
        ("start", "1000000"),
        ("end", "2000000"),
        ("limit", "20"),
        ("skip", "0"),
    ]


def test_empty_expr_is_omitted() -> None:
    assert LogQuery(service="a", expr="").to_search_params() == [("service", "a")]


def test_negative_paging_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LogQuery(service="a", limit=-1)
    with pytest.raises(ValidationError):
        LogQuery(service="a", skip=-5)


def test_next_page_advances_skip() -> None:
    first = LogQuery(service="a")
    second = first.next_page()
    third = second.next_page()

    assert second.limit == DEFAULT_LOG_LIMIT
    assert second.skip == DEFAULT_LOG_LIMIT
    assert third.skip == 2 * DEFAULT_LOG_LIMIT
    assert LogQuery(service="a", limit=10, skip=5).next_page().skip == 15
    assert first.skip is None
