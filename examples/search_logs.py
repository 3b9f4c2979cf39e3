#!/usr/bin/env python3
"""Programmatic log search example.

This demonstrates using the client components directly:

* load settings from `.env`
* load the service list and log schema for a search page
* run a log search and a best-effort field statistics query
* remember the last searched service in the persisted UI config
"""

from __future__ import annotations

import argparse
from typing import Sequence

from log_search_client.api import LogQuery, TransportError
from log_search_client.config import LogSearchSettings
from log_search_client.logging import configure_logging
from log_search_client.page import create_client, create_config_store, load_search_page


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search logs (programmatic example).")
    parser.add_argument("--service", default="", help="Service to search (defaults to the last one)")
    parser.add_argument("--expr", default=None, help='Filter expression, e.g. "level = \'ERROR\'"')
    parser.add_argument("--limit", type=int, default=20, help="Maximum number of records")
    parser.add_argument("--stats-field", default="level", help="Field to aggregate")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = LogSearchSettings()
    configure_logging(settings.log_level)

    config = create_config_store(settings)
    with create_client(settings) as client:
        page = load_search_page(client)
        service = args.service or config.get().get("service") or (page.services or [""])[0]
        if not service:
            print("No services reported by the backend")
            return 1

        params = LogQuery(service=service, expr=args.expr, limit=args.limit).to_search_params()
        try:
            logs = client.search_logs(params)
        except TransportError as exc:
            print(f"Search failed: {exc}")
            return 1

        stats = client.get_field_stats(args.stats_field, params)

    config.update(lambda current: {**current, "service": service})

    print(f"{len(logs)} log records for {service!r}")
    for stat in stats:
        print(f"  {args.stats_field}={stat['value']}: {stat['count']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
