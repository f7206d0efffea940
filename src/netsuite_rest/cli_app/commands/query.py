"""Query command group: SuiteQL."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from netsuite_rest.cli_app.common import positive_int, run_with_client
from netsuite_rest.clients import NetSuiteClient

logger = logging.getLogger(__name__)


def register(subparsers: argparse._SubParsersAction) -> None:
    query_cmd = subparsers.add_parser("query", help="SuiteQL queries")
    query_sub = query_cmd.add_subparsers(dest="subcommand", required=True)

    suiteql = query_sub.add_parser("suiteql", help="Run a SuiteQL statement")
    suiteql.add_argument("query", help="SuiteQL statement, e.g. 'SELECT id FROM item'")
    suiteql.add_argument("--offset", type=int, default=0, help="First row (default: 0)")
    suiteql.add_argument(
        "--limit", type=positive_int, default=None, help="Rows for a single page (default: 10)"
    )
    suiteql.add_argument(
        "--all",
        dest="fetch_all",
        action="store_true",
        help="Follow next links and return every row",
    )
    suiteql.add_argument(
        "--page-limit",
        type=positive_int,
        default=None,
        help="Page size when using --all (default: 1000)",
    )
    suiteql.add_argument(
        "--max-retries",
        type=positive_int,
        default=None,
        help="Attempts per page when using --all (default: 1, no retry)",
    )


async def _single_page(client: NetSuiteClient, args: argparse.Namespace) -> Any:
    return await client.fetch_suiteql(args.query, args.offset, args.limit)


async def _all_pages(client: NetSuiteClient, args: argparse.Namespace) -> dict[str, Any]:
    paginator = client.suiteql_paginator(
        args.query, limit=args.page_limit, max_retries=args.max_retries
    )
    rows: list[dict[str, Any]] = []
    pages = 0
    async for page in paginator.run():
        pages += 1
        rows.extend(page.items)
        logger.info(f"Page {pages}: {len(page.items)} rows")

    return {"pages": pages, "count": len(rows), "items": rows}


def run(args: argparse.Namespace) -> int:
    if args.fetch_all:
        return run_with_client(
            args, "query suiteql", lambda client: _all_pages(client, args)
        )
    return run_with_client(
        args, "query suiteql", lambda client: _single_page(client, args)
    )
