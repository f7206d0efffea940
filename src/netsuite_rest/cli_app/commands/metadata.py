"""Metadata command group: OpenAPI record catalog."""

from __future__ import annotations

import argparse
from typing import Any

from netsuite_rest.cli_app.common import run_with_client
from netsuite_rest.clients import NetSuiteClient
from netsuite_rest.models import MetadataOptions


def register(subparsers: argparse._SubParsersAction) -> None:
    metadata_cmd = subparsers.add_parser("metadata", help="Record metadata catalog")
    metadata_sub = metadata_cmd.add_subparsers(dest="subcommand", required=True)

    fetch = metadata_sub.add_parser("fetch", help="Fetch the OpenAPI record catalog")
    fetch.add_argument(
        "--record-type",
        dest="record_types",
        action="append",
        default=None,
        help="Restrict to a record type (repeatable), e.g. customer",
    )
    fetch.add_argument(
        "--save", action="store_true", help="Write the catalog to a JSON file"
    )
    fetch.add_argument("--file-name", default=None, help="Output file name")


async def _fetch(client: NetSuiteClient, args: argparse.Namespace) -> dict[str, Any]:
    options = MetadataOptions(
        record_types=args.record_types,
        save_to_file=args.save,
        file_name=args.file_name,
    )
    metadata = await client.get_openapi_metadata(options)
    if not args.save:
        return metadata

    paths = metadata.get("paths") or {}
    return {
        "saved_to": options.file_name or client.settings.metadata_file_name,
        "path_count": len(paths),
        "paths": sorted(paths)[:10],
    }


def run(args: argparse.Namespace) -> int:
    return run_with_client(args, "metadata fetch", lambda client: _fetch(client, args))
