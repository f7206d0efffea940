"""System command group: configuration and connectivity checks."""

from __future__ import annotations

import argparse
import asyncio
import sys

from netsuite_rest.cli_app.output import emit
from netsuite_rest.clients import NetSuiteClient
from netsuite_rest.config import CREDENTIAL_ENV_VARS, Config
from netsuite_rest.utils.errors import NetSuiteError, handle_error


def obfuscate_sensitive_value(value: str | None, keep_chars: int = 4) -> str | None:
    """Obfuscate sensitive values by showing only the first few characters."""
    if not value or not isinstance(value, str):
        return value
    if len(value) <= keep_chars:
        return "*" * len(value)
    return value[:keep_chars] + "*" * (len(value) - keep_chars)


def register(subparsers: argparse._SubParsersAction) -> None:
    system_cmd = subparsers.add_parser("system", help="Configuration and connectivity")
    system_sub = system_cmd.add_subparsers(dest="subcommand", required=True)

    check = system_sub.add_parser(
        "check", help="Show which credentials are set and probe the account"
    )
    check.add_argument(
        "--skip-connection",
        action="store_true",
        help="Only inspect configuration, do not call NetSuite",
    )


def run(args: argparse.Namespace) -> int:
    config = Config.load(args.env_file)
    missing = config.missing_credentials

    report: dict[str, object] = {
        "account_id": obfuscate_sensitive_value(config.account_id),
        "credentials": {name: name not in missing for name in CREDENTIAL_ENV_VARS},
        "missing": missing,
        "connected": None,
    }

    if missing or args.skip_connection:
        emit(report)
        return 1 if missing else 0

    async def _probe() -> bool:
        async with NetSuiteClient(config=config) as client:
            return await client.test_connection()

    try:
        report["connected"] = asyncio.run(_probe())
    except NetSuiteError as e:
        print(handle_error(e, "system check"), file=sys.stderr)
        return 1

    emit(report)
    return 0 if report["connected"] else 1
