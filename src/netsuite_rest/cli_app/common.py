"""Shared helpers for CLI command groups."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Awaitable, Callable
import json
import sys
from typing import Any

from netsuite_rest.cli_app.output import emit
from netsuite_rest.clients import NetSuiteClient, get_netsuite_client
from netsuite_rest.utils.errors import NetSuiteError, handle_error

ClientAction = Callable[[NetSuiteClient], Awaitable[Any]]


def json_argument(text: str) -> Any:
    """argparse type for inline JSON values."""
    try:
        return json.loads(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}") from e


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return value


def key_value_argument(text: str) -> tuple[str, str]:
    """argparse type for KEY=VALUE pairs."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def run_with_client(args: argparse.Namespace, operation: str, action: ClientAction) -> int:
    """
    Run an async action against a configured client and emit its result.

    Returns the process exit code: 0 on success, 1 on NetSuite errors.
    """

    async def _run() -> Any:
        async with get_netsuite_client(args.env_file) as client:
            return await action(client)

    try:
        payload = asyncio.run(_run())
    except NetSuiteError as e:
        print(handle_error(e, operation), file=sys.stderr)
        return 1

    emit(payload)
    return 0
