"""Records command group: generic REST calls and RESTlets."""

from __future__ import annotations

import argparse

from netsuite_rest.cli_app.common import json_argument, key_value_argument, run_with_client
from netsuite_rest.models import RequestOptions


def register(subparsers: argparse._SubParsersAction) -> None:
    records_cmd = subparsers.add_parser("records", help="Record and RESTlet calls")
    records_sub = records_cmd.add_subparsers(dest="subcommand", required=True)

    request = records_sub.add_parser("request", help="Call any REST path")
    request.add_argument("path", help="Path under services/rest, e.g. record/v1/customer/42")
    request.add_argument(
        "--method",
        default="GET",
        type=str.upper,
        choices=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    )
    request.add_argument("--body", type=json_argument, help="JSON request body")

    restlet = records_sub.add_parser("restlet", help="Call a RESTlet (GET)")
    restlet.add_argument("script_id", help="RESTlet script id")
    restlet.add_argument("--deploy-id", default="1", help="Deployment id (default: 1)")
    restlet.add_argument(
        "--param",
        dest="params",
        action="append",
        type=key_value_argument,
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter for the script (repeatable)",
    )


def run(args: argparse.Namespace) -> int:
    if args.subcommand == "request":
        options = RequestOptions(path=args.path, method=args.method, body=args.body)
        return run_with_client(
            args, "records request", lambda client: client.request(options)
        )

    return run_with_client(
        args,
        "records restlet",
        lambda client: client.get_restlet(
            args.script_id, args.deploy_id, dict(args.params)
        ),
    )
