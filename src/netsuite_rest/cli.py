"""
Command-line interface for the NetSuite REST client.
"""

from collections.abc import Sequence
import logging

from netsuite_rest.cli_app.registry import build_parser, dispatch
from netsuite_rest.utils.logging_config import initialize_logging


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    initialize_logging(
        level=logging.DEBUG if args.verbose else None,
        file=args.log_file,
    )
    return dispatch(args)


if __name__ == "__main__":
    raise SystemExit(main())
