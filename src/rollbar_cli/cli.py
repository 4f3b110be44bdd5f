"""
Command-line interface for rollbar-cli.

Every command prints indented JSON to stdout. Failures print
``Error: <message>`` to stderr and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError

from rollbar_cli import __version__
from rollbar_cli.config import Settings, get_settings
from rollbar_cli.datasources.rollbar import (
    RollbarClient,
    fetch_item,
    fetch_items,
    fetch_occurrence,
    fetch_occurrence_raw,
    fetch_occurrences,
    summarize_occurrence,
)
from rollbar_cli.errors import ConfigError, RollbarCLIError
from rollbar_cli.logs import get_logger, setup_logging

log = get_logger("cli")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="rollbar",
        description="A lightweight CLI tool to query Rollbar errors",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (to stderr)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    items_parser = subparsers.add_parser("items", help="List recent error items")
    items_parser.add_argument("-n", "--limit", type=int, default=10, help="Number of items")
    items_parser.add_argument(
        "-s",
        "--status",
        default="active",
        help="Filter by status: active, resolved, muted (default: active)",
    )
    items_parser.add_argument(
        "-l", "--level", default="", help="Filter by level: error, warning, critical"
    )
    items_parser.add_argument("-e", "--env", default="", help="Filter by environment")

    item_parser = subparsers.add_parser("item", help="Show item details")
    item_parser.add_argument("item_id", help="Item ID")

    occurrences_parser = subparsers.add_parser(
        "occurrences", aliases=["occ"], help="List occurrences for an item"
    )
    occurrences_parser.add_argument("item_id", help="Item ID")
    occurrences_parser.add_argument(
        "-n", "--limit", type=int, default=10, help="Number of occurrences"
    )

    occurrence_parser = subparsers.add_parser(
        "occurrence", aliases=["o"], help="Show occurrence details"
    )
    occurrence_parser.add_argument("occurrence_id", help="Occurrence ID")
    occurrence_parser.add_argument(
        "-f",
        "--full",
        action="store_true",
        help="Show full occurrence data (verbose)",
    )

    subparsers.add_parser("info", help="Show effective configuration")

    return parser


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def make_client() -> RollbarClient:
    """Build an API client from settings; fails without an access token."""
    return RollbarClient.from_settings(get_settings())


def cmd_items(args: argparse.Namespace) -> int:
    """Handle the 'items' command."""
    items = fetch_items(
        make_client(),
        args.limit,
        status=args.status,
        level=args.level,
        environment=args.env,
    )
    print_json([item.model_dump() for item in items])
    return 0


def cmd_item(args: argparse.Namespace) -> int:
    """Handle the 'item' command."""
    item = fetch_item(make_client(), args.item_id)
    print_json(item.model_dump())
    return 0


def cmd_occurrences(args: argparse.Namespace) -> int:
    """Handle the 'occurrences' command."""
    occurrences = fetch_occurrences(make_client(), args.item_id, args.limit)
    print_json([occ.listing() for occ in occurrences])
    return 0


def cmd_occurrence(args: argparse.Namespace) -> int:
    """Handle the 'occurrence' command: summary by default, raw with --full."""
    client = make_client()
    if args.full:
        print_json(fetch_occurrence_raw(client, args.occurrence_id))
        return 0

    occ = fetch_occurrence(client, args.occurrence_id)
    print_json({**occ.listing(), "data": summarize_occurrence(occ.data).to_dict()})
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print_json(
        {
            "application": settings.app_name,
            "version": __version__,
            "api_base": settings.api_base,
            "timeout": settings.timeout,
            "read_token": settings.masked_token,
            "log_level": settings.log_level,
        }
    )
    return 0


COMMANDS = {
    "items": cmd_items,
    "item": cmd_item,
    "occurrences": cmd_occurrences,
    "occ": cmd_occurrences,
    "occurrence": cmd_occurrence,
    "o": cmd_occurrence,
    "info": cmd_info,
}


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        settings = _load_settings()
        setup_logging("DEBUG" if args.debug else settings.log_level, settings.log_format)
        log.debug("running command", command=args.command)
        return handler(args)
    except RollbarCLIError as exc:
        log.debug("command failed", command=args.command, error_type=type(exc).__name__)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
