"""Command line entry-point for ad hoc Bitcoin.co.id API calls."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from bitcoincoid.config import load_settings
from bitcoincoid.core import BitcoinCoIdClient, BitcoinCoIdError, constants
from bitcoincoid.utils import configure_logging

LOGGER = logging.getLogger(__name__)

PUBLIC_COMMANDS = ("ticker", "trades", "depth")


def parse_params(items: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"expected key=value, got {item!r}")
        params[key] = value
    return params


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bitcoincoid", description="Call the Bitcoin.co.id API")
    parser.add_argument("--env-file", help="Path to .env file with BCI_AK / BCI_SK", default=None)
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    for name in PUBLIC_COMMANDS:
        public = commands.add_parser(name, help=f"Public {name} of a pair")
        public.add_argument("pair", help="Trading pair, e.g. btc_idr")

    private = commands.add_parser("private", help="Signed trade API call")
    # Any method name is accepted; PRIVATE_METHODS lists the known ones.
    private.add_argument("method", help="Trade API method, e.g. " + ", ".join(constants.PRIVATE_METHODS))
    private.add_argument("params", nargs="*", metavar="key=value")
    return parser.parse_args(argv)


def build_client(args: argparse.Namespace) -> BitcoinCoIdClient:
    # Market data needs no credentials.
    public = args.command in PUBLIC_COMMANDS
    settings = load_settings(args.env_file, require_credentials=not public)
    return BitcoinCoIdClient.from_settings(settings)


def run(client: BitcoinCoIdClient, args: argparse.Namespace) -> object:
    if args.command in PUBLIC_COMMANDS:
        return getattr(client, args.command)(args.pair)
    return client.call_private(args.method, parse_params(args.params))


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        client = build_client(args)
    except ValidationError as exc:
        print(f"Failed to load settings: {exc}", file=sys.stderr)
        return 1

    try:
        result = run(client, args)
    except argparse.ArgumentTypeError as exc:
        print(f"Invalid parameter: {exc}", file=sys.stderr)
        return 2
    except BitcoinCoIdError as exc:
        LOGGER.debug("Request failed", exc_info=True)
        print(f"Bitcoin.co.id API error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
