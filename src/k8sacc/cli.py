"""Command line interface for k8sacc."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .accounts import Account, Accounts
from .config import CONFIG_ENV_VAR, resolve_config_path
from .errors import ConfigurationError, K8sAccError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="k8sacc",
        description="Switch between Kubernetes cluster accounts",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=f"Path to the accounts file (defaults to ${CONFIG_ENV_VAR} or ~/.k8sacc)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print list of available accounts")
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the account list as JSON",
    )

    activate_parser = subparsers.add_parser("activate", help="Activate a given account")
    activate_parser.add_argument("alias", help="Alias of the account to activate")
    activate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the provider command but do not run it",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    config_path = resolve_config_path(args.config)
    try:
        accounts = Accounts.parse(config_path)
    except ConfigurationError as exc:
        parser.error(str(exc))
        return 2

    if args.command == "list":
        if args.json:
            _print_json(accounts.sorted())
        else:
            _print_human(accounts.sorted())
        return 0

    if args.command == "activate":
        try:
            account = accounts.get(args.alias)
            account.activate(dry_run=args.dry_run)
        except K8sAccError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        return 0

    parser.error(f"Unsupported command '{args.command}'")  # pragma: no cover - defensive
    return 2


def _print_json(accounts: List[Account]) -> None:
    payload = [{"alias": account.alias, "provider": account.provider.value} for account in accounts]
    print(json.dumps(payload, indent=2))


def _print_human(accounts: List[Account]) -> None:
    print("Available accounts:")
    for account in accounts:
        print(f"- {account.alias} ({account.provider.label})")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
