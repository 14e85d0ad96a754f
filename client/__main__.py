"""
Client entry point

Run:
    python -m client list [--partner P] [--category C]
    python -m client add --partner P --description D --amount 12.50 --category C [--date YYYY-MM-DD]
    python -m client delete ID
    python -m client balance [--partner P]
    python -m client health
"""

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

from adapters.api.rest_client import LedgerRestClient
from adapters.cache.snapshot_cache import SnapshotCache
from client.notifier import ConsoleNotifier
from client.probe import ConnectivityProbe
from client.render import render_connectivity, render_expenses, render_summary
from client.state import ExpenseStateManager
from core.config.loader import ConfigLoadError, get_settings
from core.errors import LedgerError
from core.logging import setup_logging
from core.types import LoadSource

logger = logging.getLogger("client")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m client",
        description="Shared expense tracker for two partners",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="settings.yaml path (default: config/settings.yaml)",
    )
    parser.add_argument("--verbose", action="store_true", help="log to the console")

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="list expenses (newest first)")
    list_parser.add_argument("--partner", default=None)
    list_parser.add_argument("--category", default=None)

    add_parser = sub.add_parser("add", help="add an expense")
    add_parser.add_argument("--partner", required=True)
    add_parser.add_argument("--description", required=True)
    add_parser.add_argument("--amount", required=True)
    add_parser.add_argument("--category", required=True)
    add_parser.add_argument(
        "--date",
        default=date.today().isoformat(),
        help="purchase date YYYY-MM-DD (default: today)",
    )

    delete_parser = sub.add_parser("delete", help="delete an expense by id")
    delete_parser.add_argument("expense_id")

    balance_parser = sub.add_parser("balance", help="balance overview")
    balance_parser.add_argument("--partner", default=None, help="restrict to one partner")

    sub.add_parser("health", help="check the connection to the ledger service")

    return parser


async def run(args: argparse.Namespace) -> int:
    """Execute one command

    Returns:
        process exit code
    """
    settings = get_settings(args.config)
    config = settings.config

    api = LedgerRestClient(
        base_url=config.api_base_url,
        timeout=config.request_timeout_sec,
        read_retries=config.read_retries,
    )

    async with api:
        if args.command == "health":
            probe = ConnectivityProbe(api, interval_seconds=config.probe_interval_sec)
            await probe.check()
            print(render_connectivity(probe.is_connected, probe.last_checked))
            return 0 if probe.is_connected else 1

        state = ExpenseStateManager(
            api=api,
            cache=SnapshotCache(config.cache_path, key=config.cache_key),
            notifier=ConsoleNotifier(),
            partners=config.partners,
        )
        source = await state.initialize()
        if source != LoadSource.REMOTE:
            print(f"[OFFLINE] Ledger service not reachable, using {source.value.lower()} data")

        if args.command == "list":
            expenses = state.filtered(partner=args.partner, category=args.category)
            print(render_expenses(expenses, state.pending_ids))
            categories = state.categories()
            if categories:
                print(f"\nCategories: {', '.join(categories)}")

        elif args.command == "add":
            await state.add_expense({
                "partner": args.partner,
                "description": args.description,
                "amount": args.amount,
                "date": args.date,
                "category": args.category,
            })

        elif args.command == "delete":
            await state.delete_expense(args.expense_id)

        elif args.command == "balance":
            if args.partner is not None and args.partner not in config.partners:
                print(f"Unknown partner: {args.partner}", file=sys.stderr)
                return 2
            print(render_summary(state.summary(partner=args.partner)))

    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        "client",
        console_level=logging.INFO if args.verbose else logging.CRITICAL,
    )

    try:
        return asyncio.run(run(args))
    except ConfigLoadError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except LedgerError as e:
        logger.error(f"Command failed: {e}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
