"""Command line entry point for quick Bittrex API queries."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from bittrex_client.config_loader import load_client_config, load_log_level
from bittrex_client.errors import BittrexError
from bittrex_client.exchange import BittrexExchange


LOGGER = logging.getLogger("bittrex")
PROJECT_ROOT = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = str(PROJECT_ROOT / "config.yaml")


def configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper().strip(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bittrex REST API client")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"YAML config path (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override app.log_level from the config file",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("markets", help="List open markets")
    sub.add_parser("currencies", help="List supported currencies")

    ticker = sub.add_parser("ticker", help="Current tick for a market")
    ticker.add_argument("market")

    summary = sub.add_parser("summary", help="24h summary (all markets when omitted)")
    summary.add_argument("market", nargs="?")

    orderbook = sub.add_parser("orderbook", help="Order book for a market")
    orderbook.add_argument("market")
    orderbook.add_argument("--type", default="both", choices=["buy", "sell", "both"])
    orderbook.add_argument("--depth", type=int, default=20)

    history = sub.add_parser("history", help="Latest trades for a market")
    history.add_argument("market")

    sub.add_parser("balances", help="All account balances")

    balance = sub.add_parser("balance", help="Balance for one currency")
    balance.add_argument("currency")

    open_orders = sub.add_parser("open-orders", help="Open orders (all markets when omitted)")
    open_orders.add_argument("market", nargs="?", default="")

    check = sub.add_parser("check", help="Print public/private connectivity and exit")
    check.add_argument("--market", default="BTC-LTC")

    return parser.parse_args(argv)


def run_command(exchange: BittrexExchange, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "markets":
        return exchange.get_markets()
    if command == "currencies":
        return exchange.get_currencies()
    if command == "ticker":
        return exchange.get_ticker(args.market)
    if command == "summary":
        if args.market:
            return exchange.get_market_summary(args.market)
        return exchange.get_market_summaries()
    if command == "orderbook":
        return exchange.get_order_book(args.market, type=args.type, depth=args.depth)
    if command == "history":
        return exchange.get_market_history(args.market)
    if command == "balances":
        return exchange.get_balances()
    if command == "balance":
        return exchange.get_balance(args.currency)
    if command == "open-orders":
        return exchange.get_open_orders(args.market)
    if command == "check":
        return exchange.connectivity_report(sample_market=args.market)
    raise ValueError(f"Unknown command: {command}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level or load_log_level(args.config))

    with BittrexExchange(config=load_client_config(args.config)) as exchange:
        try:
            result = run_command(exchange, args)
        except BittrexError as exc:
            LOGGER.error("%s failed: %s", args.command, exc)
            return 1

    print(json.dumps(result, ensure_ascii=False, indent=2, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
