#!/usr/bin/env python3
"""
gTrade simulator CLI: calc | pairs | trade | candles
Usage:
  python main.py calc --amount 1000 --price 50000 --leverage 10 --direction long
  python main.py pairs [--category crypto]
  python main.py trade --symbol BTC/USD --amount 100 --leverage 10 --direction short
  python main.py candles --symbol ETH/USD [--timeframe 1h --count 24]
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parent

from gtrade_sim.core.config import load_config
from gtrade_sim.core.errors import InvalidInput, NotFound
from gtrade_sim.core.logger import setup_logging
from gtrade_sim.core.types import TradeParameters
from gtrade_sim.analytics.portfolio import pnl_percent, summarize_positions
from gtrade_sim.execution.base import OrderRequest
from gtrade_sim.execution.paper import PaperExecutionClient
from gtrade_sim.market.feed import PriceSimulator, generate_candles
from gtrade_sim.market.pairs import CATEGORIES
from gtrade_sim.risk.manager import OrderRiskManager
from gtrade_sim.risk.position_math import calculate_position_metrics, parse_direction
from gtrade_sim.storage.memory import MemStorage
from gtrade_sim.utils.formatting import format_change, format_price, format_volume

logger = logging.getLogger("gtrade_sim")


def run_calc(args: argparse.Namespace) -> int:
    """Print position size, margin and liquidation price for a trade form."""
    try:
        params = TradeParameters(args.amount, args.price, args.leverage, parse_direction(args.direction))
        m = calculate_position_metrics(params)
    except InvalidInput as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    print(f"Position size:     {m.position_size:.8f}")
    print(f"Margin required:   ${m.margin_required:.2f}")
    print(f"Liquidation price: {format_price(m.liquidation_price)}")
    return 0


def run_pairs(args: argparse.Namespace) -> int:
    storage = MemStorage()
    pairs = storage.get_trading_pairs_by_category(args.category) if args.category else storage.get_all_trading_pairs()
    for p in pairs:
        print(
            f"{p.symbol:<10} {format_price(p.price):>12} {format_change(p.change_24h):>8} "
            f"{format_volume(p.volume_24h):>9}  max {p.max_leverage}x"
        )
    return 0


def run_trade(args: argparse.Namespace, config_path: Optional[Path]) -> int:
    """Open a paper position, move prices a few ticks, then mark it to market."""
    config = load_config(config_path, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file)
    storage = MemStorage()
    pair = storage.get_trading_pair_by_symbol(args.symbol.upper())
    if pair is None:
        logger.error("Unknown symbol %s", args.symbol)
        return 1
    client = PaperExecutionClient(
        storage,
        OrderRiskManager(config.chain, config.collateral, config.enforce_collateral_min),
        default_user_id=config.default_user_id,
        execution_delay_seconds=config.execution_delay_seconds,
        telegram_bot_token=config.telegram_bot_token,
        telegram_chat_id=config.telegram_chat_id,
    )
    created = client.create_order(OrderRequest(
        pair_id=pair.id,
        direction=args.direction,
        usd_amount=args.amount,
        leverage=args.leverage,
        type=args.type,
        limit_price=args.limit_price,
        take_profit=args.take_profit,
        stop_loss=args.stop_loss,
    ))
    if not created.success:
        logger.error("Order rejected: %s", created.error)
        return 1
    try:
        result = client.execute_trade(created.order.id)
    except NotFound as e:
        logger.error("%s", e)
        return 1
    print(f"Order {result.order.id} {result.order.status.value} (tx {result.transaction_hash})")
    if result.position is None:
        return 0

    feed = PriceSimulator(config.price_fluctuation_pct, seed=config.random_seed)
    for _ in range(args.ticks):
        feed.tick(storage)
    pos = client.mark_to_market(result.position.id)
    print(
        f"Position {pos.id}: {pos.direction.value} {pair.symbol} x{pos.leverage} "
        f"entry {format_price(pos.entry_price)} now {format_price(pos.current_price)} "
        f"liq {format_price(pos.liquidation_price)}"
    )
    print(f"PnL: ${pos.pnl:.2f} ({pnl_percent(pos.pnl, pos.margin_used):+.2f}%)")
    summary = summarize_positions(storage.get_user_positions(config.default_user_id))
    print(f"Open margin: ${summary.total_margin:.2f} across {summary.open_positions} position(s)")
    return 0


def run_candles(args: argparse.Namespace, config_path: Optional[Path]) -> int:
    config = load_config(config_path, ROOT)
    storage = MemStorage()
    pair = storage.get_trading_pair_by_symbol(args.symbol.upper())
    if pair is None:
        print(f"Unknown symbol {args.symbol}", file=sys.stderr)
        return 1
    try:
        df = generate_candles(
            pair.price,
            count=args.count if args.count is not None else config.candle_count,
            timeframe=args.timeframe if args.timeframe is not None else config.candle_timeframe,
            seed=config.random_seed,
        )
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    print(df.to_string(index=False))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="gTrade simulator: position math and paper trading")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Position size, margin and liquidation price")
    calc.add_argument("--amount", type=float, required=True, help="USD notional")
    calc.add_argument("--price", type=float, required=True, help="Entry price")
    calc.add_argument("--leverage", type=float, required=True)
    calc.add_argument("--direction", choices=["long", "short"], default="long")

    pairs = sub.add_parser("pairs", help="List trading pairs")
    pairs.add_argument("--category", choices=CATEGORIES, default=None)

    trade = sub.add_parser("trade", help="Open a paper position")
    trade.add_argument("--symbol", required=True, help="e.g. BTC/USD")
    trade.add_argument("--amount", type=float, required=True, help="USD notional")
    trade.add_argument("--leverage", type=int, required=True)
    trade.add_argument("--direction", choices=["long", "short"], default="long")
    trade.add_argument("--type", choices=["market", "limit"], default="market")
    trade.add_argument("--limit-price", type=float, default=None)
    trade.add_argument("--take-profit", type=float, default=None)
    trade.add_argument("--stop-loss", type=float, default=None)
    trade.add_argument("--ticks", type=int, default=5, help="Simulated price ticks before marking to market")

    candles = sub.add_parser("candles", help="Print synthetic OHLCV candles")
    candles.add_argument("--symbol", required=True)
    candles.add_argument("--timeframe", default=None)
    candles.add_argument("--count", type=int, default=None)

    args = parser.parse_args()
    if args.command == "calc":
        return run_calc(args)
    if args.command == "pairs":
        return run_pairs(args)
    if args.command == "trade":
        return run_trade(args, args.config)
    if args.command == "candles":
        return run_candles(args, args.config)
    return 1


if __name__ == "__main__":
    sys.exit(main())
