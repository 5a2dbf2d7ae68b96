"""Core: config, types, errors, logging."""

from gtrade_sim.core.config import load_config, Config
from gtrade_sim.core.errors import InvalidInput, NotFound
from gtrade_sim.core.types import (
    Direction,
    OrderType,
    OrderStatus,
    PositionStatus,
    TradeParameters,
    PositionMetrics,
    User,
    TradingPair,
    Order,
    Position,
)
from gtrade_sim.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "InvalidInput",
    "NotFound",
    "Direction",
    "OrderType",
    "OrderStatus",
    "PositionStatus",
    "TradeParameters",
    "PositionMetrics",
    "User",
    "TradingPair",
    "Order",
    "Position",
    "setup_logging",
]
