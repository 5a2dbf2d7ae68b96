"""
Core data types: trade parameters, derived metrics, and the records kept by the store.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Direction(str, Enum):
    LONG = "long"
    SHORT = "short"


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"


class OrderStatus(str, Enum):
    PENDING = "pending"
    FILLED = "filled"
    CANCELLED = "cancelled"


class PositionStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class TradeParameters:
    """User-entered trade form: USD notional, entry price, leverage, direction."""
    usd_amount: float
    entry_price: float
    leverage: float
    direction: Direction


@dataclass(frozen=True)
class PositionMetrics:
    """Derived from TradeParameters on every change; never stored by the math."""
    position_size: float
    margin_required: float
    liquidation_price: float


@dataclass
class User:
    id: int
    username: str
    password: str
    wallet_address: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class TradingPair:
    """Tradable market. Prices are quote currency per unit."""
    id: int
    symbol: str
    name: str
    category: str  # crypto | forex | stocks | indices | commodities
    price: float
    change_24h: float
    volume_24h: float
    max_leverage: int
    min_position_size: float = 10.0
    spread_p: float = 0.05
    pair_index: Optional[int] = None
    is_active: bool = True
    icon: Optional[str] = None
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class Order:
    id: int
    user_id: int
    pair_id: int
    type: OrderType
    direction: Direction
    size: float
    leverage: int
    margin_required: float
    entry_price: Optional[float] = None
    liquidation_price: Optional[float] = None
    limit_price: Optional[float] = None
    take_profit: Optional[float] = None
    stop_loss: Optional[float] = None
    collateral_token: str = "USDC"
    collateral_index: int = 3
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class Position:
    """Open or closed position created from a filled market order."""
    id: int
    user_id: int
    order_id: int
    pair_id: int
    direction: Direction
    size: float
    leverage: int
    entry_price: float
    current_price: float
    margin_used: float
    liquidation_price: float
    take_profit: Optional[float] = None
    stop_loss: Optional[float] = None
    collateral_token: str = "USDC"
    collateral_index: int = 3
    pnl: float = 0.0
    status: PositionStatus = PositionStatus.OPEN
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
