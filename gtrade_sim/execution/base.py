"""Abstract execution interface: order creation, fills, position lifecycle."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from gtrade_sim.core.types import Direction, Order, OrderType, Position


@dataclass
class OrderRequest:
    """Order as submitted from the trade form. usd_amount is the notional."""
    pair_id: int
    direction: Direction
    usd_amount: float
    leverage: int
    type: OrderType = OrderType.MARKET
    limit_price: Optional[float] = None
    take_profit: Optional[float] = None
    stop_loss: Optional[float] = None
    user_id: Optional[int] = None


@dataclass
class TradeExecution:
    """Result of creating or executing an order."""
    success: bool
    order: Optional[Order] = None
    position: Optional[Position] = None
    transaction_hash: Optional[str] = None
    error: str = ""


class ExecutionClient(ABC):
    """Abstract client: create/execute/cancel orders and manage positions."""

    @abstractmethod
    def create_order(self, request: OrderRequest) -> TradeExecution:
        """Validate and store a pending order with margin and liquidation price."""
        pass

    @abstractmethod
    def execute_trade(self, order_id: int) -> TradeExecution:
        """Fill a pending order; market orders open a position."""
        pass

    @abstractmethod
    def cancel_order(self, order_id: int) -> Order:
        pass

    @abstractmethod
    def mark_to_market(self, position_id: int) -> Position:
        """Re-price an open position from its pair and update PnL."""
        pass

    @abstractmethod
    def close_position(self, position_id: int) -> Position:
        pass

    def get_open_positions(self, user_id: int) -> List[Position]:
        """Optional: open positions for a user. Default empty."""
        return []
