"""
In-memory store for users, trading pairs, orders and positions.
Process-local dicts keyed by incrementing ids (starting at 1); nothing is persisted.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from gtrade_sim.core.types import (
    Order,
    OrderStatus,
    Position,
    PositionStatus,
    TradingPair,
    User,
    utcnow,
)
from gtrade_sim.market.pairs import default_pairs

logger = logging.getLogger("gtrade_sim.storage")


class MemStorage:
    """Mutable record store. Updates replace the stored record with an updated copy."""

    def __init__(self, seed: bool = True):
        self._users: Dict[int, User] = {}
        self._pairs: Dict[int, TradingPair] = {}
        self._orders: Dict[int, Order] = {}
        self._positions: Dict[int, Position] = {}
        self._next_user_id = 1
        self._next_pair_id = 1
        self._next_order_id = 1
        self._next_position_id = 1
        if seed:
            for pair in default_pairs():
                self.create_trading_pair(**pair)
            logger.debug("Seeded %d trading pairs", len(self._pairs))

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def get_user_by_wallet(self, wallet_address: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.wallet_address == wallet_address), None)

    def create_user(self, username: str, password: str, wallet_address: Optional[str] = None) -> User:
        user = User(id=self._next_user_id, username=username, password=password, wallet_address=wallet_address)
        self._next_user_id += 1
        self._users[user.id] = user
        return user

    # Trading pairs

    def get_all_trading_pairs(self) -> List[TradingPair]:
        """Active pairs only."""
        return [p for p in self._pairs.values() if p.is_active]

    def get_trading_pairs_by_category(self, category: str) -> List[TradingPair]:
        return [p for p in self._pairs.values() if p.category == category and p.is_active]

    def get_trading_pair(self, pair_id: int) -> Optional[TradingPair]:
        return self._pairs.get(pair_id)

    def get_trading_pair_by_symbol(self, symbol: str) -> Optional[TradingPair]:
        return next((p for p in self._pairs.values() if p.symbol == symbol), None)

    def create_trading_pair(self, **fields) -> TradingPair:
        pair = TradingPair(id=self._next_pair_id, **fields)
        self._next_pair_id += 1
        self._pairs[pair.id] = pair
        return pair

    def update_trading_pair_price(self, pair_id: int, price: float, change_24h: float) -> Optional[TradingPair]:
        pair = self._pairs.get(pair_id)
        if pair is None:
            return None
        updated = replace(pair, price=price, change_24h=change_24h, updated_at=utcnow())
        self._pairs[pair_id] = updated
        return updated

    # Orders

    def create_order(self, **fields) -> Order:
        """Store a new order. Status is always pending on creation."""
        fields.pop("status", None)
        order = Order(id=self._next_order_id, status=OrderStatus.PENDING, **fields)
        self._next_order_id += 1
        self._orders[order.id] = order
        return order

    def get_order(self, order_id: int) -> Optional[Order]:
        return self._orders.get(order_id)

    def get_user_orders(self, user_id: int) -> List[Order]:
        return [o for o in self._orders.values() if o.user_id == user_id]

    def update_order_status(self, order_id: int, status: OrderStatus) -> Optional[Order]:
        order = self._orders.get(order_id)
        if order is None:
            return None
        updated = replace(order, status=OrderStatus(status), updated_at=utcnow())
        self._orders[order_id] = updated
        return updated

    # Positions

    def create_position(self, **fields) -> Position:
        """Store a new open position with zero PnL."""
        fields.pop("pnl", None)
        fields.pop("status", None)
        position = Position(id=self._next_position_id, pnl=0.0, status=PositionStatus.OPEN, **fields)
        self._next_position_id += 1
        self._positions[position.id] = position
        return position

    def get_position(self, position_id: int) -> Optional[Position]:
        return self._positions.get(position_id)

    def get_user_positions(self, user_id: int) -> List[Position]:
        return [p for p in self._positions.values() if p.user_id == user_id]

    def update_position(self, position_id: int, current_price: float, pnl: float) -> Optional[Position]:
        position = self._positions.get(position_id)
        if position is None:
            return None
        updated = replace(position, current_price=current_price, pnl=pnl, updated_at=utcnow())
        self._positions[position_id] = updated
        return updated

    def close_position(self, position_id: int) -> Optional[Position]:
        position = self._positions.get(position_id)
        if position is None:
            return None
        updated = replace(position, status=PositionStatus.CLOSED, updated_at=utcnow())
        self._positions[position_id] = updated
        return updated
