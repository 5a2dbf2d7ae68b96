"""
Paper execution against the in-memory store. Fills are immediate (optionally delayed)
and carry a mock transaction hash; nothing touches a chain.
"""

from __future__ import annotations
import logging
import secrets
import time
from typing import List, Optional

from gtrade_sim.core.errors import NotFound
from gtrade_sim.core.types import Direction, Order, OrderStatus, OrderType, Position, PositionStatus
from gtrade_sim.analytics.portfolio import unrealized_pnl
from gtrade_sim.execution.base import ExecutionClient, OrderRequest, TradeExecution
from gtrade_sim.market.collaterals import get_collateral_by_symbol
from gtrade_sim.risk.manager import OrderRiskManager
from gtrade_sim.risk.position_math import parse_direction
from gtrade_sim.storage.memory import MemStorage
from gtrade_sim.utils.formatting import format_price
from gtrade_sim.utils.telegram import send_telegram

logger = logging.getLogger("gtrade_sim.execution.paper")

PRICE_DECIMALS = 8


def mock_transaction_hash() -> str:
    return "0x" + secrets.token_hex(32)


def _crossed_liquidation(position: Position, price: float) -> bool:
    if position.direction is Direction.LONG:
        # x1 longs liquidate at 0, which a positive price never reaches
        return price <= position.liquidation_price
    return price >= position.liquidation_price


class PaperExecutionClient(ExecutionClient):
    """Simulated execution: stores orders, opens positions, marks them to market."""

    def __init__(
        self,
        storage: MemStorage,
        risk_manager: OrderRiskManager,
        default_user_id: int = 1,
        execution_delay_seconds: float = 0.0,
        telegram_bot_token: str = "",
        telegram_chat_id: str = "",
    ):
        self.storage = storage
        self.risk_manager = risk_manager
        self.default_user_id = default_user_id
        self.execution_delay_seconds = execution_delay_seconds
        self._telegram_bot_token = telegram_bot_token
        self._telegram_chat_id = telegram_chat_id

    def _get_order(self, order_id: int) -> Order:
        order = self.storage.get_order(order_id)
        if order is None:
            raise NotFound(f"Order {order_id} not found")
        return order

    def _get_position(self, position_id: int) -> Position:
        position = self.storage.get_position(position_id)
        if position is None:
            raise NotFound(f"Position {position_id} not found")
        return position

    def create_order(self, request: OrderRequest) -> TradeExecution:
        pair = self.storage.get_trading_pair(request.pair_id)
        if pair is None:
            return TradeExecution(success=False, error="Invalid trading pair")

        result = self.risk_manager.validate_order(
            pair,
            usd_amount=request.usd_amount,
            leverage=request.leverage,
            direction=request.direction,
            order_type=request.type,
            limit_price=request.limit_price,
            take_profit=request.take_profit,
            stop_loss=request.stop_loss,
        )
        if not result.allowed:
            logger.info("Order rejected for %s: %s", pair.symbol, result.reason)
            return TradeExecution(success=False, error=result.reason)

        kind = OrderType(request.type)
        collateral = get_collateral_by_symbol(self.risk_manager.collateral)
        metrics = result.metrics
        order = self.storage.create_order(
            user_id=request.user_id if request.user_id is not None else self.default_user_id,
            pair_id=pair.id,
            type=kind,
            direction=parse_direction(request.direction),
            size=round(metrics.position_size, PRICE_DECIMALS),
            leverage=request.leverage,
            margin_required=round(metrics.margin_required, PRICE_DECIMALS),
            entry_price=request.limit_price if kind is OrderType.LIMIT else pair.price,
            liquidation_price=round(metrics.liquidation_price, PRICE_DECIMALS),
            limit_price=request.limit_price if kind is OrderType.LIMIT else None,
            take_profit=request.take_profit,
            stop_loss=request.stop_loss,
            collateral_token=collateral.symbol,
            collateral_index=collateral.index,
        )
        logger.info(
            "Order %d created: %s %s size=%.8f x%d margin=%.2f liq=%s",
            order.id, pair.symbol, order.direction.value, order.size, order.leverage,
            order.margin_required, format_price(order.liquidation_price),
        )
        return TradeExecution(success=True, order=order)

    def execute_trade(self, order_id: int) -> TradeExecution:
        order = self._get_order(order_id)
        if order.status != OrderStatus.PENDING:
            return TradeExecution(success=False, order=order, error=f"Order {order_id} is {order.status.value}")

        if self.execution_delay_seconds > 0:
            time.sleep(self.execution_delay_seconds)

        filled = self.storage.update_order_status(order_id, OrderStatus.FILLED)
        tx_hash = mock_transaction_hash()
        position = None
        if order.type is OrderType.MARKET:
            pair = self.storage.get_trading_pair(order.pair_id)
            current_price = pair.price if pair is not None else order.entry_price
            position = self.storage.create_position(
                user_id=order.user_id,
                order_id=order.id,
                pair_id=order.pair_id,
                direction=order.direction,
                size=order.size,
                leverage=order.leverage,
                entry_price=order.entry_price if order.entry_price is not None else current_price,
                current_price=current_price,
                margin_used=order.margin_required,
                liquidation_price=order.liquidation_price if order.liquidation_price is not None else 0.0,
                take_profit=order.take_profit,
                stop_loss=order.stop_loss,
                collateral_token=order.collateral_token,
                collateral_index=order.collateral_index,
            )
            logger.info("Order %d filled, position %d opened (tx %s)", order_id, position.id, tx_hash[:10])
            self._notify_fill(order, position)
        else:
            logger.info("Order %d filled (tx %s)", order_id, tx_hash[:10])
        return TradeExecution(success=True, order=filled, position=position, transaction_hash=tx_hash)

    def cancel_order(self, order_id: int) -> Order:
        order = self._get_order(order_id)
        if order.status != OrderStatus.PENDING:
            raise ValueError(f"Order {order_id} is {order.status.value}, cannot cancel")
        logger.info("Order %d cancelled", order_id)
        return self.storage.update_order_status(order_id, OrderStatus.CANCELLED)

    def mark_to_market(self, position_id: int) -> Position:
        position = self._get_position(position_id)
        if position.status != PositionStatus.OPEN:
            return position
        pair = self.storage.get_trading_pair(position.pair_id)
        if pair is None:
            raise NotFound(f"Trading pair {position.pair_id} not found")
        if _crossed_liquidation(position, pair.price):
            # Loss is capped at the posted margin
            self.storage.update_position(position_id, pair.price, -position.margin_used)
            logger.warning(
                "Position %d liquidated: %s at %s (liq %s), margin %.2f lost",
                position_id, position.direction.value, format_price(pair.price),
                format_price(position.liquidation_price), position.margin_used,
            )
            return self.storage.close_position(position_id)
        pnl = unrealized_pnl(position.direction, position.entry_price, pair.price, position.size)
        return self.storage.update_position(position_id, pair.price, round(pnl, PRICE_DECIMALS))

    def close_position(self, position_id: int) -> Position:
        position = self.mark_to_market(position_id)
        if position.status != PositionStatus.OPEN:
            raise ValueError(f"Position {position_id} is already closed")
        closed = self.storage.close_position(position_id)
        logger.info("Position %d closed at %s, pnl=%.2f", position_id, format_price(closed.current_price), closed.pnl)
        return closed

    def get_open_positions(self, user_id: Optional[int] = None) -> List[Position]:
        uid = user_id if user_id is not None else self.default_user_id
        return [p for p in self.storage.get_user_positions(uid) if p.status == PositionStatus.OPEN]

    def _notify_fill(self, order: Order, position: Position) -> None:
        pair = self.storage.get_trading_pair(order.pair_id)
        symbol = pair.symbol if pair is not None else str(order.pair_id)
        text = (
            f"Filled {position.direction.value.upper()} {symbol} x{position.leverage}\n"
            f"Entry: {format_price(position.entry_price)} | Liq: {format_price(position.liquidation_price)}\n"
            f"Margin: ${position.margin_used:.2f}"
        )
        send_telegram(text, self._telegram_bot_token, self._telegram_chat_id)
