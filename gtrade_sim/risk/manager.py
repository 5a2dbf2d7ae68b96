"""
Order risk checks: leverage bound, minimum notional, collateral support, TP/SL placement.
Position size and margin come from position_math; rejections are returned, not raised.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Union

from gtrade_sim.core.errors import InvalidInput
from gtrade_sim.core.types import Direction, OrderType, PositionMetrics, TradeParameters, TradingPair
from gtrade_sim.market.collaterals import get_collateral_by_symbol
from gtrade_sim.risk.position_math import calculate_position_metrics, parse_direction

logger = logging.getLogger("gtrade_sim.risk")


@dataclass
class RiskResult:
    """Result of risk check: allowed or rejected + reason."""
    allowed: bool
    size: float = 0.0
    metrics: Optional[PositionMetrics] = None
    reason: str = ""


class OrderRiskManager:
    """
    Enforces per-pair max leverage and min position size, collateral/chain support,
    optional collateral minimum, and sane take-profit / stop-loss levels.
    """

    def __init__(
        self,
        chain: str = "arbitrum",
        collateral: str = "USDC",
        enforce_collateral_min: bool = False,
    ):
        self.chain = chain.lower()
        self.collateral = collateral.upper()
        self.enforce_collateral_min = enforce_collateral_min

    def check_leverage(self, leverage: float, pair: TradingPair) -> Optional[str]:
        """Return rejection reason, or None if leverage is within [1, pair.max_leverage]."""
        if leverage < 1:
            return f"leverage {leverage} < 1"
        if leverage > pair.max_leverage:
            return f"leverage {leverage} > max {pair.max_leverage} for {pair.symbol}"
        return None

    def check_collateral(self, usd_amount: float) -> Optional[str]:
        token = get_collateral_by_symbol(self.collateral)
        if token is None:
            return f"unknown collateral {self.collateral}"
        if self.chain not in token.supported_chains:
            return f"collateral {token.symbol} not supported on {self.chain}"
        if self.enforce_collateral_min and usd_amount < token.min_position_usd:
            return f"amount {usd_amount:.2f} < {token.symbol} min {token.min_position_usd:.2f} on {self.chain}"
        return None

    def _check_exits(
        self,
        direction: Direction,
        entry_price: float,
        liquidation_price: float,
        take_profit: Optional[float],
        stop_loss: Optional[float],
    ) -> Optional[str]:
        sign = 1 if direction is Direction.LONG else -1
        if take_profit is not None and (take_profit - entry_price) * sign <= 0:
            return f"take_profit {take_profit} not beyond entry {entry_price} for {direction.value}"
        if stop_loss is not None:
            if (entry_price - stop_loss) * sign <= 0:
                return f"stop_loss {stop_loss} not behind entry {entry_price} for {direction.value}"
            if (stop_loss - liquidation_price) * sign < 0:
                return f"stop_loss {stop_loss} beyond liquidation {liquidation_price:.8f}"
        return None

    def validate_order(
        self,
        pair: TradingPair,
        usd_amount: float,
        leverage: float,
        direction: Union[Direction, str],
        order_type: Union[OrderType, str] = OrderType.MARKET,
        limit_price: Optional[float] = None,
        take_profit: Optional[float] = None,
        stop_loss: Optional[float] = None,
    ) -> RiskResult:
        """
        Validate an order request against the pair and compute its metrics.
        Entry price is the pair price for market orders, limit_price for limit orders.
        """
        if not pair.is_active:
            return RiskResult(allowed=False, reason=f"{pair.symbol} is not active")

        try:
            side = parse_direction(direction)
            kind = OrderType(order_type)
        except (InvalidInput, ValueError) as e:
            return RiskResult(allowed=False, reason=str(e))

        if kind is OrderType.LIMIT:
            if limit_price is None or limit_price <= 0:
                return RiskResult(allowed=False, reason="limit order needs a positive limit price")
            entry_price = limit_price
        else:
            entry_price = pair.price

        if usd_amount <= 0:
            return RiskResult(allowed=False, reason="amount must be > 0")
        if usd_amount < pair.min_position_size:
            return RiskResult(
                allowed=False,
                reason=f"amount {usd_amount:.2f} < min {pair.min_position_size:.2f} for {pair.symbol}",
            )

        reason = self.check_leverage(leverage, pair) or self.check_collateral(usd_amount)
        if reason:
            return RiskResult(allowed=False, reason=reason)

        try:
            metrics = calculate_position_metrics(TradeParameters(usd_amount, entry_price, leverage, side))
        except InvalidInput as e:
            return RiskResult(allowed=False, reason=str(e))

        reason = self._check_exits(side, entry_price, metrics.liquidation_price, take_profit, stop_loss)
        if reason:
            return RiskResult(allowed=False, reason=reason)

        logger.debug(
            "Order ok: %s %s %.2f USD x%s size=%.8f margin=%.2f liq=%.8f",
            pair.symbol, side.value, usd_amount, leverage,
            metrics.position_size, metrics.margin_required, metrics.liquidation_price,
        )
        return RiskResult(allowed=True, size=metrics.position_size, metrics=metrics)
