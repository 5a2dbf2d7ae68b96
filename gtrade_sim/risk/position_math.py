"""
Leveraged-position math: position size, required margin, liquidation price.
Pure functions. Fees, funding and maintenance margin are not modelled:
a position is liquidated when price moves 1/leverage against it.
"""

from __future__ import annotations
import math
from typing import Union

from gtrade_sim.core.errors import InvalidInput
from gtrade_sim.core.types import Direction, PositionMetrics, TradeParameters


def _require_finite(name: str, value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return v


def _require_positive(name: str, value: float) -> float:
    v = _require_finite(name, value)
    if v <= 0:
        raise InvalidInput(f"{name} must be > 0, got {value!r}")
    return v


def _require_non_negative(name: str, value: float) -> float:
    v = _require_finite(name, value)
    if v < 0:
        raise InvalidInput(f"{name} must be >= 0, got {value!r}")
    return v


def parse_direction(direction: Union[Direction, str]) -> Direction:
    """Accept a Direction or 'long' / 'short' (any case)."""
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        try:
            return Direction(direction.strip().lower())
        except ValueError:
            pass
    raise InvalidInput(f"direction must be 'long' or 'short', got {direction!r}")


def calculate_position_size(usd_amount: float, entry_price: float) -> float:
    """Units of the asset bought with usd_amount at entry_price."""
    usd = _require_non_negative("usd_amount", usd_amount)
    price = _require_positive("entry_price", entry_price)
    return usd / price


def calculate_margin_required(size: float, entry_price: float, leverage: float) -> float:
    """Collateral needed to open size units at entry_price: notional / leverage."""
    qty = _require_non_negative("size", size)
    price = _require_positive("entry_price", entry_price)
    lev = _require_positive("leverage", leverage)
    return (qty * price) / lev


def calculate_liquidation_price(
    entry_price: float,
    leverage: float,
    direction: Union[Direction, str],
) -> float:
    """
    Price at which the margin is fully lost.
    Long: entry * (1 - 1/leverage). Short: entry * (1 + 1/leverage).
    leverage == 1 gives 0 for a long and 2 * entry for a short.
    """
    price = _require_positive("entry_price", entry_price)
    lev = _require_positive("leverage", leverage)
    side = parse_direction(direction)
    if side is Direction.LONG:
        return price * (1 - 1 / lev)
    return price * (1 + 1 / lev)


def calculate_position_metrics(params: TradeParameters) -> PositionMetrics:
    """All three metrics for a trade form, recomputed from scratch."""
    size = calculate_position_size(params.usd_amount, params.entry_price)
    return PositionMetrics(
        position_size=size,
        margin_required=calculate_margin_required(size, params.entry_price, params.leverage),
        liquidation_price=calculate_liquidation_price(params.entry_price, params.leverage, params.direction),
    )
