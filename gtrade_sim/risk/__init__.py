"""Risk: leveraged-position math and order checks."""

from gtrade_sim.risk.position_math import (
    calculate_position_size,
    calculate_margin_required,
    calculate_liquidation_price,
    calculate_position_metrics,
    parse_direction,
)
from gtrade_sim.risk.manager import OrderRiskManager, RiskResult

__all__ = [
    "calculate_position_size",
    "calculate_margin_required",
    "calculate_liquidation_price",
    "calculate_position_metrics",
    "parse_direction",
    "OrderRiskManager",
    "RiskResult",
]
