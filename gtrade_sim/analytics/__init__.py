"""Analytics: position PnL and portfolio summary."""

from gtrade_sim.analytics.portfolio import (
    PortfolioSummary,
    summarize_positions,
    unrealized_pnl,
    pnl_percent,
    win_rate,
    profit_factor,
    expectancy,
)

__all__ = [
    "PortfolioSummary",
    "summarize_positions",
    "unrealized_pnl",
    "pnl_percent",
    "win_rate",
    "profit_factor",
    "expectancy",
]
