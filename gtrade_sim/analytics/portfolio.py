"""
Position PnL and portfolio summary.
PnL is price move times position size (size already reflects leverage through the notional).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Union

import numpy as np

from gtrade_sim.core.types import Direction, Position, PositionStatus
from gtrade_sim.risk.position_math import parse_direction


@dataclass
class PortfolioSummary:
    """Aggregate view over a user's positions."""
    open_positions: int
    closed_positions: int
    total_margin: float
    total_pnl: float
    total_pnl_pct: float
    win_rate: float
    profit_factor: float
    expectancy: float


def unrealized_pnl(direction: Union[Direction, str], entry_price: float, current_price: float, size: float) -> float:
    """(current - entry) * size for a long, negated for a short."""
    sign = 1.0 if parse_direction(direction) is Direction.LONG else -1.0
    return (current_price - entry_price) * size * sign


def pnl_percent(pnl: float, margin: float) -> float:
    """PnL as percent of margin. 0 if margin is 0."""
    if margin <= 0:
        return 0.0
    return pnl / margin * 100.0


def win_rate(pnls: List[float]) -> float:
    """Fraction of positions closed with positive PnL."""
    if not pnls:
        return 0.0
    return float(np.mean(np.array(pnls) > 0))


def profit_factor(pnls: List[float]) -> float:
    """Gross profit / gross loss. inf if only wins, 0 if no wins."""
    arr = np.array(pnls, dtype=float)
    wins = arr[arr > 0].sum()
    losses = -arr[arr < 0].sum()
    if losses <= 0:
        return float("inf") if wins > 0 else 0.0
    return float(wins / losses)


def expectancy(pnls: List[float]) -> float:
    if not pnls:
        return 0.0
    return float(np.mean(pnls))


def summarize_positions(positions: Iterable[Position]) -> PortfolioSummary:
    """Open margin and PnL across open positions; win stats across closed ones."""
    positions = list(positions)
    open_pos = [p for p in positions if p.status == PositionStatus.OPEN]
    closed_pnls = [p.pnl for p in positions if p.status == PositionStatus.CLOSED]
    total_margin = float(np.sum([p.margin_used for p in open_pos])) if open_pos else 0.0
    total_pnl = float(np.sum([p.pnl for p in open_pos])) if open_pos else 0.0
    return PortfolioSummary(
        open_positions=len(open_pos),
        closed_positions=len(closed_pnls),
        total_margin=total_margin,
        total_pnl=total_pnl,
        total_pnl_pct=pnl_percent(total_pnl, total_margin),
        win_rate=win_rate(closed_pnls),
        profit_factor=profit_factor(closed_pnls),
        expectancy=expectancy(closed_pnls),
    )
