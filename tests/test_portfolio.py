"""Unit tests for analytics.portfolio."""

import pytest
from gtrade_sim.analytics.portfolio import (
    unrealized_pnl,
    pnl_percent,
    win_rate,
    profit_factor,
    expectancy,
    summarize_positions,
)
from gtrade_sim.core.types import Direction, Position, PositionStatus


def _position(pid, pnl, margin=100.0, status=PositionStatus.OPEN):
    return Position(
        id=pid, user_id=1, order_id=pid, pair_id=1, direction=Direction.LONG, size=1.0, leverage=10,
        entry_price=1000.0, current_price=1000.0, margin_used=margin, liquidation_price=900.0,
        pnl=pnl, status=status,
    )


def test_unrealized_pnl_long_short():
    assert unrealized_pnl("long", 100.0, 110.0, 2.0) == pytest.approx(20.0)
    assert unrealized_pnl(Direction.SHORT, 100.0, 110.0, 2.0) == pytest.approx(-20.0)
    assert unrealized_pnl("short", 100.0, 90.0, 2.0) == pytest.approx(20.0)


def test_pnl_percent():
    assert pnl_percent(25.0, 100.0) == pytest.approx(25.0)
    assert pnl_percent(25.0, 0.0) == 0.0


def test_win_rate():
    assert win_rate([1, -1, 1, 1]) == 0.75
    assert win_rate([]) == 0.0


def test_profit_factor():
    assert profit_factor([10, -5, 10, -5]) == 2.0
    assert profit_factor([10, 10]) == float("inf")
    assert profit_factor([-5, -5]) == 0.0


def test_expectancy():
    assert expectancy([10, -5, 5]) == pytest.approx(10 / 3)
    assert expectancy([]) == 0.0


def test_summarize_positions():
    positions = [
        _position(1, 20.0, margin=100.0),
        _position(2, -5.0, margin=50.0),
        _position(3, 15.0, status=PositionStatus.CLOSED),
        _position(4, -3.0, status=PositionStatus.CLOSED),
    ]
    s = summarize_positions(positions)
    assert s.open_positions == 2
    assert s.closed_positions == 2
    assert s.total_margin == pytest.approx(150.0)
    assert s.total_pnl == pytest.approx(15.0)
    assert s.total_pnl_pct == pytest.approx(10.0)
    assert s.win_rate == 0.5
    assert s.profit_factor == pytest.approx(5.0)
    assert s.expectancy == pytest.approx(6.0)


def test_summarize_empty():
    s = summarize_positions(iter([]))
    assert s.open_positions == 0
    assert s.total_pnl_pct == 0.0
    assert s.profit_factor == 0.0
