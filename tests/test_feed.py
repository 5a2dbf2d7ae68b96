"""Unit tests for market.feed."""

from datetime import datetime, timezone

import pandas as pd
import pytest
from gtrade_sim.market.feed import PriceSimulator, generate_candles
from gtrade_sim.storage.memory import MemStorage


def test_tick_moves_within_band():
    s = MemStorage()
    before = {p.id: (p.price, p.change_24h) for p in s.get_all_trading_pairs()}
    updated = PriceSimulator(fluctuation_pct=0.5, seed=7).tick(s)
    assert len(updated) == len(before)
    # prices are stored to 8 decimals, so check pairs where that rounding is negligible
    for p in (p for p in updated if p.price >= 1):
        old_price, old_change = before[p.id]
        move = p.price / old_price - 1
        assert abs(move) <= 0.005 + 1e-6
        assert p.change_24h == pytest.approx(old_change + move * 100, abs=1e-3)


def test_tick_is_reproducible_with_seed():
    a, b = MemStorage(), MemStorage()
    PriceSimulator(seed=42).tick(a)
    PriceSimulator(seed=42).tick(b)
    assert [p.price for p in a.get_all_trading_pairs()] == [p.price for p in b.get_all_trading_pairs()]


def test_zero_fluctuation_keeps_prices():
    s = MemStorage()
    prices = [p.price for p in s.get_all_trading_pairs()]
    PriceSimulator(fluctuation_pct=0.0).tick(s)
    assert [p.price for p in s.get_all_trading_pairs()] == prices


def test_negative_fluctuation_rejected():
    with pytest.raises(ValueError):
        PriceSimulator(fluctuation_pct=-1)


def test_generate_candles_shape():
    end = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    df = generate_candles(3423.8, count=20, timeframe="1h", seed=1, end=end)
    assert list(df.columns) == ["time", "open", "high", "low", "close", "volume"]
    assert len(df) == 20
    assert df["time"].iloc[-1] == pd.Timestamp(end)
    assert (df["time"].diff().dropna() == pd.Timedelta(hours=1)).all()
    assert (df["high"] >= df[["open", "close"]].max(axis=1)).all()
    assert (df["low"] <= df[["open", "close"]].min(axis=1)).all()
    assert ((df["close"] - 3423.8).abs() <= 3423.8 * 0.01 + 1e-9).all()
    assert df["open"].iloc[0] == 3423.8
    assert (df["open"].iloc[1:].values == df["close"].iloc[:-1].values).all()


def test_generate_candles_invalid():
    with pytest.raises(ValueError):
        generate_candles(0.0)
    with pytest.raises(ValueError):
        generate_candles(100.0, count=0)
    with pytest.raises(ValueError):
        generate_candles(100.0, timeframe="1x")
