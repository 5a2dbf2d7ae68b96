"""
Simulated market data: random price ticks for stored pairs and synthetic OHLCV candles.
Not a real price feed.
"""

from __future__ import annotations
import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

import numpy as np
import pandas as pd

from gtrade_sim.core.types import TradingPair
from gtrade_sim.storage.memory import MemStorage
from gtrade_sim.utils.timeframes import timeframe_minutes

logger = logging.getLogger("gtrade_sim.market.feed")


class PriceSimulator:
    """Moves every active pair's price by a uniform random amount within +/- fluctuation_pct percent."""

    def __init__(self, fluctuation_pct: float = 0.5, seed: Optional[int] = None):
        if fluctuation_pct < 0:
            raise ValueError(f"fluctuation_pct must be >= 0, got {fluctuation_pct}")
        self.fluctuation_pct = fluctuation_pct
        self._rng = random.Random(seed)

    def next_move(self) -> float:
        """Fractional price move, e.g. 0.003 = +0.3%."""
        return (self._rng.random() - 0.5) * 2 * self.fluctuation_pct / 100.0

    def tick(self, storage: MemStorage) -> List[TradingPair]:
        """Apply one random move to every active pair and return the updated pairs."""
        updated = []
        for pair in storage.get_all_trading_pairs():
            move = self.next_move()
            new_price = round(pair.price * (1 + move), 8)
            new_change = round(pair.change_24h + move * 100, 4)
            p = storage.update_trading_pair_price(pair.id, new_price, new_change)
            if p is not None:
                updated.append(p)
        logger.debug("Price tick applied to %d pairs", len(updated))
        return updated


def generate_candles(
    base_price: float,
    count: int = 50,
    timeframe: str = "15m",
    seed: Optional[int] = None,
    end: Optional[datetime] = None,
) -> pd.DataFrame:
    """
    Synthetic OHLCV candles scattered within +/-1% of base_price.
    Columns: time, open, high, low, close, volume. Last candle ends at `end` (default now, UTC).
    """
    if base_price <= 0:
        raise ValueError(f"base_price must be > 0, got {base_price}")
    if count <= 0:
        raise ValueError(f"count must be > 0, got {count}")
    step = pd.Timedelta(minutes=timeframe_minutes(timeframe))
    rng = np.random.default_rng(seed)

    closes = base_price + (rng.random(count) - 0.5) * base_price * 0.02
    opens = np.concatenate(([base_price], closes[:-1]))
    wick = rng.random((2, count)) * 0.005
    highs = np.maximum(opens, closes) * (1 + wick[0])
    lows = np.minimum(opens, closes) * (1 - wick[1])
    volumes = rng.uniform(100.0, 1000.0, count)

    end_ts = pd.Timestamp(end or datetime.now(timezone.utc)).floor(step)
    times = pd.date_range(end=end_ts, periods=count, freq=step)
    return pd.DataFrame({
        "time": times,
        "open": opens,
        "high": highs,
        "low": lows,
        "close": closes,
        "volume": volumes,
    })
