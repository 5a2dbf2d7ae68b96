"""Default trading-pair catalog used to seed the in-memory store."""

from __future__ import annotations
from typing import List

CATEGORIES = ("crypto", "forex", "stocks", "indices", "commodities")

# Max leverage and spread by asset class
MAX_LEVERAGE = {"crypto": 150, "forex": 1000, "stocks": 25, "indices": 250, "commodities": 250}
SPREAD_P = {"crypto": 0.05, "forex": 0.01, "stocks": 0.1, "indices": 0.05, "commodities": 0.04}
# Gold trades tighter than the rest of the commodities class
SPREAD_OVERRIDES = {"XAU/USD": 0.01}
MIN_POSITION_SIZE = 10.0

# (symbol, name, category, price, change_24h, volume_24h, gains pair index)
_PAIRS = [
    ("BTC/USD", "Bitcoin", "crypto", 97524.50, 2.34, 28_590_000_000, 0),
    ("ETH/USD", "Ethereum", "crypto", 3423.80, 1.87, 15_430_000_000, 1),
    ("LINK/USD", "Chainlink", "crypto", 24.56, 3.21, 850_000_000, 2),
    ("DOGE/USD", "Dogecoin", "crypto", 0.3654, 5.67, 2_100_000_000, 3),
    ("ADA/USD", "Cardano", "crypto", 0.8943, 1.23, 650_000_000, 5),
    ("AAVE/USD", "Aave", "crypto", 324.56, 2.11, 180_000_000, 7),
    ("SOL/USD", "Solana", "crypto", 234.78, 4.56, 1_200_000_000, 33),
    ("BNB/USD", "BNB", "crypto", 712.34, 1.89, 580_000_000, 47),
    ("APE/USD", "ApeCoin", "crypto", 1.23, 6.78, 89_000_000, 55),
    ("SHIB/USD", "Shiba Inu", "crypto", 0.00002456, 12.34, 780_000_000, 57),
    ("AVAX/USD", "Avalanche", "crypto", 42.56, 3.45, 320_000_000, 102),
    ("ARB/USD", "Arbitrum", "crypto", 0.8765, 2.34, 145_000_000, 109),
    ("PEPE/USD", "Pepe", "crypto", 0.000021, 15.67, 890_000_000, 134),
    ("WIF/USD", "Dogwifhat", "crypto", 2.34, 8.90, 67_000_000, 205),
    ("PNUT/USD", "Peanut the Squirrel", "crypto", 1.567, 23.45, 123_000_000, 301),
    ("EUR/USD", "Euro Dollar", "forex", 1.0456, -0.23, 87_650_000_000, 21),
    ("USD/JPY", "Dollar Yen", "forex", 149.56, 0.45, 56_780_000_000, 22),
    ("GBP/USD", "Pound Dollar", "forex", 1.2789, 0.12, 45_670_000_000, 23),
    ("USD/CAD", "Dollar Canadian", "forex", 1.3456, -0.34, 23_450_000_000, 26),
    ("EUR/JPY", "Euro Yen", "forex", 156.78, 0.23, 34_560_000_000, 29),
    ("AAPL/USD", "Apple Inc", "stocks", 234.56, 1.23, 12_340_000_000, 58),
    ("MSFT/USD", "Microsoft", "stocks", 456.78, 0.89, 8_760_000_000, 62),
    ("NVDA/USD", "NVIDIA", "stocks", 876.54, 3.45, 15_670_000_000, 65),
    ("META/USD", "Meta Platforms", "stocks", 567.89, 2.11, 9_870_000_000, 81),
    ("GOOGL/USD", "Alphabet Inc", "stocks", 178.90, 1.67, 6_540_000_000, 82),
    ("AMZN/USD", "Amazon", "stocks", 198.76, 0.98, 7_890_000_000, 84),
    ("TSLA/USD", "Tesla Inc", "stocks", 432.10, 4.56, 11_230_000_000, 85),
    ("MSTR/USD", "MicroStrategy", "stocks", 567.43, 8.90, 2_340_000_000, 378),
    ("SPY/USD", "S&P 500 ETF", "indices", 567.89, 0.78, 23_450_000_000, 86),
    ("QQQ/USD", "Nasdaq 100 ETF", "indices", 487.65, 1.23, 18_760_000_000, 87),
    ("IWM/USD", "Russell 2000 ETF", "indices", 234.56, 0.45, 8_760_000_000, 88),
    ("DIA/USD", "Dow Jones ETF", "indices", 456.78, 0.67, 6_540_000_000, 89),
    ("XAU/USD", "Gold", "commodities", 2678.90, 0.89, 12_340_000_000, 90),
    ("XAG/USD", "Silver", "commodities", 31.45, 1.23, 3_450_000_000, 91),
    ("WTI/USD", "WTI Crude Oil", "commodities", 78.90, 2.34, 8_760_000_000, 187),
]


def default_pairs() -> List[dict]:
    """Pair records (without id) ready for MemStorage.create_trading_pair."""
    out = []
    for symbol, name, category, price, change, volume, pair_index in _PAIRS:
        out.append({
            "symbol": symbol,
            "name": name,
            "category": category,
            "price": price,
            "change_24h": change,
            "volume_24h": float(volume),
            "max_leverage": MAX_LEVERAGE[category],
            "min_position_size": MIN_POSITION_SIZE,
            "spread_p": SPREAD_OVERRIDES.get(symbol, SPREAD_P[category]),
            "pair_index": pair_index,
            "icon": symbol.split("/")[0].lower(),
        })
    return out
