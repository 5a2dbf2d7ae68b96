"""Market data: pair catalog, collaterals, simulated prices and candles."""

from gtrade_sim.market.collaterals import (
    CollateralToken,
    COLLATERAL_TOKENS,
    get_supported_collaterals,
    get_default_collateral,
    get_collateral_by_symbol,
    get_collateral_by_index,
)
from gtrade_sim.market.pairs import default_pairs, CATEGORIES

__all__ = [
    "CollateralToken",
    "COLLATERAL_TOKENS",
    "get_supported_collaterals",
    "get_default_collateral",
    "get_collateral_by_symbol",
    "get_collateral_by_index",
    "default_pairs",
    "CATEGORIES",
]
