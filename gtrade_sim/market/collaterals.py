"""Collateral tokens accepted by Gains Network, per chain."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class CollateralToken:
    symbol: str
    name: str
    index: int  # Gains collateral index
    decimals: int
    supported_chains: tuple
    min_position_usd: float


COLLATERAL_TOKENS: Dict[str, CollateralToken] = {
    "USDC": CollateralToken("USDC", "USD Coin", 3, 6, ("arbitrum", "polygon", "base"), 7500.0),
    "DAI": CollateralToken("DAI", "Dai Stablecoin", 0, 18, ("polygon", "arbitrum"), 1500.0),
    "WETH": CollateralToken("WETH", "Wrapped Ethereum", 1, 18, ("arbitrum", "polygon"), 7500.0),
    "APE": CollateralToken("APE", "ApeCoin", 2, 18, ("arbitrum",), 7500.0),
}


def get_supported_collaterals(chain: str) -> List[CollateralToken]:
    return [c for c in COLLATERAL_TOKENS.values() if chain.lower() in c.supported_chains]


def get_default_collateral(chain: str) -> CollateralToken:
    """DAI on Polygon, USDC everywhere else."""
    if chain.lower() == "polygon":
        return COLLATERAL_TOKENS["DAI"]
    return COLLATERAL_TOKENS["USDC"]


def get_collateral_by_symbol(symbol: str) -> Optional[CollateralToken]:
    return COLLATERAL_TOKENS.get(symbol.upper())


def get_collateral_by_index(index: int) -> Optional[CollateralToken]:
    for c in COLLATERAL_TOKENS.values():
        if c.index == index:
            return c
    return None
