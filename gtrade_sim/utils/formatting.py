"""Display formatting for prices, percent changes and volumes."""

from __future__ import annotations
from typing import Union

Number = Union[str, float, int]


def format_price(price: Number) -> str:
    """>= 1000: thousands separators, 2dp. >= 1: 2dp. Below 1: 4dp."""
    p = float(price)
    if p >= 1000:
        return f"{p:,.2f}"
    if p >= 1:
        return f"{p:.2f}"
    return f"{p:.4f}"


def format_change(change: Number) -> str:
    c = float(change)
    sign = "+" if c >= 0 else ""
    return f"{sign}{c:.2f}%"


def format_volume(volume: Number) -> str:
    v = float(volume)
    if v >= 1e9:
        return f"${v / 1e9:.1f}B"
    if v >= 1e6:
        return f"${v / 1e6:.1f}M"
    if v >= 1e3:
        return f"${v / 1e3:.1f}K"
    return f"${v:.2f}"
