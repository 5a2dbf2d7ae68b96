"""gTrade-style leveraged trading simulator: position math, pair catalog, paper execution."""

__version__ = "0.1.0"
