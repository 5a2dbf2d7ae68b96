"""Storage: process-local record store."""

from gtrade_sim.storage.memory import MemStorage

__all__ = ["MemStorage"]
