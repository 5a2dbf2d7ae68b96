"""Utils: formatting, Telegram, timeframes."""

from gtrade_sim.utils.formatting import format_price, format_change, format_volume
from gtrade_sim.utils.telegram import send_telegram
from gtrade_sim.utils.timeframes import timeframe_minutes

__all__ = ["format_price", "format_change", "format_volume", "send_telegram", "timeframe_minutes"]
