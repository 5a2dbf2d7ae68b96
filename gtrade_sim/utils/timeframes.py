"""Chart timeframe string to minutes conversion."""

_UNIT_MINUTES = {"m": 1, "h": 60, "d": 60 * 24, "w": 60 * 24 * 7}


def timeframe_minutes(tf: str) -> int:
    """Convert a chart timeframe (e.g. '1m', '15m', '4h', '1d', '1w') to minutes."""
    tf = tf.strip().lower()
    unit = tf[-1:]
    if unit not in _UNIT_MINUTES or not tf[:-1].isdigit():
        raise ValueError(f"Unsupported timeframe: {tf}")
    minutes = int(tf[:-1]) * _UNIT_MINUTES[unit]
    if minutes <= 0:
        raise ValueError(f"Unsupported timeframe: {tf}")
    return minutes
