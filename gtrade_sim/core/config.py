"""
Load configuration from config.yaml and .env. Telegram credentials only from env.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: Any = "") -> str:
        return os.getenv(key, str(default) if default is not None else "").strip()

    def env_bool(key: str, default: bool = False) -> bool:
        return os.getenv(key, str(default)).lower() in ("true", "1", "yes")

    def env_int(key: str, default: Optional[int] = 0) -> Optional[int]:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw)
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    market = data.get("market", {})
    feed = data.get("feed", {})
    risk = data.get("risk", {})
    execution = data.get("execution", {})
    logging_cfg = data.get("logging", {})

    return Config(
        chain=env("CHAIN", market.get("chain", "arbitrum")).lower(),
        collateral=env("COLLATERAL", market.get("collateral", "USDC")).upper(),
        default_user_id=env_int("DEFAULT_USER_ID", market.get("default_user_id", 1)),
        price_fluctuation_pct=env_float("PRICE_FLUCTUATION_PCT", feed.get("price_fluctuation_pct", 0.5)),
        random_seed=env_int("RANDOM_SEED", feed.get("random_seed")),
        candle_timeframe=env("CANDLE_TIMEFRAME", feed.get("candle_timeframe", "15m")),
        candle_count=env_int("CANDLE_COUNT", feed.get("candle_count", 50)),
        enforce_collateral_min=env_bool("ENFORCE_COLLATERAL_MIN", risk.get("enforce_collateral_min", False)),
        execution_delay_seconds=env_float("EXECUTION_DELAY_SECONDS", execution.get("delay_seconds", 0.0)),
        telegram_bot_token=env("TELEGRAM_BOT_TOKEN"),
        telegram_chat_id=env("TELEGRAM_CHAT_ID"),
        log_level=logging_cfg.get("level", "INFO"),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file", "gtrade_sim.log"),
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "chain", "collateral", "default_user_id",
        "price_fluctuation_pct", "random_seed", "candle_timeframe", "candle_count",
        "enforce_collateral_min", "execution_delay_seconds",
        "telegram_bot_token", "telegram_chat_id",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        chain: str = "arbitrum",
        collateral: str = "USDC",
        default_user_id: int = 1,
        price_fluctuation_pct: float = 0.5,
        random_seed: Optional[int] = None,
        candle_timeframe: str = "15m",
        candle_count: int = 50,
        enforce_collateral_min: bool = False,
        execution_delay_seconds: float = 0.0,
        telegram_bot_token: str = "",
        telegram_chat_id: str = "",
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "gtrade_sim.log",
    ):
        object.__setattr__(self, "chain", chain)
        object.__setattr__(self, "collateral", collateral)
        object.__setattr__(self, "default_user_id", default_user_id)
        object.__setattr__(self, "price_fluctuation_pct", price_fluctuation_pct)
        object.__setattr__(self, "random_seed", random_seed)
        object.__setattr__(self, "candle_timeframe", candle_timeframe)
        object.__setattr__(self, "candle_count", candle_count)
        object.__setattr__(self, "enforce_collateral_min", enforce_collateral_min)
        object.__setattr__(self, "execution_delay_seconds", execution_delay_seconds)
        object.__setattr__(self, "telegram_bot_token", telegram_bot_token)
        object.__setattr__(self, "telegram_chat_id", telegram_chat_id)
        object.__setattr__(self, "log_level", log_level)
        object.__setattr__(self, "log_dir", Path(log_dir) if log_dir else Path("logs"))
        object.__setattr__(self, "log_file", log_file)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Config is immutable, cannot set {name}")
