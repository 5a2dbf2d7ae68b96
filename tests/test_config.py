"""Unit tests for core.config and core.logger."""

import logging
import os
from pathlib import Path

import pytest
from gtrade_sim.core.config import Config, load_config
from gtrade_sim.core.logger import setup_logging

ENV_KEYS = [
    "CHAIN", "COLLATERAL", "DEFAULT_USER_ID", "PRICE_FLUCTUATION_PCT", "RANDOM_SEED",
    "CANDLE_TIMEFRAME", "CANDLE_COUNT", "ENFORCE_COLLATERAL_MIN", "EXECUTION_DELAY_SECONDS",
    "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight to os.environ
    for key in ENV_KEYS:
        os.environ.pop(key, None)


def test_defaults_without_files(tmp_path):
    cfg = load_config(tmp_path / "missing.yaml", tmp_path)
    assert cfg.chain == "arbitrum"
    assert cfg.collateral == "USDC"
    assert cfg.default_user_id == 1
    assert cfg.price_fluctuation_pct == 0.5
    assert cfg.random_seed is None
    assert cfg.enforce_collateral_min is False
    assert cfg.log_dir == Path("logs")


def test_yaml_and_env_overlay(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(
        "market:\n  chain: Polygon\n  collateral: dai\n"
        "feed:\n  random_seed: 3\n  candle_timeframe: 1h\n"
        "risk:\n  enforce_collateral_min: true\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CANDLE_COUNT", "12")
    monkeypatch.setenv("PRICE_FLUCTUATION_PCT", "not-a-number")
    cfg = load_config(path, tmp_path)
    assert cfg.chain == "polygon"
    assert cfg.collateral == "DAI"
    assert cfg.random_seed == 3
    assert cfg.candle_timeframe == "1h"
    assert cfg.candle_count == 12
    assert cfg.price_fluctuation_pct == 0.5
    assert cfg.enforce_collateral_min is True


def test_dotenv_supplies_telegram(tmp_path):
    (tmp_path / ".env").write_text("TELEGRAM_BOT_TOKEN=abc\nTELEGRAM_CHAT_ID=42\n", encoding="utf-8")
    cfg = load_config(tmp_path / "missing.yaml", tmp_path)
    assert cfg.telegram_bot_token == "abc"
    assert cfg.telegram_chat_id == "42"


def test_config_is_immutable():
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.chain = "base"


def test_setup_logging_writes_file(tmp_path):
    logger = setup_logging("debug", tmp_path / "logs", "run.log")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    logging.getLogger("gtrade_sim.test").info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()


def test_setup_logging_masks_bot_token(tmp_path):
    logger = setup_logging("info", tmp_path, "run.log")
    url = "https://api.telegram.org/bot123456:AAH-secret_Token/sendMessage"
    logging.getLogger("gtrade_sim.utils.telegram").warning("POST %s failed", url)
    for h in logger.handlers:
        h.flush()
    text = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert "AAH-secret_Token" not in text
    assert "bot<redacted>/sendMessage failed" in text
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()


def test_setup_logging_replaces_handlers(tmp_path):
    first = setup_logging("info", tmp_path, "a.log")
    file_handler = first.handlers[1]
    second = setup_logging("warning", None, None)
    assert second is first
    assert len(second.handlers) == 1
    assert file_handler not in second.handlers
    assert file_handler.stream is None
    second.handlers.clear()
