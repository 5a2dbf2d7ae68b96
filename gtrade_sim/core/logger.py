"""
Logging for the gtrade_sim logger tree: stdout plus an optional file, with Telegram
bot tokens masked on every handler.
"""

from __future__ import annotations
import logging
import re
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "gtrade_sim"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# bot<numeric id>:<secret>, as it appears in Bot API URLs
_BOT_TOKEN = re.compile(r"bot\d+:[A-Za-z0-9_-]+")


class RedactTokenFilter(logging.Filter):
    """Replace Telegram bot tokens in the rendered message with `bot<redacted>`."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _BOT_TOKEN.sub("bot<redacted>", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    # handler-level so records propagated from child loggers are filtered too
    handler.addFilter(RedactTokenFilter())
    logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger. Safe to call once per CLI run or test: handlers from a
    previous call are closed before new ones are attached.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    _attach(logger, logging.StreamHandler(sys.stdout), formatter)

    if log_dir and log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_dir / log_file, encoding="utf-8"), formatter)

    return logger
