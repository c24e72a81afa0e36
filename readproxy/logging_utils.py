"""Process-wide log stream for the proxy.

Every line is prefixed with a UTC timestamp of the form
``[2023/4/25 15:05:05.123]``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

from rich.logging import RichHandler

from readproxy.config import Settings

LOGGER_NAME = "readproxy"


class ProxyFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return f"{format_timestamp(record.created)} {record.getMessage()}"


def format_timestamp(created: float) -> str:
    now = datetime.fromtimestamp(created, tz=timezone.utc)
    return (
        f"[{now.year}/{now.month}/{now.day} "
        f"{now.hour}:{now.minute:02d}:{now.second:02d}.{now.microsecond // 1000:03d}]"
    )


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(cfg: Settings) -> logging.Logger:
    """Configure and return the ``readproxy`` logger.

    Safe to call more than once; existing handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_string(cfg.log_level))
    logger.handlers = []
    logger.propagate = False

    if cfg.log_rich:
        handler: logging.Handler = RichHandler(show_time=True, show_level=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ProxyFormatter())
    handler.setLevel(_level_from_string(cfg.log_level))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
