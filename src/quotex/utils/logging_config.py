from __future__ import annotations

import logging
import sys
from typing import Union

from colorlog import ColoredFormatter

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

NOISY_LOGGERS = ("httpx", "urllib3", "requests", "streamlit", "watchdog", "uvicorn.access")


def short_logger_name(name: str) -> str:
    """quotex.generation.providers.factory -> quotex...factory; quotex.api -> api."""
    parts = name.split('.')
    if len(parts) > 2:
        return f"{parts[0]}...{parts[-1]}"
    if len(parts) == 2:
        return parts[-1]
    return name


class QuotexFormatter(ColoredFormatter):
    """colorlog formatter that adds %(short_name)s without touching record.name."""

    def format(self, record: logging.LogRecord) -> str:
        record.short_name = short_logger_name(record.name)
        return super().format(record)


def build_formatter() -> QuotexFormatter:
    return QuotexFormatter(
        "%(asctime)s %(green)s║%(reset)s %(log_color)s%(levelname)-8s%(reset)s "
        "%(green)s║%(reset)s %(cyan)s%(short_name)-15s%(reset)s %(green)s║%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        reset=True,
        log_colors=LOG_COLORS,
    )


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """Install the coloured console handler once; later calls only adjust the quotex level."""
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    if not any(isinstance(h.formatter, QuotexFormatter) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(build_formatter())
        root.addHandler(handler)
        root.setLevel(level)

        for noisy in NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("quotex").setLevel(level)
