# === FILE: page_scout/logger.py ===
"""Логирование PageScout.

Все модули пишут в именованный логгер ``PageScout``; CLI вызывает
:func:`init_logging` один раз при старте, чтобы выставить уровень и, при
необходимости, добавить файл с ротацией.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

LOGGER_NAME: Final[str] = "PageScout"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"

_MAX_LOG_BYTES: Final[int] = 2 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 2


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Сбросить обработчики логгера ``PageScout`` и поставить новые.

    Всегда пишет в stdout; с *log_file* дополнительно пишет в файл,
    создавая родительский каталог.
    """
    crawl_logger = logging.getLogger(LOGGER_NAME)
    crawl_logger.setLevel(level)
    for handler in list(crawl_logger.handlers):
        crawl_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        crawl_logger.addHandler(handler)

    crawl_logger.propagate = False
    return crawl_logger


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
