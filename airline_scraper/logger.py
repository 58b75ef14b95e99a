"""Logging for scraper runs.

The console gets short progress lines (fetches, ok/skip/err per code); the
rotating file keeps timestamps. With DEBUG, httpx request lines are written
to the same file.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "airline_scraper"
LOG_FILE = "airline_scraper.log"

CONSOLE_FORMAT = "%(levelname)-7s %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _file_handler(log_dir: str) -> RotatingFileHandler:
    fh = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return fh


def setup_logger(log_dir: str = "logs", level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger once; later calls only change the level."""
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(ch)
        logger.addHandler(_file_handler(log_dir))

    for handler in logger.handlers:
        handler.setLevel(level)

    http_logger = logging.getLogger("httpx")
    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    if level <= logging.DEBUG:
        http_logger.setLevel(logging.DEBUG)
        for fh in file_handlers:
            if fh not in http_logger.handlers:
                http_logger.addHandler(fh)
    else:
        for fh in file_handlers:
            http_logger.removeHandler(fh)

    return logger
