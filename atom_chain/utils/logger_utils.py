# logger_utils.py - logging setup and timing helpers shared across the package

import logging
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "atom_chain"


def setup_logging(level: int = logging.INFO, path: Optional[str] = None) -> logging.Logger:
    """
    Attach a handler to the package logger. Library code never calls this,
    applications opt in.
    Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | logger | message
    Passing `path` appends to that file instead of writing to stderr.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler: logging.Handler
    if path:
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def time_block(label: str, logger: Optional[logging.Logger] = None) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("train_many"):
            do_some_work()
    The elapsed time is logged at DEBUG when the block exits.
    """
    return _Timer(label, logger or logging.getLogger(PACKAGE_LOGGER))


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str, logger: logging.Logger):
        self.label = label
        self.logger = logger
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 6)
        self.logger.debug("%s done in %ss", self.label, self.elapsed)
        # never suppress the exception
        return False
