from __future__ import annotations

import logging
import sys

_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
}

def get_logger(name: str = "wordsmith") -> logging.Logger:
    log = logging.getLogger(name)
    if log.handlers:
        return log
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    log.addHandler(h)
    log.setLevel(logging.ERROR)
    return log

def set_verbosity(count: int) -> None:
    """Map the number of -v flags to a log level (-vvv and beyond is DEBUG)."""
    get_logger().setLevel(_LEVELS.get(count, logging.DEBUG))
