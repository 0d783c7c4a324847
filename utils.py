"""
utils.py

Small collection of utilities: inclusive integer ranges and a minimal logger setup helper.
"""

from typing import List
import logging


def increasing_range(start: int, stop: int) -> List[int]:
    """
    Return [start, start + 1, ..., stop]. Empty when start > stop.
    """
    return list(range(start, stop + 1))


def setup_basic_logger(name: str = "zn", level: int = logging.INFO) -> logging.Logger:
    """
    Return a logger configured with a StreamHandler and a compact formatter.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger
