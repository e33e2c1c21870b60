"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger. Log lines
carry the timestamp, logger name, level and message. Configuration happens
at most once per process.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    If the root logger already has handlers (uvicorn, pytest, a second
    ``create_app`` call) only the level is adjusted.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive;
        unknown names fall back to ``INFO``.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logger.setLevel(numeric_level)
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
