"""
NeuroLit Matrix - one-call logger setup

Usage:
    from neurolit.logging_helper import get_logger
    log = get_logger(__name__)
    log.info("It works")

License: MIT License
Copyright (c) 2026 NeuroLit Matrix contributors
"""

from __future__ import annotations

import logging
import sys

from neurolit.config import LOG_DATE_FORMAT, LOG_FORMAT


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Create (or return existing) logger for *name* that echoes to stderr.
    Streamlit owns stdout, so console output goes to stderr.
    """
    logger = logging.getLogger(name)
    if logger.handlers:                 # already initialised
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler.setLevel(level)

    logger.addHandler(handler)
    return logger
