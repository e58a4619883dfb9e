#!/usr/bin/python3
"""Package logger."""
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _make_logger(name: str) -> logging.Logger:
    new_logger = logging.getLogger(name)
    if not new_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        new_logger.addHandler(handler)
    new_logger.setLevel(logging.INFO)
    new_logger.propagate = False
    return new_logger


logger = _make_logger("dobble_deck")
