"""Logging setup for applications embedding the rover."""

import logging
from typing import Union

LOGGER_NAME = "pluto_rover"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a timestamped stream handler to the package logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_pluto_rover", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        handler._pluto_rover = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
