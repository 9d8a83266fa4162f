"""Logging setup"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level"""
    logger = logging.getLogger("opendocx")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if not any(getattr(h, "_opendocx", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._opendocx = True
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
