from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "[tg][%(levelname)s] %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is when it is installed."""


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Route the package logger to stderr with a ``[tg][level]`` prefix.

    Replaces the handler installed by a previous call, so repeated calls
    (one per ``main()``) never duplicate output.
    """
    logger = logging.getLogger("tinygradient")
    for handler in list(logger.handlers):
        if isinstance(handler, _StderrHandler):
            logger.removeHandler(handler)

    handler = _StderrHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(level)
    return logger
